from abc import ABC, abstractmethod
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """
    Abstract string key-value storage.

    The public get/set/remove never raise: a failing backend degrades to
    "absent" on reads and to a logged no-op on writes, so callers keep
    working purely in memory when storage is unavailable.
    """

    PROBE_KEY = "__storage_test__"

    def get(self, key: str) -> Optional[str]:
        """Return the stored string or None when absent or unreadable"""
        try:
            return self._get(key)
        except Exception as e:
            logger.error(f"Failed to read key '{key}' from {self.backend_name}: {str(e)}")
            return None

    def set(self, key: str, value: str) -> bool:
        """Store value under key, overwriting; returns False on failure"""
        try:
            self._set(key, value)
            return True
        except Exception as e:
            logger.error(f"Failed to write key '{key}' to {self.backend_name}: {str(e)}")
            return False

    def remove(self, key: str) -> bool:
        """Delete key if present; returns False on failure"""
        try:
            self._remove(key)
            return True
        except Exception as e:
            logger.error(f"Failed to remove key '{key}' from {self.backend_name}: {str(e)}")
            return False

    def is_available(self) -> bool:
        """Probe the backend with a throwaway write"""
        try:
            self._set(self.PROBE_KEY, self.PROBE_KEY)
            self._remove(self.PROBE_KEY)
            return True
        except Exception:
            return False

    @property
    def backend_name(self) -> str:
        return self.__class__.__name__

    # Backend operations; may raise
    @abstractmethod
    def _get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def _set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def _remove(self, key: str) -> None:
        pass
