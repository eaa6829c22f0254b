from typing import Dict, Optional

from storefront.core.exceptions import StorageError
from storefront.repositories.base import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    """
    Process-local storage backed by a dict.

    quota_bytes mimics a browser storage quota: writes whose value exceeds
    it fail the same way a full backend would.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None, quota_bytes: Optional[int] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.quota_bytes = quota_bytes

    def _get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _set(self, key: str, value: str) -> None:
        if self.quota_bytes is not None and len(value.encode("utf-8")) > self.quota_bytes:
            raise StorageError(f"Quota of {self.quota_bytes} bytes exceeded for key '{key}'", "WRITE")
        self._data[key] = value

    def _remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class NullStorage(KeyValueStorage):
    """Storage for contexts without persistence; reads are absent, writes vanish"""

    def _get(self, key: str) -> Optional[str]:
        return None

    def _set(self, key: str, value: str) -> None:
        return None

    def _remove(self, key: str) -> None:
        return None

    def is_available(self) -> bool:
        return False
