from contextlib import contextmanager
from typing import Optional
import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from storefront.core.exceptions import StorageError
from storefront.db import build_engine
from storefront.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


class SqlKeyValueStorage(KeyValueStorage):
    """
    Key-value storage in a single SQL table.

    Works on SQLite and PostgreSQL (both support ON CONFLICT upserts).
    The table is created on first use, so an unreachable database only
    surfaces as logged failures on the individual operations.
    """

    def __init__(self, engine: Optional[Engine] = None, table_name: str = "kv_store"):
        self.engine = engine or build_engine()
        self.table_name = table_name
        self._table_ready = False

    @contextmanager
    def get_db_connection(self):
        """Transactional connection that converts driver errors to StorageError"""
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            logger.error(f"Storage database error: {str(e)}")
            raise StorageError(f"Storage database operation failed: {str(e)}")

    def _ensure_table(self) -> None:
        if self._table_ready:
            return
        with self.get_db_connection() as conn:
            conn.execute(text(
                f"CREATE TABLE IF NOT EXISTS {self.table_name} ("
                " key TEXT PRIMARY KEY,"
                " value TEXT NOT NULL"
                ")"
            ))
        self._table_ready = True

    def _get(self, key: str) -> Optional[str]:
        self._ensure_table()
        with self.get_db_connection() as conn:
            return conn.execute(
                text(f"SELECT value FROM {self.table_name} WHERE key = :key"),
                {"key": key}
            ).scalar()

    def _set(self, key: str, value: str) -> None:
        self._ensure_table()
        with self.get_db_connection() as conn:
            conn.execute(
                text(
                    f"INSERT INTO {self.table_name} (key, value) VALUES (:key, :value) "
                    "ON CONFLICT (key) DO UPDATE SET value = excluded.value"
                ),
                {"key": key, "value": value}
            )

    def _remove(self, key: str) -> None:
        self._ensure_table()
        with self.get_db_connection() as conn:
            conn.execute(
                text(f"DELETE FROM {self.table_name} WHERE key = :key"),
                {"key": key}
            )
