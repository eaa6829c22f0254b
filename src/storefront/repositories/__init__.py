from .base import KeyValueStorage
from .memory_storage import MemoryStorage, NullStorage
from .sql_storage import SqlKeyValueStorage
from .json_items import get_validated_item, set_json_item

__all__ = [
    "KeyValueStorage", "MemoryStorage", "NullStorage", "SqlKeyValueStorage",
    "get_validated_item", "set_json_item"
]
