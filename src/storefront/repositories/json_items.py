from typing import Any, Callable, Optional
import logging

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from storefront.core.exceptions import ValidationError
from storefront.repositories.base import KeyValueStorage

logger = logging.getLogger(__name__)


def get_validated_item(
    storage: KeyValueStorage,
    key: str,
    adapter: TypeAdapter,
    on_error: Optional[Callable[[ValidationError], None]] = None,
) -> Optional[Any]:
    """
    Read a JSON value and validate it against a pydantic adapter.

    Returns None when the key is absent or empty. Undecodable or invalid
    data is reported (through on_error, or logged), erased from storage,
    and also yields None.
    """
    raw = storage.get(key)
    if raw is None or raw == "":
        return None

    try:
        return adapter.validate_json(raw)
    except PydanticValidationError as e:
        error = ValidationError.from_pydantic(e, f"Stored data under '{key}' is invalid")

    if on_error is not None:
        on_error(error)
    else:
        logger.warning(f"Storage validation failed for key '{key}': {error.field_errors}")

    storage.remove(key)
    return None


def set_json_item(storage: KeyValueStorage, key: str, adapter: TypeAdapter, value: Any) -> bool:
    """Serialize value with the adapter and store it; absent optionals are dropped"""
    payload = adapter.dump_json(value, exclude_none=True).decode("utf-8")
    return storage.set(key, payload)
