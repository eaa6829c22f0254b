from typing import Callable, Iterable
import logging

from storefront.core.exceptions import ValidationError
from storefront.models.cart import CartMsg, HydrateFromStorage
from storefront.repositories.base import KeyValueStorage
from storefront.repositories.json_items import get_validated_item, set_json_item
from storefront.schemas.cart_schemas import CartItem, CartItemList

logger = logging.getLogger(__name__)

# Persisted carts are only readable under the schema they were written with;
# changing the key or the CartItem shape needs a migration.
CART_STORAGE_KEY = "shopping-cart"


def load_cart_from_storage(
    storage: KeyValueStorage,
    dispatch: Callable[[CartMsg], None],
    key: str = CART_STORAGE_KEY,
) -> None:
    """
    Hydrate the cart from storage

    Dispatches HydrateFromStorage only when the stored blob is fully valid.
    Corrupted data is logged and erased; the cart then stays empty.
    """
    def report(error: ValidationError) -> None:
        logger.warning(f"Cart data validation failed. Clearing corrupted cart: {error.field_errors}")

    stored_items = get_validated_item(storage, key, CartItemList, on_error=report)

    if stored_items is not None:
        logger.info(f"Restored {len(stored_items)} cart items from storage")
        dispatch(HydrateFromStorage(items=tuple(stored_items)))


def save_cart_to_storage(
    storage: KeyValueStorage,
    items: Iterable[CartItem],
    key: str = CART_STORAGE_KEY,
) -> bool:
    """Overwrite the persisted cart; failures are logged by the storage and reported as False"""
    return set_json_item(storage, key, CartItemList, list(items))
