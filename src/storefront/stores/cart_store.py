from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from storefront.models.cart import CartModel, CartMsg, INITIAL_CART_MODEL
from storefront.repositories.base import KeyValueStorage
from storefront.repositories.memory_storage import NullStorage
from storefront.schemas.cart_schemas import CartItem
from storefront.stores.cart_effects import CART_STORAGE_KEY, load_cart_from_storage, save_cart_to_storage
from storefront.stores.cart_update import update
from storefront.utils.pricing import PricingUtils, TAX_RATE


@dataclass(frozen=True)
class CartState:
    """Read-only snapshot of the cart and its derived values"""
    items: Tuple[CartItem, ...]
    item_count: int
    subtotal: int
    tax: int
    total: int
    is_empty: bool


class CartStore:
    """
    Shopping cart store

    Public API:
    - dispatch(msg): the only way to change the cart
    - read-only properties recomputed from the current model on every read
    - item_in_cart(product_id)

    The cart is hydrated from storage once on construction and saved after
    every dispatch that changes the items.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        storage_key: str = CART_STORAGE_KEY,
        tax_rate: Decimal = TAX_RATE,
    ):
        self._storage = storage if storage is not None else NullStorage()
        self._storage_key = storage_key
        self._tax_rate = tax_rate
        self._model: CartModel = INITIAL_CART_MODEL

        load_cart_from_storage(self._storage, self.dispatch, self._storage_key)

    def dispatch(self, msg: CartMsg) -> None:
        previous = self._model
        self._model = update(previous, msg)

        if self._model.items != previous.items:
            save_cart_to_storage(self._storage, self._model.items, self._storage_key)

    # Read surface

    @property
    def model(self) -> CartModel:
        return self._model

    @property
    def items(self) -> Tuple[CartItem, ...]:
        return self._model.items

    @property
    def item_count(self) -> int:
        return PricingUtils.calculate_item_count(self._model.items)

    @property
    def subtotal(self) -> int:
        return PricingUtils.calculate_subtotal(self._model.items)

    @property
    def tax(self) -> int:
        return PricingUtils.calculate_tax(self.subtotal, self._tax_rate)

    @property
    def total(self) -> int:
        subtotal = self.subtotal
        return PricingUtils.calculate_total(subtotal, PricingUtils.calculate_tax(subtotal, self._tax_rate))

    @property
    def is_empty(self) -> bool:
        return len(self._model.items) == 0

    def item_in_cart(self, product_id: str) -> Optional[CartItem]:
        return self._model.find(product_id)

    @property
    def state(self) -> CartState:
        subtotal = self.subtotal
        tax = PricingUtils.calculate_tax(subtotal, self._tax_rate)
        return CartState(
            items=self._model.items,
            item_count=self.item_count,
            subtotal=subtotal,
            tax=tax,
            total=PricingUtils.calculate_total(subtotal, tax),
            is_empty=self.is_empty,
        )
