from dataclasses import dataclass
from typing import Optional, Tuple, Union

from storefront.schemas.cart_schemas import CartItem
from storefront.schemas.product_schemas import Product


@dataclass(frozen=True)
class CartModel:
    """
    Immutable cart state.

    items keeps insertion order and holds at most one entry per product id.
    """
    items: Tuple[CartItem, ...] = ()

    def find(self, product_id: str) -> Optional[CartItem]:
        """Find cart item by product ID"""
        return next((item for item in self.items if item.product.id == product_id), None)


INITIAL_CART_MODEL = CartModel()


# Messages

@dataclass(frozen=True)
class AddItem:
    product: Product


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int  # absolute, <= 0 removes


@dataclass(frozen=True)
class IncrementItem:
    product_id: str


@dataclass(frozen=True)
class DecrementItem:
    product_id: str


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class HydrateFromStorage:
    """Sent only by the persistence effect with already validated items"""
    items: Tuple[CartItem, ...]


CartMsg = Union[
    AddItem,
    RemoveItem,
    UpdateQuantity,
    IncrementItem,
    DecrementItem,
    ClearCart,
    HydrateFromStorage,
]
