"""
Cart update function.

Pure: given the same model and message it always returns the same result,
never mutates its input and performs no I/O. Any path that would leave an
item with quantity <= 0 removes the item instead. A quantity that is not a
whole number raises pydantic.ValidationError and leaves the model untouched.
"""

from storefront.core.exceptions import assert_unreachable
from storefront.models.cart import (
    AddItem,
    CartModel,
    CartMsg,
    ClearCart,
    DecrementItem,
    HydrateFromStorage,
    IncrementItem,
    RemoveItem,
    UpdateQuantity,
)
from storefront.schemas.cart_schemas import CartItem
from storefront.schemas.product_schemas import Product


def _add_item(model: CartModel, product: Product) -> CartModel:
    existing = model.find(product.id)

    if existing is not None:
        return CartModel(items=tuple(
            CartItem(product=item.product, quantity=item.quantity + 1)
            if item.product.id == product.id else item
            for item in model.items
        ))

    return CartModel(items=model.items + (CartItem(product=product, quantity=1),))


def _remove_item(model: CartModel, product_id: str) -> CartModel:
    if model.find(product_id) is None:
        return model
    return CartModel(items=tuple(item for item in model.items if item.product.id != product_id))


def _update_quantity(model: CartModel, product_id: str, quantity: int) -> CartModel:
    if quantity <= 0:
        return _remove_item(model, product_id)

    if model.find(product_id) is None:
        return model

    return CartModel(items=tuple(
        CartItem(product=item.product, quantity=quantity)
        if item.product.id == product_id else item
        for item in model.items
    ))


def update(model: CartModel, msg: CartMsg) -> CartModel:
    if isinstance(msg, AddItem):
        return _add_item(model, msg.product)

    elif isinstance(msg, RemoveItem):
        return _remove_item(model, msg.product_id)

    elif isinstance(msg, UpdateQuantity):
        return _update_quantity(model, msg.product_id, msg.quantity)

    elif isinstance(msg, IncrementItem):
        item = model.find(msg.product_id)
        if item is None:
            return model
        return _update_quantity(model, msg.product_id, item.quantity + 1)

    elif isinstance(msg, DecrementItem):
        item = model.find(msg.product_id)
        if item is None:
            return model
        return _update_quantity(model, msg.product_id, item.quantity - 1)

    elif isinstance(msg, ClearCart):
        return CartModel(items=())

    elif isinstance(msg, HydrateFromStorage):
        return CartModel(items=tuple(msg.items))

    else:
        assert_unreachable(msg)
