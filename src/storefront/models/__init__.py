from .cart import (
    CartModel, INITIAL_CART_MODEL, CartMsg,
    AddItem, RemoveItem, UpdateQuantity, IncrementItem, DecrementItem, ClearCart, HydrateFromStorage
)
from .products import (
    ProductsModel, INITIAL_PRODUCTS_MODEL, ProductsMsg, DEFAULT_FILTER, DEFAULT_SORT,
    SetFilter, SetSort, ResetFilter, FetchRequest, FetchSuccess, FetchFailure
)

__all__ = [
    "CartModel", "INITIAL_CART_MODEL", "CartMsg",
    "AddItem", "RemoveItem", "UpdateQuantity", "IncrementItem", "DecrementItem",
    "ClearCart", "HydrateFromStorage",
    "ProductsModel", "INITIAL_PRODUCTS_MODEL", "ProductsMsg", "DEFAULT_FILTER", "DEFAULT_SORT",
    "SetFilter", "SetSort", "ResetFilter", "FetchRequest", "FetchSuccess", "FetchFailure"
]
