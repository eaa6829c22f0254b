from .cart_store import CartState, CartStore
from .products_store import ProductsState, ProductsStore

__all__ = ["CartState", "CartStore", "ProductsState", "ProductsStore"]
