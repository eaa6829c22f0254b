from .product_schemas import (
    ALL_CATEGORIES, PriceRange, Product, ProductCategory, ProductFilter, ProductList, ProductSort
)
from .cart_schemas import CartItem, CartItemList
from .order_schemas import OrderItem, OrderRequest, OrderResponse

__all__ = [
    "ALL_CATEGORIES", "PriceRange", "Product", "ProductCategory", "ProductFilter",
    "ProductList", "ProductSort",
    "CartItem", "CartItemList",
    "OrderItem", "OrderRequest", "OrderResponse"
]
