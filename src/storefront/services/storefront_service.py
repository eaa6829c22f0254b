from typing import Any, Dict, Optional
import logging

from storefront.core.exceptions import BusinessLogicError, NotFoundError
from storefront.models.cart import AddItem, ClearCart
from storefront.schemas.order_schemas import OrderItem, OrderRequest, OrderResponse
from storefront.services.order_service import OrderService
from storefront.stores.cart_store import CartStore
from storefront.stores.products_store import ProductsStore
from storefront.utils.formatting_utils import FormattingUtils
from storefront.utils.pricing import PricingUtils

logger = logging.getLogger(__name__)


class StorefrontService:
    """
    Storefront orchestration service

    Responsibilities:
    - Enforce stock limits before items reach the cart
    - Turn the cart snapshot into an order submission
    - Present cart totals for display
    """

    def __init__(self, products_store: ProductsStore, cart_store: CartStore, currency: str = "USD"):
        self.products_store = products_store
        self.cart_store = cart_store
        self.currency = currency

    def add_to_cart(self, product_id: str) -> None:
        """
        Add one unit of a catalog product to the cart

        Business Rules:
        - The product must be in the loaded catalog
        - The cart quantity may not exceed the product stock
        """
        product = self.products_store.product_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)

        existing = self.cart_store.item_in_cart(product_id)
        in_cart = existing.quantity if existing else 0
        if in_cart + 1 > product.stock:
            raise BusinessLogicError(
                f"Only {product.stock} units of '{product.name}' are in stock",
                rule="insufficient_stock"
            )

        self.cart_store.dispatch(AddItem(product=product))
        logger.info(f"Added product {product_id} to cart ({in_cart + 1} in cart)")

    def build_order_request(self) -> OrderRequest:
        """Snapshot the cart as an order submission"""
        state = self.cart_store.state
        if state.is_empty:
            raise BusinessLogicError("Cannot check out an empty cart", rule="empty_cart")

        return OrderRequest(
            items=[
                OrderItem(
                    product=item.product,
                    quantity=item.quantity,
                    subtotal=PricingUtils.calculate_item_subtotal(item.product.price, item.quantity),
                )
                for item in state.items
            ],
            subtotal=state.subtotal,
            tax=state.tax,
            total=state.total,
        )

    def place_order(self, order_service: Optional[OrderService] = None) -> OrderResponse:
        """Submit the cart and clear it once the order is accepted"""
        order_service = order_service or OrderService()
        response = order_service.place_order(self.build_order_request())
        self.cart_store.dispatch(ClearCart())
        return response

    def summary(self) -> Dict[str, Any]:
        state = self.cart_store.state
        return {
            "item_count": state.item_count,
            "subtotal": FormattingUtils.format_money(state.subtotal, self.currency),
            "tax": FormattingUtils.format_money(state.tax, self.currency),
            "total": FormattingUtils.format_money(state.total, self.currency),
            "is_empty": state.is_empty,
        }
