from .order_service import OrderService
from .storefront_service import StorefrontService

__all__ = ["OrderService", "StorefrontService"]
