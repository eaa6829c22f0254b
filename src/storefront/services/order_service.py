"""
Order submission.

Nothing is persisted: an order is checked against its own lines and the
tax rule, then echoed back with a generated identifier.
"""

import logging
import secrets
import string
import time
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from storefront.core.config import config
from storefront.core.exceptions import ValidationError
from storefront.schemas.order_schemas import OrderLineSummary, OrderRequest, OrderResponse, OrderSummary
from storefront.utils.pricing import PricingUtils

logger = logging.getLogger(__name__)

# Accepted difference between the submitted and recomputed tax, in cents
TAX_TOLERANCE_CENTS = 1
ORDER_ID_SUFFIX_LENGTH = 7
_ORDER_ID_ALPHABET = string.ascii_uppercase + string.digits


class OrderService:
    def __init__(self, tax_rate: Optional[Decimal] = None):
        self.tax_rate = tax_rate if tax_rate is not None else config.catalog.tax_rate

    def place_order(self, order: OrderRequest) -> OrderResponse:
        """
        Check the order totals and build the confirmation

        Raises:
            ValidationError: subtotal, tax or total are inconsistent
        """
        self._check_totals(order)

        order_id = self.generate_order_id()
        logger.info(f"Order {order_id} placed: {len(order.items)} lines, total {order.total}")

        return OrderResponse(
            order_id=order_id,
            message="Order placed successfully",
            order=OrderSummary(
                items=[
                    OrderLineSummary(
                        product_id=item.product.id,
                        product_name=item.product.name,
                        quantity=item.quantity,
                        subtotal=item.subtotal,
                    )
                    for item in order.items
                ],
                subtotal=order.subtotal,
                tax=order.tax,
                total=order.total,
                created_at=datetime.now(timezone.utc),
            ),
        )

    def _check_totals(self, order: OrderRequest) -> None:
        calculated_subtotal = sum(item.subtotal for item in order.items)
        if calculated_subtotal != order.subtotal:
            raise ValidationError("Order subtotal does not match item totals")

        expected_tax = PricingUtils.calculate_tax(order.subtotal, self.tax_rate)
        if abs(order.tax - expected_tax) > TAX_TOLERANCE_CENTS:
            raise ValidationError("Order tax calculation is incorrect")

        if PricingUtils.calculate_total(order.subtotal, order.tax) != order.total:
            raise ValidationError("Order total does not match subtotal + tax")

    @staticmethod
    def generate_order_id() -> str:
        """ORDER-<epoch millis>-<7 uppercase alphanumerics>"""
        suffix = "".join(secrets.choice(_ORDER_ID_ALPHABET) for _ in range(ORDER_ID_SUFFIX_LENGTH))
        return f"ORDER-{int(time.time() * 1000)}-{suffix}"
