from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from storefront.schemas.cart_schemas import CartItem


TAX_RATE = Decimal("0.10")


class PricingUtils:
    """
    Cart pricing calculations

    All amounts are integer cents. Tax uses Decimal arithmetic so that
    half-cent results round up deterministically (665 -> 67).
    """

    @classmethod
    def calculate_item_subtotal(cls, price_cents: int, quantity: int) -> int:
        """Line subtotal from unit price and quantity"""
        return price_cents * quantity

    @classmethod
    def calculate_subtotal(cls, items: Iterable[CartItem]) -> int:
        """Sum of price x quantity over all items"""
        return sum(
            cls.calculate_item_subtotal(item.product.price, item.quantity)
            for item in items
        )

    @classmethod
    def calculate_tax(cls, subtotal_cents: int, tax_rate: Decimal = TAX_RATE) -> int:
        """
        Tax in cents, rounded half-up to the nearest cent

        Examples:
            calculate_tax(6997) -> 700
            calculate_tax(665) -> 67
        """
        tax = Decimal(subtotal_cents) * Decimal(tax_rate)
        return int(tax.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @classmethod
    def calculate_total(cls, subtotal_cents: int, tax_cents: int) -> int:
        return subtotal_cents + tax_cents

    @classmethod
    def calculate_item_count(cls, items: Iterable[CartItem]) -> int:
        """Total number of units across all items"""
        return sum(item.quantity for item in items)
