import re
from decimal import Decimal

import pytest

from storefront.core.exceptions import BusinessLogicError, NotFoundError, ValidationError
from storefront.models.products import FetchSuccess
from storefront.schemas.order_schemas import OrderRequest
from storefront.services.order_service import OrderService
from storefront.services.storefront_service import StorefrontService
from storefront.stores.cart_effects import CART_STORAGE_KEY
from storefront.stores.cart_store import CartStore
from storefront.stores.products_store import ProductsStore
from tests.factories import make_product, static_fetcher


@pytest.fixture
def service(sample_products, memory_storage):
    products_store = ProductsStore(static_fetcher())
    products_store.dispatch(FetchSuccess(tuple(sample_products)))
    return StorefrontService(products_store, CartStore(memory_storage))


class TestAddToCart:
    def test_adds_catalog_product(self, service):
        service.add_to_cart("4")
        service.add_to_cart("4")

        assert service.cart_store.item_in_cart("4").quantity == 2

    def test_unknown_product(self, service):
        with pytest.raises(NotFoundError):
            service.add_to_cart("404")

    def test_out_of_stock(self, service):
        """Product 2 has no stock at all"""
        with pytest.raises(BusinessLogicError) as exc_info:
            service.add_to_cart("2")

        assert exc_info.value.details == {"violated_rule": "insufficient_stock"}
        assert service.cart_store.is_empty

    def test_stock_limit(self):
        products_store = ProductsStore(static_fetcher())
        products_store.dispatch(FetchSuccess((make_product(id="9", stock=2),)))
        service = StorefrontService(products_store, CartStore())

        service.add_to_cart("9")
        service.add_to_cart("9")
        with pytest.raises(BusinessLogicError):
            service.add_to_cart("9")

        assert service.cart_store.item_count == 2


class TestOrders:
    def test_build_order_request(self, service):
        service.add_to_cart("1")
        service.add_to_cart("4")
        service.add_to_cart("4")

        order = service.build_order_request()

        assert isinstance(order, OrderRequest)
        assert [(i.product.id, i.quantity, i.subtotal) for i in order.items] == [("1", 1, 19999), ("4", 2, 6998)]
        assert order.subtotal == 26997
        assert order.tax == 2700
        assert order.total == 29697

    def test_empty_cart_cannot_check_out(self, service):
        with pytest.raises(BusinessLogicError):
            service.build_order_request()

    def test_place_order_clears_cart(self, service, memory_storage):
        service.add_to_cart("5")

        response = service.place_order()

        assert response.success is True
        assert response.order.total == 4399
        assert service.cart_store.is_empty
        assert memory_storage.get(CART_STORAGE_KEY) == "[]"

    def test_rejected_order_keeps_cart(self, service):
        """A stricter order tax rate rejects the cart totals"""
        service.add_to_cart("1")

        with pytest.raises(ValidationError):
            service.place_order(OrderService(tax_rate=Decimal("0.20")))

        assert service.cart_store.item_count == 1


class TestSummary:
    def test_formatted_totals(self, service):
        service.add_to_cart("3")
        service.add_to_cart("3")

        assert service.summary() == {
            "item_count": 2,
            "subtotal": "$49.98",
            "tax": "$5.00",
            "total": "$54.98",
            "is_empty": False,
        }

    def test_empty(self, service):
        summary = service.summary()
        assert summary["total"] == "$0.00"
        assert summary["is_empty"] is True


class TestOrderService:
    def test_order_id_format(self):
        assert re.fullmatch(r"ORDER-\d{13,}-[A-Z0-9]{7}", OrderService.generate_order_id())

    def test_order_ids_differ(self):
        assert OrderService.generate_order_id() != OrderService.generate_order_id()
