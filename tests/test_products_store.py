import logging

import pytest

from storefront.core.exceptions import ExternalServiceError
from storefront.models.products import DEFAULT_FILTER, DEFAULT_SORT, FetchSuccess
from storefront.stores.products_effects import INVALID_PRODUCT_DATA_MESSAGE
from storefront.stores.products_store import ProductsStore
from storefront.schemas.product_schemas import ProductFilter, ProductSort
from tests.factories import static_fetcher


def fetcher_returning(payload):
    async def fetcher():
        return payload
    return fetcher


def fetcher_raising(exc):
    async def fetcher():
        raise exc
    return fetcher


@pytest.fixture
def payload(sample_products):
    return [p.to_dict() for p in sample_products]


class TestFetchProducts:
    @pytest.mark.asyncio
    async def test_success(self, payload, sample_products):
        store = ProductsStore(fetcher_returning(payload))

        await store.fetch_products()

        assert list(store.products) == sample_products
        assert store.loading is False
        assert store.error is None

    @pytest.mark.asyncio
    async def test_loading_while_in_flight(self, payload):
        seen = []

        async def fetcher():
            seen.append(store.loading)
            return payload

        store = ProductsStore(fetcher)
        await store.fetch_products()

        assert seen == [True]
        assert store.loading is False

    @pytest.mark.asyncio
    async def test_invalid_payload(self, payload, caplog):
        """A single bad field rejects the whole response"""
        payload[2]["price"] = "free"
        store = ProductsStore(fetcher_returning(payload))

        with caplog.at_level(logging.ERROR):
            await store.fetch_products()

        assert store.products == ()
        assert store.error == INVALID_PRODUCT_DATA_MESSAGE
        assert "validation failed" in caplog.text

    @pytest.mark.asyncio
    async def test_non_list_payload(self):
        store = ProductsStore(fetcher_returning({"products": []}))
        await store.fetch_products()
        assert store.error == INVALID_PRODUCT_DATA_MESSAGE

    @pytest.mark.asyncio
    async def test_fetcher_exception_message(self):
        store = ProductsStore(fetcher_raising(ExternalServiceError("catalog-api", "HTTP 500: boom")))
        await store.fetch_products()

        assert store.error == "HTTP 500: boom"
        assert store.loading is False

    @pytest.mark.asyncio
    async def test_exception_without_message(self):
        store = ProductsStore(fetcher_raising(RuntimeError()))
        await store.fetch_products()
        assert store.error == "Failed to fetch products"

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_catalog(self, payload):
        store = ProductsStore(fetcher_returning(payload))
        await store.fetch_products()

        await store.fetch_products(fetcher_raising(ConnectionError("offline")))

        assert len(store.products) == len(payload)
        assert store.error == "offline"

    @pytest.mark.asyncio
    async def test_fetcher_argument_overrides_default(self, payload):
        store = ProductsStore(fetcher_raising(RuntimeError("default fetcher used")))

        await store.fetch_products(fetcher_returning(payload))

        assert len(store.products) == len(payload)
        assert store.error is None


class TestDerivedViews:
    @pytest.fixture
    def store(self, sample_products):
        store = ProductsStore(static_fetcher())
        store.dispatch(FetchSuccess(tuple(sample_products)))
        return store

    def test_default_view_is_name_sorted(self, store):
        assert [p.id for p in store.filtered_products] == ["2", "3", "5", "1", "4"]

    def test_filter_then_sort(self, store):
        store.set_filter(ProductFilter(in_stock=True))
        store.set_sort(ProductSort.PRICE_DESC)

        assert [p.id for p in store.filtered_products] == ["1", "5", "4", "3"]

    def test_reset(self, store):
        store.set_filter(ProductFilter(category="books"))
        store.set_sort(ProductSort.RATING_DESC)

        store.reset_filter()

        assert store.current_filter == DEFAULT_FILTER
        assert store.current_sort == DEFAULT_SORT
        assert len(store.filtered_products) == 5

    def test_categories(self, store):
        assert store.categories == ["electronics", "clothing", "books", "sports", "home"]

    def test_product_by_id(self, store):
        assert store.product_by_id("4").name == "Yoga Mat"
        assert store.product_by_id("nope") is None

    def test_state_snapshot(self, store):
        store.set_filter(ProductFilter(search="lamp"))
        state = store.state

        assert [p.id for p in state.filtered_products] == ["5"]
        assert state.categories == ("electronics", "clothing", "books", "sports", "home")
        assert state.loading is False
