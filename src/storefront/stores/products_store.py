from dataclasses import dataclass
from typing import List, Optional, Tuple

from storefront.models.products import (
    INITIAL_PRODUCTS_MODEL,
    ProductsModel,
    ProductsMsg,
    ResetFilter,
    SetFilter,
    SetSort,
)
from storefront.schemas.product_schemas import Product, ProductFilter, ProductSort
from storefront.stores.products_effects import ProductFetcher, fetch_products
from storefront.stores.products_update import update
from storefront.utils.filters import ProductFilterUtils


@dataclass(frozen=True)
class ProductsState:
    """Read-only snapshot of the catalog and its derived values"""
    products: Tuple[Product, ...]
    loading: bool
    error: Optional[str]
    current_filter: ProductFilter
    current_sort: ProductSort
    filtered_products: Tuple[Product, ...]
    categories: Tuple[str, ...]


class ProductsStore:
    """
    Product catalog store

    Public API:
    - dispatch(msg) and the set_filter / set_sort / reset_filter shortcuts
    - fetch_products(): runs the fetch effect; failures end up in error, never raised
    - read-only properties recomputed from the current model on every read
    """

    def __init__(self, fetcher: ProductFetcher):
        self._fetcher = fetcher
        self._model: ProductsModel = INITIAL_PRODUCTS_MODEL

    def dispatch(self, msg: ProductsMsg) -> None:
        self._model = update(self._model, msg)

    async def fetch_products(self, fetcher: Optional[ProductFetcher] = None) -> None:
        """Run the fetch effect with fetcher, or the one given at construction"""
        await fetch_products(self.dispatch, fetcher or self._fetcher)

    def set_filter(self, product_filter: ProductFilter) -> None:
        self.dispatch(SetFilter(filter=product_filter))

    def set_sort(self, sort: ProductSort) -> None:
        self.dispatch(SetSort(sort=sort))

    def reset_filter(self) -> None:
        self.dispatch(ResetFilter())

    # Read surface

    @property
    def model(self) -> ProductsModel:
        return self._model

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._model.products

    @property
    def loading(self) -> bool:
        return self._model.loading

    @property
    def error(self) -> Optional[str]:
        return self._model.error

    @property
    def current_filter(self) -> ProductFilter:
        return self._model.current_filter

    @property
    def current_sort(self) -> ProductSort:
        return self._model.current_sort

    @property
    def filtered_products(self) -> List[Product]:
        filtered = ProductFilterUtils.filter_products(self._model.products, self._model.current_filter)
        return ProductFilterUtils.sort_products(filtered, self._model.current_sort)

    @property
    def categories(self) -> List[str]:
        return ProductFilterUtils.categories(self._model.products)

    def product_by_id(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._model.products if p.id == product_id), None)

    @property
    def state(self) -> ProductsState:
        model = self._model
        return ProductsState(
            products=model.products,
            loading=model.loading,
            error=model.error,
            current_filter=model.current_filter,
            current_sort=model.current_sort,
            filtered_products=tuple(self.filtered_products),
            categories=tuple(self.categories),
        )
