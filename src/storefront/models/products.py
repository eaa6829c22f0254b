from dataclasses import dataclass
from typing import Optional, Tuple, Union

from storefront.schemas.product_schemas import Product, ProductFilter, ProductSort


DEFAULT_FILTER = ProductFilter(search=None, category="all", in_stock=False)
DEFAULT_SORT = ProductSort.NAME_ASC


@dataclass(frozen=True)
class ProductsModel:
    """
    Immutable catalog state.

    Invariant: loading implies error is None.
    """
    products: Tuple[Product, ...] = ()
    loading: bool = False
    error: Optional[str] = None
    current_filter: ProductFilter = DEFAULT_FILTER
    current_sort: ProductSort = DEFAULT_SORT


INITIAL_PRODUCTS_MODEL = ProductsModel()


# Messages

@dataclass(frozen=True)
class SetFilter:
    filter: ProductFilter


@dataclass(frozen=True)
class SetSort:
    sort: ProductSort


@dataclass(frozen=True)
class ResetFilter:
    pass


@dataclass(frozen=True)
class FetchRequest:
    pass


@dataclass(frozen=True)
class FetchSuccess:
    products: Tuple[Product, ...]


@dataclass(frozen=True)
class FetchFailure:
    error: str


ProductsMsg = Union[
    SetFilter,
    SetSort,
    ResetFilter,
    FetchRequest,
    FetchSuccess,
    FetchFailure,
]
