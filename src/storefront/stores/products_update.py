"""
Products update function.

Loading state machine over (loading, error):

    (False, None) --FetchRequest--> (True, None)
    (True, *)     --FetchSuccess--> (False, None)
    (True, *)     --FetchFailure--> (False, error)

Re-entrant FetchRequest is allowed; whichever resolution arrives last wins.
"""

from dataclasses import replace

from storefront.core.exceptions import assert_unreachable
from storefront.models.products import (
    DEFAULT_FILTER,
    DEFAULT_SORT,
    FetchFailure,
    FetchRequest,
    FetchSuccess,
    ProductsModel,
    ProductsMsg,
    ResetFilter,
    SetFilter,
    SetSort,
)


def update(model: ProductsModel, msg: ProductsMsg) -> ProductsModel:
    if isinstance(msg, SetFilter):
        # Replaces the whole filter; fields are not merged
        return replace(model, current_filter=msg.filter)

    elif isinstance(msg, SetSort):
        return replace(model, current_sort=msg.sort)

    elif isinstance(msg, ResetFilter):
        return replace(model, current_filter=DEFAULT_FILTER, current_sort=DEFAULT_SORT)

    elif isinstance(msg, FetchRequest):
        return replace(model, loading=True, error=None)

    elif isinstance(msg, FetchSuccess):
        return replace(model, products=tuple(msg.products), loading=False, error=None)

    elif isinstance(msg, FetchFailure):
        # Previously loaded products stay available
        return replace(model, loading=False, error=msg.error)

    else:
        assert_unreachable(msg)
