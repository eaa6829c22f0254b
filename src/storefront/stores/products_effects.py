"""
Products effects.

Effects talk to the reducer only through dispatched messages, which keeps
the update function pure while allowing I/O.
"""

from typing import Any, Awaitable, Callable
import logging

from pydantic import ValidationError as PydanticValidationError

from storefront.core.exceptions import ValidationError
from storefront.models.products import FetchFailure, FetchRequest, FetchSuccess, ProductsMsg
from storefront.schemas.product_schemas import ProductList

logger = logging.getLogger(__name__)

ProductFetcher = Callable[[], Awaitable[Any]]

INVALID_PRODUCT_DATA_MESSAGE = "Invalid product data received from API"
DEFAULT_FETCH_ERROR_MESSAGE = "Failed to fetch products"


async def fetch_products(dispatch: Callable[[ProductsMsg], None], fetcher: ProductFetcher) -> None:
    """
    Load the catalog through fetcher

    Dispatches:
    - FetchRequest when starting
    - FetchSuccess with the validated products
    - FetchFailure when the fetcher fails or returns malformed data

    Never raises; overlapping calls are not cancelled.
    """
    dispatch(FetchRequest())

    try:
        payload = await fetcher()
        products = ProductList.validate_python(payload)
    except PydanticValidationError as e:
        error = ValidationError.from_pydantic(e, INVALID_PRODUCT_DATA_MESSAGE)
        logger.error(f"API response validation failed: {error.field_errors}")
        dispatch(FetchFailure(error=INVALID_PRODUCT_DATA_MESSAGE))
        return
    except Exception as e:
        message = str(e) or DEFAULT_FETCH_ERROR_MESSAGE
        logger.error(f"Error fetching products: {message}")
        dispatch(FetchFailure(error=message))
        return

    logger.info(f"Fetched {len(products)} products")
    dispatch(FetchSuccess(products=tuple(products)))
