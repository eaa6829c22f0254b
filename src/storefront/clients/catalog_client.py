"""
Catalog HTTP client.

Fetches the raw product payload from the catalog API. Validation is left
to the fetch effect so that malformed data becomes a FetchFailure there.
"""

import logging
from typing import Any, Optional

import httpx

from storefront.core.config import config
from storefront.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "catalog-api"


class CatalogClient:
    """
    Async client for the products endpoints.

    An instance is itself a product fetcher: ``await client()`` returns the
    product list payload.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Catalog API root (defaults to CATALOG_API_URL)
            timeout: Request timeout in seconds
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
        """
        self._base_url = (base_url or config.catalog.api_base_url).rstrip("/")
        self._timeout = timeout or config.catalog.timeout_seconds
        self._transport = transport

    @property
    def products_url(self) -> str:
        return f"{self._base_url}/api/products"

    async def __call__(self) -> Any:
        return await self.fetch_products()

    async def fetch_products(self, params: Optional[dict[str, Any]] = None) -> Any:
        """GET /api/products and return the decoded JSON body"""
        return await self._get(self.products_url, params)

    async def fetch_product(self, product_id: str) -> Any:
        """GET /api/products/<id> and return the decoded JSON body"""
        return await self._get(f"{self.products_url}/{product_id}")

    async def _get(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        logger.debug(f"GET {url}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException:
            raise ExternalServiceError(SERVICE_NAME, "Timeout connecting to catalog API")
        except httpx.HTTPError as e:
            logger.error(f"Catalog request failed: {e}")
            raise ExternalServiceError(SERVICE_NAME, f"Connection error with catalog API: {str(e)}")

        if response.status_code != 200:
            raise ExternalServiceError(SERVICE_NAME, self._error_message(response))

        try:
            return response.json()
        except ValueError:
            raise ExternalServiceError(SERVICE_NAME, "Catalog API returned a non-JSON body")

    def _error_message(self, response: httpx.Response) -> str:
        error_detail = response.text
        logger.error(f"Catalog API error {response.status_code}: {error_detail}")

        try:
            error_json = response.json()
            error_message = error_json.get("error", error_detail)
        except (ValueError, AttributeError):
            error_message = error_detail

        return f"HTTP {response.status_code}: {error_message}"
