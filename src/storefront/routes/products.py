import logging
import sys

from flask import Blueprint, abort, jsonify, request
from marshmallow import ValidationError

from storefront.routes.catalog_data import MOCK_PRODUCTS
from storefront.routes.schemas import ProductQuerySchema
from storefront.schemas.product_schemas import PriceRange, ProductFilter
from storefront.utils.filters import ProductFilterUtils

logger = logging.getLogger(__name__)

products_bp = Blueprint("products", __name__)

_query_schema = ProductQuerySchema()


def _to_filter(query: dict) -> ProductFilter:
    """Map validated query params onto a ProductFilter"""
    min_price, max_price = query["min_price"], query["max_price"]
    price_range = None
    if min_price is not None or max_price is not None:
        price_range = PriceRange(
            min=min_price if min_price is not None else 0,
            max=max_price if max_price is not None else sys.maxsize,
        )

    return ProductFilter(
        search=query["search"],
        category=query["category"] or None,
        price_range=price_range,
        min_rating=query["min_rating"],
        in_stock=query["in_stock"],
    )


@products_bp.route("", methods=["GET"])
def list_products():
    """
    List the catalog, optionally filtered.

    Query params:
      search    - substring of name or description (case-insensitive)
      category  - electronics | clothing | books | home | sports | all
      minPrice  - inclusive lower bound in cents
      maxPrice  - inclusive upper bound in cents
      minRating - 0 to 5
      inStock   - only products with stock > 0
    """
    try:
        query = _query_schema.load(request.args)
    except ValidationError as err:
        abort(400, f"Invalid query parameters: {err.messages}")

    products = ProductFilterUtils.filter_products(MOCK_PRODUCTS, _to_filter(query))
    logger.debug(f"Listing {len(products)} of {len(MOCK_PRODUCTS)} products")
    return jsonify([p.to_dict() for p in products]), 200


@products_bp.route("/<product_id>", methods=["GET"])
def get_product(product_id: str):
    product = next((p for p in MOCK_PRODUCTS if p.id == product_id), None)
    if product is None:
        abort(404, f'Product with ID "{product_id}" not found')
    return jsonify(product.to_dict()), 200
