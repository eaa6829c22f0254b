import logging

from flask import Blueprint, abort, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from storefront.core.exceptions import ValidationError
from storefront.schemas.order_schemas import OrderRequest
from storefront.services.order_service import OrderService

logger = logging.getLogger(__name__)

orders_bp = Blueprint("orders", __name__)


@orders_bp.route("", methods=["POST"])
def submit_order():
    """
    Submit an order built from a cart snapshot.

    The body must carry at least one line, and its subtotal, tax and total
    must agree with the lines. Validation failures return 400.
    """
    body = request.get_json(silent=True)
    if body is None:
        abort(400, "Request body must be a JSON object")

    try:
        order = OrderRequest.model_validate(body)
    except PydanticValidationError as e:
        logger.info(f"Rejected order with {e.error_count()} validation errors")
        raise ValidationError.from_pydantic(e, "Invalid order data")

    response = OrderService().place_order(order)
    return jsonify(response.model_dump(mode="json", by_alias=True)), 200
