from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates_schema

from storefront.schemas.product_schemas import ALL_CATEGORIES, ProductCategory


class ProductQuerySchema(Schema):
    """Query string of GET /api/products"""

    class Meta:
        unknown = EXCLUDE

    search = fields.String(load_default=None)
    category = fields.String(
        load_default=ALL_CATEGORIES,
        validate=validate.OneOf([c.value for c in ProductCategory] + [ALL_CATEGORIES, ""]),
    )
    min_price = fields.Integer(data_key="minPrice", load_default=None, validate=validate.Range(min=0))
    max_price = fields.Integer(data_key="maxPrice", load_default=None, validate=validate.Range(min=0))
    min_rating = fields.Float(data_key="minRating", load_default=None, validate=validate.Range(min=0, max=5))
    in_stock = fields.Boolean(data_key="inStock", load_default=False)

    @validates_schema
    def validate_price_range(self, data, **kwargs):
        min_price = data.get("min_price")
        max_price = data.get("max_price")
        if min_price is not None and max_price is not None and min_price > max_price:
            raise ValidationError("minPrice cannot be greater than maxPrice", "minPrice")
