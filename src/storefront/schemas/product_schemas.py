from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class ProductCategory(str, Enum):
    """Closed set of catalog categories"""
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    HOME = "home"
    SPORTS = "sports"


ALL_CATEGORIES = "all"


class ProductSort(str, Enum):
    """Sort options for the product listing"""
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_DESC = "rating-desc"


class Product(BaseModel):
    """
    Catalog product as returned by the products API and embedded in cart items.

    price is an integer number of cents to avoid floating-point rounding.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": "4",
                "name": "Classic Cotton T-Shirt",
                "description": "Comfortable 100% cotton t-shirt, available in multiple colors",
                "price": 1999,
                "category": "clothing",
                "image": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400",
                "stock": 50,
                "rating": 4.0
            }
        }
    )

    id: str = Field(min_length=1, description="Unique product identifier")
    name: str = Field(min_length=1, description="Product name")
    description: str = Field(description="Product description")
    price: int = Field(ge=0, strict=True, description="Unit price in cents")
    category: ProductCategory = Field(description="Product category")
    image: str = Field(min_length=1, description="Image URL")
    stock: int = Field(ge=0, strict=True, description="Units in stock")
    rating: Optional[float] = Field(default=None, ge=0, le=5, description="Average rating (0-5)")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def to_dict(self) -> dict:
        """Convert to the JSON-compatible wire shape (rating omitted when absent)"""
        return self.model_dump(mode="json", exclude_none=True)


class PriceRange(BaseModel):
    """Inclusive price range in cents"""
    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=0, description="Lowest accepted price in cents")
    max: int = Field(ge=0, description="Highest accepted price in cents")

    @model_validator(mode="after")
    def validate_bounds(self):
        """Ensure min <= max"""
        if self.min > self.max:
            raise ValueError("min cannot be greater than max")
        return self


class ProductFilter(BaseModel):
    """Active filter criteria for the product listing. Every field is optional."""
    model_config = ConfigDict(frozen=True)

    search: Optional[str] = Field(default=None, description="Case-insensitive text in name or description")
    category: Union[Literal["all"], ProductCategory, None] = Field(
        default=ALL_CATEGORIES, description="Category restriction, 'all' for none"
    )
    price_range: Optional[PriceRange] = Field(default=None, description="Inclusive price range")
    min_rating: Optional[float] = Field(default=None, ge=0, le=5, description="Minimum rating")
    in_stock: Optional[bool] = Field(default=False, description="Only products with stock > 0")


def _unique_ids(products: List[Product]) -> List[Product]:
    ids = [p.id for p in products]
    if len(ids) != len(set(ids)):
        raise ValueError("Product identifiers must be unique")
    return products


ProductList = TypeAdapter(Annotated[List[Product], AfterValidator(_unique_ids)])
