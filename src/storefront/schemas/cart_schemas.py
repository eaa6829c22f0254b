from typing import Annotated, List

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter

from storefront.schemas.product_schemas import Product


class CartItem(BaseModel):
    """
    A product in the cart with its quantity.

    This is also the persisted record shape, so changing it breaks carts
    already saved under the current storage key.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "product": {
                    "id": "1",
                    "name": "Wireless Headphones",
                    "description": "Premium noise-canceling wireless headphones",
                    "price": 19999,
                    "category": "electronics",
                    "image": "https://example.com/headphones.jpg",
                    "stock": 15,
                    "rating": 4.5
                },
                "quantity": 2
            }
        }
    )

    product: Product = Field(description="Product snapshot taken when added")
    quantity: int = Field(gt=0, strict=True, description="Quantity in cart (> 0)")

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def subtotal(self) -> int:
        """Line subtotal in cents, always from the stored unit price"""
        return self.product.price * self.quantity

    def to_dict(self) -> dict:
        return {"product": self.product.to_dict(), "quantity": self.quantity}


def _unique_product_ids(items: List[CartItem]) -> List[CartItem]:
    ids = [item.product.id for item in items]
    if len(ids) != len(set(ids)):
        raise ValueError("Cart contains more than one item for the same product")
    return items


CartItemList = TypeAdapter(Annotated[List[CartItem], AfterValidator(_unique_product_ids)])
