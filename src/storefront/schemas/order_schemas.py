from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.product_schemas import Product


class OrderItem(BaseModel):
    """Order line submitted from the cart"""
    product: Product = Field(description="Product snapshot")
    quantity: int = Field(gt=0, strict=True, description="Ordered quantity")
    subtotal: int = Field(ge=0, strict=True, description="Line subtotal in cents")


class OrderRequest(BaseModel):
    """Order submission built from a cart snapshot"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {
                        "product": {
                            "id": "4",
                            "name": "Classic Cotton T-Shirt",
                            "description": "Comfortable 100% cotton t-shirt",
                            "price": 1999,
                            "category": "clothing",
                            "image": "https://example.com/tshirt.jpg",
                            "stock": 50
                        },
                        "quantity": 2,
                        "subtotal": 3998
                    }
                ],
                "subtotal": 3998,
                "tax": 400,
                "total": 4398
            }
        }
    )

    items: List[OrderItem] = Field(min_length=1, description="Order lines")
    subtotal: int = Field(ge=0, strict=True, description="Sum of line subtotals in cents")
    tax: int = Field(ge=0, strict=True, description="Tax in cents")
    total: int = Field(ge=0, strict=True, description="subtotal + tax in cents")


class OrderLineSummary(BaseModel):
    product_id: str = Field(serialization_alias="productId")
    product_name: str = Field(serialization_alias="productName")
    quantity: int
    subtotal: int


class OrderSummary(BaseModel):
    items: List[OrderLineSummary]
    subtotal: int
    tax: int
    total: int
    created_at: datetime = Field(serialization_alias="createdAt")


class OrderResponse(BaseModel):
    """Response of a successful order submission"""
    success: bool = True
    order_id: str = Field(serialization_alias="orderId")
    message: str
    order: OrderSummary
