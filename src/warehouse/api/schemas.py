"""Pydantic request/response schemas for the Warehouse API.

These are external contracts, kept separate from the domain objects. Decimal
fields serialize as JSON strings so prices and weights keep their precision.
"""

from datetime import date
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    kind: Literal["food", "electronics"]
    name: str
    category: str
    price: Decimal
    weight: Decimal | None = None
    expiration_date: date | None = None
    warranty_months: int | None = None
    id: UUID | None = None


class UpdatePriceRequest(BaseModel):
    price: Decimal


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class ProductIdResponse(BaseModel):
    product_id: str


class ProductResponse(BaseModel):
    id: str
    kind: str
    name: str
    category: str
    price: Decimal
    details: str
    weight: Decimal | None = None
    shipping_cost: Decimal | None = None
    expiration_date: date | None = None


class CategoryProductsResponse(BaseModel):
    category: str
    products: list[ProductResponse] = Field(default_factory=list)


class CategoryAmountResponse(BaseModel):
    category: str
    amount: Decimal


class DiscountedPriceResponse(BaseModel):
    product_id: str
    name: str
    original_price: Decimal
    discounted_price: Decimal


class InventoryValidationResponse(BaseModel):
    high_value_percentage: float
    category_diversity: int
    high_value_warning: bool
    minimum_diversity: bool


class InventoryStatisticsResponse(BaseModel):
    total_products: int
    total_value: Decimal
    average_price: Decimal
    expired_count: int
    category_count: int
    most_expensive_product_id: str | None = None
    cheapest_product_id: str | None = None


class ShippingGroupResponse(BaseModel):
    product_ids: list[str]
    total_weight: Decimal
    total_shipping_cost: Decimal


class ShippingCostResponse(BaseModel):
    total_shipping_cost: Decimal
