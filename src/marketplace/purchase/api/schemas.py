"""Pydantic request/response schemas for the purchase API."""

from __future__ import annotations

from pydantic import BaseModel

from marketplace.catalogue.api.schemas import ProductResponse


class PurchaseRequest(BaseModel):
    """Without ``product_id`` the whole cart is checked out."""

    model_config = {"json_schema_extra": {"examples": [{"user_id": "user-001"}]}}

    user_id: str
    product_id: str | None = None


class PurchaseResponse(BaseModel):
    id: str
    product_id: str
    title: str
    price: float
    quantity: int
    purchased_at: str
    product: ProductResponse | None = None


class PurchaseResultResponse(BaseModel):
    success: bool = True
    purchases: list[PurchaseResponse] = []


class PurchaseSummaryResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"count": 2, "total_spent": 689.99}]}}

    count: int
    total_spent: float
