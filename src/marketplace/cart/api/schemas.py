"""Pydantic request/response schemas for the cart API."""

from __future__ import annotations

from pydantic import BaseModel

from marketplace.catalogue.api.schemas import ProductResponse


class AddToCartRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"user_id": "user-001", "product_id": "prod-001"}]}}

    user_id: str
    product_id: str


class CartLineResponse(ProductResponse):
    quantity: int
    added_at: str | None = None


class CartTotalResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"items": 3, "total": 420.0}]}}

    items: int
    total: float
