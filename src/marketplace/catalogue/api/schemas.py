"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class UpdateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Mountain Bike (serviced)",
                    "description": "Trek mountain bike, new brake pads.",
                    "category": "Sports",
                    "price": 300.0,
                }
            ]
        }
    }

    title: str = Field(..., max_length=255)
    description: str | None = None
    category: str
    price: float


# --- Response Schemas ---


class ProductResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "title": "Mountain Bike",
                    "description": "Trek mountain bike in good condition.",
                    "price": 320.0,
                    "category": "Sports",
                    "image_url": "/media/5f1c0e.jpg",
                    "seller_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "seller_name": "sarah",
                    "created_at": "2024-01-12T10:00:00+00:00",
                    "updated_at": "2024-01-12T10:00:00+00:00",
                }
            ]
        }
    }

    id: str
    title: str
    description: str | None = None
    price: float
    category: str
    image_url: str | None = None
    seller_id: str
    seller_name: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class SuccessResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"success": True}]}}

    success: bool = True
