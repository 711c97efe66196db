"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"email": "alice@example.com", "password": "s3cret", "username": "alice"}]}
    }

    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1)
    username: str = Field(..., max_length=50)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "alice@example.com", "password": "s3cret"}]}}

    email: str
    password: str


class UpdateProfileRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"username": "alice_w", "email": "alice.w@example.com"}]}}

    username: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=254)
    avatar_url: str | None = Field(None, max_length=500)


# --- Response Schemas ---


class UserResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "email": "alice@example.com",
                    "username": "alice",
                    "avatar_url": None,
                }
            ]
        }
    }

    id: str
    email: str
    username: str
    avatar_url: str | None = None


class LoginResponse(BaseModel):
    token: str
    expires_at: str
    user: UserResponse


class ListingSummaryResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"count": 3, "total_value": 560.0, "average_price": 186.67}]}}

    count: int
    total_value: float
    average_price: float
