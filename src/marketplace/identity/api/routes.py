"""FastAPI endpoints for accounts, login and profiles."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.api.security import current_caller, ensure_caller_is
from marketplace.catalogue.listing import seller_summary
from marketplace.identity.api.schemas import (
    ListingSummaryResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UpdateProfileRequest,
    UserResponse,
)
from marketplace.identity.authentication import authenticate
from marketplace.identity.profile import UpdateProfile
from marketplace.identity.registration import register
from marketplace.identity.tokens import SessionClaims
from marketplace.identity.user import User

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])
user_router = APIRouter(prefix="/api/user", tags=["users"])


# --- Authentication ---


@auth_router.post("/register", status_code=201, response_model=UserResponse)
async def register_user(body: RegisterRequest) -> UserResponse:
    user = register(email=body.email, password=body.password, username=body.username)
    return UserResponse(**user.to_public())


@auth_router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest) -> LoginResponse:
    user, session = authenticate(body.email, body.password)
    return LoginResponse(
        token=session.token,
        expires_at=session.expires_at.isoformat(),
        user=UserResponse(**user.to_public()),
    )


# --- Profiles ---


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_profile(user_id: str) -> UserResponse:
    user = current_domain.repository_for(User).get(user_id)
    return UserResponse(**user.to_public())


@user_router.get("/{user_id}/listings", response_model=ListingSummaryResponse)
async def get_listing_summary(user_id: str) -> ListingSummaryResponse:
    return ListingSummaryResponse(**seller_summary(user_id))


@user_router.put("/{user_id}", response_model=UserResponse)
async def update_profile(
    user_id: str,
    body: UpdateProfileRequest,
    caller: SessionClaims = Depends(current_caller),
) -> UserResponse:
    ensure_caller_is(caller, user_id)
    command = UpdateProfile(
        user_id=user_id,
        username=body.username,
        email=body.email,
        avatar_url=body.avatar_url,
    )
    current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    return UserResponse(**user.to_public())
