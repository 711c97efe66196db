"""FastAPI endpoints for carts.

Every endpoint acts on behalf of the user named in the path or body, who
must be the authenticated caller.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.api.security import current_caller, ensure_caller_is
from marketplace.cart.api.schemas import AddToCartRequest, CartLineResponse, CartTotalResponse
from marketplace.cart.items import AddToCart, RemoveFromCart
from marketplace.cart.views import cart_lines, cart_total
from marketplace.catalogue.api.schemas import SuccessResponse
from marketplace.identity.tokens import SessionClaims

cart_router = APIRouter(prefix="/api/cart", tags=["cart"])


@cart_router.post("", response_model=SuccessResponse)
async def add_to_cart(body: AddToCartRequest, caller: SessionClaims = Depends(current_caller)) -> SuccessResponse:
    ensure_caller_is(caller, body.user_id)
    current_domain.process(AddToCart(user_id=body.user_id, product_id=body.product_id), asynchronous=False)
    return SuccessResponse()


@cart_router.get("/{user_id}", response_model=list[CartLineResponse])
async def get_cart(user_id: str, caller: SessionClaims = Depends(current_caller)) -> list[CartLineResponse]:
    ensure_caller_is(caller, user_id)
    return [
        CartLineResponse(
            **line.product.to_dict(),
            quantity=line.quantity,
            added_at=line.added_at.isoformat() if line.added_at else None,
        )
        for line in cart_lines(user_id)
    ]


@cart_router.get("/{user_id}/total", response_model=CartTotalResponse)
async def get_cart_total(user_id: str, caller: SessionClaims = Depends(current_caller)) -> CartTotalResponse:
    ensure_caller_is(caller, user_id)
    lines = cart_lines(user_id)
    return CartTotalResponse(items=sum(line.quantity for line in lines), total=cart_total(user_id))


@cart_router.delete("/{user_id}/{product_id}", response_model=SuccessResponse)
async def remove_from_cart(
    user_id: str,
    product_id: str,
    caller: SessionClaims = Depends(current_caller),
) -> SuccessResponse:
    ensure_caller_is(caller, user_id)
    current_domain.process(RemoveFromCart(user_id=user_id, product_id=product_id), asynchronous=False)
    return SuccessResponse()
