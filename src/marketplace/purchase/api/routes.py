"""FastAPI endpoints for checkout and purchase history.

Every endpoint acts on behalf of the user named in the path or body, who
must be the authenticated caller.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.api.security import current_caller, ensure_caller_is
from marketplace.catalogue.api.schemas import ProductResponse
from marketplace.identity.tokens import SessionClaims
from marketplace.purchase.api.schemas import (
    PurchaseRequest,
    PurchaseResponse,
    PurchaseResultResponse,
    PurchaseSummaryResponse,
)
from marketplace.purchase.checkout import CompletePurchase, PurchaseProduct
from marketplace.purchase.history import purchase_summary, purchases_with_products
from marketplace.purchase.purchase import Purchase

purchase_router = APIRouter(prefix="/api/purchase", tags=["purchases"])


def _purchase_response(purchase, product=None) -> PurchaseResponse:
    return PurchaseResponse(
        id=str(purchase.id),
        product_id=str(purchase.product_id),
        title=purchase.title,
        price=purchase.price,
        quantity=purchase.quantity,
        purchased_at=purchase.purchased_at.isoformat(),
        product=ProductResponse(**product.to_dict()) if product is not None else None,
    )


@purchase_router.post("", response_model=PurchaseResultResponse)
async def purchase(body: PurchaseRequest, caller: SessionClaims = Depends(current_caller)) -> PurchaseResultResponse:
    ensure_caller_is(caller, body.user_id)
    if body.product_id:
        command = PurchaseProduct(user_id=body.user_id, product_id=body.product_id)
    else:
        command = CompletePurchase(user_id=body.user_id)

    purchase_ids = current_domain.process(command, asynchronous=False)
    repo = current_domain.repository_for(Purchase)
    return PurchaseResultResponse(purchases=[_purchase_response(repo.get(pid)) for pid in purchase_ids])


@purchase_router.get("/{user_id}", response_model=list[PurchaseResponse])
async def purchase_history(user_id: str, caller: SessionClaims = Depends(current_caller)) -> list[PurchaseResponse]:
    ensure_caller_is(caller, user_id)
    return [_purchase_response(purchase, product) for purchase, product in purchases_with_products(user_id)]


@purchase_router.get("/{user_id}/summary", response_model=PurchaseSummaryResponse)
async def get_purchase_summary(user_id: str, caller: SessionClaims = Depends(current_caller)) -> PurchaseSummaryResponse:
    ensure_caller_is(caller, user_id)
    return PurchaseSummaryResponse(**purchase_summary(user_id))
