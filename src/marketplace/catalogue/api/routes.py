"""FastAPI endpoints for browsing and managing listings."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from protean.utils.globals import current_domain

from marketplace.api.security import current_caller, ensure_caller_is
from marketplace.catalogue.api.schemas import ProductResponse, SuccessResponse, UpdateProductRequest
from marketplace.catalogue.creation import create_product
from marketplace.catalogue.details import UpdateProduct
from marketplace.catalogue.listing import categories, get_product, list_products
from marketplace.catalogue.removal import DeleteProduct
from marketplace.identity.tokens import SessionClaims

product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def browse_products(
    category: str | None = None,
    search: str | None = None,
    seller_id: str | None = None,
) -> list[ProductResponse]:
    listing = list_products(category=category, search=search, seller_id=seller_id)
    return [ProductResponse(**product.to_dict()) for product in listing]


@product_router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    return categories()


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_listing(
    title: str = Form(...),
    category: str = Form(...),
    price: float = Form(...),
    description: str | None = Form(None),
    user_id: str | None = Form(None),
    image: UploadFile | None = File(None),
    caller: SessionClaims = Depends(current_caller),
) -> ProductResponse:
    if user_id:
        ensure_caller_is(caller, user_id)

    content = await image.read() if image is not None else None
    product = create_product(
        title=title,
        description=description,
        category=category,
        price=price,
        seller_id=caller.user_id,
        image=content,
        image_filename=image.filename if image is not None else None,
        image_content_type=image.content_type if image is not None else None,
    )
    return ProductResponse(**product.to_dict())


@product_router.get("/{product_id}", response_model=ProductResponse)
async def show_product(product_id: str) -> ProductResponse:
    return ProductResponse(**get_product(product_id).to_dict())


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_listing(
    product_id: str,
    body: UpdateProductRequest,
    caller: SessionClaims = Depends(current_caller),
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        actor_id=caller.user_id,
        title=body.title,
        description=body.description,
        category=body.category,
        price=body.price,
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse(**get_product(product_id).to_dict())


@product_router.delete("/{product_id}", response_model=SuccessResponse)
async def delete_listing(product_id: str, caller: SessionClaims = Depends(current_caller)) -> SuccessResponse:
    current_domain.process(DeleteProduct(product_id=product_id, actor_id=caller.user_id), asynchronous=False)
    return SuccessResponse()
