"""Listing creation: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product import Product
from marketplace.catalogue.storage import get_object_store
from marketplace.domain import marketplace
from marketplace.identity.user import User
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Product")
class CreateProduct:
    """Put a product up for sale on behalf of an existing user."""

    title: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    category: String(required=True, max_length=50, sanitize=False)
    price: Float(required=True)
    seller_id: Identifier(required=True)
    image_url: String(max_length=500)


@marketplace.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        try:
            seller = current_domain.repository_for(User).get(command.seller_id)
        except ObjectNotFoundError:
            raise ValidationError({"seller_id": ["Seller does not exist"]}) from None

        product = Product.create(
            title=command.title,
            description=command.description,
            category=command.category,
            price=command.price,
            seller_id=command.seller_id,
            seller_name=seller.username,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product listed", product_id=str(product.id), seller_id=str(command.seller_id))
        return str(product.id)


def create_product(
    title,
    category,
    price,
    seller_id,
    description=None,
    image: bytes | None = None,
    image_filename: str | None = None,
    image_content_type: str | None = None,
) -> Product:
    """List a product, uploading ``image`` to the object store first when given.

    An uploaded image is discarded again if the listing cannot be stored.
    """
    image_url = None
    store = get_object_store()
    if image:
        image_url = store.put(image, filename=image_filename, content_type=image_content_type).url

    try:
        product_id = current_domain.process(
            CreateProduct(
                title=title,
                description=description,
                category=category,
                price=price,
                seller_id=seller_id,
                image_url=image_url,
            ),
            asynchronous=False,
        )
    except Exception:
        if image_url:
            store.delete(image_url)
        raise

    return current_domain.repository_for(Product).get(product_id)
