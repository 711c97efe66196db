"""Listing updates: command and handler."""

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product import Product
from marketplace.domain import marketplace


@marketplace.command(part_of="Product")
class UpdateProduct:
    """Replace title, description, category and price of a listing."""

    product_id: Identifier(required=True)
    actor_id: Identifier(required=True)
    title: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    category: String(required=True, max_length=50, sanitize=False)
    price: Float(required=True)


@marketplace.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.ensure_sold_by(command.actor_id)
        product.update_listing(
            title=command.title,
            description=command.description,
            category=command.category,
            price=command.price,
        )
        repo.add(product)
        return str(product.id)
