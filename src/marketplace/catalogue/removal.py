"""Listing removal: command and handler.

Removal is a hard delete. Cart entries pointing at the product are removed in
the same unit of work; purchase records keep their own title and price
snapshot and are left alone.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.cart.cart import Cart
from marketplace.catalogue.product import Product
from marketplace.domain import marketplace
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)
    actor_id: Identifier(required=True)


@marketplace.command_handler(part_of=Product)
class DeleteProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            # Deleting a listing that is already gone still succeeds
            return False

        product.ensure_sold_by(command.actor_id)

        cart_repo = current_domain.repository_for(Cart)
        carts = cart_repo.holding(command.product_id)
        for cart in carts:
            cart.discard(command.product_id)
            cart_repo.add(cart)

        repo._dao.delete(product)
        logger.info(
            "Product removed",
            product_id=str(command.product_id),
            carts_updated=len(carts),
        )
        return True
