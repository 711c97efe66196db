"""Checkout: commands and handler turning cart entries into purchase records.

Each handler method runs inside one unit of work: either every purchase is
stored and the cart emptied, or nothing changes.
"""

from datetime import UTC, datetime

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.cart.cart import Cart
from marketplace.catalogue.product import Product
from marketplace.domain import marketplace
from marketplace.exceptions import EmptyCartError
from marketplace.purchase.purchase import Purchase
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Purchase")
class CompletePurchase:
    """Buy everything in the user's cart."""

    user_id = Identifier(required=True)


@marketplace.command(part_of="Purchase")
class PurchaseProduct:
    """Buy a single product right away, without going through the cart."""

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@marketplace.command_handler(part_of=Purchase)
class CheckoutHandler:
    @handle(CompletePurchase)
    def complete_purchase(self, command):
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_user(command.user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError()

        products = current_domain.repository_for(Product)
        purchase_repo = current_domain.repository_for(Purchase)
        now = datetime.now(UTC)

        available = []
        for product_id, quantity in cart.check_out():
            try:
                available.append((products.get(product_id), quantity))
            except ObjectNotFoundError:
                logger.warning("Dropping cart entry for removed product", product_id=product_id)

        # Nothing left to buy: fail and leave the cart as it was
        if not available:
            raise EmptyCartError("Cart has no products available for purchase")

        purchase_ids = []
        for product, quantity in available:
            purchase = Purchase.record(command.user_id, product, quantity=quantity, purchased_at=now)
            purchase_repo.add(purchase)
            purchase_ids.append(str(purchase.id))

        cart_repo.add(cart)
        logger.info("Checkout completed", user_id=str(command.user_id), purchases=len(purchase_ids))
        return purchase_ids

    @handle(PurchaseProduct)
    def purchase_product(self, command):
        try:
            product = current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ValidationError({"product_id": ["Product does not exist"]}) from None

        purchase = Purchase.record(command.user_id, product)
        current_domain.repository_for(Purchase).add(purchase)

        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_user(command.user_id)
        if cart is not None and cart.remove_product(command.product_id):
            cart_repo.add(cart)

        logger.info("Product purchased", user_id=str(command.user_id), product_id=str(command.product_id))
        return [str(purchase.id)]
