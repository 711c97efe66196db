"""Cart contents joined with the current catalogue."""

from dataclasses import dataclass
from datetime import datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.cart.cart import Cart
from marketplace.catalogue.product import Product


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: int
    added_at: datetime | None

    @property
    def subtotal(self) -> float:
        return round(self.product.price * self.quantity, 2)


def cart_lines(user_id) -> list[CartLine]:
    """Entries of the user's cart, in the order they were added.

    Entries whose product has since been deleted are left out.
    """
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        return []

    products = current_domain.repository_for(Product)
    lines = []
    for entry in sorted(cart.entries, key=lambda e: e.added_at.timestamp() if e.added_at else 0):
        try:
            product = products.get(entry.product_id)
        except ObjectNotFoundError:
            continue
        lines.append(CartLine(product=product, quantity=entry.quantity, added_at=entry.added_at))
    return lines


def cart_total(user_id) -> float:
    return round(sum(line.subtotal for line in cart_lines(user_id)), 2)
