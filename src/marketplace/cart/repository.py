"""Repository for the Cart aggregate."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.cart.cart import Cart, CartEntry
from marketplace.domain import marketplace


@marketplace.repository(part_of=Cart)
class CartRepository:
    def for_user(self, user_id) -> Cart | None:
        try:
            return self._dao.find_by(user_id=str(user_id))
        except ObjectNotFoundError:
            return None

    def holding(self, product_id) -> list[Cart]:
        """Carts with an entry for ``product_id``."""
        entries = current_domain.repository_for(CartEntry)._dao.query.filter(product_id=str(product_id)).all().items
        cart_ids = {str(entry.cart_id) for entry in entries}
        return [self.get(cart_id) for cart_id in cart_ids]
