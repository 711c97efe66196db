"""Purchase aggregate: an immutable record of a completed purchase.

The unit price and title are copied from the product at purchase time, so
later edits to (or removal of) the listing do not change the history.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, Integer, String

from marketplace.domain import marketplace
from marketplace.purchase.events import ProductPurchased


@marketplace.aggregate
class Purchase:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    seller_id = Identifier()
    title = String(required=True, max_length=255, sanitize=False)
    price = Float(required=True, min_value=0.01)
    quantity = Integer(required=True, min_value=1, default=1)
    purchased_at = DateTime(required=True)

    @classmethod
    def record(cls, user_id, product, quantity=1, purchased_at=None):
        """Capture a purchase of ``quantity`` units of ``product`` at its current price."""
        now = purchased_at or datetime.now(UTC)
        purchase = cls(
            user_id=user_id,
            product_id=product.id,
            seller_id=product.seller_id,
            title=product.title,
            price=product.price,
            quantity=quantity,
            purchased_at=now,
        )
        purchase.raise_(
            ProductPurchased(
                purchase_id=str(purchase.id),
                user_id=str(user_id),
                product_id=str(product.id),
                price=product.price,
                quantity=quantity,
                purchased_at=now,
            )
        )
        return purchase

    @property
    def total(self) -> float:
        return round(self.price * self.quantity, 2)
