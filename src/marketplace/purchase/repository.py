"""Repository for the Purchase aggregate."""

from marketplace.domain import marketplace
from marketplace.purchase.purchase import Purchase


@marketplace.repository(part_of=Purchase)
class PurchaseRepository:
    def history(self, user_id) -> list[Purchase]:
        """All purchases of ``user_id``, most recent first."""
        query = self._dao.query.filter(user_id=str(user_id)).order_by("-purchased_at")
        purchases = []
        offset = 0
        while True:
            page = query.offset(offset).all()
            purchases.extend(page.items)
            if not page.items or not page.has_next:
                return purchases
            offset += len(page.items)
