"""Repository for the Product aggregate."""

from collections.abc import Iterator

from marketplace.catalogue.product import Product
from marketplace.domain import marketplace


@marketplace.repository(part_of=Product)
class ProductRepository:
    def search(self, category: str | None = None, search: str | None = None, seller_id: str | None = None) -> Iterator[Product]:
        """Yield matching products, newest first, fetching one page at a time.

        Empty strings are not filters. ``search`` is a case-insensitive
        substring match on the title. Filters combine with AND.
        """
        criteria = {}
        if category:
            criteria["category"] = category
        if search:
            criteria["title__icontains"] = search
        if seller_id:
            criteria["seller_id"] = seller_id

        query = self._dao.query
        if criteria:
            query = query.filter(**criteria)
        query = query.order_by("-created_at")

        offset = 0
        while True:
            page = query.offset(offset).all()
            yield from page.items
            if not page.items or not page.has_next:
                return
            offset += len(page.items)
