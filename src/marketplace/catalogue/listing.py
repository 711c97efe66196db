"""Read side of the catalogue: browsing, filtering and seller statistics."""

from collections.abc import Iterator

from protean.utils.globals import current_domain

from marketplace.catalogue.product import CATEGORIES, Product


class ProductListing:
    """A re-iterable view over products matching a set of filters.

    Each iteration queries the repository afresh, so it reflects writes made
    since the previous pass.
    """

    def __init__(self, category: str | None = None, search: str | None = None, seller_id: str | None = None):
        self.category = category
        self.search = search
        self.seller_id = seller_id

    def __iter__(self) -> Iterator[Product]:
        return current_domain.repository_for(Product).search(
            category=self.category,
            search=self.search,
            seller_id=self.seller_id,
        )


def list_products(category: str | None = None, search: str | None = None, seller_id: str | None = None) -> ProductListing:
    return ProductListing(category=category, search=search, seller_id=seller_id)


def get_product(product_id: str) -> Product:
    """Raises ObjectNotFoundError when the listing does not exist."""
    return current_domain.repository_for(Product).get(product_id)


def seller_summary(seller_id: str) -> dict:
    prices = [product.price for product in list_products(seller_id=seller_id)]
    total = round(sum(prices), 2)
    return {
        "count": len(prices),
        "total_value": total,
        "average_price": round(total / len(prices), 2) if prices else 0.0,
    }


def categories() -> list[str]:
    return list(CATEGORIES)
