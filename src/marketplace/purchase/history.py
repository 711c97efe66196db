"""Purchase history queries."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalogue.product import Product
from marketplace.purchase.purchase import Purchase


def list_purchases(user_id) -> list[Purchase]:
    return current_domain.repository_for(Purchase).history(user_id)


def purchases_with_products(user_id) -> list[tuple[Purchase, Product | None]]:
    """Pair each purchase with its listing, or None if the listing was removed."""
    products = current_domain.repository_for(Product)
    pairs = []
    for purchase in list_purchases(user_id):
        try:
            product = products.get(purchase.product_id)
        except ObjectNotFoundError:
            product = None
        pairs.append((purchase, product))
    return pairs


def purchase_summary(user_id) -> dict:
    purchases = list_purchases(user_id)
    return {
        "count": len(purchases),
        "total_spent": round(sum(p.total for p in purchases), 2),
    }
