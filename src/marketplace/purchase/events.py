"""Domain events for the Purchase aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Purchase")
class ProductPurchased:
    """A buyer completed the purchase of a product."""

    __version__ = 1

    purchase_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    price = Float(required=True)
    quantity = Integer(required=True)
    purchased_at = DateTime(required=True)
