"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductListed:
    """A seller put a new product up for sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    title: String(required=True, sanitize=False)
    category: String(required=True, sanitize=False)
    price: Float(required=True)
    listed_at: DateTime(required=True)


@marketplace.event(part_of="Product")
class ProductUpdated:
    """A seller changed the title, description, category or price of a listing."""

    __version__ = 1

    product_id: Identifier(required=True)
    title: String(required=True, sanitize=False)
    category: String(required=True, sanitize=False)
    price: Float(required=True)
    updated_at: DateTime(required=True)
