"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Cart")
class ProductAddedToCart:
    """A product was added to a cart, or its quantity went up by one."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@marketplace.event(part_of="Cart")
class ProductRemovedFromCart:
    """A product's entry was removed from a cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@marketplace.event(part_of="Cart")
class CartCheckedOut:
    """Every entry of a cart was converted into purchase records."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    entry_count = Integer(required=True)
