"""Cart aggregate: the products a user intends to buy, with quantities.

Each user has at most one cart, and a cart holds at most one entry per
product: adding a product that is already present raises its quantity.
Checkout consumes every entry; the resulting purchase records are created by
the checkout handler in the same unit of work.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from marketplace.cart.events import CartCheckedOut, ProductAddedToCart, ProductRemovedFromCart
from marketplace.domain import marketplace
from marketplace.exceptions import EmptyCartError


@marketplace.entity(part_of="Cart")
class CartEntry:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@marketplace.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    entries = HasMany(CartEntry)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_entry_per_product(self):
        product_ids = [str(entry.product_id) for entry in self.entries]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"entries": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Entry management
    # -------------------------------------------------------------------
    def entry_for(self, product_id):
        return next((e for e in self.entries if str(e.product_id) == str(product_id)), None)

    def add_product(self, product_id):
        """Add one unit of a product, merging with an existing entry."""
        now = datetime.now(UTC)
        existing = self.entry_for(product_id)

        if existing:
            existing.quantity += 1
            entry = existing
        else:
            entry = CartEntry(product_id=product_id, quantity=1, added_at=now)
            self.add_entries(entry)

        self.updated_at = now

        self.raise_(
            ProductAddedToCart(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
                quantity=entry.quantity,
            )
        )
        return entry

    def remove_product(self, product_id):
        """Remove a product's entry. Does nothing when the product is not in the cart."""
        entry = self.entry_for(product_id)
        if entry is None:
            return False

        self.remove_entries(entry)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductRemovedFromCart(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
            )
        )
        return True

    def discard(self, product_id):
        """Drop an entry whose product is no longer for sale."""
        return self.remove_product(product_id)

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def check_out(self):
        """Empty the cart and return what it held as ``(product_id, quantity)`` pairs."""
        if not self.entries:
            raise EmptyCartError()

        consumed = [(str(entry.product_id), entry.quantity) for entry in self.entries]
        for entry in list(self.entries):
            self.remove_entries(entry)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                entry_count=len(consumed),
            )
        )
        return consumed

    @property
    def is_empty(self):
        return not self.entries
