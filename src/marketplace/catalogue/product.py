"""Product aggregate root: a second-hand listing offered for sale by one seller."""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text

from marketplace.domain import marketplace
from marketplace.exceptions import PermissionDeniedError


class Category(Enum):
    """Fixed set of listing categories."""

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    HOME_AND_GARDEN = "Home & Garden"
    SPORTS = "Sports"
    BOOKS = "Books"
    TOYS = "Toys"
    FURNITURE = "Furniture"
    AUTOMOTIVE = "Automotive"
    OTHER = "Other"


CATEGORIES = [category.value for category in Category]


def _to_price(value):
    """Round to cents; leave non-numeric input for field validation to reject."""
    try:
        return round(float(value), 2)
    except (TypeError, ValueError):
        return value


@marketplace.aggregate
class Product:
    """A listing: what is sold, for how much, and by whom.

    Only the seller may change or remove a listing; everyone can read it.
    """

    title: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(required=True)
    category: String(required=True, choices=Category, sanitize=False)
    image_url: String(max_length=500)
    seller_id: Identifier(required=True)
    seller_name: String(max_length=50, sanitize=False)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Price must be greater than zero"]})

    @classmethod
    def create(cls, title, category, price, seller_id, description=None, image_url=None, seller_name=None):
        from marketplace.catalogue.events import ProductListed

        now = datetime.now(UTC)
        product = cls(
            title=title,
            description=description,
            category=category,
            price=_to_price(price),
            image_url=image_url,
            seller_id=seller_id,
            seller_name=seller_name,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductListed(
                product_id=product.id,
                seller_id=seller_id,
                title=title,
                category=category,
                price=product.price,
                listed_at=now,
            )
        )
        return product

    def is_sold_by(self, user_id) -> bool:
        return str(self.seller_id) == str(user_id)

    def ensure_sold_by(self, user_id):
        if not self.is_sold_by(user_id):
            raise PermissionDeniedError("Only the seller can modify this listing")

    def update_listing(self, title, description, category, price):
        """Replace the four mutable fields of the listing."""
        from marketplace.catalogue.events import ProductUpdated

        with atomic_change(self):
            self.title = title
            self.description = description
            self.category = category
            self.price = _to_price(price)
            self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                title=self.title,
                category=self.category,
                price=self.price,
                updated_at=self.updated_at,
            )
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "image_url": self.image_url,
            "seller_id": str(self.seller_id),
            "seller_name": self.seller_name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
