"""EmailAddress value object for validated login emails."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from marketplace.domain import marketplace


@marketplace.value_object
class EmailAddress:
    """A structurally valid email address.

    Enforces exactly one ``@``, non-empty local and domain parts, a dotted
    domain, no whitespace and no consecutive dots. Addresses are compared
    case-insensitively, so callers should use :meth:`normalized`.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address

        def _reject():
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if any(ch.isspace() for ch in email):
            _reject()

        if email.count("@") != 1:
            _reject()

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            _reject()

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            _reject()

        if "." not in domain_part:
            _reject()

        if ".." in local_part or ".." in domain_part:
            _reject()

        for label in domain_part.split("."):
            if label.startswith("-") or label.endswith("-"):
                _reject()

    def normalized(self) -> str:
        return self.address.strip().lower()
