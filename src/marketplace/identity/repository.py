"""Repository for the User aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.identity.user import User


@marketplace.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Look a user up by login email, ignoring case. Returns None when absent."""
        address = (email or "").strip().lower()
        try:
            return self._dao.find_by(email=address)
        except ObjectNotFoundError:
            return None

    def email_taken(self, email: str, exclude_user_id: str | None = None) -> bool:
        user = self.find_by_email(email)
        if user is None:
            return False
        return exclude_user_id is None or str(user.id) != str(exclude_user_id)
