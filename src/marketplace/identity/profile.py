"""Profile management: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user import User


@marketplace.command(part_of="User")
class UpdateProfile:
    user_id: Identifier(required=True)
    username: String(max_length=50, sanitize=False)
    email: String(max_length=254)
    avatar_url: String(max_length=500)


@marketplace.command_handler(part_of=User)
class ManageProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        changes = {
            field: getattr(command, field)
            for field in ("username", "email", "avatar_url")
            if getattr(command, field) is not None
        }
        if "email" in changes and repo.email_taken(changes["email"], exclude_user_id=user.id):
            raise ValidationError({"email": ["Email is already registered"]})

        user.update_profile(**changes)
        repo.add(user)
        return str(user.id)
