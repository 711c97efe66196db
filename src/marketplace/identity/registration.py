"""User registration: command, handler and entry point.

The plaintext password is hashed before the command is built, so commands
recorded in the event store never carry it.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.passwords import hash_password
from marketplace.identity.user import User
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="User")
class RegisterUser:
    """Create a new account for a buyer/seller."""

    email: String(required=True, max_length=254)
    username: String(required=True, max_length=50, sanitize=False)
    password_hash: String(required=True, max_length=255)


@marketplace.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.email_taken(command.email):
            raise ValidationError({"email": ["Email is already registered"]})

        user = User.register(
            email=command.email,
            username=command.username,
            password_hash=command.password_hash,
        )
        repo.add(user)
        logger.info("User registered", user_id=str(user.id))
        return str(user.id)


def register(email: str, password: str, username: str) -> User:
    """Register a new user and return the stored aggregate."""
    if not password:
        raise ValidationError({"password": ["is required"]})

    user_id = current_domain.process(
        RegisterUser(email=email, username=username, password_hash=hash_password(password)),
        asynchronous=False,
    )
    return current_domain.repository_for(User).get(user_id)
