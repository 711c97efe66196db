"""Login: credential verification and session-token issuance."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.exceptions import AuthenticationError
from marketplace.identity.passwords import verify_password
from marketplace.identity.tokens import SessionToken, issue_token
from marketplace.identity.user import User
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="User")
class RecordLogin:
    user_id: Identifier(required=True)


@marketplace.command_handler(part_of=User)
class RecordLoginHandler:
    @handle(RecordLogin)
    def record_login(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.record_login()
        repo.add(user)


def authenticate(email: str, password: str) -> tuple[User, SessionToken]:
    """Check credentials and issue a session token valid for one day.

    Unknown emails and wrong passwords fail the same way, with
    :class:`AuthenticationError`, and no token is issued.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login rejected")
        raise AuthenticationError()

    current_domain.process(RecordLogin(user_id=user.id), asynchronous=False)
    logger.info("User logged in", user_id=str(user.id))
    return user, issue_token(user.id, user.email)
