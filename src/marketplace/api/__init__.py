"""HTTP concerns shared by every router: error mapping and caller resolution."""

from marketplace.api.errors import install_error_handlers
from marketplace.api.middleware import install_request_context
from marketplace.api.security import current_caller, ensure_caller_is

__all__ = ["install_error_handlers", "install_request_context", "current_caller", "ensure_caller_is"]
