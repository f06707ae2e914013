"""
Error types raised by the menu API.

Every error carries a stable ``code`` (surfaced to GraphQL clients as
``extensions.code``) and the HTTP status a REST caller would expect.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import Violation


class MenuError(Exception):
    """Base class for menu domain errors."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MenuError):
    """A write payload violated one or more field constraints."""

    code = "BAD_USER_INPUT"
    status_code = 400

    def __init__(self, violations: List["Violation"]):
        self.violations = list(violations)
        message = "; ".join(v.message for v in self.violations) or "Invalid payload"
        super().__init__(message)


class NotFoundError(MenuError):
    """No menu item has the requested business identifier."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, business_id: str):
        self.business_id = business_id
        super().__init__(f'Menu item with id "{business_id}" not found')


class ConflictError(MenuError):
    """A menu item with the same business identifier already exists."""

    code = "CONFLICT"
    status_code = 409

    def __init__(self, business_id: str):
        self.business_id = business_id
        super().__init__(f'Menu item with id "{business_id}" already exists')


class StoreUnavailableError(MenuError):
    """The database could not be reached."""

    code = "STORE_UNAVAILABLE"
    status_code = 503

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Menu store is unavailable")
