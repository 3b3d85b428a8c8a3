"""
Errors returned by the user and article services.

Each error kind carries a static, client-safe :attr:`ServiceError.message`,
plus the operation and resource id it was raised for. Controllers render
only the static message; the rest is for logs.
"""

from typing import Any, Optional

from ..auth.exceptions import AuthContextError


class ServiceError(RuntimeError):
    """Base class for all service errors."""

    message = 'internal error'
    """Short, stable description that is safe to show to clients."""

    def __init__(self, op: str, resource_id: Optional[Any] = None,
                 message: Optional[str] = None) -> None:
        """Record the failing operation and the resource it concerned."""
        if message is not None:
            self.message = message
        self.op = op
        self.resource_id = resource_id
        super(ServiceError, self).__init__(f'{op}: {self.message}')


class ValidationError(ServiceError):
    """A required field was empty or otherwise unusable."""

    message = 'invalid request'


class UserExists(ServiceError):
    """Registration conflicts with an existing username."""

    message = 'user already exists'


class ArticleExists(ServiceError):
    """Article conflicts with an existing one."""

    message = 'article already exists'


class UserNotFound(ServiceError):
    """No such user."""

    message = 'user not found'


class ArticleNotFound(ServiceError):
    """No such article."""

    message = 'article not found'


class UserNameTaken(ServiceError):
    """Another user already has the requested username."""

    message = 'user name already taken'


class IncorrectCredentials(ServiceError):
    """Login failed."""

    message = 'invalid credentials'


class IncorrectPassword(IncorrectCredentials):
    """The user exists, but the password does not match."""


class Forbidden(ServiceError):
    """Authenticated, but not the owner of the resource."""

    message = 'not enough rights'


class Canceled(ServiceError):
    """The request was canceled while talking to storage."""

    message = 'request canceled'


class DeadlineExceeded(Canceled):
    """The request ran out of time while talking to storage."""

    message = 'request timed out'


class InternalError(ServiceError):
    """Catch-all for storage and other server-side faults."""


__all__ = (
    'ServiceError', 'ValidationError', 'UserExists', 'ArticleExists',
    'UserNotFound', 'ArticleNotFound', 'UserNameTaken',
    'IncorrectCredentials', 'IncorrectPassword', 'Forbidden',
    'AuthContextError', 'Canceled', 'DeadlineExceeded', 'InternalError',
)
