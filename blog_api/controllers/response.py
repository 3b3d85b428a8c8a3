"""The JSON response envelope shared by every endpoint."""

from functools import wraps
from http import HTTPStatus
from typing import Any, Callable, Optional, Tuple

from ..auth.exceptions import AuthContextError
from ..services import exceptions
from .. import domain

STATUS_OK = 'OK'
STATUS_ERROR = 'Error'

Response = Tuple[Optional[dict], int, dict]


def ok(**fields: Any) -> dict:
    """Build a successful envelope, e.g. ``ok(token='...')``."""
    return dict(status=STATUS_OK, **fields)


def error(message: str) -> dict:
    """Build a failed envelope carrying a static ``message``."""
    return {'status': STATUS_ERROR, 'error': message}


def user_to_json(user: domain.User) -> dict:
    """Public representation of a user. Never includes the password hash."""
    return {
        'id': user.user_id,
        'username': user.username,
        'registration_date': _isoformat(user.registration_date),
        'status': user.status
    }


def article_to_json(article: domain.Article) -> dict:
    """Public representation of an article."""
    return {
        'id': article.article_id,
        'title': article.title,
        'content': article.content,
        'publish_date': _isoformat(article.publish_date),
        'author_id': article.author_id
    }


def handles_errors(func: Callable[..., Response]) -> Callable[..., Response]:
    """
    Render service errors raised by a controller as error envelopes.

    Business errors are handled outcomes, so the HTTP status is still 200;
    the envelope's ``status`` carries the real outcome. Only the static
    message of the error kind reaches the client.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Response:
        try:
            return func(*args, **kwargs)
        except exceptions.ServiceError as e:
            return error(e.message), HTTPStatus.OK, {}
        except AuthContextError:
            return error(exceptions.InternalError.message), HTTPStatus.OK, {}
    return wrapper


def _isoformat(value: Any) -> Optional[str]:
    return value.isoformat() if value is not None else None
