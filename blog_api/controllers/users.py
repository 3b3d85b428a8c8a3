"""Handles all user-related requests."""

from http import HTTPStatus
from typing import Any, Optional

from flask import current_app

from ..services import UserService, exceptions
from .. import domain
from .request import string_field
from .response import Response, handles_errors, ok, error, user_to_json

INVALID_CREDENTIALS = exceptions.IncorrectCredentials.message


def get_user_service() -> UserService:
    """Get the :class:`.UserService` installed on the current app."""
    service: UserService = current_app.extensions['blog_api'].users
    return service


@handles_errors
def register(payload: Any) -> Response:
    """
    Register a new user.

    Parameters
    ----------
    payload : dict
        Should contain ``username`` and ``password``.

    Returns
    -------
    dict
        Response envelope.
    int
        An HTTP status code.
    dict
        Some extra headers to add to the response.

    """
    op = 'handlers.users.register'
    username = string_field(op, payload, 'username')
    password = string_field(op, payload, 'password')
    get_user_service().register(username, password)
    return ok(), HTTPStatus.OK, {}


def login(payload: Any) -> Response:
    """
    Log in, returning a fresh token in the envelope.

    A missing user and a wrong password get the same response.
    """
    op = 'handlers.users.login'
    try:
        username = string_field(op, payload, 'username')
        password = string_field(op, payload, 'password')
        token = get_user_service().login(username, password)
    except (exceptions.UserNotFound, exceptions.IncorrectCredentials):
        return error(INVALID_CREDENTIALS), HTTPStatus.OK, {}
    except exceptions.ServiceError as e:
        return error(e.message), HTTPStatus.OK, {}
    return ok(token=token), HTTPStatus.OK, {}


@handles_errors
def get_user(user_id: int) -> Response:
    """Get the public profile of a user."""
    user = get_user_service().user_by_id(user_id)
    return ok(user=user_to_json(user)), HTTPStatus.OK, {}


@handles_errors
def update_user(claims: Optional[domain.Claims], user_id: int,
                payload: Any) -> Response:
    """
    Update the caller's own profile.

    Parameters
    ----------
    claims : :class:`.domain.Claims`
        Verified claims from the request.
    user_id : int
        From the URL. Must match the ``uid`` claim.
    payload : dict
        May contain ``username`` and/or ``status``.

    """
    op = 'handlers.users.update'
    username = string_field(op, payload, 'username', required=False)
    status = string_field(op, payload, 'status', required=False)
    get_user_service().update_profile(claims, user_id,
                                      username=username, status=status)
    return ok(), HTTPStatus.OK, {}


@handles_errors
def remove_user(claims: Optional[domain.Claims], user_id: int) -> Response:
    """Delete the caller's own account."""
    get_user_service().remove_user(claims, user_id)
    return ok(), HTTPStatus.OK, {}
