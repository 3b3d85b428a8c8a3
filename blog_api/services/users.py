"""User registration, login, and self-service profile management."""

import logging
from datetime import timedelta
from typing import Optional, Union

from ..auth import passwords, tokens
from ..auth.exceptions import HashingError
from ..storage import exceptions as storage
from .. import domain
from . import exceptions
from .util import require_owner, storage_errors

logger = logging.getLogger(__name__)

USERNAME_EMPTY = 'invalid credentials: user name is empty'
PASSWORD_EMPTY = 'invalid credentials: password is empty'
PASSWORD_TOO_LONG = 'invalid credentials: password is too long'


class UserService(object):
    """
    Applies the account rules on top of a storage collaborator.

    The token TTL and signing secret are fixed at construction; the service
    keeps no other state and is safe to share between requests.
    """

    def __init__(self, store, token_ttl: Union[timedelta, int],
                 secret: str) -> None:
        """
        Parameters
        ----------
        store : :class:`.SQLStorage`
            Persists users.
        token_ttl : :class:`timedelta` or int
            Lifetime of issued tokens (int is read as seconds).
        secret : str
            Key used to sign tokens.

        """
        if not isinstance(token_ttl, timedelta):
            token_ttl = timedelta(seconds=token_ttl)
        self._store = store
        self._token_ttl = token_ttl
        self._secret = secret

    @property
    def token_ttl(self) -> timedelta:
        """Lifetime of tokens issued by :meth:`login`."""
        return self._token_ttl

    def register(self, username: str, password: str) -> domain.User:
        """
        Create a new user account.

        Raises
        ------
        :class:`.exceptions.ValidationError`
            If the username or password is empty.
        :class:`.exceptions.UserExists`
            If the username is already registered.
        :class:`.exceptions.InternalError`

        """
        op = 'users.register'
        _validate_credentials(op, username, password)
        if passwords.is_too_long(password):
            logger.info('Password is too long', extra={'op': op})
            raise exceptions.ValidationError(op, message=PASSWORD_TOO_LONG)

        try:
            pass_hash = passwords.hash_password(password)
        except HashingError as e:
            logger.error('Could not hash password: %s', e, extra={'op': op})
            raise exceptions.InternalError(op) from e

        with storage_errors(op, username,
                            {storage.UserExists: exceptions.UserExists}):
            user = self._store.create_user(username, pass_hash)
        logger.info('Registered user %i', user.user_id,
                    extra={'op': op, 'resource_id': user.user_id})
        return user

    def login(self, username: str, password: str) -> str:
        """
        Check credentials and issue a fresh token.

        The caller should report :class:`.exceptions.UserNotFound` and
        :class:`.exceptions.IncorrectPassword` identically, so that the
        response does not reveal which usernames exist.

        Returns
        -------
        str
            A signed token whose ``uid`` claim is the user's id.

        """
        op = 'users.login'
        _validate_credentials(op, username, password)

        with storage_errors(op, username,
                            {storage.NoSuchUser: exceptions.UserNotFound}):
            credentials = self._store.user_by_name(username)
        user_id = credentials.user.user_id

        try:
            valid = passwords.check_password(credentials.pass_hash, password)
        except HashingError as e:
            logger.error('Stored hash is unusable: %s', e,
                         extra={'op': op, 'resource_id': user_id})
            raise exceptions.InternalError(op, user_id) from e
        if not valid:
            logger.info('Incorrect password',
                        extra={'op': op, 'resource_id': user_id})
            raise exceptions.IncorrectPassword(op, user_id)

        return tokens.encode(user_id, self._token_ttl, self._secret)

    def user_by_id(self, user_id: int) -> domain.User:
        """Load a user."""
        op = 'users.user_by_id'
        with storage_errors(op, user_id,
                            {storage.NoSuchUser: exceptions.UserNotFound}):
            return self._store.user_by_id(user_id)

    def update_profile(self, claims: Optional[domain.Claims], user_id: int,
                       username: Optional[str] = None,
                       status: Optional[str] = None) -> domain.User:
        """
        Update the caller's own username and/or status.

        Empty values are ignored, so either field may be updated alone.

        Raises
        ------
        :class:`.exceptions.Forbidden`
            If ``claims`` do not belong to ``user_id``.
        :class:`.exceptions.UserNameTaken`
        :class:`.exceptions.UserNotFound`

        """
        op = 'users.update_profile'
        require_owner(op, claims, user_id)

        with storage_errors(op, user_id, {
                storage.NoSuchUser: exceptions.UserNotFound,
                storage.UserNameTaken: exceptions.UserNameTaken}):
            if not username and not status:
                return self._store.user_by_id(user_id)
            return self._store.update_user(user_id,
                                           username=username or None,
                                           status=status or None)

    def remove_user(self, claims: Optional[domain.Claims],
                    user_id: int) -> None:
        """
        Delete the caller's own account.

        Articles written by the user are not removed.
        """
        op = 'users.remove_user'
        require_owner(op, claims, user_id)

        with storage_errors(op, user_id,
                            {storage.NoSuchUser: exceptions.UserNotFound}):
            self._store.remove_user(user_id)
        logger.info('Removed user %i', user_id,
                    extra={'op': op, 'resource_id': user_id})


def _validate_credentials(op: str, username: str, password: str) -> None:
    if not username:
        logger.info('User name is empty', extra={'op': op})
        raise exceptions.ValidationError(op, message=USERNAME_EMPTY)
    if not password:
        logger.info('Password is empty', extra={'op': op})
        raise exceptions.ValidationError(op, message=PASSWORD_EMPTY)
