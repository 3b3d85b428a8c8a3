"""Password hashing and verification."""

import logging

import bcrypt

from .exceptions import HashingError

logger = logging.getLogger(__name__)

ROUNDS = 10
"""bcrypt work factor. Fixed; existing hashes carry their own cost."""

MAX_PASSWORD_BYTES = 72
"""bcrypt ignores (or refuses) anything past this many bytes."""


def is_too_long(password: str) -> bool:
    """Whether ``password`` exceeds what bcrypt can take into account."""
    return len(password.encode('utf-8')) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> bytes:
    """
    Generate a salted bcrypt hash of a password.

    Raises
    ------
    :class:`.HashingError`
        If bcrypt fails to produce a hash.

    """
    try:
        return bcrypt.hashpw(password.encode('utf-8'),
                             bcrypt.gensalt(rounds=ROUNDS))
    except (ValueError, TypeError) as e:
        raise HashingError('Could not hash password') from e


def check_password(pass_hash: bytes, password: str) -> bool:
    """
    Check a password against a bcrypt hash.

    Returns ``False`` if the password does not match. The comparison is
    done by bcrypt in constant time.

    Raises
    ------
    :class:`.HashingError`
        If ``pass_hash`` is not a valid bcrypt hash.

    """
    if is_too_long(password):
        return False    # Could never have been stored.
    try:
        return bcrypt.checkpw(password.encode('utf-8'), bytes(pass_hash))
    except (ValueError, TypeError) as e:
        logger.error('Stored password hash is not valid: %s', e)
        raise HashingError('Invalid password hash') from e
