"""Functions for working with signed bearer tokens."""

from datetime import datetime, timedelta, timezone
from typing import Union

import jwt

from . import exceptions
from .. import domain

ALGORITHM = 'HS256'
REQUIRED_CLAIMS = ['uid', 'exp']


def encode(subject_id: int, ttl: Union[timedelta, int], secret: str) -> str:
    """
    Issue a signed token for the user ``subject_id``.

    Parameters
    ----------
    subject_id : int
        Identifier of the user the token is issued to.
    ttl : :class:`timedelta` or int
        How long the token remains valid. An int is read as seconds.
    secret : str
        Symmetric signing key.

    Returns
    -------
    str

    """
    if not isinstance(ttl, timedelta):
        ttl = timedelta(seconds=ttl)
    now = datetime.now(tz=timezone.utc)
    claims = {'uid': int(subject_id), 'iat': now, 'exp': now + ttl}
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def decode(token: str, secret: str) -> domain.Claims:
    """
    Verify a token's signature and expiry, and unpack its claims.

    Raises
    ------
    :class:`.ExpiredToken`
    :class:`.InvalidSignature`
    :class:`.MalformedToken`

    """
    try:
        data: dict = jwt.decode(token, secret, algorithms=[ALGORITHM],
                                options={'require': REQUIRED_CLAIMS})
    except jwt.exceptions.ExpiredSignatureError as e:
        raise exceptions.ExpiredToken('Token has expired') from e
    except jwt.exceptions.InvalidSignatureError as e:
        raise exceptions.InvalidSignature('Token signature mismatch') from e
    except jwt.exceptions.InvalidTokenError as e:
        raise exceptions.MalformedToken('Not a valid token') from e

    # The subject is always an integer at this boundary; anything else was
    # not issued by us.
    uid = data['uid']
    if not isinstance(uid, int) or isinstance(uid, bool):
        raise exceptions.MalformedToken('uid claim is not an integer')
    return domain.Claims(
        uid=uid,
        exp=datetime.fromtimestamp(data['exp'], tz=timezone.utc)
    )
