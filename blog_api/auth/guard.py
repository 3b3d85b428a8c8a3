"""
Ownership checks for mutating operations.

A user may only modify or delete their own account, or articles they
authored. :func:`check_owner` is the single place where that rule is
evaluated. Callers are responsible for passing the *actual* owner of the
resource: the ``id`` path parameter for user self-service, and the
``author_id`` freshly loaded from storage for articles (never a value taken
from the request body).

.. code-block:: python

   from blog_api.auth import guard

   article = storage.article_by_id(article_id)
   if not guard.check_owner(claims, article.author_id):
       raise Forbidden(...)

"""

import logging
from typing import Any, Optional

from .exceptions import AuthContextError
from .. import domain

logger = logging.getLogger(__name__)


def check_owner(claims: Optional[domain.Claims], owner_id: Any) -> bool:
    """
    Check whether the authenticated subject owns a resource.

    Parameters
    ----------
    claims : :class:`.domain.Claims`
        Claims attached to the request by the auth layer.
    owner_id : int
        Identifier of the resource's owner.

    Returns
    -------
    bool
        ``True`` iff the token subject equals ``owner_id``. A mismatch, or a
        claim/owner that is not an integer, yields ``False``.

    Raises
    ------
    :class:`.AuthContextError`
        If no claims are available at all.

    """
    if claims is None:
        logger.error('Owner check requested without auth claims')
        raise AuthContextError('No claims in request context')

    uid = getattr(claims, 'uid', None)
    if not _is_int(uid) or not _is_int(owner_id):
        logger.debug('Malformed uid claim or owner id: %r, %r', uid, owner_id)
        return False
    if uid != owner_id:
        logger.debug('Subject %i is not owner %i', uid, owner_id)
        return False
    return True


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
