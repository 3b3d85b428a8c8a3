"""
Authentication requirement for Flask routes.

:func:`authenticated` protects routes that only make sense for a caller
holding a valid bearer token (all of the mutating endpoints). It does not
decide *which* resources the caller may touch; that is the job of
:func:`blog_api.auth.guard.check_owner`, invoked by the services once the
real owner of the resource is known.

.. code-block:: python

   from blog_api.auth.decorators import authenticated

   @blueprint.route('/<int:user_id>', methods=['DELETE'])
   @authenticated
   def remove_user(user_id: int):
       data, code, headers = users.remove_user(request.auth, user_id)
       return jsonify(data), code, headers

When the decorated route function is called...

- If the auth layer could not verify a token, or none was sent, an
  :class:`Unauthorized` exception is raised.
- Otherwise the route is called with the original parameters; the verified
  :class:`.domain.Claims` are available as ``request.auth``.

"""

import logging
from functools import wraps
from typing import Any, Callable

from flask import request
from werkzeug.exceptions import Unauthorized

logger = logging.getLogger(__name__)


def authenticated(func: Callable) -> Callable:
    """Require verified claims on the request before calling ``func``."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """
        Check for verified claims before executing the route.

        Raises
        ------
        :class:`.Unauthorized`
            Raised when no verified claims are available.

        """
        if getattr(request, 'auth', None) is None:
            logger.debug('No valid claims (%r); aborting',
                         getattr(request, 'auth_error', None))
            raise Unauthorized('Not a valid auth token')
        return func(*args, **kwargs)
    return wrapper
