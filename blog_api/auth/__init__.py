"""
Credential and token handling, and the auth layer for Flask requests.

Install :class:`Auth` onto an application to have bearer tokens verified
before each request. Verified :class:`.domain.Claims` are attached to the
request as ``flask.request.auth`` (``None`` if the request is anonymous or
the token could not be verified).
"""

import logging
from typing import Optional

from flask import Flask, request

from . import decorators, exceptions, guard, passwords, tokens

logger = logging.getLogger(__name__)


class Auth(object):
    """
    Attaches verified token claims to the request.

    Intended for use in a Flask application factory, for example:

    .. code-block:: python

       from flask import Flask
       from blog_api.auth import Auth


       def create_web_app() -> Flask:
          app = Flask('blog_api')
          app.config.from_object('blog_api.config')
          Auth(app)
          return app

    """

    def __init__(self, app: Optional[Flask] = None) -> None:
        """
        Initialize ``app`` with the auth layer.

        Parameters
        ----------
        app : :class:`Flask`

        """
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """
        Attach :meth:`.load_claims` to the Flask app.

        Parameters
        ----------
        app : :class:`Flask`

        """
        self.app = app
        self.app.before_request(self.load_claims)

    def load_claims(self) -> None:
        """
        Verify the bearer token (if any) and attach its claims to the request.

        Failure to verify is not an error here: public routes must keep
        working. Routes that need a caller use
        :func:`.decorators.authenticated`, which looks at the outcome.
        """
        request.auth = None
        request.auth_error = None

        token = self._get_token()
        if token is None:
            return

        secret = self.app.config.get('JWT_SECRET')
        if not secret:
            raise exceptions.AuthContextError('JWT_SECRET is not configured')

        try:
            request.auth = tokens.decode(token, secret)
        except exceptions.ExpiredToken as e:
            logger.info('Auth token has expired')
            request.auth_error = e
        except exceptions.InvalidSignature as e:
            logger.warning('Auth token has a bad signature')
            request.auth_error = e
        except exceptions.MalformedToken as e:
            logger.warning('Auth token is malformed')
            request.auth_error = e

    def _get_token(self) -> Optional[str]:
        header = request.headers.get('Authorization')
        if not header:
            return None
        parts = header.split()
        if len(parts) == 2 and parts[0].lower() == 'bearer':
            return parts[1]
        logger.debug('Auth header is malformed')
        request.auth_error = exceptions.MalformedToken('Bad auth header')
        return None
