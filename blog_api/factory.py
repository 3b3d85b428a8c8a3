"""Application factory for the blog API."""

import logging
from typing import Any, Mapping, NamedTuple, Optional

from flask import Flask, current_app, jsonify
from werkzeug import Response
from werkzeug.exceptions import BadRequest, HTTPException, \
    InternalServerError, MethodNotAllowed, NotFound, Unauthorized

from . import routes, storage
from .app_logging import setup_logger
from .auth import Auth
from .controllers.response import error
from .services import ArticleService, UserService
from .services.exceptions import InternalError

logger = logging.getLogger(__name__)


class Services(NamedTuple):
    """Services shared by all requests to an app."""

    users: UserService
    articles: ArticleService


def jsonify_exception(exc: HTTPException) -> Response:
    """Render an HTTP error with the usual response envelope."""
    if isinstance(exc, Unauthorized):
        message = 'unauthorized'
    elif isinstance(exc, InternalServerError):
        message = InternalError.message
    else:
        message = exc.name.lower()
    response = jsonify(error(message))
    response.status_code = exc.code or 500
    return response


def handle_unexpected(exc: Exception) -> Response:
    """Log an unhandled exception and render it as an internal error."""
    if isinstance(exc, HTTPException):
        return jsonify_exception(exc)
    logger.exception('Unhandled exception: %s', exc)
    return jsonify_exception(InternalServerError(original_exception=exc))


def set_deadline() -> None:
    """Start the storage deadline for the current request."""
    storage.util.set_deadline(current_app.config['REQUEST_TIMEOUT'])


def create_web_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Initialize an instance of the blog API.

    Parameters
    ----------
    config : dict
        Overrides for the values in :mod:`blog_api.config`.

    """
    app = Flask('blog_api')
    app.config.from_object('blog_api.config')
    if config:
        app.config.update(config)

    setup_logger(app.config['ENV_NAME'], app.config['LOGLEVEL'])
    storage.init_app(app)
    Auth(app)
    app.before_request(set_deadline)

    store = storage.SQLStorage()
    app.extensions['blog_api'] = Services(
        users=UserService(store, app.config['TOKEN_TTL'],
                          app.config['JWT_SECRET']),
        articles=ArticleService(store)
    )

    app.register_blueprint(routes.blueprint)
    app.register_blueprint(routes.users_blueprint)
    app.register_blueprint(routes.articles_blueprint)
    app.errorhandler(NotFound)(jsonify_exception)
    app.errorhandler(BadRequest)(jsonify_exception)
    app.errorhandler(Unauthorized)(jsonify_exception)
    app.errorhandler(MethodNotAllowed)(jsonify_exception)
    app.errorhandler(InternalServerError)(jsonify_exception)
    app.errorhandler(Exception)(handle_unexpected)
    logger.debug('Created app for %s', app.config['ENV_NAME'])
    return app
