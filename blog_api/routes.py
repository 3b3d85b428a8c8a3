"""Provides the HTTP routes for users and articles."""

from http import HTTPStatus

from flask import Blueprint, jsonify, request
from werkzeug import Response

from .auth.decorators import authenticated
from .controllers import articles, users
from .controllers.response import ok
from . import storage

blueprint = Blueprint('blog', __name__, url_prefix='')
users_blueprint = Blueprint('users', __name__, url_prefix='/users')
articles_blueprint = Blueprint('articles', __name__, url_prefix='/articles')


def _payload() -> object:
    # A body that is not JSON is passed on as None; the controllers reject it.
    return request.get_json(silent=True, force=True)


@blueprint.route('/status', methods=['GET'])
def service_status() -> Response:
    """Health check endpoint."""
    if not storage.is_available():
        return jsonify({'status': 'Error', 'error': 'storage unavailable'}), \
            HTTPStatus.SERVICE_UNAVAILABLE
    return jsonify(ok()), HTTPStatus.OK


@users_blueprint.route('/register', methods=['POST'])
def register() -> Response:
    """Register a new user."""
    data, code, headers = users.register(_payload())
    return jsonify(data), code, headers


@users_blueprint.route('/login', methods=['POST'])
def login() -> Response:
    """Log in and obtain a token."""
    data, code, headers = users.login(_payload())
    return jsonify(data), code, headers


@users_blueprint.route('/<int:user_id>', methods=['GET'])
def get_user(user_id: int) -> Response:
    """Get a user's public profile."""
    data, code, headers = users.get_user(user_id)
    return jsonify(data), code, headers


@users_blueprint.route('/<int:user_id>', methods=['PUT'])
@authenticated
def update_user(user_id: int) -> Response:
    """Update the caller's own profile."""
    data, code, headers = users.update_user(request.auth, user_id,
                                            _payload())
    return jsonify(data), code, headers


@users_blueprint.route('/<int:user_id>', methods=['DELETE'])
@authenticated
def remove_user(user_id: int) -> Response:
    """Delete the caller's own account."""
    data, code, headers = users.remove_user(request.auth, user_id)
    return jsonify(data), code, headers


@articles_blueprint.route('/', methods=['GET'])
def list_articles() -> Response:
    """List all articles."""
    data, code, headers = articles.list_articles()
    return jsonify(data), code, headers


@articles_blueprint.route('/', methods=['POST'])
@authenticated
def create_article() -> Response:
    """Publish an article as the caller."""
    data, code, headers = articles.create_article(request.auth, _payload())
    return jsonify(data), code, headers


@articles_blueprint.route('/<int:article_id>', methods=['GET'])
def get_article(article_id: int) -> Response:
    """Get a single article."""
    data, code, headers = articles.get_article(article_id)
    return jsonify(data), code, headers


@articles_blueprint.route('/<int:article_id>', methods=['PUT'])
@authenticated
def update_article(article_id: int) -> Response:
    """Update one of the caller's articles."""
    data, code, headers = articles.update_article(request.auth, article_id,
                                                  _payload())
    return jsonify(data), code, headers


@articles_blueprint.route('/<int:article_id>', methods=['DELETE'])
@authenticated
def remove_article(article_id: int) -> Response:
    """Delete one of the caller's articles."""
    data, code, headers = articles.remove_article(request.auth, article_id)
    return jsonify(data), code, headers
