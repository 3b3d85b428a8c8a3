"""Handles all article-related requests."""

from http import HTTPStatus
from typing import Any, Optional

from flask import current_app

from ..services import ArticleService
from .. import domain
from .request import int_field, string_field
from .response import Response, article_to_json, handles_errors, ok


def get_article_service() -> ArticleService:
    """Get the :class:`.ArticleService` installed on the current app."""
    service: ArticleService = current_app.extensions['blog_api'].articles
    return service


@handles_errors
def list_articles() -> Response:
    """List every article."""
    articles = get_article_service().list()
    return ok(articles=[article_to_json(a) for a in articles]), \
        HTTPStatus.OK, {}


@handles_errors
def get_article(article_id: int) -> Response:
    """
    Retrieve a single article.

    The article is returned as the only item of ``articles``.
    """
    article = get_article_service().get_by_id(article_id)
    return ok(articles=[article_to_json(article)]), HTTPStatus.OK, {}


@handles_errors
def create_article(claims: Optional[domain.Claims], payload: Any) -> Response:
    """
    Create a new article.

    Parameters
    ----------
    claims : :class:`.domain.Claims`
        Verified claims from the request.
    payload : dict
        Should contain ``title``, ``content``, and ``author_id``. The
        ``author_id`` must be the caller's own id.

    Returns
    -------
    dict
        Response envelope.
    int
        An HTTP status code.
    dict
        Some extra headers to add to the response.

    """
    op = 'handlers.articles.create'
    title = string_field(op, payload, 'title')
    content = string_field(op, payload, 'content')
    author_id = int_field(op, payload, 'author_id')
    get_article_service().create(claims, author_id, title, content)
    return ok(), HTTPStatus.OK, {}


@handles_errors
def update_article(claims: Optional[domain.Claims], article_id: int,
                   payload: Any) -> Response:
    """
    Update an article written by the caller.

    Only ``title`` and ``content`` are read from ``payload``; any
    ``author_id`` sent along is ignored.
    """
    op = 'handlers.articles.update'
    title = string_field(op, payload, 'title', required=False)
    content = string_field(op, payload, 'content', required=False)
    get_article_service().update(claims, article_id,
                                 title=title, content=content)
    return ok(), HTTPStatus.OK, {}


@handles_errors
def remove_article(claims: Optional[domain.Claims],
                   article_id: int) -> Response:
    """Delete an article written by the caller."""
    get_article_service().remove(claims, article_id)
    return ok(), HTTPStatus.OK, {}
