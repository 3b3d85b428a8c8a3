"""Article management with author-only mutation."""

import logging
from datetime import datetime
from typing import List, Optional

from pytz import UTC

from ..storage import exceptions as storage
from .. import domain
from . import exceptions
from .util import require_owner, storage_errors

logger = logging.getLogger(__name__)

TITLE_EMPTY = 'invalid article: title is empty'
CONTENT_EMPTY = 'invalid article: content is empty'


class ArticleService(object):
    """
    Applies the article rules on top of a storage collaborator.

    Reads are public. Every mutation is checked against the article's
    author as currently stored, never against a value sent by the client.
    """

    def __init__(self, store) -> None:
        """Use ``store`` (a :class:`.SQLStorage`) to persist articles."""
        self._store = store

    def list(self) -> List[domain.Article]:
        """Load all articles."""
        with storage_errors('articles.list'):
            return self._store.list_articles()

    def get_by_id(self, article_id: int) -> domain.Article:
        """
        Load an article.

        Raises
        ------
        :class:`.exceptions.ArticleNotFound`

        """
        return self._fetch('articles.get_by_id', article_id)

    def create(self, claims: Optional[domain.Claims], author_id: int,
               title: str, content: str) -> domain.Article:
        """
        Publish a new article as ``author_id``.

        Raises
        ------
        :class:`.exceptions.ValidationError`
            If the title or content is empty.
        :class:`.exceptions.Forbidden`
            If the token subject is not ``author_id``.
        :class:`.exceptions.UserNotFound`
            If the author no longer exists.

        """
        op = 'articles.create'
        if not title:
            logger.info('Title is empty', extra={'op': op})
            raise exceptions.ValidationError(op, message=TITLE_EMPTY)
        if not content:
            logger.info('Content is empty', extra={'op': op})
            raise exceptions.ValidationError(op, message=CONTENT_EMPTY)
        require_owner(op, claims, author_id)

        with storage_errors(op, author_id, {
                storage.NoSuchUser: exceptions.UserNotFound,
                storage.ArticleExists: exceptions.ArticleExists}):
            article = self._store.create_article(author_id, title, content,
                                                 datetime.now(tz=UTC))
        logger.info('Created article %i', article.article_id,
                    extra={'op': op, 'resource_id': article.article_id})
        return article

    def update(self, claims: Optional[domain.Claims], article_id: int,
               title: Optional[str] = None,
               content: Optional[str] = None) -> domain.Article:
        """
        Update the title and/or content of an article.

        Empty values are ignored, so either field may be updated alone.

        Raises
        ------
        :class:`.exceptions.ArticleNotFound`
        :class:`.exceptions.Forbidden`
            If the token subject is not the stored author.

        """
        op = 'articles.update'
        article = self._fetch(op, article_id)
        require_owner(op, claims, article.author_id)

        if not title and not content:
            return article
        with storage_errors(op, article_id,
                            {storage.NoSuchArticle: exceptions.ArticleNotFound}):
            return self._store.update_article(article_id,
                                              title=title or None,
                                              content=content or None)

    def remove(self, claims: Optional[domain.Claims], article_id: int) -> None:
        """
        Delete an article.

        Raises
        ------
        :class:`.exceptions.ArticleNotFound`
        :class:`.exceptions.Forbidden`
            If the token subject is not the stored author.

        """
        op = 'articles.remove'
        article = self._fetch(op, article_id)
        require_owner(op, claims, article.author_id)

        with storage_errors(op, article_id,
                            {storage.NoSuchArticle: exceptions.ArticleNotFound}):
            self._store.remove_article(article_id)
        logger.info('Removed article %i', article_id,
                    extra={'op': op, 'resource_id': article_id})

    def _fetch(self, op: str, article_id: int) -> domain.Article:
        with storage_errors(op, article_id,
                            {storage.NoSuchArticle: exceptions.ArticleNotFound}):
            return self._store.article_by_id(article_id)
