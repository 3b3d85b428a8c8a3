"""Provides access to the user and article data store."""

import logging
from datetime import datetime
from typing import List, Optional

from pytz import UTC

from .. import domain
from . import util
from .exceptions import ArticleExists, NoSuchArticle, NoSuchUser, \
    UserExists, UserNameTaken
from .models import DBArticle, DBUser

logger = logging.getLogger(__name__)

MAX_ID = 2 ** 63 - 1
MIN_ID = -2 ** 63


class SQLStorage(object):
    """
    Persists :class:`.domain.User` and :class:`.domain.Article` records.

    Every method is a single transaction. Instances hold no state of their
    own; the database session is bound to the current application context.
    """

    def create_user(self, username: str, pass_hash: bytes) -> domain.User:
        """
        Create a new user.

        Raises
        ------
        :class:`.UserExists`
            If ``username`` is already registered.

        """
        db_user = DBUser(name=username, pass_hash=pass_hash,
                         registration_date=datetime.now(tz=UTC), status='')
        with util.transaction(on_conflict=UserExists) as session:
            session.add(db_user)
            session.flush()
            return _user(db_user)

    def user_by_name(self, username: str) -> domain.Credentials:
        """Load a user, and their password hash, by username."""
        with util.transaction() as session:
            db_user = session.query(DBUser) \
                .filter(DBUser.name == username) \
                .first()
            if db_user is None:
                raise NoSuchUser('User does not exist')
            return domain.Credentials(user=_user(db_user),
                                      pass_hash=bytes(db_user.pass_hash))

    def user_by_id(self, user_id: int) -> domain.User:
        """Load a user by id."""
        with util.transaction() as session:
            return _user(_get_user(session, user_id))

    def update_user(self, user_id: int, username: Optional[str] = None,
                    status: Optional[str] = None) -> domain.User:
        """
        Update the username and/or status of a user.

        Fields passed as ``None`` are left alone.

        Raises
        ------
        :class:`.NoSuchUser`
        :class:`.UserNameTaken`
            If another user already has ``username``.

        """
        with util.transaction(on_conflict=UserNameTaken) as session:
            db_user = _get_user(session, user_id)
            if username is not None:
                db_user.name = username
            if status is not None:
                db_user.status = status
            session.flush()
            return _user(db_user)

    def remove_user(self, user_id: int) -> None:
        """Delete a user. Articles they authored are left untouched."""
        with util.transaction() as session:
            session.delete(_get_user(session, user_id))

    def list_articles(self) -> List[domain.Article]:
        """Load all articles."""
        with util.transaction() as session:
            return [_article(db_article) for db_article
                    in session.query(DBArticle).order_by(DBArticle.id)]

    def article_by_id(self, article_id: int) -> domain.Article:
        """Load an article by id."""
        with util.transaction() as session:
            return _article(_get_article(session, article_id))

    def create_article(self, author_id: int, title: str, content: str,
                       publish_date: datetime) -> domain.Article:
        """
        Create a new article.

        Raises
        ------
        :class:`.NoSuchUser`
            If ``author_id`` does not refer to an existing user.
        :class:`.ArticleExists`

        """
        with util.transaction(on_conflict=ArticleExists) as session:
            _get_user(session, author_id)
            db_article = DBArticle(author_id=author_id, title=title,
                                   content=content, publish_date=publish_date)
            session.add(db_article)
            session.flush()
            return _article(db_article)

    def update_article(self, article_id: int, title: Optional[str] = None,
                       content: Optional[str] = None) -> domain.Article:
        """
        Update the title and/or content of an article.

        Fields passed as ``None`` are left alone.
        """
        with util.transaction() as session:
            db_article = _get_article(session, article_id)
            if title is not None:
                db_article.title = title
            if content is not None:
                db_article.content = content
            session.flush()
            return _article(db_article)

    def remove_article(self, article_id: int) -> None:
        """Delete an article."""
        with util.transaction() as session:
            session.delete(_get_article(session, article_id))


def _get_user(session, user_id: int) -> DBUser:
    db_user: Optional[DBUser] = None
    if _in_range(user_id):
        db_user = session.get(DBUser, user_id)
    if db_user is None:
        raise NoSuchUser('User does not exist')
    return db_user


def _get_article(session, article_id: int) -> DBArticle:
    db_article: Optional[DBArticle] = None
    if _in_range(article_id):
        db_article = session.get(DBArticle, article_id)
    if db_article is None:
        raise NoSuchArticle('Article does not exist')
    return db_article


def _in_range(row_id: int) -> bool:
    # Ids are signed 64-bit; anything wider cannot be bound to a query.
    return MIN_ID <= row_id <= MAX_ID


def _utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes; everything we store is UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _user(db_user: DBUser) -> domain.User:
    return db_user.to_domain()._replace(
        registration_date=_utc(db_user.registration_date)
    )


def _article(db_article: DBArticle) -> domain.Article:
    return db_article.to_domain()._replace(
        publish_date=_utc(db_article.publish_date)
    )
