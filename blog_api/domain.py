"""Defines the core data structures for the blog API."""

from typing import NamedTuple, Optional
from datetime import datetime


class User(NamedTuple):
    """Represents a registered blog user."""

    username: str
    """Unique, non-empty login name."""

    user_id: Optional[int] = None
    """Unique identifier for the user. If ``None``, the user does not exist."""

    registration_date: Optional[datetime] = None
    """When the account was created. Set once, by storage."""

    status: str = ''
    """Free-form status line, editable by the owner."""


class Credentials(NamedTuple):
    """
    A :class:`.User` together with their stored password hash.

    Only the storage layer and the login flow ever see this; the hash must
    never be serialized into a response.
    """

    user: User
    pass_hash: bytes


class Article(NamedTuple):
    """Represents a blog article."""

    title: str
    """Non-empty title."""

    content: str
    """Non-empty body text."""

    author_id: int
    """The :class:`.User` who wrote the article. Immutable after creation."""

    article_id: Optional[int] = None
    """Unique identifier for the article, assigned by storage."""

    publish_date: Optional[datetime] = None
    """When the article was created."""


class Claims(NamedTuple):
    """Verified facts carried by a bearer token."""

    uid: int
    """Identifier of the :class:`.User` to whom the token was issued."""

    exp: datetime
