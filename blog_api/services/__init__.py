"""User and article services."""

from . import exceptions
from .articles import ArticleService
from .users import UserService
