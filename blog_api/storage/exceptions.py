"""Exceptions raised by the storage layer."""


class StorageError(RuntimeError):
    """Something went wrong talking to the database."""


class UserExists(StorageError):
    """A user with the requested username already exists."""


class UserNameTaken(StorageError):
    """Another user already has the requested username."""


class ArticleExists(StorageError):
    """The article conflicts with an existing one."""


class NoSuchUser(StorageError):
    """User does not exist."""


class NoSuchArticle(StorageError):
    """Article does not exist."""


class Canceled(StorageError):
    """The database operation was interrupted before it completed."""


class DeadlineExceeded(Canceled):
    """The request ran out of time before the operation completed."""
