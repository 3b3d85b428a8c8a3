"""Request controllers. Each returns ``(data, status_code, headers)``."""

from . import articles, users
