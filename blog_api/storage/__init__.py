"""
Relational storage for users and articles.

The services only depend on the methods of :class:`.SQLStorage`; anything
with the same methods and exceptions can stand in for it.
"""

from . import exceptions, models, util
from .store import SQLStorage
from .util import create_all, current_session, drop_all, init_app, \
    is_available, transaction
