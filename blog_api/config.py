"""Flask configuration."""
import os

ENV_NAME = os.environ.get('ENV_NAME', 'local')
"""One of ``local``, ``dev`` or ``prod``. Selects the log format."""

LOGLEVEL = int(os.environ.get('LOGLEVEL', '20'))
"""Numeric level for the root logger."""

#################### Auth ####################
JWT_SECRET = os.environ.get('JWT_SECRET', 'foosecret')
"""HMAC-SHA256 key used to sign and verify tokens.

The default is only suitable for local development."""

TOKEN_TTL = int(os.environ.get('TOKEN_TTL', '3600'))
"""Lifetime of issued tokens, in seconds."""

#################### Storage ####################
SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI',
                                         'sqlite:///blog.db')
SQLALCHEMY_TRACK_MODIFICATIONS = False

REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT', '5'))
"""Seconds of storage work allowed for a single request."""
