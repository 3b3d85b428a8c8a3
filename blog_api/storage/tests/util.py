"""Testing helpers."""
from contextlib import contextmanager
from typing import Generator

from flask import Flask

from .. import util


@contextmanager
def temporary_db(db_uri: str = 'sqlite:///:memory:', create: bool = True,
                 drop: bool = True) -> Generator[Flask, None, None]:
    """Provide an sqlite database, in an app context, for testing purposes."""
    app = Flask('foo')
    app.config['SQLALCHEMY_DATABASE_URI'] = db_uri
    util.init_app(app)

    with app.app_context():
        if create:
            util.create_all()
        try:
            yield app
        finally:
            util.current_session().remove()
            if drop:
                util.drop_all()
