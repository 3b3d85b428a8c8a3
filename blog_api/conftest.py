import os
import tempfile

import pytest

from blog_api import factory, storage

SECRET = 'test-secret-that-is-at-least-32-characters-long'


@pytest.fixture()
def app():
    fd, path = tempfile.mkstemp(suffix='.db')
    os.close(fd)
    app = factory.create_web_app({
        'ENV_NAME': 'local',
        'JWT_SECRET': SECRET,
        'TOKEN_TTL': 3600,
        'SQLALCHEMY_DATABASE_URI': f'sqlite:///{path}',
        'TESTING': True
    })
    with app.app_context():
        storage.create_all()
    yield app
    with app.app_context():
        storage.drop_all()
        storage.util.db.engine.dispose()
    os.remove(path)


@pytest.fixture()
def client(app):
    return app.test_client()
