import pytest

from primegen import create_app
from primegen.config import Config


class TestingConfig(Config):
    TESTING = True


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
