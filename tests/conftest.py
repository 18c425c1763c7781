import pytest

from emp_backend.app import create_app
from emp_backend.config import CorsPolicy, Settings


@pytest.fixture
def settings():
    return Settings(log_level="DEBUG", cors=CorsPolicy())


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
