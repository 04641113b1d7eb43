import pytest
from fastapi.testclient import TestClient

from grubdash.config import Settings
from grubdash.main import create_app


@pytest.fixture
def app():
    return create_app(Settings(first_record_id=1))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
