import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import create_app
from string_analyzer.store import StringStore


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
