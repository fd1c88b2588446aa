# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.database import CatalogStore
from app.main import create_app

API_HEADERS = {"apikey": "12345"}

@pytest.fixture
def store():
    return CatalogStore.seeded()

@pytest.fixture
def client(store):
    return TestClient(create_app(store))
