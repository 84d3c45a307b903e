"""Shared fixtures: an in-memory MongoDB and a test client bound to it."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from realestate.core.database import get_db
from realestate.main import app


@pytest.fixture
def test_db():
    """Create an in-memory test database."""
    mongo = mongomock.MongoClient()
    db = mongo["realestate_test"]
    try:
        yield db
    finally:
        mongo.close()


@pytest.fixture
def override_db(test_db):
    """Point the get_db dependency at the test database."""

    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    yield test_db
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_db):
    """Create a test client with database override."""
    return TestClient(app)


@pytest.fixture
def owner_payload():
    return {
        "name": "John Smith",
        "address": "123 Main St",
        "photo": "https://example.com/js.png",
        "birthday": "1980-05-15",
    }


@pytest.fixture
def property_payload():
    return {
        "name": "Contemporary Loft",
        "address": "150 Industrial Way, Chicago, IL 60622",
        "price": 850000,
        "codeInternal": "CHI001",
        "year": 2018,
        "idOwner": "OWNER003",
    }


@pytest.fixture
def create_owner(client, owner_payload):
    """Helper: create an owner through the API and return its JSON."""

    def _create(**overrides):
        response = client.post("/api/owners", json={**owner_payload, **overrides})
        assert response.status_code == 201
        return response.json()

    return _create


@pytest.fixture
def create_property(client, property_payload):
    """Helper: create a property through the API and return its JSON."""

    def _create(**overrides):
        response = client.post("/api/properties", json={**property_payload, **overrides})
        assert response.status_code == 201
        return response.json()

    return _create
