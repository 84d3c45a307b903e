"""Tests for the fixture endpoints and seeding service."""

from fastapi.testclient import TestClient

from realestate.core import database
from realestate.services.seed import clear_data, seed_data


def test_seed_inserts_fixtures(client: TestClient, test_db) -> None:
    response = client.post("/api/seed/seed")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Sample data seeded successfully"
    assert data["skipped"] is False
    assert (data["owners"], data["properties"], data["images"], data["traces"]) == (4, 6, 11, 6)
    assert database.properties(test_db).count_documents({}) == 6


def test_seed_twice_does_not_duplicate(client: TestClient, test_db) -> None:
    client.post("/api/seed/seed")
    response = client.post("/api/seed/seed")

    assert response.json()["skipped"] is True
    assert database.owners(test_db).count_documents({}) == 4
    assert database.property_images(test_db).count_documents({}) == 11


def test_clear_empties_collections(client: TestClient, test_db) -> None:
    client.post("/api/seed/seed")

    response = client.delete("/api/seed/clear")

    assert response.status_code == 200
    assert response.json() == {"message": "Data cleared successfully"}
    for collection in (
        database.owners(test_db),
        database.properties(test_db),
        database.property_images(test_db),
        database.property_traces(test_db),
    ):
        assert collection.count_documents({}) == 0


def test_seeded_listing_resolves_owners_and_covers(client: TestClient) -> None:
    client.post("/api/seed/seed")

    data = client.get("/api/properties", params={"name": "penthouse"}).json()

    assert data["totalCount"] == 1
    item = data["items"][0]
    assert item["owner"]["name"] == "Sarah Johnson"
    assert item["image"] == "https://via.placeholder.com/800x600?text=Penthouse+1"


def test_seeded_owner_by_business_id(client: TestClient) -> None:
    client.post("/api/seed/seed")

    data = client.get("/api/owners/by-id-owner/OWNER001").json()

    assert data["name"] == "John Smith"
    assert data["birthday"] == "1980-05-15"


def test_seed_service_direct(test_db) -> None:
    """Test the service without HTTP."""
    first = seed_data(test_db)
    assert not first.skipped
    assert seed_data(test_db).skipped

    clear_data(test_db)
    assert not seed_data(test_db).skipped
