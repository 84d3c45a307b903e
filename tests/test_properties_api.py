"""Tests for the property API routes."""

from datetime import datetime

from fastapi.testclient import TestClient


class TestCreateProperty:
    """POST /api/properties"""

    def test_create_returns_201_with_location(self, client: TestClient, property_payload) -> None:
        response = client.post("/api/properties", json=property_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Contemporary Loft"
        assert data["codeInternal"] == "CHI001"
        assert data["idOwner"] == "OWNER003"
        assert data["idProperty"]
        assert response.headers["location"].endswith(f"/api/properties/{data['id']}")

    def test_business_ids_are_distinct(self, create_property) -> None:
        ids = {create_property(name=f"Home {n}")["idProperty"] for n in range(5)}
        assert len(ids) == 5
        assert "" not in ids

    def test_client_supplied_business_id_is_ignored(self, create_property) -> None:
        data = create_property(idProperty="MINE")
        assert data["idProperty"] != "MINE"

    def test_resolves_owner_when_present(self, create_owner, create_property) -> None:
        owner = create_owner()
        data = create_property(idOwner=owner["idOwner"])
        assert data["owner"]["name"] == "John Smith"

    def test_missing_owner_is_allowed(self, create_property) -> None:
        data = create_property(idOwner="NOBODY")
        assert data["owner"] is None

    def test_negative_price_rejected(self, client: TestClient, property_payload) -> None:
        response = client.post("/api/properties", json={**property_payload, "price": -1})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"

    def test_missing_body_rejected(self, client: TestClient) -> None:
        response = client.post("/api/properties")
        assert response.status_code == 400

    def test_missing_fields_rejected(self, client: TestClient) -> None:
        response = client.post("/api/properties", json={"name": "Only a name"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid request"
        assert isinstance(body["error"], list)


class TestGetProperty:
    """GET /api/properties/{id}"""

    def test_get_returns_detail(self, client: TestClient, create_property) -> None:
        created = create_property()

        response = client.get(f"/api/properties/{created['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert data["idProperty"] == created["idProperty"]
        assert data["images"] == []
        assert data["traces"] == []
        assert data["image"] is None

    def test_only_enabled_images_returned(self, client: TestClient, create_property) -> None:
        created = create_property()
        pid = created["id"]
        for file, enabled in [("off.jpg", False), ("one.jpg", True), ("two.jpg", True)]:
            client.post(
                f"/api/properties/{pid}/images",
                json={"file": f"https://img/{file}", "enabled": enabled},
            )

        data = client.get(f"/api/properties/{pid}").json()

        files = [img["file"] for img in data["images"]]
        assert files == ["https://img/one.jpg", "https://img/two.jpg"]
        assert all(img["enabled"] for img in data["images"])
        assert data["image"] == "https://img/one.jpg"

    def test_traces_sorted_newest_first(self, client: TestClient, create_property) -> None:
        created = create_property()
        pid = created["id"]
        sales = [("2021-01-10", "Old"), ("2023-06-15", "Newest"), ("2022-03-01", "Middle")]
        for day, name in sales:
            response = client.post(
                f"/api/properties/{pid}/traces",
                json={"dateSale": f"{day}T00:00:00Z", "name": name, "value": 1000, "tax": 50},
            )
            assert response.status_code == 201

        data = client.get(f"/api/properties/{pid}").json()

        assert [t["name"] for t in data["traces"]] == ["Newest", "Middle", "Old"]
        dates = [datetime.fromisoformat(t["dateSale"]) for t in data["traces"]]
        assert dates == sorted(dates, reverse=True)

    def test_includes_owner(self, client: TestClient, create_owner, create_property) -> None:
        owner = create_owner()
        created = create_property(idOwner=owner["idOwner"])

        data = client.get(f"/api/properties/{created['id']}").json()

        assert data["owner"]["idOwner"] == owner["idOwner"]
        assert data["owner"]["birthday"] == "1980-05-15"

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        response = client.get("/api/properties/65a1f0c2e4b0a1b2c3d4e5f6")
        assert response.status_code == 404
        assert response.json() == {"message": "Property not found"}

    def test_malformed_id_is_404(self, client: TestClient) -> None:
        response = client.get("/api/properties/not-an-object-id")
        assert response.status_code == 404

    def test_blank_id_is_400(self, client: TestClient) -> None:
        response = client.get("/api/properties/%20")
        assert response.status_code == 400
        assert response.json() == {"message": "Property ID is required"}


class TestUpdateProperty:
    """PUT /api/properties/{id}"""

    def test_update_replaces_fields(
        self, client: TestClient, create_property, property_payload
    ) -> None:
        created = create_property()

        response = client.put(
            f"/api/properties/{created['id']}",
            json={**property_payload, "name": "Renovated Loft", "price": 900000},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Renovated Loft"
        assert data["price"] == 900000
        assert data["address"] == property_payload["address"]

    def test_update_preserves_business_id_and_created_at(
        self, client: TestClient, create_property, property_payload
    ) -> None:
        created = create_property()

        updated = client.put(
            f"/api/properties/{created['id']}",
            json={**property_payload, "idProperty": "CHANGED", "year": 2019},
        ).json()

        assert updated["idProperty"] == created["idProperty"]
        assert updated["createdAt"] == created["createdAt"]
        updated_at = datetime.fromisoformat(updated["updatedAt"])
        assert updated_at >= datetime.fromisoformat(created["updatedAt"])

        fetched = client.get(f"/api/properties/{created['id']}").json()
        assert fetched["year"] == 2019
        assert fetched["createdAt"] == created["createdAt"]

    def test_update_unknown_is_404(self, client: TestClient, property_payload) -> None:
        response = client.put("/api/properties/65a1f0c2e4b0a1b2c3d4e5f6", json=property_payload)
        assert response.status_code == 404

    def test_update_without_body_is_400(self, client: TestClient, create_property) -> None:
        created = create_property()
        response = client.put(f"/api/properties/{created['id']}")
        assert response.status_code == 400


class TestDeleteProperty:
    """DELETE /api/properties/{id}"""

    def test_delete_then_get_is_404(self, client: TestClient, create_property) -> None:
        created = create_property()

        response = client.delete(f"/api/properties/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        assert client.get(f"/api/properties/{created['id']}").status_code == 404

    def test_delete_never_created_is_404(self, client: TestClient) -> None:
        response = client.delete("/api/properties/65a1f0c2e4b0a1b2c3d4e5f6")
        assert response.status_code == 404

    def test_delete_twice_is_404(self, client: TestClient, create_property) -> None:
        created = create_property()
        assert client.delete(f"/api/properties/{created['id']}").status_code == 204
        assert client.delete(f"/api/properties/{created['id']}").status_code == 404


class TestPropertyChildren:
    """POST /api/properties/{id}/images and /traces"""

    def test_add_image_to_missing_property_is_404(self, client: TestClient) -> None:
        response = client.post(
            "/api/properties/65a1f0c2e4b0a1b2c3d4e5f6/images",
            json={"file": "https://img/x.jpg"},
        )
        assert response.status_code == 404

    def test_add_trace_returns_created(self, client: TestClient, create_property) -> None:
        created = create_property()
        response = client.post(
            f"/api/properties/{created['id']}/traces",
            json={
                "dateSale": "2023-08-05T00:00:00Z",
                "name": "Recent Sale",
                "value": 850000,
                "tax": 42500,
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Recent Sale"
        assert data["idPropertyTrace"]

    def test_add_trace_rejects_negative_tax(self, client: TestClient, create_property) -> None:
        created = create_property()
        response = client.post(
            f"/api/properties/{created['id']}/traces",
            json={"dateSale": "2023-08-05T00:00:00Z", "name": "Bad", "value": 1, "tax": -5},
        )
        assert response.status_code == 400


class TestListProperties:
    """GET /api/properties"""

    def test_empty_listing(self, client: TestClient) -> None:
        data = client.get("/api/properties").json()
        assert data["items"] == []
        assert data["totalCount"] == 0
        assert data["page"] == 1
        assert data["pageSize"] == 12
        assert data["totalPages"] == 0
        assert data["hasNextPage"] is False
        assert data["hasPreviousPage"] is False

    def test_price_range_is_inclusive(self, client: TestClient, create_property) -> None:
        for price in (100, 200, 300, 400):
            create_property(name=f"P{price}", price=price)

        data = client.get("/api/properties", params={"minPrice": 200, "maxPrice": 300}).json()

        prices = sorted(item["price"] for item in data["items"])
        assert prices == [200, 300]
        assert data["totalCount"] == 2

    def test_total_count_independent_of_page_size(
        self, client: TestClient, create_property
    ) -> None:
        for n in range(7):
            create_property(name=f"Lake House {n}", price=1000 + n)
        create_property(name="City Flat", price=5000)

        data = client.get("/api/properties", params={"name": "lake", "pageSize": 3}).json()

        assert data["totalCount"] == 7
        assert len(data["items"]) == 3
        assert data["totalPages"] == 3
        assert data["hasNextPage"] is True

    def test_name_and_address_substring_case_insensitive(
        self, client: TestClient, create_property
    ) -> None:
        create_property(name="Modern Beach House", address="500 Ocean Drive, Miami")
        create_property(name="Penthouse Suite", address="888 Skyline Blvd, Seattle")

        by_name = client.get("/api/properties", params={"name": "BEACH"}).json()
        by_address = client.get("/api/properties", params={"address": "seattle"}).json()

        assert [p["name"] for p in by_name["items"]] == ["Modern Beach House"]
        assert [p["name"] for p in by_address["items"]] == ["Penthouse Suite"]

    def test_regex_characters_match_literally(self, client: TestClient, create_property) -> None:
        create_property(name="Unit (A)")
        create_property(name="Unit A")

        data = client.get("/api/properties", params={"name": "(A)"}).json()

        assert [p["name"] for p in data["items"]] == ["Unit (A)"]

    def test_pages_are_disjoint_and_stable(self, client: TestClient, create_property) -> None:
        created = [create_property(name=f"Home {n}")["id"] for n in range(5)]

        first = client.get("/api/properties", params={"page": 1, "pageSize": 2}).json()
        second = client.get("/api/properties", params={"page": 2, "pageSize": 2}).json()
        third = client.get("/api/properties", params={"page": 3, "pageSize": 2}).json()

        seen = [p["id"] for page in (first, second, third) for p in page["items"]]
        assert seen == created
        assert third["hasNextPage"] is False
        assert third["hasPreviousPage"] is True

    def test_items_carry_cover_and_owner(
        self, client: TestClient, create_owner, create_property
    ) -> None:
        owner = create_owner()
        created = create_property(idOwner=owner["idOwner"])
        images_url = f"/api/properties/{created['id']}/images"
        client.post(images_url, json={"file": "https://img/hidden.jpg", "enabled": False})
        client.post(images_url, json={"file": "https://img/cover.jpg"})

        item = client.get("/api/properties").json()["items"][0]

        assert item["image"] == "https://img/cover.jpg"
        assert item["owner"]["name"] == owner["name"]
        assert "images" not in item

    def test_invalid_paging_is_400(self, client: TestClient) -> None:
        assert client.get("/api/properties", params={"page": 0}).status_code == 400
        assert client.get("/api/properties", params={"pageSize": 0}).status_code == 400
        assert client.get("/api/properties", params={"pageSize": 1000}).status_code == 400
        assert client.get("/api/properties", params={"minPrice": "cheap"}).status_code == 400

    def test_page_too_deep_for_skip_is_400(self, client: TestClient) -> None:
        response = client.get("/api/properties", params={"page": 10**18, "pageSize": 100})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"
