"""HTTP contract tests for /api/stores."""

RANGE = {"startDate": "2026-02-01T00:00:00", "endDate": "2026-02-07T23:59:59"}


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_stores_paginates(client):
    response = client.get("/api/stores", params={"page": 1, "pageSize": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is True
    assert body["message"] is None
    assert len(body["items"]) == 2
    assert body["page"] == 1
    assert body["pageSize"] == 2
    assert body["totalItems"] == 3
    assert body["totalPages"] == 2


def test_list_stores_normalizes_page_size(client):
    assert client.get("/api/stores", params={"pageSize": 500}).json()["pageSize"] == 50
    assert client.get("/api/stores", params={"pageSize": 0}).json()["pageSize"] == 10


def test_list_stores_sorted_by_entries(client):
    body = client.get("/api/stores", params={"sort": "entries:desc"}).json()

    assert body["items"][0]["name"] == "Store Warsaw"
    assert body["items"][0]["entryCount"] == 3


def test_list_stores_search(client):
    body = client.get("/api/stores", params={"search": "PARIS"}).json()

    assert [item["name"] for item in body["items"]] == ["Store Paris"]


def test_list_stores_search_without_match(client):
    response = client.get("/api/stores", params={"search": "atlantis"})

    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["totalItems"] == 0


def test_get_store(client, seeded):
    response = client.get(f"/api/stores/{seeded['berlin']}")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is True
    assert body["id"] == seeded["berlin"]
    assert (body["name"], body["city"], body["country"]) == ("Store Berlin", "Berlin", "Germany")


def test_get_store_not_found(client):
    response = client.get("/api/stores/99999")

    assert response.status_code == 404
    assert response.json() == {"status": False, "message": "Store not found"}


def test_create_store(client):
    response = client.post("/api/stores", json={"name": "Store Rome", "city": "Rome", "country": "Italy"})

    assert response.status_code == 201
    body = response.json()
    assert body["status"] is True
    assert body["id"] > 0
    assert client.get(f"/api/stores/{body['id']}").json()["city"] == "Rome"


def test_create_store_missing_field(client):
    response = client.post("/api/stores", json={"name": "Store Rome", "city": "Rome"})

    assert response.status_code == 400
    body = response.json()
    assert body["status"] is False
    assert body["message"] == "Validation failed"
    assert any(error["field"] == "country" for error in body["errors"])


def test_create_store_rejects_blank_and_long_values(client):
    blank = client.post("/api/stores", json={"name": "   ", "city": "Rome", "country": "Italy"})
    too_long = client.post("/api/stores", json={"name": "x" * 101, "city": "Rome", "country": "Italy"})

    assert blank.status_code == 400
    assert too_long.status_code == 400


def test_update_store(client, seeded):
    response = client.put(
        f"/api/stores/{seeded['paris']}",
        json={"name": "Store Paris Nord", "city": "Paris", "country": "France"},
    )

    assert response.status_code == 200
    assert response.json()["id"] == seeded["paris"]
    assert client.get(f"/api/stores/{seeded['paris']}").json()["name"] == "Store Paris Nord"


def test_update_store_not_found(client):
    response = client.put("/api/stores/99999", json={"name": "X", "city": "X", "country": "X"})

    assert response.status_code == 404
    assert response.json()["message"] == "Store not found"


def test_update_store_invalid_body(client, seeded):
    response = client.put(f"/api/stores/{seeded['paris']}", json={"name": ""})

    assert response.status_code == 400


def test_delete_store_cascades(client, seeded):
    response = client.delete(f"/api/stores/{seeded['warsaw']}")

    assert response.status_code == 200
    assert response.json() == {"status": True, "message": None}
    assert client.get("/api/entries").json()["totalItems"] == 3


def test_delete_store_not_found(client):
    assert client.delete("/api/stores/99999").status_code == 404


def test_delete_stores_bulk(client, seeded):
    response = client.request("DELETE", "/api/stores/bulk", json=[seeded["warsaw"], seeded["berlin"]])

    assert response.status_code == 200
    assert client.get("/api/stores").json()["totalItems"] == 1


def test_delete_stores_bulk_empty_list(client):
    response = client.request("DELETE", "/api/stores/bulk", json=[])

    assert response.status_code == 400
    assert response.json() == {"status": False, "message": "No IDs provided"}


def test_delete_stores_bulk_no_match(client):
    response = client.request("DELETE", "/api/stores/bulk", json=[99999])

    assert response.status_code == 404
    assert response.json()["message"] == "No stores found"


def test_store_statistics(client, seeded):
    response = client.get(f"/api/stores/statistics/{seeded['warsaw']}", params=RANGE)

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Store Warsaw"
    assert body["statistics"] == [
        {"date": "2026-02-01", "count": 1},
        {"date": "2026-02-02", "count": 1},
        {"date": "2026-02-03", "count": 1},
    ]


def test_store_statistics_inverted_range(client, seeded):
    response = client.get(
        f"/api/stores/statistics/{seeded['warsaw']}",
        params={"startDate": "2026-03-01T00:00:00", "endDate": "2026-02-01T00:00:00"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "startDate must be less than or equal to endDate"


def test_store_statistics_missing_dates(client, seeded):
    response = client.get(f"/api/stores/statistics/{seeded['warsaw']}")

    assert response.status_code == 400


def test_store_statistics_store_not_found(client):
    response = client.get("/api/stores/statistics/99999", params=RANGE)

    assert response.status_code == 404
    assert response.json()["message"] == "Store not found"


def test_list_stores_huge_page_is_empty(client):
    response = client.get("/api/stores", params={"page": 10**19})

    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["totalItems"] == 3
