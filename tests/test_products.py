# tests/test_products.py
from conftest import API_HEADERS


def test_root_greeting_needs_no_key(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "Hello World from the Product Catalog API"

def test_list_seeded_products(client):
    r = client.get("/api/products", headers=API_HEADERS)
    assert r.status_code == 200
    body = r.json()
    assert body["page"] == 1
    assert body["limit"] == 3
    assert body["total"] == 3
    assert [p["id"] for p in body["data"]] == [1, 2, 3]

def test_category_filter_scenario(client):
    r = client.get("/api/products", params={"category": "Electronics"}, headers=API_HEADERS)
    body = r.json()
    assert body["page"] == 1
    assert body["limit"] == 2
    assert body["total"] == 2
    assert [p["name"] for p in body["data"]] == ["Laptop", "Phone"]

def test_category_filter_is_case_insensitive(client):
    lower = client.get("/api/products", params={"category": "electronics"}, headers=API_HEADERS).json()
    upper = client.get("/api/products", params={"category": "Electronics"}, headers=API_HEADERS).json()
    assert lower == upper

def test_search_and_category_combined(client):
    r = client.get("/api/products", params={"category": "electronics", "search": "PHO"}, headers=API_HEADERS)
    body = r.json()
    assert body["total"] == 1
    assert body["data"][0]["name"] == "Phone"

def test_pagination_keeps_total(client):
    r = client.get("/api/products", params={"page": "2", "limit": "2"}, headers=API_HEADERS)
    body = r.json()
    assert body["page"] == 2
    assert body["limit"] == 2
    assert body["total"] == 3
    assert [p["id"] for p in body["data"]] == [3]

    r = client.get("/api/products", params={"page": "9", "limit": "2"}, headers=API_HEADERS)
    body = r.json()
    assert body["data"] == []
    assert body["total"] == 3

def test_non_numeric_paging_falls_back(client):
    body = client.get("/api/products", params={"page": "x", "limit": "y"}, headers=API_HEADERS).json()
    assert body["page"] == 1
    assert body["limit"] == 3
    assert len(body["data"]) == 3

def test_get_product_by_id(client):
    r = client.get("/api/products/1", headers=API_HEADERS)
    assert r.status_code == 200
    assert r.json() == {
        "id": 1, "name": "Laptop", "description": "A powerful laptop",
        "price": 1200, "category": "Electronics", "instock": True,
    }

def test_get_product_loose_id(client):
    assert client.get("/api/products/2.0", headers=API_HEADERS).json()["name"] == "Shoes"
    assert client.get("/api/products/%202", headers=API_HEADERS).json()["name"] == "Shoes"

def test_get_missing_or_non_numeric_id(client):
    for pid in ("99", "abc", "NaN"):
        r = client.get(f"/api/products/{pid}", headers=API_HEADERS)
        assert r.status_code == 404
        assert r.json() == {"error": "Product not found"}

def test_stats_route_not_shadowed_by_id(client):
    r = client.get("/api/products/stats", headers=API_HEADERS)
    assert r.status_code == 200
    assert r.json() == {"totalProducts": 3, "stats": {"Electronics": 2, "Fashion": 1}}

def test_create_then_get_round_trip(client):
    r = client.post("/api/products", json={"name": "Tablet", "price": 300}, headers=API_HEADERS)
    assert r.status_code == 201
    created = r.json()
    assert created["id"] == 4
    assert created["name"] == "Tablet"
    assert created["price"] == 300

    fetched = client.get(f"/api/products/{created['id']}", headers=API_HEADERS).json()
    assert fetched == created

    stats = client.get("/api/products/stats", headers=API_HEADERS).json()
    assert stats["totalProducts"] == 4

def test_create_coerces_numeric_string_price(client):
    r = client.post("/api/products", json={"name": "Cable", "price": "12.5"}, headers=API_HEADERS)
    assert r.status_code == 201
    assert r.json()["price"] == 12.5

def test_create_validation_failures_do_not_add(client, store):
    bad_bodies = [
        {"price": 10},
        {"name": "", "price": 10},
        {"name": "   ", "price": 10},
        {"name": "X"},
        {"name": "X", "price": 0},
        {"name": "X", "price": ""},
        {"name": "X", "price": False},
        {"name": "X", "price": -5},
        {"name": "X", "price": "abc"},
    ]
    for body in bad_bodies:
        r = client.post("/api/products", json=body, headers=API_HEADERS)
        assert r.status_code == 400, body
        assert r.json() == {"error": "Name and price are required"}
    r = client.post("/api/products", headers=API_HEADERS)
    assert r.status_code == 400
    assert store.count() == 3

def test_update_overwrites_all_fields(client):
    r = client.put("/api/products/2", json={"name": "Boots", "price": 120, "category": "fashion"}, headers=API_HEADERS)
    assert r.status_code == 200
    assert r.json() == {
        "id": 2, "name": "Boots", "description": None,
        "price": 120, "category": "fashion", "instock": None,
    }
    assert client.get("/api/products/2", headers=API_HEADERS).json()["name"] == "Boots"

def test_update_missing_product_checked_before_body(client):
    r = client.put("/api/products/42", json={}, headers=API_HEADERS)
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}

def test_update_validation(client):
    r = client.put("/api/products/1", json={"name": "Laptop", "price": 0}, headers=API_HEADERS)
    assert r.status_code == 400
    assert client.get("/api/products/1", headers=API_HEADERS).json()["price"] == 1200

def test_delete_scenario(client):
    r = client.delete("/api/products/2", headers=API_HEADERS)
    assert r.status_code == 200
    assert r.json() == {
        "message": "Product deleted",
        "deleted": [{
            "id": 2, "name": "Shoes", "description": "Comfortable running shoes",
            "price": 80, "category": "Fashion", "instock": False,
        }],
    }
    listing = client.get("/api/products", headers=API_HEADERS).json()
    assert 2 not in [p["id"] for p in listing["data"]]
    fashion = client.get("/api/products", params={"category": "fashion"}, headers=API_HEADERS).json()
    assert fashion["total"] == 0
    assert client.get("/api/products/2", headers=API_HEADERS).status_code == 404
    assert client.delete("/api/products/2", headers=API_HEADERS).status_code == 404

def test_ids_not_reused_after_delete(client):
    client.delete("/api/products/3", headers=API_HEADERS)
    r = client.post("/api/products", json={"name": "Watch", "price": 150}, headers=API_HEADERS)
    assert r.json()["id"] == 4

def test_update_requires_name(client):
    for body in ({"price": 50}, {"name": "", "price": 50}, {"name": "  ", "price": 50}):
        r = client.put("/api/products/1", json=body, headers=API_HEADERS)
        assert r.status_code == 400, body
        assert r.json() == {"error": "Name and price are required"}
    assert client.get("/api/products/1", headers=API_HEADERS).json()["name"] == "Laptop"

def test_oversized_price_is_rejected(client, store):
    r = client.post(
        "/api/products",
        content='{"name": "Yacht", "price": 1' + "0" * 400 + "}",
        headers={**API_HEADERS, "content-type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Name and price are required"}

    r = client.post("/api/products", json={"name": "Yacht", "price": "1" + "0" * 400}, headers=API_HEADERS)
    assert r.status_code == 400
    assert store.count() == 3

def test_huge_page_is_out_of_range(client):
    r = client.get("/api/products", params={"page": "9" * 5000, "limit": "2"}, headers=API_HEADERS)
    assert r.status_code == 200
    body = r.json()
    assert body["data"] == []
    assert body["total"] == 3

def test_huge_limit_returns_everything(client):
    body = client.get("/api/products", params={"limit": "9" * 5000}, headers=API_HEADERS).json()
    assert [p["id"] for p in body["data"]] == [1, 2, 3]

def test_id_segment_must_be_plain_decimal(client):
    client.post("/api/products", json={"name": "Tablet", "price": 300}, headers=API_HEADERS)
    assert client.get("/api/products/4", headers=API_HEADERS).status_code == 200
    for pid in ("0_4", "٤", "4abc"):
        r = client.get(f"/api/products/{pid}", headers=API_HEADERS)
        assert r.status_code == 404, pid
