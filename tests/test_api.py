"""
Tests for the HTTP surface over the demo dataset.
"""

import pytest
from fastapi.testclient import TestClient

from sales_analytics.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_list_sellers(client):
    resp = client.get("/api/v1/sellers")
    assert resp.status_code == 200
    assert len(resp.json()["sellers"]) == 5


def test_unknown_seller_404(client):
    assert client.get("/api/v1/sellers/nobody").status_code == 404
    assert client.get("/api/v1/report/nobody").status_code == 404


def test_report_over_seeded_data(client):
    rows = client.get("/api/v1/report").json()["report"]
    assert len(rows) == 5
    profits = [r["profit"] for r in rows]
    assert profits == sorted(profits, reverse=True)
    assert sum(r["sales_count"] for r in rows) == 300
    assert all(len(r["top_products"]) <= 10 for r in rows)
    # lowest-profit seller of five gets nothing
    assert rows[-1]["bonus"] == 0


def test_report_is_stable_across_reseed(client):
    before = client.get("/api/v1/report").json()
    assert client.post("/api/v1/admin/seed").json()["purchase_records"] == 300
    assert client.get("/api/v1/report").json() == before


def test_seller_report_has_rank(client):
    rows = client.get("/api/v1/report").json()["report"]
    second = rows[1]
    body = client.get(f"/api/v1/report/{second['seller_id']}").json()
    assert body["rank"] == 2
    assert body["total"] == 5
    assert body["profit"] == second["profit"]


def test_post_report(client):
    payload = {
        "sellers": [
            {"id": "a", "first_name": "Ann", "last_name": "Lee"},
            {"id": "b", "first_name": "Bob", "last_name": "Ray"},
        ],
        "products": [{"sku": "X", "purchase_price": 100}],
        "purchase_records": [
            {"seller_id": "a", "total_amount": 800, "items": [
                {"sku": "X", "sale_price": 400, "quantity": 2}]},
            {"seller_id": "b", "total_amount": 400, "items": [
                {"sku": "X", "sale_price": 200, "quantity": 2, "discount": 50}]},
        ],
    }
    resp = client.post("/api/v1/report", json=payload)
    assert resp.status_code == 200
    rows = resp.json()["report"]
    assert [r["seller_id"] for r in rows] == ["a", "b"]
    assert [r["profit"] for r in rows] == [600, 0]
    assert [r["bonus"] for r in rows] == [90, 0]
    assert rows[1]["name"] == "Bob Ray"


def test_post_report_rejects_empty_records(client):
    payload = {
        "sellers": [{"id": "a", "first_name": "Ann", "last_name": "Lee"}],
        "products": [{"sku": "X", "purchase_price": 1}],
        "purchase_records": [],
    }
    resp = client.post("/api/v1/report", json=payload)
    assert resp.status_code == 422
    assert "purchase_records" in resp.json()["detail"]
