import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine))


def add_customer(client, name, email=None):
    response = client.post("/api/customers", json={"name": name, "email": email})
    assert response.status_code == 200
    return response.json()


def test_register_customer_is_idempotent(client):
    first = add_customer(client, "Ada", "ada@example.com")
    again = add_customer(client, "Ada", "ada@example.com")
    assert first["id"] == again["id"]
    assert first["created_at"] is not None

    listing = client.get("/api/customers").json()
    assert listing["pages"] == 1
    assert [c["name"] for c in listing["customers"]] == ["Ada"]


def test_customer_not_found(client):
    assert client.get("/api/customers/42").status_code == 404
    assert client.get("/api/customers/42/orders").status_code == 404


def test_bad_order_direction(client):
    assert client.get("/api/customers", params={"order_dir": "up"}).status_code == 400


def test_orders_and_totals(client):
    customer = add_customer(client, "Grace")
    for status, total in [("open", 10), ("paid", 15), ("open", 5)]:
        response = client.post("/api/orders", json={"customer_id": customer["id"], "status": status, "total": total})
        assert response.status_code == 200

    orders = client.get(f"/api/customers/{customer['id']}/orders").json()
    assert [o["total"] for o in orders] == [10, 15, 5]

    open_orders = client.get(f"/api/customers/{customer['id']}/orders", params={"status": "open"}).json()
    assert [o["total"] for o in open_orders] == [10, 5]

    totals = client.get(f"/api/customers/{customer['id']}/totals").json()
    assert totals == {"open": 15, "paid": 15}


def test_order_update_and_parent(client):
    customer = add_customer(client, "Linus")
    order = client.post("/api/orders", json={"customer_id": customer["id"]}).json()
    assert order["status"] == "open"

    updated = client.put(f"/api/orders/{order['id']}", json={"status": "paid"}).json()
    assert updated["status"] == "paid" and updated["id"] == order["id"]

    parent = client.get(f"/api/orders/{order['id']}/customer").json()
    assert parent["name"] == "Linus"


def test_order_for_unknown_customer(client):
    assert client.post("/api/orders", json={"customer_id": 7}).status_code == 404
