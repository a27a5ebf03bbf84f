import pytest
from fastapi.testclient import TestClient

from grubdash.store import get_dish_store
from tests._helpers import dish_body

def test_list_dishes_empty(client: TestClient) -> None:
    r = client.get("/dishes")
    assert r.status_code == 200
    assert r.json() == {"data": []}

def test_create_dish(client: TestClient) -> None:
    r = client.post("/dishes", json=dish_body())

    assert r.status_code == 201
    data = r.json()["data"]
    assert data == {"id": data["id"], "name": "Pasta", "description": "x", "image_url": "u", "price": 12}
    assert data["id"]

    listed = client.get("/dishes").json()["data"]
    assert listed == [data]

def test_create_dish_ignores_client_id(client: TestClient, dish) -> None:
    r = client.post("/dishes", json=dish_body(id="d1"))

    assert r.status_code == 201
    assert r.json()["data"]["id"] != "d1"
    assert len(get_dish_store()) == 2

def test_created_ids_are_distinct(client: TestClient) -> None:
    ids = {client.post("/dishes", json=dish_body()).json()["data"]["id"] for _ in range(5)}
    assert len(ids) == 5

@pytest.mark.parametrize("field", ["name", "description", "image_url", "price"])
def test_create_dish_requires_field(client: TestClient, field: str) -> None:
    body = dish_body()
    del body["data"][field]

    r = client.post("/dishes", json=body)

    assert r.status_code == 400
    assert r.json() == {"status": 400, "message": f"Dish must include a {field}"}

@pytest.mark.parametrize("field", ["name", "description", "image_url"])
def test_create_dish_rejects_empty_string(client: TestClient, field: str) -> None:
    r = client.post("/dishes", json=dish_body(**{field: ""}))

    assert r.status_code == 400
    assert r.json()["message"] == f"Dish must include a {field}"

@pytest.mark.parametrize("value", [False, 0])
@pytest.mark.parametrize("field", ["name", "description", "image_url"])
def test_create_dish_rejects_falsy_field(client: TestClient, field: str, value) -> None:
    r = client.post("/dishes", json=dish_body(**{field: value}))

    assert r.status_code == 400
    assert r.json() == {"status": 400, "message": f"Dish must include a {field}"}
    assert len(get_dish_store()) == 0

def test_create_dish_accepts_very_large_integer_price(client: TestClient) -> None:
    r = client.post("/dishes", json=dish_body(price=10**400))

    assert r.status_code == 201
    assert r.json()["data"]["price"] == 10**400

@pytest.mark.parametrize("price", [0, -1, "17", True])
def test_create_dish_rejects_bad_price(client: TestClient, price) -> None:
    r = client.post("/dishes", json=dish_body(price=price))

    assert r.status_code == 400
    assert r.json()["message"] == "Dish must have a price that is an integer greater than 0"
    assert len(get_dish_store()) == 0

@pytest.mark.parametrize("body", [None, {}, {"data": None}, []])
def test_create_dish_without_payload(client: TestClient, body) -> None:
    r = client.post("/dishes", json=body)

    assert r.status_code == 400
    assert r.json()["message"] == "Dish must include a name"

def test_create_dish_malformed_json(client: TestClient) -> None:
    r = client.post("/dishes", content=b"{not json", headers={"content-type": "application/json"})

    assert r.status_code == 400
    assert r.json() == {"status": 400, "message": "Request body must be valid JSON"}

def test_read_dish(client: TestClient, dish) -> None:
    first = client.get("/dishes/d1")
    second = client.get("/dishes/d1")

    assert first.status_code == 200
    assert first.json() == {
        "data": {"id": "d1", "name": "Pasta", "description": "Spaghetti", "image_url": "u", "price": 12}
    }
    assert second.json() == first.json()

def test_read_missing_dish(client: TestClient) -> None:
    r = client.get("/dishes/nope")

    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "Dish does not exist: nope"}

def test_update_dish(client: TestClient, dish) -> None:
    r = client.put("/dishes/d1", json=dish_body(name="Lasagna", price=20))

    assert r.status_code == 200
    assert r.json()["data"] == {"id": "d1", "name": "Lasagna", "description": "x", "image_url": "u", "price": 20}
    assert dish.name == "Lasagna"
    assert client.get("/dishes/d1").json()["data"]["price"] == 20

def test_update_dish_with_matching_id(client: TestClient, dish) -> None:
    r = client.put("/dishes/d1", json=dish_body(id="d1"))
    assert r.status_code == 200
    assert r.json()["data"]["id"] == "d1"

def test_update_dish_mismatched_id(client: TestClient, dish) -> None:
    r = client.put("/dishes/d1", json=dish_body(id="d2"))

    assert r.status_code == 400
    assert r.json()["message"] == "Dish id does not match route id. Dish: d2, Route: d1"
    assert dish.name == "Pasta"

def test_update_dish_mismatched_id_wins_over_other_errors(client: TestClient, dish) -> None:
    r = client.put("/dishes/d1", json={"data": {"id": "d2", "price": "free"}})

    assert r.status_code == 400
    assert "does not match route id" in r.json()["message"]

def test_update_missing_dish(client: TestClient) -> None:
    r = client.put("/dishes/nope", json=dish_body())
    assert r.status_code == 404

def test_rejected_update_leaves_dish_untouched(client: TestClient, dish) -> None:
    r = client.put("/dishes/d1", json=dish_body(name="Changed", price=0))

    assert r.status_code == 400
    assert dish.name == "Pasta"
    assert dish.price == 12

def test_dishes_cannot_be_deleted(client: TestClient, dish) -> None:
    r = client.delete("/dishes/d1")

    assert r.status_code == 405
    assert r.json() == {"status": 405, "message": "DELETE not allowed for /dishes/d1"}
    assert get_dish_store().find("d1") is dish
