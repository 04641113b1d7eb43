import pytest

from _helper import call, create_dish, stored_dish_id, valid_dish, without


def test_create_dish_returns_201_with_assigned_id(client):
    status, body = create_dish(client, valid_dish())

    assert status == 201
    assert body == {
        "data": {
            "id": 1,
            "name": "Pasta",
            "description": "Tasty",
            "price": 10,
            "image_url": "http://x",
        }
    }


def test_created_ids_are_unique_and_listed_in_insertion_order(client):
    first = stored_dish_id(client, name="Pasta")
    second = stored_dish_id(client, name="Soup")

    status, body = call(client, "GET", "/dishes")

    assert first != second
    assert status == 200
    assert [d["name"] for d in body["data"]] == ["Pasta", "Soup"]


def test_list_is_empty_on_fresh_app(client):
    assert call(client, "GET", "/dishes") == (200, {"data": []})


@pytest.mark.parametrize(
    "field, message",
    [
        ("name", "Dish must include a name"),
        ("description", "Dish must include a description"),
        ("price", "Dish must include a price"),
        ("image_url", "Dish must include a image_url"),
    ],
)
def test_create_rejects_missing_field(client, field, message):
    status, body = create_dish(client, without(valid_dish(), field))

    assert status == 400
    assert body == {"error": message}
    assert call(client, "GET", "/dishes")[1]["data"] == []


@pytest.mark.parametrize("field", ["name", "description", "image_url"])
def test_create_rejects_empty_string(client, field):
    status, _ = create_dish(client, valid_dish(**{field: ""}))
    assert status == 400


@pytest.mark.parametrize("price", [0, -1, 9.5, "10", True])
def test_create_rejects_non_positive_or_non_integer_price(client, price):
    status, body = create_dish(client, valid_dish(price=price))

    assert status == 400
    assert body["error"] == "Dish must have a price that is an integer greater than 0"
    assert call(client, "GET", "/dishes")[1]["data"] == []


def test_first_failing_check_wins(client):
    status, body = create_dish(client, {"price": -3})
    assert (status, body["error"]) == (400, "Dish must include a name")


def test_read_dish(client):
    dish_id = stored_dish_id(client)

    status, body = call(client, "GET", f"/dishes/{dish_id}")

    assert status == 200
    assert body["data"]["id"] == dish_id


@pytest.mark.parametrize("dish_id", ["99", "abc"])
def test_read_missing_dish_is_404(client, dish_id):
    status, body = call(client, "GET", f"/dishes/{dish_id}")

    assert status == 404
    assert body == {"error": f"Dish does not exist: {dish_id}"}


def test_update_overwrites_fields_and_keeps_id(client):
    dish_id = stored_dish_id(client)
    changes = valid_dish(name="Pizza", description="Cheesy", price=12, image_url="http://y")

    status, body = call(client, "PUT", f"/dishes/{dish_id}", changes)

    assert status == 200
    assert body["data"] == {"id": dish_id, **changes}
    assert call(client, "GET", f"/dishes/{dish_id}")[1]["data"]["name"] == "Pizza"


def test_update_accepts_matching_or_absent_payload_id(client):
    dish_id = stored_dish_id(client)

    assert call(client, "PUT", f"/dishes/{dish_id}", valid_dish(id=dish_id))[0] == 200
    assert call(client, "PUT", f"/dishes/{dish_id}", valid_dish(id=str(dish_id)))[0] == 200
    assert call(client, "PUT", f"/dishes/{dish_id}", valid_dish(id=None))[0] == 200
    assert call(client, "PUT", f"/dishes/{dish_id}", valid_dish())[0] == 200


def test_update_rejects_mismatched_payload_id(client):
    dish_id = stored_dish_id(client)

    status, body = call(client, "PUT", f"/dishes/{dish_id}", valid_dish(id=dish_id + 41, name="Other"))

    assert status == 400
    assert body["error"] == f"Dish id does not match route id. Dish: {dish_id + 41}, Route: {dish_id}"
    assert call(client, "GET", f"/dishes/{dish_id}")[1]["data"]["name"] == "Pasta"


@pytest.mark.parametrize(
    "field, message",
    [
        ("name", "Dish must include a name"),
        ("description", "Dish must include a description"),
        ("price", "Dish must include a price"),
        ("image_url", "Dish must include a image_url"),
    ],
)
def test_update_rejects_missing_field(client, field, message):
    dish_id = stored_dish_id(client)
    changes = without(valid_dish(name="Pizza", price=12), field)

    status, body = call(client, "PUT", f"/dishes/{dish_id}", changes)

    assert (status, body) == (400, {"error": message})
    assert call(client, "GET", f"/dishes/{dish_id}")[1]["data"] == {"id": dish_id, **valid_dish()}


def test_update_rejects_invalid_price(client):
    dish_id = stored_dish_id(client)

    status, _ = call(client, "PUT", f"/dishes/{dish_id}", valid_dish(price=0))

    assert status == 400
    assert call(client, "GET", f"/dishes/{dish_id}")[1]["data"]["price"] == 10


def test_update_missing_dish_is_404_before_field_checks(client):
    status, body = call(client, "PUT", "/dishes/7", {})
    assert (status, body) == (404, {"error": "Dish does not exist: 7"})


def test_dishes_cannot_be_deleted(client):
    dish_id = stored_dish_id(client)

    status, _ = call(client, "DELETE", f"/dishes/{dish_id}")

    assert status == 405
    assert len(call(client, "GET", "/dishes")[1]["data"]) == 1
