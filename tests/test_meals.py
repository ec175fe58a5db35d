"""
Tests for the meal log endpoints (create, list, get, update, delete).

All requests go through a registered user's session cookie; isolation
between two users is covered in ``test_ownership.py``.
"""

from test_helpers import create_meal, list_meals, meal_payload, register_user


def test_create_meal(client):
    register_user(client)

    r = client.post("/meals", json=meal_payload())

    assert r.status_code == 201
    assert r.content == b""


def test_create_then_get_round_trip(client):
    register_user(client)
    create_meal(
        client,
        name="New meal",
        description="new meal description",
        date=1704372956,
        is_on_diet=True,
    )

    meal_id = list_meals(client)[0]["id"]
    r = client.get(f"/meals/{meal_id}")

    assert r.status_code == 200
    meal = r.json()["meal"]
    assert meal["id"] == meal_id
    assert meal["name"] == "New meal"
    assert meal["description"] == "new meal description"
    assert meal["date"] == 1704372956
    assert meal["is_on_diet"] is True


def test_date_string_is_stored_as_epoch_millis(client):
    register_user(client)
    create_meal(client, date="2021-01-01T08:00:00Z")
    create_meal(client, date="2021-01-01T10:00:00+02:00")

    dates = [m["date"] for m in list_meals(client)]
    assert dates == [1609488000000, 1609488000000]


def test_list_is_sorted_by_date_ascending(client):
    register_user(client)
    for name, date in [("dinner", 3000), ("breakfast", 1000), ("lunch", 2000)]:
        create_meal(client, name=name, date=date)

    meals = list_meals(client)

    assert [m["name"] for m in meals] == ["breakfast", "lunch", "dinner"]
    assert [m["date"] for m in meals] == [1000, 2000, 3000]


def test_list_is_empty_for_new_user(client):
    register_user(client)
    assert list_meals(client) == []


def test_update_meal_replaces_every_field(client):
    register_user(client)
    create_meal(client, name="New meal", is_on_diet=True, date=1704372956)
    meal_id = list_meals(client)[0]["id"]

    r = client.put(
        f"/meals/{meal_id}",
        json=meal_payload(
            name="New meal 2",
            description="new meal 2 description",
            date="2024-01-05T12:00:00Z",
            is_on_diet=False,
        ),
    )

    assert r.status_code == 204
    assert r.content == b""

    meal = client.get(f"/meals/{meal_id}").json()["meal"]
    assert meal["name"] == "New meal 2"
    assert meal["description"] == "new meal 2 description"
    assert meal["date"] == 1704456000000
    assert meal["is_on_diet"] is False


def test_update_requires_every_field(client):
    register_user(client)
    create_meal(client, name="Original")
    meal_id = list_meals(client)[0]["id"]

    r = client.put(f"/meals/{meal_id}", json={"name": "Only the name"})

    assert r.status_code == 422
    assert list_meals(client)[0]["name"] == "Original"


def test_update_missing_meal_returns_404(client):
    register_user(client)

    r = client.put(
        "/meals/123e4567-e89b-12d3-a456-426614174000", json=meal_payload()
    )

    assert r.status_code == 404
    assert r.json() == {"error": "meal not found"}


def test_delete_meal(client):
    register_user(client)
    create_meal(client)
    meal_id = list_meals(client)[0]["id"]

    r = client.delete(f"/meals/{meal_id}")

    assert r.status_code == 204
    assert list_meals(client) == []


def test_delete_twice_returns_404(client):
    register_user(client)
    create_meal(client)
    meal_id = list_meals(client)[0]["id"]

    assert client.delete(f"/meals/{meal_id}").status_code == 204

    r = client.delete(f"/meals/{meal_id}")
    assert r.status_code == 404
    assert r.json() == {"error": "meal not found"}


def test_get_missing_meal_returns_404(client):
    register_user(client)

    r = client.get("/meals/123e4567-e89b-12d3-a456-426614174000")

    assert r.status_code == 404
    assert r.json() == {"error": "meal not found"}


def test_get_with_malformed_id_is_a_validation_error(client):
    register_user(client)

    r = client.get("/meals/not-a-uuid")

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_meal_validation(client):
    register_user(client)

    missing = meal_payload()
    del missing["isOnDiet"]
    assert client.post("/meals", json=missing).status_code == 422

    assert client.post("/meals", json=meal_payload(is_on_diet="yes")).status_code == 422
    assert client.post("/meals", json=meal_payload(date="not a date")).status_code == 422
    assert client.post("/meals", json=meal_payload(date=True)).status_code == 422
    assert client.post("/meals", json=meal_payload(name=42)).status_code == 422

    assert list_meals(client) == []


def test_out_of_range_date_is_a_validation_error(client):
    register_user(client)

    for date in (1e20, 2**63, "99999999999999999999"):
        r = client.post("/meals", json=meal_payload(date=date))
        assert r.status_code == 422, date
        assert r.json()["error"]["code"] == "VALIDATION_ERROR"

    assert list_meals(client) == []


def test_update_with_out_of_range_date_leaves_meal_unchanged(client):
    register_user(client)
    create_meal(client, name="Original", date=1000)
    meal = list_meals(client)[0]

    r = client.put(f"/meals/{meal['id']}", json=meal_payload(name="Changed", date=1e20))

    assert r.status_code == 422
    assert list_meals(client) == [meal]
