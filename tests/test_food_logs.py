from datetime import datetime, timedelta

from healthstack.models import FoodLog


def create_food_log(client, headers, **overrides):
    body = {"foodName": "Oatmeal", "calories": 350, "mealType": "BREAKFAST"}
    body.update(overrides)
    r = client.post("/api/food-logs", json=body, headers=headers)
    assert r.status_code == 201, r.data
    return r.get_json()["foodLog"]


def test_create_assigns_owner_from_token(client, alice):
    user, headers = alice
    r = client.post("/api/food-logs", headers=headers, json={
        "foodName": "Chicken salad", "calories": 420, "protein": 35, "mealType": "LUNCH",
        "userId": user["id"] + 100,
    })
    assert r.status_code == 201, r.data
    body = r.get_json()
    assert body["message"] == "Food log created successfully"
    log = body["foodLog"]
    assert log["userId"] == user["id"]
    assert log["id"]
    assert log["createdAt"].endswith("Z")
    # optional values that were not sent stay absent
    assert log["carbs"] is None
    assert log["fiber"] is None


def test_logged_at_defaults_to_now(client, headers):
    before = datetime.utcnow() - timedelta(seconds=5)
    log = create_food_log(client, headers)
    logged_at = datetime.fromisoformat(log["loggedAt"].rstrip("Z"))
    assert logged_at >= before


def test_create_validation(client, headers):
    r = client.post("/api/food-logs", headers=headers, json={
        "foodName": "", "calories": -5, "mealType": "BRUNCH", "protein": -1
    })
    assert r.status_code == 400
    fields = {d["field"] for d in r.get_json()["details"]}
    assert {"foodName", "calories", "mealType", "protein"} <= fields


def test_list_totals_treat_missing_as_zero(client, headers):
    create_food_log(client, headers, calories=300, protein=20.5, fat=10)
    create_food_log(client, headers, calories=200, protein=9.5)
    create_food_log(client, headers, calories=100, fiber=4)

    r = client.get("/api/food-logs", headers=headers)
    assert r.status_code == 200
    body = r.get_json()
    assert body["count"] == 3
    assert len(body["foodLogs"]) == 3
    assert body["totals"] == {
        "calories": 600.0, "protein": 30.0, "carbs": 0.0, "fat": 10.0, "fiber": 4.0
    }


def test_list_is_most_recent_first(client, headers):
    create_food_log(client, headers, foodName="early", loggedAt="2024-03-01T08:00:00Z")
    create_food_log(client, headers, foodName="late", loggedAt="2024-03-01T18:00:00Z")
    create_food_log(client, headers, foodName="middle", loggedAt="2024-03-01T12:00:00Z")
    names = [log["foodName"] for log in client.get("/api/food-logs", headers=headers).get_json()["foodLogs"]]
    assert names == ["late", "middle", "early"]


def test_date_only_range_covers_whole_day(client, headers):
    create_food_log(client, headers, foodName="before", loggedAt="2024-02-29T23:59:59.999Z")
    create_food_log(client, headers, foodName="midnight", loggedAt="2024-03-01T00:00:00Z")
    create_food_log(client, headers, foodName="last-ms", loggedAt="2024-03-01T23:59:59.999Z")
    create_food_log(client, headers, foodName="after", loggedAt="2024-03-02T00:00:00Z")

    r = client.get("/api/food-logs?startDate=2024-03-01&endDate=2024-03-01", headers=headers)
    assert r.status_code == 200
    names = {log["foodName"] for log in r.get_json()["foodLogs"]}
    assert names == {"midnight", "last-ms"}


def test_meal_type_filter(client, headers):
    create_food_log(client, headers, mealType="BREAKFAST", calories=100)
    create_food_log(client, headers, mealType="SNACK", calories=50)
    body = client.get("/api/food-logs?mealType=SNACK", headers=headers).get_json()
    assert [log["mealType"] for log in body["foodLogs"]] == ["SNACK"]
    assert body["totals"]["calories"] == 50.0

    r = client.get("/api/food-logs?mealType=BRUNCH", headers=headers)
    assert r.status_code == 400


def test_invalid_range_boundary(client, headers):
    r = client.get("/api/food-logs?startDate=yesterday", headers=headers)
    assert r.status_code == 400
    assert r.get_json()["details"][0]["field"] == "startDate"


def test_get_update_delete(client, headers):
    log = create_food_log(client, headers, protein=10, notes="first")

    r = client.get(f"/api/food-logs/{log['id']}", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["foodLog"]["notes"] == "first"

    r2 = client.put(f"/api/food-logs/{log['id']}", headers=headers, json={"calories": 400, "protein": None})
    assert r2.status_code == 200, r2.data
    updated = r2.get_json()["foodLog"]
    assert updated["calories"] == 400
    assert updated["protein"] is None
    assert updated["foodName"] == "Oatmeal"
    assert updated["notes"] == "first"

    r3 = client.delete(f"/api/food-logs/{log['id']}", headers=headers)
    assert r3.status_code == 200
    assert r3.get_json()["message"] == "Food log deleted successfully"


def test_delete_twice_is_not_found(client, headers):
    log = create_food_log(client, headers)
    assert client.delete(f"/api/food-logs/{log['id']}", headers=headers).status_code == 200
    r = client.delete(f"/api/food-logs/{log['id']}", headers=headers)
    assert r.status_code == 404
    assert r.get_json()["error"] == "Food log not found"


def test_other_user_cannot_see_or_touch(client, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    log = create_food_log(client, alice_headers, foodName="alice-secret")

    assert client.get(f"/api/food-logs/{log['id']}", headers=bob_headers).status_code == 404
    r = client.put(f"/api/food-logs/{log['id']}", headers=bob_headers, json={"calories": 1})
    assert r.status_code == 404
    assert "alice-secret" not in r.get_data(as_text=True)
    assert client.delete(f"/api/food-logs/{log['id']}", headers=bob_headers).status_code == 404
    assert client.get("/api/food-logs", headers=bob_headers).get_json()["foodLogs"] == []

    # untouched for the owner
    r2 = client.get(f"/api/food-logs/{log['id']}", headers=alice_headers)
    assert r2.get_json()["foodLog"]["calories"] == 350


def test_requires_authentication(client):
    assert client.get("/api/food-logs").status_code == 401
    r = client.post("/api/food-logs", json={"foodName": "x", "calories": 1, "mealType": "LUNCH"})
    assert r.status_code == 401
    assert FoodLog.query.count() == 0


def test_sub_millisecond_timestamp_stays_in_its_day(client, headers):
    log = create_food_log(client, headers, loggedAt="2024-03-01T23:59:59.999500Z")
    assert log["loggedAt"] == "2024-03-01T23:59:59.999Z"

    day1 = client.get("/api/food-logs?startDate=2024-03-01&endDate=2024-03-01", headers=headers).get_json()
    day2 = client.get("/api/food-logs?startDate=2024-03-02&endDate=2024-03-02", headers=headers).get_json()
    assert day1["count"] == 1
    assert day2["count"] == 0


def test_huge_id_is_not_found(client, headers):
    huge = 99999999999999999999
    for method in (client.get, client.delete):
        r = method(f"/api/food-logs/{huge}", headers=headers)
        assert r.status_code == 404
        assert r.get_json()["code"] == "NOT_FOUND"
    r = client.put(f"/api/food-logs/{huge}", headers=headers, json={"calories": 1})
    assert r.status_code == 404
