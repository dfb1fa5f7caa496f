import pytest
from datetime import date, timedelta

from serene.services import habit_service
from serene.services.habit_service import current_streak


def test_streak_counts_back_from_today():
    today = date(2024, 5, 10)
    dates = [today, today - timedelta(days=1), today - timedelta(days=2), today - timedelta(days=4)]
    assert current_streak(dates, today) == 3


def test_streak_survives_until_today_is_done():
    today = date(2024, 5, 10)
    dates = [today - timedelta(days=1), today - timedelta(days=2)]
    assert current_streak(dates, today) == 2


def test_streak_broken_after_missed_day():
    today = date(2024, 5, 10)
    assert current_streak([today - timedelta(days=2)], today) == 0
    assert current_streak([], today) == 0


def test_seed_defaults_only_when_empty(client):
    first = client.post("/habits/defaults")
    assert first.json() == {"inserted": 3}

    second = client.post("/habits/defaults")
    assert second.json() == {"inserted": 0}

    habits = client.get("/habits").json()
    assert {h["name"] for h in habits} == {"Drink Water", "5-Minute Meditation", "Stretching"}
    assert {h["category"] for h in habits} == {"self-care", "mindfulness", "physical"}


def test_seed_skipped_when_user_has_habits(db):
    habit_service.create_habit(db, "Read", "Ten pages", "productivity")
    assert habit_service.initialize_default_habits(db) == 0
    assert [h.name for h in habit_service.list_habits(db)] == ["Read"]


def test_create_and_update_habit(client):
    created = client.post("/habits", json={
        "name": "Journal",
        "description": "Write before bed",
        "category": "mindfulness",
    })
    assert created.status_code == 201
    habit = created.json()
    assert habit["completed_dates"] == []
    assert habit["streak"] == 0

    updated = client.patch(f"/habits/{habit['id']}", json={"category": "self-care"})
    assert updated.status_code == 200
    assert updated.json()["category"] == "self-care"
    assert updated.json()["name"] == "Journal"
    assert updated.json()["description"] == "Write before bed"


def test_invalid_category_rejected(client):
    resp = client.post("/habits", json={"name": "Nap", "category": "sleeping"})
    assert resp.status_code == 422


def test_toggle_adds_then_removes_completion(client):
    habit_id = client.post("/habits", json={"name": "Walk"}).json()["id"]

    on = client.post(f"/habits/{habit_id}/toggle", json={"date": "2024-05-01"})
    assert on.json() == {"habit_id": habit_id, "date": "2024-05-01", "completed": True}

    habits = client.get("/habits").json()
    assert habits[0]["completed_dates"] == ["2024-05-01"]

    off = client.post(f"/habits/{habit_id}/toggle", json={"date": "2024-05-01"})
    assert off.json()["completed"] is False
    assert client.get("/habits").json()[0]["completed_dates"] == []


def test_toggle_defaults_to_today(client):
    habit_id = client.post("/habits", json={"name": "Stretch"}).json()["id"]

    resp = client.post(f"/habits/{habit_id}/toggle")

    assert resp.json()["date"] == date.today().isoformat()
    listed = client.get("/habits").json()[0]
    assert listed["streak"] == 1


def test_toggle_unknown_habit_returns_404(client):
    resp = client.post("/habits/missing/toggle", json={"date": "2024-05-01"})
    assert resp.status_code == 404


def test_delete_habit_removes_completions(client, db):
    habit_id = client.post("/habits", json={"name": "Floss"}).json()["id"]
    client.post(f"/habits/{habit_id}/toggle", json={"date": "2024-05-01"})

    assert client.delete(f"/habits/{habit_id}").status_code == 204
    assert client.get("/habits").json() == []
    assert client.delete(f"/habits/{habit_id}").status_code == 404

    from serene.models.habit import HabitCompletion
    assert db.query(HabitCompletion).count() == 0


def test_update_missing_habit_returns_404(client):
    assert client.patch("/habits/missing", json={"name": "x"}).status_code == 404


def test_blank_habit_name_rejected(client):
    assert client.post("/habits", json={"name": "   "}).status_code == 422

    habit_id = client.post("/habits", json={"name": "Read"}).json()["id"]
    assert client.patch(f"/habits/{habit_id}", json={"name": "  "}).status_code == 422
    assert client.get("/habits").json()[0]["name"] == "Read"


def test_service_rejects_blank_habit_name(db):
    with pytest.raises(ValueError):
        habit_service.create_habit(db, "   ")

    habit = habit_service.create_habit(db, "Read")
    with pytest.raises(ValueError):
        habit_service.update_habit(db, habit.id, name="\t")
    assert habit_service.get_habit(db, habit.id).name == "Read"
