import pytest
from datetime import date


def test_save_mood_inserts_then_replaces_same_day(client):
    first = client.put("/moods", json={"date": "2024-06-01", "emotion": "anxious", "intensity": 7, "notes": "exam"})
    assert first.status_code == 200

    second = client.put("/moods", json={"date": "2024-06-01", "emotion": "calm", "intensity": 3})
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    moods = client.get("/moods").json()
    assert len(moods) == 1
    assert moods[0]["emotion"] == "calm"
    assert moods[0]["intensity"] == 3
    assert moods[0]["notes"] is None


def test_moods_listed_oldest_first(client):
    for day in ("2024-06-03", "2024-06-01", "2024-06-02"):
        client.put("/moods", json={"date": day, "emotion": "happy", "intensity": 5})

    assert [m["date"] for m in client.get("/moods").json()] == ["2024-06-01", "2024-06-02", "2024-06-03"]


def test_mood_validation(client):
    bad_emotion = client.put("/moods", json={"date": "2024-06-01", "emotion": "bored", "intensity": 5})
    bad_intensity = client.put("/moods", json={"date": "2024-06-01", "emotion": "sad", "intensity": 11})
    assert bad_emotion.status_code == 422
    assert bad_intensity.status_code == 422


def test_mood_summary_counts_range(client):
    entries = [
        ("2024-06-01", "happy", 8),
        ("2024-06-02", "happy", 6),
        ("2024-06-03", "sad", 4),
        ("2024-06-10", "angry", 9),
    ]
    for day, emotion, intensity in entries:
        client.put("/moods", json={"date": day, "emotion": emotion, "intensity": intensity})

    resp = client.get("/moods/summary", params={"start_date": "2024-06-01", "end_date": "2024-06-03"})

    body = resp.json()
    assert body["total_records"] == 3
    assert body["summary"] == {"happy": 2, "sad": 1}
    assert body["average_intensity"] == 6.0


def test_mood_summary_rejects_bad_range(client):
    reversed_range = client.get("/moods/summary", params={"start_date": "2024-06-05", "end_date": "2024-06-01"})
    bad_format = client.get("/moods/summary", params={"start_date": "06/01/2024", "end_date": "2024-06-05"})
    assert reversed_range.status_code == 400
    assert bad_format.status_code == 400


def test_service_upsert_keyed_by_date(db):
    from serene.services.mood_service import get_mood_entries, save_mood_entry

    save_mood_entry(db, date(2024, 7, 1), "sad", 6, "rainy")
    save_mood_entry(db, date(2024, 7, 1), "neutral", 5, None)
    save_mood_entry(db, date(2024, 7, 2), "happy", 8, None)

    entries = get_mood_entries(db)
    assert [(e.date, e.emotion) for e in entries] == [(date(2024, 7, 1), "neutral"), (date(2024, 7, 2), "happy")]


def test_healthz_reports_db(client):
    body = client.get("/healthz").json()
    assert body["details"]["db_connection"] is True


@pytest.mark.parametrize("intensity", [0, 11, 42])
def test_service_rejects_intensity_out_of_range(db, intensity):
    from serene.services.mood_service import get_mood_entries, save_mood_entry

    with pytest.raises(ValueError):
        save_mood_entry(db, date(2024, 1, 1), "sad", intensity, None)
    assert get_mood_entries(db) == []


def test_out_of_range_intensity_keeps_existing_entry(db):
    from serene.services.mood_service import get_mood_entries, save_mood_entry

    save_mood_entry(db, date(2024, 1, 1), "calm", 4, None)
    with pytest.raises(ValueError):
        save_mood_entry(db, date(2024, 1, 1), "angry", 42, None)
    assert [(e.emotion, e.intensity) for e in get_mood_entries(db)] == [("calm", 4)]


def test_mood_summary_storage_failure_returns_500(client, monkeypatch):
    from sqlalchemy.exc import OperationalError

    from serene.services import mood_service

    def broken(db, start, end):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(mood_service, "mood_summary", broken)
    resp = client.get("/moods/summary", params={"start_date": "2024-06-01", "end_date": "2024-06-03"})

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to summarize mood entries"}
