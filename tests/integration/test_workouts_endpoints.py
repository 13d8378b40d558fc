"""
HTTP tests for /api/v1/workouts, /exercises, /stats and /health.

Covered:
- POST /workouts: 201 with server timestamp and PR flag, 422 listing each bad field
- GET/PUT/DELETE /workouts/{id}: 404 for unknown ids, update keeps recorded_at
- GET /workouts (filters), /workouts/recent, /workouts/prs
- GET /exercises, /exercises/{name}/workouts
- GET /stats/{name}, /stats/{name}/progression
"""

import uuid
from datetime import timedelta

import pytest

from workout_log.core.exceptions import StoreError
from workout_log.repositories.workout_store import WorkoutStore

pytestmark = pytest.mark.integration

BASE = "/api/v1"


async def post_set(client, name: str, reps: int, weight: float):
    response = await client.post(
        f"{BASE}/workouts", json={"exercise_name": name, "reps": reps, "weight_kg": weight}
    )
    assert response.status_code == 201, response.text
    return response.json()


# ---------------------------------------------------------------------------
# POST /workouts
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_record_returns_created_entry(client, clock):
    body = await post_set(client, "Bench Press", 5, 100)

    assert uuid.UUID(body["id"])
    assert body["exercise_name"] == "Bench Press"
    assert body["is_personal_record"] is True
    assert body["recorded_at"].startswith(clock.now().strftime("%Y-%m-%dT%H:%M"))


@pytest.mark.asyncio
async def test_record_equal_weight_is_not_pr(client, clock):
    await post_set(client, "Bench Press", 5, 100)
    clock.advance(minutes=3)
    body = await post_set(client, "bench press", 5, 100)

    assert body["is_personal_record"] is False


@pytest.mark.asyncio
async def test_record_invalid_payload_lists_every_field(client):
    response = await client.post(
        f"{BASE}/workouts", json={"exercise_name": "B", "reps": 0, "weight_kg": 0}
    )

    assert response.status_code == 422
    fields = {err["loc"][-1]: err["type"] for err in response.json()["detail"]}
    assert fields == {
        "exercise_name": "string_too_short",
        "reps": "greater_than_equal",
        "weight_kg": "greater_than",
    }
    listing = await client.get(f"{BASE}/workouts")
    assert listing.json() == []


@pytest.mark.asyncio
async def test_record_rejects_boolean_reps(client):
    response = await client.post(
        f"{BASE}/workouts", json={"exercise_name": "Bench Press", "reps": True, "weight_kg": 100}
    )

    assert response.status_code == 422
    assert [err["type"] for err in response.json()["detail"]] == ["int_type"]


# ---------------------------------------------------------------------------
# GET / PUT / DELETE /workouts/{id}
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_update_delete_roundtrip(client, clock):
    created = await post_set(client, "Squat", 5, 140)
    clock.advance(days=2)

    fetched = await client.get(f"{BASE}/workouts/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    updated = await client.put(
        f"{BASE}/workouts/{created['id']}",
        json={"exercise_name": "Front Squat", "reps": 3, "weight_kg": 120, "is_personal_record": True},
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["exercise_name"] == "Front Squat"
    assert body["reps"] == 3
    assert body["recorded_at"] == created["recorded_at"]

    deleted = await client.delete(f"{BASE}/workouts/{created['id']}")
    assert deleted.status_code == 204
    gone = await client.get(f"{BASE}/workouts/{created['id']}")
    assert gone.status_code == 404
    assert gone.json() == {"detail": "Workout not found"}


@pytest.mark.asyncio
async def test_unknown_id_returns_404(client):
    missing = uuid.uuid4()
    payload = {"exercise_name": "Squat", "reps": 5, "weight_kg": 100}

    assert (await client.get(f"{BASE}/workouts/{missing}")).status_code == 404
    assert (await client.put(f"{BASE}/workouts/{missing}", json=payload)).status_code == 404
    assert (await client.delete(f"{BASE}/workouts/{missing}")).status_code == 404


@pytest.mark.asyncio
async def test_update_invalid_payload_returns_422(client):
    created = await post_set(client, "Squat", 5, 140)
    response = await client.put(
        f"{BASE}/workouts/{created['id']}",
        json={"exercise_name": "Squat", "reps": 1001, "weight_kg": 140},
    )
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# list views
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_recent_and_prs(client, clock):
    old = await post_set(client, "Squat", 5, 100)
    clock.advance(days=8)
    new = await post_set(client, "Squat", 5, 105)
    clock.advance(minutes=1)
    await post_set(client, "Squat", 5, 90)
    clock.advance(minutes=1)

    recent = (await client.get(f"{BASE}/workouts/recent")).json()
    assert [w["weight_kg"] for w in recent] == [90, 105]

    widened = (await client.get(f"{BASE}/workouts/recent", params={"days": 10})).json()
    assert len(widened) == 3

    prs = (await client.get(f"{BASE}/workouts/prs")).json()
    assert [w["id"] for w in prs] == [new["id"], old["id"]]

    bad = await client.get(f"{BASE}/workouts/recent", params={"days": 0})
    assert bad.status_code == 422


@pytest.mark.asyncio
async def test_list_filters(client, clock):
    await post_set(client, "Squat", 5, 100)
    clock.advance(days=10)
    await post_set(client, "Bench Press", 5, 80)
    clock.advance(minutes=1)
    await post_set(client, "Bench Press", 5, 70)

    everything = (await client.get(f"{BASE}/workouts")).json()
    assert len(everything) == 3

    week = (await client.get(f"{BASE}/workouts", params={"period": "week"})).json()
    assert {w["exercise_name"] for w in week} == {"Bench Press"}

    bench_prs = (
        await client.get(f"{BASE}/workouts", params={"exercise": "bench press", "prs_only": True})
    ).json()
    assert [w["weight_kg"] for w in bench_prs] == [80]

    invalid = await client.get(f"{BASE}/workouts", params={"period": "decade"})
    assert invalid.status_code == 422


@pytest.mark.asyncio
async def test_exercise_names_and_history(client, clock):
    await post_set(client, "Bench Press", 5, 80)
    clock.advance(minutes=1)
    await post_set(client, "bench press", 5, 85)
    clock.advance(minutes=1)
    await post_set(client, "Squat", 5, 100)

    names = (await client.get(f"{BASE}/exercises")).json()
    assert names == ["Bench Press", "Squat"]

    history = (await client.get(f"{BASE}/exercises/BENCH PRESS/workouts")).json()
    assert [w["weight_kg"] for w in history] == [85, 80]


# ---------------------------------------------------------------------------
# stats
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_stats_for_exercise(client, clock):
    await post_set(client, "Bench Press", 5, 100)
    clock.advance(days=1)
    await post_set(client, "Bench Press", 3, 110)

    upper = (await client.get(f"{BASE}/stats/Bench Press")).json()
    lower = (await client.get(f"{BASE}/stats/bench press")).json()

    assert upper["total_volume"] == 830
    assert upper["max_weight"] == 110
    assert upper["average_weight"] == 105
    assert upper["total_sets"] == 2
    assert {k: v for k, v in upper.items() if k != "exercise_name"} == {
        k: v for k, v in lower.items() if k != "exercise_name"
    }


@pytest.mark.asyncio
async def test_stats_for_unknown_exercise(client):
    body = (await client.get(f"{BASE}/stats/Lunge")).json()

    assert body["exercise_name"] == "Lunge"
    assert body["total_sets"] == 0
    assert body["first_workout"] is None
    assert body["last_workout"] is None


@pytest.mark.asyncio
async def test_progression(client, clock):
    await post_set(client, "Deadlift", 5, 120)
    clock.advance(days=7)
    await post_set(client, "Deadlift", 5, 125)

    points = (await client.get(f"{BASE}/stats/deadlift/progression")).json()

    assert [p["weight_kg"] for p in points] == [120, 125]
    assert all(p["is_personal_record"] for p in points)


# ---------------------------------------------------------------------------
# health / store failures
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_health(client, monkeypatch):
    monkeypatch.setenv("BACKEND_BUILT_AT", "2026-01-01T00:00:00Z")
    assert (await client.get(f"{BASE}/health")).json() == {"status": "ok"}
    ready = await client.get(f"{BASE}/health/ready")
    assert ready.status_code == 200
    assert ready.json()["database"] == "connected"


@pytest.mark.asyncio
async def test_store_failure_returns_503(client, monkeypatch):
    async def broken_scan(self, **filters):
        raise StoreError("scan")

    monkeypatch.setattr(WorkoutStore, "scan", broken_scan)

    response = await client.get(f"{BASE}/workouts")

    assert response.status_code == 503
    assert response.json() == {"detail": "Workout store unavailable"}
