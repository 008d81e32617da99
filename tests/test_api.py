"""End-to-end checks through the HTTP layer (auth service mocked, SQLite store)."""

from tests.conftest import OWNER_ID

OTHER = {"Authorization": "Bearer other-token"}


async def create_training(client, **fields):
    body = {"title": "Leg day", "planned_date": "2023-10-05T15:00:00Z", **fields}
    response = await client.post("/api/v1/trainings", json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def test_health_needs_no_token(client):
    response = await client.get("/api/v1/health", headers={"Authorization": ""})

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_missing_bearer_is_rejected(client):
    response = await client.get("/api/v1/trainings", headers={"Authorization": ""})

    assert response.status_code == 401
    assert response.json() == {"error": "no_bearer"}


async def test_unknown_token_is_rejected(client):
    response = await client.get("/api/v1/trainings", headers={"Authorization": "Bearer forged"})

    assert response.status_code == 401
    assert response.json() == {"error": "invalid_token"}


async def test_create_start_add_complete(client, clock):
    created = await create_training(client, total_duration="1h30m")
    assert created["user_id"] == str(OWNER_ID)
    assert created["is_done"] is False
    assert created["started_at"] is None
    assert created["finished_at"] is None
    assert created["planned_date"] == "2023-10-05T15:00:00Z"
    assert created["total_duration"] == "1h30m0s"
    assert created["state"] == "planned"
    training_id = created["id"]

    started = await client.post(f"/api/v1/trainings/{training_id}/start")
    assert started.status_code == 200
    assert started.json()["started_at"] == "2024-03-10T09:00:00Z"

    added = await client.post(
        f"/api/v1/trainings/{training_id}/exercises",
        json={"exercise_id": 7, "reps": 10, "approaches": 3, "rest": "90s"},
    )
    assert added.status_code == 201
    assert added.json()["rest"] == "1m30s"

    clock.advance(minutes=45)
    completed = await client.patch(f"/api/v1/trainings/{training_id}/complete", json={"rating": 5})
    assert completed.status_code == 200
    body = completed.json()
    assert body["is_done"] is True
    assert body["rating"] == 5
    assert body["finished_at"] == "2024-03-10T09:45:00Z"
    assert [(e["exercise_id"], e["reps"], e["approaches"]) for e in body["exercises"]] == [(7, 10, 3)]

    total = await client.get(f"/api/v1/trainings/{training_id}/total-time")
    assert total.json() == {"total_seconds": 0, "total_rest_seconds": 90, "total_exercise_seconds": 0}

    stats = await client.get("/api/v1/trainings/stats")
    assert stats.json() == {
        "total_trainings": 1,
        "completed_trainings": 1,
        "average_rating": 5.0,
        "total_duration": "1h30m0s",
    }


async def test_create_keeps_training_planned(client):
    created = await create_training(
        client, is_done=True, started_at="2024-03-09T08:00:00Z", finished_at="2024-03-09T09:00:00Z"
    )

    assert created["state"] == "planned"
    assert created["is_done"] is False
    assert created["started_at"] is None
    assert created["finished_at"] is None


async def test_start_by_other_user_is_forbidden(client):
    created = await create_training(client)

    response = await client.post(f"/api/v1/trainings/{created['id']}/start", headers=OTHER)

    assert response.status_code == 403
    assert response.json() == {"error": "training does not belong to user"}
    fetched = await client.get(f"/api/v1/trainings/{created['id']}")
    assert fetched.json()["started_at"] is None


async def test_pause_unstarted_training_conflicts(client):
    created = await create_training(client)

    response = await client.post(f"/api/v1/trainings/{created['id']}/pause")

    assert response.status_code == 409
    assert response.json() == {"error": "training is not active"}


async def test_assign_global_training_today(client, global_template, clock):
    response = await client.post(
        f"/api/v1/global-trainings/{global_template}/assign",
        json={"planned_date": "2024-03-10T18:00:00Z"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Push A"
    assert body["actual_date"] == "2024-03-10T09:00:00Z"
    assert [e["exercise_id"] for e in body["exercises"]] == [7, 3, 11]
    assert all(e["weight"] is None and e["reps"] is None for e in body["exercises"])

    listed = await client.get("/api/v1/global-trainings", params={"level": "beginner"})
    assert [t["id"] for t in listed.json()] == [global_template]


async def test_invalid_duration_is_bad_request(client):
    response = await client.post(
        "/api/v1/trainings",
        json={"planned_date": "2023-10-05T15:00:00Z", "total_duration": "soon"},
    )

    assert response.status_code == 400
    assert "total_duration" in response.json()["error"]


async def test_missing_planned_date_is_bad_request(client):
    response = await client.post("/api/v1/trainings", json={"title": "No date"})

    assert response.status_code == 400
    assert response.json() == {"error": "planned date is required"}


async def test_unknown_training_is_not_found(client):
    response = await client.get("/api/v1/trainings/12345")

    assert response.status_code == 404
    assert response.json() == {"error": "training not found"}


async def test_delete_training(client):
    created = await create_training(client)

    deleted = await client.delete(f"/api/v1/trainings/{created['id']}")
    assert deleted.status_code == 204

    assert (await client.get(f"/api/v1/trainings/{created['id']}")).status_code == 404
    assert (await client.delete(f"/api/v1/trainings/{created['id']}")).status_code == 404


async def test_remove_exercise_from_wrong_training(client):
    first = await create_training(client)
    second = await create_training(client)
    entry = (
        await client.post(f"/api/v1/trainings/{first['id']}/exercises", json={"exercise_id": 2})
    ).json()

    response = await client.delete(f"/api/v1/trainings/{second['id']}/exercises/{entry['id']}")
    assert response.status_code == 404

    response = await client.delete(f"/api/v1/trainings/{first['id']}/exercises/{entry['id']}")
    assert response.status_code == 204


async def test_update_entry_timers(client):
    training = await create_training(client)
    entry = (
        await client.post(f"/api/v1/trainings/{training['id']}/exercises", json={"exercise_id": 5})
    ).json()

    rest = await client.patch(f"/api/v1/training-exercises/{entry['id']}/rest", json={"rest_time": "2m"})
    doing = await client.patch(f"/api/v1/training-exercises/{entry['id']}/doing", json={"doing_time": "45s"})
    put = await client.put(f"/api/v1/training-exercises/{entry['id']}", json={"weight": 80, "notes": "felt strong"})

    assert rest.json()["rest"] == "2m0s"
    assert doing.json()["doing"] == "45s"
    assert put.json()["weight"] == 80.0
    assert put.json()["rest"] == "2m0s"
    assert put.json()["notes"] == "felt strong"

    precise = await client.put(f"/api/v1/training-exercises/{entry['id']}", json={"weight": 70.1})
    assert precise.json()["weight"] == 70.1


async def test_current_and_today(client, clock):
    assert (await client.get("/api/v1/trainings/current")).status_code == 404

    today = await create_training(client, planned_date="2024-03-10T20:00:00Z")
    await create_training(client, planned_date="2024-03-12T20:00:00Z")
    await client.post(f"/api/v1/trainings/{today['id']}/start")

    current = await client.get("/api/v1/trainings/current")
    todays = await client.get("/api/v1/trainings/today")

    assert current.json()["id"] == today["id"]
    assert [t["id"] for t in todays.json()] == [today["id"]]
