"""HTTP API against a throwaway SQLite database."""

import uuid

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from fitmaster.core.config import Settings, get_settings
from tests.conftest import TEST_EMAIL, TEST_PASSWORD

API = "/api/v1"


def new_exercise(name, muscle_group="chest", exercise_type="main", **extra):
    return {
        "name": name,
        "muscle_group": muscle_group,
        "load_type": "additional_weight",
        "exercise_type": exercise_type,
        **extra,
    }


@pytest.fixture
def chest_catalog(auth_client):
    ids = []
    for body in (
        new_exercise("Bench press", sets=4, reps=8),
        new_exercise("Weighted dips"),
        new_exercise("Cable fly", exercise_type="isolation"),
        new_exercise("Squat", muscle_group="legs"),
    ):
        resp = auth_client.post(f"{API}/exercises", json=body)
        assert resp.status_code == 201, resp.text
        ids.append(resp.json()["id"])
    return ids


@pytest.fixture
def started_workout(auth_client, chest_catalog):
    resp = auth_client.post(
        f"{API}/generator/start",
        json={
            "name": "Chest day",
            "exercises": [{"exercise_id": chest_catalog[0]}, {"exercise_id": chest_catalog[2]}],
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestHealth:
    def test_root(self, client):
        assert client.get("/").json()["status"] == "ok"

    def test_health(self, client):
        assert client.get(f"{API}/health").json()["status"] == "ok"

    def test_ready(self, client):
        resp = client.get(f"{API}/health/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "database": "connected", "active_sessions": 0}


class TestUsers:
    def test_requires_credentials(self, client):
        resp = client.get(f"{API}/exercises")
        assert resp.status_code == 401
        assert resp.headers["WWW-Authenticate"] == "Basic"

    def test_wrong_password(self, auth_client):
        resp = auth_client.get(f"{API}/users/me", auth=(TEST_EMAIL, "wrong-password"))
        assert resp.status_code == 401

    def test_me(self, auth_client):
        resp = auth_client.get(f"{API}/users/me")
        assert resp.status_code == 200
        assert resp.json()["email"] == TEST_EMAIL

    def test_email_is_case_insensitive(self, auth_client):
        resp = auth_client.get(f"{API}/users/me", auth=(TEST_EMAIL.upper(), TEST_PASSWORD))
        assert resp.status_code == 200

    def test_duplicate_email(self, auth_client):
        resp = auth_client.post(
            f"{API}/users", json={"email": TEST_EMAIL, "password": "another-password"}
        )
        assert resp.status_code == 409

    @pytest.mark.parametrize(
        "body",
        [
            {"email": "not-an-email", "password": "long-enough"},
            {"email": "a@b.c", "password": "short"},
        ],
    )
    def test_invalid_registration(self, client, body):
        assert client.post(f"{API}/users", json=body).status_code == 422


class TestExercises:
    def test_crud(self, auth_client):
        created = auth_client.post(
            f"{API}/exercises", json=new_exercise("Bench press", technique="Retract scapula")
        )
        assert created.status_code == 201
        body = created.json()
        assert (body["sets"], body["reps"]) == (3, 10)
        url = f"{API}/exercises/{body['id']}"

        assert auth_client.get(url).json()["technique"] == "Retract scapula"

        patched = auth_client.patch(url, json={"sets": 5, "comment": "Pause at chest"})
        assert patched.status_code == 200
        assert patched.json()["sets"] == 5
        assert patched.json()["name"] == "Bench press"

        assert auth_client.delete(url).status_code == 204
        assert auth_client.get(url).status_code == 404
        assert auth_client.delete(url).status_code == 404

    @pytest.mark.parametrize(
        "overrides",
        [{"sets": 0}, {"sets": 11}, {"reps": 101}, {"name": ""}, {"muscle_group": "neck"}],
    )
    def test_validation(self, auth_client, overrides):
        body = {**new_exercise("Bench press"), **overrides}
        assert auth_client.post(f"{API}/exercises", json=body).status_code == 422

    def test_filters(self, auth_client, chest_catalog):
        def names(**params):
            resp = auth_client.get(f"{API}/exercises", params=params)
            assert resp.status_code == 200
            return {e["name"] for e in resp.json()}

        assert names() == {"Bench press", "Weighted dips", "Cable fly", "Squat"}
        assert names(muscle_group="legs") == {"Squat"}
        assert names(search="PRESS") == {"Bench press"}
        assert names(load_type="machine") == set()

    def test_newest_first(self, auth_client, chest_catalog):
        ids = [e["id"] for e in auth_client.get(f"{API}/exercises").json()]
        assert ids == list(reversed(chest_catalog))

    def test_users_are_isolated(self, auth_client, chest_catalog):
        other = ("other@example.com", "other-password")
        resp = auth_client.post(f"{API}/users", json={"email": other[0], "password": other[1]})
        assert resp.status_code == 201
        assert auth_client.get(f"{API}/exercises", auth=other).json() == []
        assert auth_client.get(f"{API}/exercises/{chest_catalog[0]}", auth=other).status_code == 404


class TestGenerator:
    def test_muscle_groups(self, auth_client, chest_catalog):
        groups = {g["muscle_group"]: g for g in auth_client.get(f"{API}/generator/muscle-groups").json()}
        assert groups["chest"] == {"muscle_group": "chest", "exercise_count": 3, "selectable": True}
        assert groups["legs"]["exercise_count"] == 1
        assert groups["cardio"]["selectable"] is False

    def test_generate(self, auth_client, chest_catalog):
        resp = auth_client.post(
            f"{API}/generator/generate",
            json={
                "selections": [
                    {"muscle_group": "chest", "exercise_count": 2},
                    {"muscle_group": "cardio", "exercise_count": 2},
                    {"muscle_group": "legs", "exercise_count": 9},
                ]
            },
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["selections"] == [
            {"muscle_group": "chest", "exercise_count": 2},
            {"muscle_group": "legs", "exercise_count": 4},
        ]
        exercises = body["exercises"]
        assert [e["muscle_group"] for e in exercises] == ["chest", "chest", "legs"]
        assert sorted(e["exercise_type"] for e in exercises[:2]) == ["isolation", "main"]
        assert len({e["id"] for e in exercises}) == 3

    def test_generate_uses_configured_default_count(self, auth_client, chest_catalog):
        auth_client.app.dependency_overrides[get_settings] = lambda: Settings(
            _env_file=None, default_exercise_count=3
        )
        resp = auth_client.post(
            f"{API}/generator/generate", json={"selections": [{"muscle_group": "chest"}]}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["selections"] == [{"muscle_group": "chest", "exercise_count": 3}]
        assert len(body["exercises"]) == 3

    def test_generate_needs_a_selection(self, auth_client):
        assert auth_client.post(f"{API}/generator/generate", json={"selections": []}).status_code == 422

    def test_replace(self, auth_client, chest_catalog):
        bench, dips, fly, squat = chest_catalog
        resp = auth_client.post(
            f"{API}/generator/replace",
            json={
                "workout": [{"exercise_id": bench}, {"exercise_id": fly}, {"exercise_id": squat}],
                "exercise_id": bench,
            },
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["replaced"] is True
        assert [e["id"] for e in body["exercises"]] == [dips, fly, squat]
        assert [e["is_replaced"] for e in body["exercises"]] == [True, False, False]

    def test_replace_without_candidates(self, auth_client, chest_catalog):
        squat = chest_catalog[3]
        resp = auth_client.post(
            f"{API}/generator/replace",
            json={"workout": [{"exercise_id": squat}], "exercise_id": squat},
        )
        assert resp.json()["replaced"] is False

    def test_replace_unknown(self, auth_client, chest_catalog):
        resp = auth_client.post(
            f"{API}/generator/replace",
            json={"workout": [{"exercise_id": chest_catalog[0]}], "exercise_id": str(uuid.uuid4())},
        )
        assert resp.status_code == 404

    def test_start(self, auth_client, chest_catalog, started_workout):
        assert started_workout["status"] == "active"
        assert started_workout["name"] == "Chest day"
        bench = started_workout["exercises"][0]
        assert bench == {
            "exercise_id": chest_catalog[0],
            "sets": 4,
            "reps": 8,
            "weight": 0,
            "completed": False,
        }
        listed = auth_client.get(f"{API}/workouts", params={"status": "active"}).json()
        assert [w["id"] for w in listed] == [started_workout["id"]]

    def test_start_default_name(self, auth_client, chest_catalog):
        resp = auth_client.post(
            f"{API}/generator/start", json={"exercises": [{"exercise_id": chest_catalog[3]}]}
        )
        assert resp.json()["name"].startswith("Workout ")

    def test_start_unknown_exercise(self, auth_client):
        resp = auth_client.post(
            f"{API}/generator/start", json={"exercises": [{"exercise_id": str(uuid.uuid4())}]}
        )
        assert resp.status_code == 404


class TestWorkouts:
    def test_rename_and_delete(self, auth_client, started_workout):
        url = f"{API}/workouts/{started_workout['id']}"
        resp = auth_client.patch(url, json={"name": "Renamed"})
        assert resp.json()["name"] == "Renamed"
        assert auth_client.delete(url).status_code == 204
        assert auth_client.get(url).status_code == 404

    def test_negative_weight_rejected(self, auth_client, started_workout):
        exercises = started_workout["exercises"]
        exercises[0]["weight"] = -5
        resp = auth_client.patch(
            f"{API}/workouts/{started_workout['id']}", json={"exercises": exercises}
        )
        assert resp.status_code == 422


class TestSession:
    def test_empty_redirects_to_generator(self, auth_client):
        resp = auth_client.post(f"{API}/session")
        assert resp.status_code == 200
        assert resp.json()["state"] == "empty"
        assert resp.json()["redirect_to"] == "generator"
        assert auth_client.get(f"{API}/session").status_code == 409

    def test_full_flow(self, auth_client, chest_catalog, started_workout):
        opened = auth_client.post(f"{API}/session").json()
        assert opened["state"] == "in_progress"
        assert opened["workout_id"] == started_workout["id"]
        assert opened["timer"]["state"] == "idle"
        assert opened["timer"]["formatted"] == "1:30"
        assert [len(e["set_results"]) for e in opened["exercises"]] == [4, 3]

        resp = auth_client.put(f"{API}/session/exercises/0/sets/0/weight", json={"weight": 62.5})
        assert resp.json()["exercises"][0]["set_results"][0]["weight"] == 62.5

        done = auth_client.post(f"{API}/session/exercises/0/sets/0/complete").json()
        assert done["exercises"][0]["current_set"] == 1
        assert done["exercises"][0]["completed_sets"] == 1
        assert done["timer"]["state"] == "running"
        assert done["progress"] == pytest.approx(100 / 7)

        moved = auth_client.post(f"{API}/session/next").json()
        assert moved["current_exercise_index"] == 1
        assert moved["timer"]["state"] == "idle"
        assert auth_client.post(f"{API}/session/next").json()["current_exercise_index"] == 1

        for i in range(3):
            auth_client.post(f"{API}/session/exercises/1/sets/{i}/complete")

        finished = auth_client.post(f"{API}/session/finish")
        assert finished.status_code == 200
        workout = finished.json()
        assert workout["status"] == "completed"
        assert workout["completed_at"] is not None
        assert [(e["weight"], e["completed"]) for e in workout["exercises"]] == [
            (62.5, False),
            (0, True),
        ]

        assert auth_client.get(f"{API}/session").status_code == 409
        assert auth_client.post(f"{API}/session").json()["state"] == "empty"

    def test_failed_commit_on_finish_can_be_retried(self, auth_client, started_workout, monkeypatch):
        auth_client.post(f"{API}/session")
        auth_client.post(f"{API}/session/exercises/0/sets/0/complete")

        async def failing_commit(self):
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        monkeypatch.setattr(AsyncSession, "commit", failing_commit)
        resp = auth_client.post(f"{API}/session/finish")
        monkeypatch.undo()

        assert resp.status_code == 503
        kept = auth_client.get(f"{API}/session")
        assert kept.status_code == 200
        assert kept.json()["state"] == "in_progress"
        assert kept.json()["exercises"][0]["set_results"][0]["completed"] is True
        active = auth_client.get(f"{API}/workouts", params={"status": "active"}).json()
        assert [w["id"] for w in active] == [started_workout["id"]]

        retried = auth_client.post(f"{API}/session/finish")
        assert retried.status_code == 200
        assert retried.json()["status"] == "completed"
        stored = auth_client.get(f"{API}/workouts/{started_workout['id']}").json()
        assert stored["status"] == "completed"
        assert auth_client.get(f"{API}/session").status_code == 409

    def test_invalid_set_operations(self, auth_client, started_workout):
        auth_client.post(f"{API}/session")
        assert auth_client.post(f"{API}/session/exercises/5/sets/0/complete").status_code == 409
        resp = auth_client.put(f"{API}/session/exercises/0/sets/0/weight", json={"weight": -1})
        assert resp.status_code == 422

    def test_timer_controls(self, auth_client, started_workout):
        auth_client.post(f"{API}/session")
        assert auth_client.put(f"{API}/session/timer/duration", json={"seconds": 7}).status_code == 422

        timer = auth_client.put(f"{API}/session/timer/duration", json={"seconds": 120}).json()["timer"]
        assert (timer["duration"], timer["time_left"], timer["formatted"]) == (120, 120, "2:00")

        assert auth_client.post(f"{API}/session/timer/start").json()["timer"]["state"] == "running"
        assert auth_client.post(f"{API}/session/timer/pause").json()["timer"]["state"] == "idle"
        assert auth_client.post(f"{API}/session/timer/resume").json()["timer"]["state"] == "running"
        reset = auth_client.post(f"{API}/session/timer/reset").json()["timer"]
        assert (reset["state"], reset["time_left"]) == ("idle", 120)

    def test_close(self, auth_client, started_workout):
        auth_client.post(f"{API}/session")
        assert auth_client.delete(f"{API}/session").status_code == 204
        assert auth_client.get(f"{API}/session").status_code == 409


class TestStats:
    def test_stats(self, auth_client, chest_catalog, started_workout):
        auth_client.post(f"{API}/session")
        auth_client.post(f"{API}/session/finish")
        auth_client.post(
            f"{API}/generator/start", json={"exercises": [{"exercise_id": chest_catalog[3]}]}
        )
        assert auth_client.get(f"{API}/stats").json() == {
            "total_exercises": 4,
            "total_workouts": 2,
            "workouts_this_week": 2,
            "completed_workouts": 1,
        }
