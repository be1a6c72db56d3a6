from __future__ import annotations

import uuid
from datetime import date


def _student(learner_id: str) -> dict:
    return {"learner_id": learner_id, "name": "Ravi", "age": 16, "student_type": "school"}


def _generate(client, learner_id: str, **overrides):
    payload = {
        "student": _student(learner_id),
        "duration": 14,
        "start_date": date.today().isoformat(),
        "preferences": {"study_on_weekends": True},
    }
    payload.update(overrides)
    return client.post("/learning-plans/generate", json=payload)


def test_health_reports_store_and_provider(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["llm"]["provider"] == "none"
    assert body["llm"]["configured"] is False
    assert body["plan_store"]["configured_backend"] == "file"
    assert response.headers["x-request-id"]


def test_roadmap_catalogue(client):
    response = client.get("/learning-plans/roadmaps")
    assert response.status_code == 200
    ids = {item["id"]: item["kind"] for item in response.json()["roadmaps"]}
    assert ids["frontend"] == "roadmap"
    assert ids["neet"] == "preset"
    assert ids["cbse-9"] == "preset"


def test_generate_fetch_and_complete_flow(client):
    learner_id = str(uuid.uuid4())

    created = _generate(client, learner_id)
    assert created.status_code == 200
    body = created.json()
    assert body["success"] is True
    assert "local fallback" in body["message"]
    plan = body["learning_plan"]
    assert plan["generated_by"] == "Fallback"
    assert plan["learner_id"] == learner_id
    assert len(plan["daily_roadmap"]) == 14
    assert plan["schedule"]["weekly_plan"][0]["day"] == "Monday"
    assert body["stats"]["total_days"] == 14
    plan_id = plan["plan_id"]

    fetched = client.get(f"/learning-plans/{plan_id}")
    assert fetched.status_code == 200
    assert fetched.json()["plan_id"] == plan_id

    listing = client.get(f"/learning-plans/by-learner/{learner_id}")
    assert listing.status_code == 200
    assert [item["plan_id"] for item in listing.json()["plans"]] == [plan_id]
    assert listing.json()["plans"][0]["completion_percentage"] == 0

    today = client.get(f"/learning-plans/{plan_id}/today")
    assert today.status_code == 200
    day = today.json()["day"]
    assert day["day_number"] == 1
    assert day["date"] == date.today().isoformat()
    session_id = day["sessions"][0]["session_id"]
    assert session_id == "day1_session1"

    completed = client.put(
        f"/learning-plans/{plan_id}/sessions/{session_id}/complete",
        json={"score": 75, "notes": "solid"},
    )
    assert completed.status_code == 200
    result = completed.json()
    assert result["success"] is True
    assert result["day"]["progress"]["completed_sessions"] == 1
    assert result["day"]["sessions"][0]["is_completed"] is True
    assert result["completion_percentage"] > 0

    reloaded = client.get(f"/learning-plans/{plan_id}").json()
    assert reloaded["daily_roadmap"][0]["sessions"][0]["notes"] == "solid"


def test_generate_with_explicit_subjects(client):
    response = _generate(
        client,
        str(uuid.uuid4()),
        duration=7,
        subjects=[{"name": "Chemistry", "units": [{"title": "Bonding", "topics": ["Ionic", "Covalent"]}]}],
    )
    assert response.status_code == 200
    plan = response.json()["learning_plan"]
    assert plan["curriculum"]["source"] == "explicit"
    first = plan["daily_roadmap"][0]["sessions"][0]
    assert (first["subject"], first["unit"], first["topics"]) == ("Chemistry", "Bonding", ["Ionic", "Covalent"])


def test_unknown_session_is_404(client):
    plan_id = _generate(client, str(uuid.uuid4())).json()["learning_plan"]["plan_id"]
    response = client.put(f"/learning-plans/{plan_id}/sessions/day99_session1/complete", json={})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "session_not_found"


def test_today_outside_plan_window_is_404(client):
    created = _generate(client, str(uuid.uuid4()), start_date="2020-01-06", duration=3)
    plan_id = created.json()["learning_plan"]["plan_id"]
    response = client.get(f"/learning-plans/{plan_id}/today")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "http_error"


def test_unknown_plan_is_404(client):
    response = client.get("/learning-plans/does-not-exist")
    assert response.status_code == 404
    assert "does-not-exist" in response.json()["error"]["message"]


def test_non_positive_duration_is_rejected(client):
    response = _generate(client, str(uuid.uuid4()), duration=0)
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "planning_error"
    assert error["details"] == {"type": "InvalidDurationError"}


def test_missing_student_fails_validation(client):
    response = client.post("/learning-plans/generate", json={"duration": 10})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "validation_error"
    assert body["error"]["request_id"]


def test_generate_accepts_snake_case_plan_keys(client):
    response = _generate(client, str(uuid.uuid4()), roadmap_type="frontend", plan_type="technology-roadmap")
    assert response.status_code == 200
    plan = response.json()["learning_plan"]
    assert plan["plan_type"] == "technology-roadmap"
    assert plan["curriculum"]["roadmap_type"] == "frontend"
    assert plan["curriculum"]["source"] == "roadmap.sh"
