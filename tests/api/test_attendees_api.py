# tests/api/test_attendees_api.py

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.utils.attendee import create_attendee
from tests.utils.session import create_random_session

ATTENDEE_DATA = {
    "first_name": "Grace",
    "last_name": "Hopper",
    "email_address": "grace@example.com",
    "user_name": "grace",
}


def test_create_attendee_api(client: TestClient):
    response = client.post("/api/attendees", json=ATTENDEE_DATA)

    assert response.status_code == 201
    data = response.json()
    assert data["user_name"] == "grace"
    assert data["session_ids"] == []


def test_create_attendee_duplicate_conflict(client: TestClient):
    client.post("/api/attendees", json=ATTENDEE_DATA)

    response = client.post("/api/attendees", json=ATTENDEE_DATA)

    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]


def test_create_attendee_validation_failure(client: TestClient, db_session: Session):
    response = client.post(
        "/api/attendees",
        json={**ATTENDEE_DATA, "first_name": "   ", "email_address": "not-an-email"},
    )

    assert response.status_code == 422
    failed_fields = {error["loc"][-1] for error in response.json()["detail"]}
    assert {"first_name", "email_address"} <= failed_fields
    # Nothing was written.
    assert client.get("/api/attendees/grace").status_code == 404


def test_get_attendee_not_found(client: TestClient):
    response = client.get("/api/attendees/nobody")

    assert response.status_code == 404


def test_add_session_to_attendee(client: TestClient, db_session: Session):
    create_attendee(db_session, user_name="ada")
    session = create_random_session(db_session)

    first = client.post(f"/api/attendees/ada/session/{session.id}")
    second = client.post(f"/api/attendees/ada/session/{session.id}")

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["session_ids"] == [session.id]


def test_add_unknown_session_is_not_found(client: TestClient, db_session: Session):
    create_attendee(db_session, user_name="ada")

    response = client.post("/api/attendees/ada/session/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Session not found"


def test_add_session_for_unknown_attendee_is_not_found(
    client: TestClient, db_session: Session
):
    session = create_random_session(db_session)

    response = client.post(f"/api/attendees/nobody/session/{session.id}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Attendee not found"


def test_remove_session_is_idempotent(client: TestClient, db_session: Session):
    create_attendee(db_session, user_name="ada")
    session = create_random_session(db_session)
    client.post(f"/api/attendees/ada/session/{session.id}")

    first = client.delete(f"/api/attendees/ada/session/{session.id}")
    second = client.delete(f"/api/attendees/ada/session/{session.id}")

    assert first.status_code == 204
    assert second.status_code == 204
    assert client.get("/api/attendees/ada").json()["session_ids"] == []


def test_get_attendee_sessions(client: TestClient, db_session: Session):
    create_attendee(db_session, user_name="ada")
    session = create_random_session(db_session, title="On my agenda")
    create_random_session(db_session, title="Not on my agenda")
    client.post(f"/api/attendees/ada/session/{session.id}")

    response = client.get("/api/attendees/ada/sessions")

    assert response.status_code == 200
    assert [s["title"] for s in response.json()] == ["On my agenda"]
