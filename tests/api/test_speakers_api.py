# tests/api/test_speakers_api.py

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.crud import crud_speaker
from app.schemas.speaker import SpeakerCreate
from tests.utils.session import create_random_session


def test_create_speaker_api(client: TestClient):
    response = client.post(
        "/api/speakers", json={"name": "Dr. Evelyn Reed", "bio": "AI researcher"}
    )

    assert response.status_code == 201
    assert response.json()["name"] == "Dr. Evelyn Reed"


def test_get_speaker_with_sessions(client: TestClient, db_session: Session):
    speaker = crud_speaker.speaker.create(db_session, obj_in=SpeakerCreate(name="Linus"))
    create_random_session(db_session, title="Kernel Talk", speaker_ids=[speaker.id])

    response = client.get(f"/api/speakers/{speaker.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Linus"
    assert [s["title"] for s in data["sessions"]] == ["Kernel Talk"]


def test_get_speaker_not_found(client: TestClient):
    assert client.get("/api/speakers/999").status_code == 404


def test_update_speaker_api(client: TestClient, db_session: Session):
    speaker = crud_speaker.speaker.create(db_session, obj_in=SpeakerCreate(name="Old"))

    response = client.put(f"/api/speakers/{speaker.id}", json={"web_site": "https://example.com"})

    assert response.status_code == 200
    assert response.json()["name"] == "Old"
    assert response.json()["web_site"] == "https://example.com"
