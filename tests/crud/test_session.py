# tests/crud/test_session.py

from datetime import datetime
from sqlalchemy.orm import Session

from app.crud import crud_session, crud_speaker
from app.models.session import Session as SessionModel
from app.models.speaker import Speaker
from app.schemas.session import SessionUpdate
from app.schemas.speaker import SpeakerCreate
from tests.utils.session import create_random_session


def test_create_session_with_speakers(db_session: Session):
    """
    Tests the direct CRUD function for creating a session and linking speakers.
    """
    speaker1 = crud_speaker.speaker.create(db_session, obj_in=SpeakerCreate(name="Speaker One"))
    speaker2 = crud_speaker.speaker.create(db_session, obj_in=SpeakerCreate(name="Speaker Two"))

    created = create_random_session(
        db_session, title="CRUD Test Session", speaker_ids=[speaker1.id, speaker2.id]
    )

    assert created.id is not None
    assert created.title == "CRUD Test Session"
    assert sorted(s.name for s in created.speakers) == ["Speaker One", "Speaker Two"]


def test_update_session_replaces_speakers(db_session: Session):
    speaker1 = crud_speaker.speaker.create(db_session, obj_in=SpeakerCreate(name="Speaker One"))
    speaker2 = crud_speaker.speaker.create(db_session, obj_in=SpeakerCreate(name="Speaker Two"))
    session = create_random_session(db_session, speaker_ids=[speaker1.id])

    updated = crud_session.session.update(
        db_session,
        db_obj=session,
        obj_in=SessionUpdate(title="Renamed", speaker_ids=[speaker2.id]),
    )

    assert updated.title == "Renamed"
    assert [s.name for s in updated.speakers] == ["Speaker Two"]


def test_update_session_leaves_unset_fields(db_session: Session):
    session = create_random_session(db_session, title="Original")

    updated = crud_session.session.update(
        db_session, db_obj=session, obj_in=SessionUpdate(track="Cloud")
    )

    assert updated.title == "Original"
    assert updated.track == "Cloud"


def test_get_multi_orders_by_start_time(db_session: Session):
    create_random_session(db_session, title="Afternoon", start_time=datetime(2025, 11, 10, 14))
    create_random_session(db_session, title="Morning", start_time=datetime(2025, 11, 10, 9))

    titles = [s.title for s in crud_session.session.get_multi(db_session)]

    assert titles == ["Morning", "Afternoon"]


def test_get_multi_puts_unscheduled_sessions_last(db_session: Session):
    db_session.add(SessionModel(title="Unscheduled"))
    db_session.commit()
    create_random_session(db_session, title="Keynote", start_time=datetime(2025, 11, 10, 9))

    titles = [s.title for s in crud_session.session.get_multi(db_session)]

    assert titles == ["Keynote", "Unscheduled"]


def test_speaker_listing_is_not_capped(db_session: Session):
    db_session.add_all([Speaker(name=f"Speaker {i}") for i in range(150)])
    db_session.commit()

    assert len(crud_speaker.speaker.get_multi(db_session)) == 150


def test_search_is_case_insensitive(db_session: Session):
    create_random_session(db_session, title="Async Python")
    create_random_session(db_session, title="Rust for Pythonistas")
    create_random_session(db_session, title="Kubernetes")

    titles = sorted(s.title for s in crud_session.session.search(db_session, query="PYTHON"))

    assert titles == ["Async Python", "Rust for Pythonistas"]
