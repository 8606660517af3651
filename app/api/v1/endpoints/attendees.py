# app/api/v1/endpoints/attendees.py
from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.crud import crud_attendee, crud_session
from app.crud.crud_attendee import DuplicateAttendeeError
from app.schemas.attendee import Attendee, AttendeeCreate
from app.schemas.session import Session as SessionSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/attendees", tags=["Attendees"])


def _get_attendee_or_404(db: Session, user_name: str):
    attendee = crud_attendee.attendee.get_by_user_name(db, user_name=user_name)
    if not attendee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Attendee not found"
        )
    return attendee


@router.get("/{user_name}", response_model=Attendee)
def get_attendee(user_name: str, db: Session = Depends(get_db)):
    """Retrieve an attendee, including the ids of the sessions on their agenda."""
    return _get_attendee_or_404(db, user_name)


@router.post("", response_model=Attendee, status_code=status.HTTP_201_CREATED)
def create_attendee(attendee_in: AttendeeCreate, db: Session = Depends(get_db)):
    """
    Register a new attendee.

    The user name comes from the identity provider and must be unique;
    a second sign-up for the same user name is rejected with 409.
    """
    try:
        return crud_attendee.attendee.create(db, obj_in=attendee_in)
    except DuplicateAttendeeError:
        logger.warning(f"Duplicate sign-up rejected for user {attendee_in.user_name}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An attendee with this user name already exists.",
        )


@router.post("/{user_name}/session/{session_id}", response_model=Attendee)
def add_session(user_name: str, session_id: int, db: Session = Depends(get_db)):
    """Add a session to the attendee's agenda. Adding it twice is harmless."""
    attendee = _get_attendee_or_404(db, user_name)
    session = crud_session.session.get(db, id=session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    return crud_attendee.attendee.add_session(db, attendee=attendee, session=session)


@router.delete(
    "/{user_name}/session/{session_id}", status_code=status.HTTP_204_NO_CONTENT
)
def remove_session(user_name: str, session_id: int, db: Session = Depends(get_db)):
    """Remove a session from the attendee's agenda. Removing an absent one is harmless."""
    attendee = _get_attendee_or_404(db, user_name)
    crud_attendee.attendee.remove_session(db, attendee=attendee, session_id=session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_name}/sessions", response_model=List[SessionSchema])
def get_attendee_sessions(user_name: str, db: Session = Depends(get_db)):
    """The attendee's agenda, in schedule order."""
    attendee = _get_attendee_or_404(db, user_name)
    return crud_attendee.attendee.get_sessions(db, attendee=attendee)
