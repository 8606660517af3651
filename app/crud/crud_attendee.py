# app/crud/crud_attendee.py
"""
CRUD operations for attendees and their personal agenda.

Adding and removing agenda sessions is idempotent: adding a session that
is already on the agenda, or removing one that is not, leaves the
association table untouched.
"""

from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .base import CRUDBase
from app.models.attendee import Attendee
from app.models.session import Session as SessionModel
from app.schemas.attendee import AttendeeCreate

logger = logging.getLogger(__name__)


class DuplicateAttendeeError(Exception):
    """Raised when an attendee with the same user name already exists."""

    def __init__(self, user_name: str):
        super().__init__(f"Attendee '{user_name}' already exists")
        self.user_name = user_name


class CRUDAttendee(CRUDBase[Attendee, AttendeeCreate, AttendeeCreate]):
    def get_by_user_name(self, db: Session, *, user_name: str) -> Optional[Attendee]:
        return db.query(self.model).filter(self.model.user_name == user_name).first()

    def create(self, db: Session, *, obj_in: AttendeeCreate) -> Attendee:
        if self.get_by_user_name(db, user_name=obj_in.user_name):
            raise DuplicateAttendeeError(obj_in.user_name)

        db_obj = self.model(
            first_name=obj_in.first_name,
            last_name=obj_in.last_name,
            user_name=obj_in.user_name,
            email_address=str(obj_in.email_address),
        )
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent sign-up for the same user name.
            db.rollback()
            raise DuplicateAttendeeError(obj_in.user_name)
        db.refresh(db_obj)
        logger.info(f"Attendee created for user {obj_in.user_name}")
        return db_obj

    def add_session(
        self, db: Session, *, attendee: Attendee, session: SessionModel
    ) -> Attendee:
        """Put a session on the attendee's agenda. No-op if already there."""
        if session in attendee.sessions:
            logger.info(
                f"Session {session.id} already on agenda of {attendee.user_name}"
            )
            return attendee

        try:
            attendee.sessions.append(session)
            db.commit()
            db.refresh(attendee)
        except Exception as e:
            logger.error(
                f"Failed to add session {session.id} for {attendee.user_name}: {str(e)}",
                exc_info=True,
                extra={"user_name": attendee.user_name, "session_id": session.id},
            )
            db.rollback()
            raise

        logger.info(f"Session {session.id} added to agenda of {attendee.user_name}")
        return attendee

    def remove_session(
        self, db: Session, *, attendee: Attendee, session_id: int
    ) -> Attendee:
        """Take a session off the attendee's agenda. No-op if it is not there."""
        match = next((s for s in attendee.sessions if s.id == session_id), None)
        if match is None:
            logger.info(
                f"Session {session_id} not on agenda of {attendee.user_name}"
            )
            return attendee

        try:
            attendee.sessions.remove(match)
            db.commit()
            db.refresh(attendee)
        except Exception as e:
            logger.error(
                f"Failed to remove session {session_id} for {attendee.user_name}: {str(e)}",
                exc_info=True,
                extra={"user_name": attendee.user_name, "session_id": session_id},
            )
            db.rollback()
            raise

        logger.info(f"Session {session_id} removed from agenda of {attendee.user_name}")
        return attendee

    def get_sessions(self, db: Session, *, attendee: Attendee) -> List[SessionModel]:
        """The attendee's agenda in schedule order."""
        return (
            db.query(SessionModel)
            .filter(SessionModel.attendees.any(Attendee.id == attendee.id))
            .order_by(SessionModel.start_time.asc().nulls_last(), SessionModel.id)
            .all()
        )


attendee = CRUDAttendee(Attendee)
