# tests/utils/attendee.py
from sqlalchemy.orm import Session

from app.crud import crud_attendee
from app.models.attendee import Attendee
from app.schemas.attendee import AttendeeCreate


def create_attendee(db: Session, user_name: str = "ada") -> Attendee:
    attendee_in = AttendeeCreate(
        first_name="Ada",
        last_name="Lovelace",
        email_address=f"{user_name}@example.com",
        user_name=user_name,
    )
    return crud_attendee.attendee.create(db, obj_in=attendee_in)
