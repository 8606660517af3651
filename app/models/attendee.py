# app/models/attendee.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.base_class import Base
from app.models.session_attendee import session_attendee_association


class Attendee(Base):
    __tablename__ = "attendees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(200), nullable=False)
    last_name = Column(String(200), nullable=False)
    # Supplied by the identity provider; unique and never changed after sign-up.
    user_name = Column(String(200), nullable=False, unique=True, index=True)
    email_address = Column(String(256), nullable=False)

    sessions = relationship(
        "Session", secondary=session_attendee_association, back_populates="attendees"
    )

    @property
    def session_ids(self):
        return [s.id for s in self.sessions]
