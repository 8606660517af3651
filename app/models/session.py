# app/models/session.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from app.db.base_class import Base
from app.models.session_speaker import session_speaker_association
from app.models.session_attendee import session_attendee_association


class Session(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    abstract = Column(Text, nullable=True)
    start_time = Column(DateTime(timezone=True), nullable=True, index=True)
    end_time = Column(DateTime(timezone=True), nullable=True)
    track = Column(String(200), nullable=True)

    # Relationships
    speakers = relationship(
        "Speaker", secondary=session_speaker_association, back_populates="sessions"
    )
    attendees = relationship(
        "Attendee", secondary=session_attendee_association, back_populates="sessions"
    )
