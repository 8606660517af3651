# app/models/session_speaker.py
from sqlalchemy import Table, Column, Integer, ForeignKey
from app.db.base_class import Base

# Association table between sessions and the speakers presenting them.
session_speaker_association = Table(
    "session_speaker_association",
    Base.metadata,
    Column("session_id", Integer, ForeignKey("sessions.id", ondelete="CASCADE"), primary_key=True),
    Column("speaker_id", Integer, ForeignKey("speakers.id", ondelete="CASCADE"), primary_key=True),
)
