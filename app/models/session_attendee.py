# app/models/session_attendee.py
"""
Association table backing each attendee's personal agenda.

The composite primary key makes every (session, attendee) pair either
present or absent; there is no ordering and no metadata on the edge.
"""

from sqlalchemy import Table, Column, Integer, ForeignKey
from app.db.base_class import Base

session_attendee_association = Table(
    "session_attendees",
    Base.metadata,
    Column("session_id", Integer, ForeignKey("sessions.id", ondelete="CASCADE"), primary_key=True),
    Column("attendee_id", Integer, ForeignKey("attendees.id", ondelete="CASCADE"), primary_key=True),
)
