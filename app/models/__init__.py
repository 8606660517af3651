# app/models/__init__.py
# Import all models to ensure SQLAlchemy can resolve relationships

from app.db.base_class import Base
from app.models.session_speaker import session_speaker_association
from app.models.session_attendee import session_attendee_association
from app.models.speaker import Speaker
from app.models.session import Session
from app.models.attendee import Attendee
