# app/crud/__init__.py

from .crud_attendee import attendee
from .crud_session import session
from .crud_speaker import speaker
