# app/web/schemas.py
"""View models returned by the front-end routes."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from app.schemas.session import Session
from app.web.agenda import AgendaAction


class DaySessions(BaseModel):
    day: Optional[date] = None
    sessions: List[Session] = []


class IndexView(BaseModel):
    days: List[DaySessions] = []
    user_session_ids: List[int] = []


class SessionView(BaseModel):
    session: Session
    is_in_personal_agenda: bool = False
    next_action: Optional[AgendaAction] = None


class AgendaView(BaseModel):
    user_name: str
    sessions: List[Session] = []


class WelcomeView(BaseModel):
    user_name: str
    first_name: str = ""
    last_name: str = ""
    email_address: str = ""


class IdentityView(BaseModel):
    user_name: Optional[str] = None
    is_authenticated: bool = False
