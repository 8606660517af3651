# app/web/agenda.py
"""
Personal agenda workflow for signed-up attendees.

For a single (attendee, session) pair there are two states, REGISTERED and
NOT_REGISTERED. ``add`` moves to REGISTERED and ``remove`` moves to
NOT_REGISTERED; repeating either is a no-op.
"""

import asyncio
import enum
import logging
from collections import OrderedDict
from datetime import date
from typing import Dict, Iterable, List, Optional, Set

from app.schemas.session import Session

logger = logging.getLogger(__name__)


class AgendaState(str, enum.Enum):
    REGISTERED = "registered"
    NOT_REGISTERED = "not_registered"


class AgendaAction(str, enum.Enum):
    ADD = "add"
    REMOVE = "remove"


_TRANSITIONS = {
    (AgendaState.NOT_REGISTERED, AgendaAction.ADD): AgendaState.REGISTERED,
    (AgendaState.REGISTERED, AgendaAction.ADD): AgendaState.REGISTERED,
    (AgendaState.REGISTERED, AgendaAction.REMOVE): AgendaState.NOT_REGISTERED,
    (AgendaState.NOT_REGISTERED, AgendaAction.REMOVE): AgendaState.NOT_REGISTERED,
}


def transition(state: AgendaState, action: AgendaAction) -> AgendaState:
    return _TRANSITIONS[(state, action)]


def is_in_agenda(session_id: int, registered_ids: Iterable[int]) -> bool:
    return session_id in set(registered_ids)


def next_action(session_id: int, registered_ids: Iterable[int]) -> AgendaAction:
    """The affordance to offer next for a session: remove it if present, else add it."""
    if is_in_agenda(session_id, registered_ids):
        return AgendaAction.REMOVE
    return AgendaAction.ADD


def group_by_day(sessions: Iterable[Session]) -> Dict[Optional[date], List[Session]]:
    """
    Group sessions by calendar day of their start time.

    Days come out in chronological order and sessions within a day are
    sorted by start time; unscheduled sessions are collected under ``None``
    at the end.
    """
    sessions = list(sessions)
    scheduled = sorted(
        (s for s in sessions if s.start_time is not None),
        key=lambda s: (s.start_time, s.id),
    )
    unscheduled = [s for s in sessions if s.start_time is None]

    days: Dict[Optional[date], List[Session]] = OrderedDict()
    for session in scheduled:
        days.setdefault(session.start_time.date(), []).append(session)
    if unscheduled:
        days[None] = unscheduled
    return days


class AgendaService:
    def __init__(self, api_client):
        self._api_client = api_client

    async def get_registered_ids(self, user_name: Optional[str]) -> Set[int]:
        if not user_name:
            return set()
        attendee = await self._api_client.get_attendee(user_name)
        if attendee is None:
            return set()
        return set(attendee.session_ids)

    async def get_agenda(self, user_name: str) -> List[Session]:
        """
        Sessions on the attendee's agenda, in the order of the full session list.

        An unknown attendee has an empty agenda.
        """
        sessions, attendee = await asyncio.gather(
            self._api_client.get_sessions(),
            self._api_client.get_attendee(user_name),
        )
        if attendee is None:
            return []
        registered = set(attendee.session_ids)
        return [s for s in sessions if s.id in registered]

    async def add(self, user_name: str, session_id: int) -> bool:
        """Returns False when the session (or the attendee) does not exist."""
        if not await self._api_client.add_session_to_attendee(user_name, session_id):
            logger.warning(f"Session {session_id} not found for agenda of {user_name}")
            return False
        logger.info(f"Session {session_id} added to agenda of {user_name}")
        return True

    async def remove(self, user_name: str, session_id: int) -> None:
        await self._api_client.remove_session_from_attendee(user_name, session_id)
        logger.info(f"Session {session_id} removed from agenda of {user_name}")
