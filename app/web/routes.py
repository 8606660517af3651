# app/web/routes.py
"""
Front-end site routes.

Pages return JSON view models; form submissions answer with 303 redirects
the way a browser-facing page would.
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from app.api import deps
from app.core.config import settings
from app.schemas.attendee import AttendeeCreate, AttendeeProfile
from app.schemas.search import SearchResult
from app.schemas.speaker import Speaker, SpeakerDetail
from app.schemas.token import TokenPayload
from app.web.agenda import AgendaService, group_by_day, is_in_agenda, next_action
from app.web.api_client import ApiClient
from app.web.deps import get_agenda_service, get_api_client
from app.web.schemas import (
    AgendaView,
    DaySessions,
    IdentityView,
    IndexView,
    SessionView,
    WelcomeView,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MY_AGENDA_PATH = "/my-agenda"


@router.get("/", response_model=IndexView)
async def index(
    api_client: ApiClient = Depends(get_api_client),
    agenda: AgendaService = Depends(get_agenda_service),
    current_user: Optional[TokenPayload] = Depends(deps.get_current_user_optional),
):
    """The conference schedule grouped by day, with the caller's agenda marked."""
    user_name = current_user.sub if current_user else None
    sessions, registered = await asyncio.gather(
        api_client.get_sessions(), agenda.get_registered_ids(user_name)
    )
    return IndexView(
        days=[
            DaySessions(day=day, sessions=day_sessions)
            for day, day_sessions in group_by_day(sessions).items()
        ],
        user_session_ids=sorted(registered),
    )


@router.get("/sessions/{session_id}", response_model=SessionView)
async def session_detail(
    session_id: int,
    api_client: ApiClient = Depends(get_api_client),
    agenda: AgendaService = Depends(get_agenda_service),
    current_user: Optional[TokenPayload] = Depends(deps.get_current_user_optional),
):
    session = await api_client.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    if current_user is None:
        return SessionView(session=session)

    registered = await agenda.get_registered_ids(current_user.sub)
    return SessionView(
        session=session,
        is_in_personal_agenda=is_in_agenda(session.id, registered),
        next_action=next_action(session.id, registered),
    )


@router.get("/speakers", response_model=List[Speaker])
async def speakers(api_client: ApiClient = Depends(get_api_client)):
    return await api_client.get_speakers()


@router.get("/speakers/{speaker_id}", response_model=SpeakerDetail)
async def speaker_detail(
    speaker_id: int, api_client: ApiClient = Depends(get_api_client)
):
    speaker = await api_client.get_speaker(speaker_id)
    if speaker is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Speaker not found"
        )
    return speaker


@router.get("/search", response_model=SearchResult)
async def search(term: str = "", api_client: ApiClient = Depends(get_api_client)):
    if not term.strip():
        return SearchResult()
    return await api_client.search(term.strip())


# --- Personal agenda ---


@router.get(MY_AGENDA_PATH, response_model=AgendaView)
async def my_agenda(
    agenda: AgendaService = Depends(get_agenda_service),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    sessions = await agenda.get_agenda(current_user.sub)
    return AgendaView(user_name=current_user.sub, sessions=sessions)


@router.post(MY_AGENDA_PATH + "/{session_id}")
async def add_to_agenda(
    session_id: int,
    agenda: AgendaService = Depends(get_agenda_service),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    if not await agenda.add(current_user.sub, session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    return RedirectResponse(MY_AGENDA_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.delete(MY_AGENDA_PATH + "/{session_id}")
async def remove_from_agenda(
    session_id: int,
    agenda: AgendaService = Depends(get_agenda_service),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    await agenda.remove(current_user.sub, session_id)
    return RedirectResponse(MY_AGENDA_PATH, status_code=status.HTTP_303_SEE_OTHER)


# --- Sign-up ---


@router.get(settings.WELCOME_PATH, response_model=WelcomeView)
async def welcome(
    api_client: ApiClient = Depends(get_api_client),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """The sign-up form, prefilled with the identity provider's user name."""
    if await api_client.get_attendee(current_user.sub) is not None:
        return RedirectResponse(settings.HOME_PATH, status_code=status.HTTP_303_SEE_OTHER)
    return WelcomeView(user_name=current_user.sub)


@router.post(settings.WELCOME_PATH)
async def sign_up(
    profile: AttendeeProfile,
    api_client: ApiClient = Depends(get_api_client),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """
    Create the attendee record for the signed-in user.

    The user name always comes from the token, never from the form.
    """
    attendee = AttendeeCreate(user_name=current_user.sub, **profile.model_dump())
    if not await api_client.add_attendee(attendee):
        logger.warning(f"Sign-up conflict for user {current_user.sub}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An attendee with this user name already exists.",
        )
    logger.info(f"User {current_user.sub} signed up")
    return RedirectResponse(settings.HOME_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/login", response_model=IdentityView)
def login(current_user: Optional[TokenPayload] = Depends(deps.get_current_user_optional)):
    """Identity is issued by the external provider; this only reports it."""
    if current_user is None:
        return IdentityView()
    return IdentityView(user_name=current_user.sub, is_authenticated=True)


@router.get("/logout", response_model=IdentityView)
def logout():
    return IdentityView()
