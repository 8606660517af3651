# app/web/deps.py
from fastapi import Request

from app.web.agenda import AgendaService
from app.web.api_client import ApiClient


def get_api_client(request: Request) -> ApiClient:
    """The shared client opened in the application lifespan."""
    return request.app.state.api_client


def get_agenda_service(request: Request) -> AgendaService:
    return AgendaService(get_api_client(request))
