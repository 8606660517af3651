# app/api/v1/api.py

from fastapi import APIRouter
from app.api.v1.endpoints import (
    attendees,
    sessions,
    speakers,
    search,
    health,
)

# This is the main router for the API.
api_router = APIRouter()

api_router.include_router(attendees.router)
api_router.include_router(sessions.router)
api_router.include_router(speakers.router)
api_router.include_router(search.router)
api_router.include_router(health.router)
