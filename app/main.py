# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.api import api_router
from app.core.config import settings
from app.db.session import engine
from app.models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Conference Planner API starting up...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables checked and created if necessary.")
    yield
    logger.info("Conference Planner API shutting down...")


app = FastAPI(
    title="Conference Planner API",
    version="1.0.0",
    description="""
        **Conference Planner back-end**

        ## Features

        * **Sessions**: Browse and manage the conference schedule
        * **Speakers**: Speaker profiles and the sessions they present
        * **Attendees**: Sign-up and personal agendas
        * **Search**: Find sessions and speakers by keyword

        ## Authentication

        Session and speaker writes require a JWT via the
        `Authorization: Bearer <token>` header.
        """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/")
def read_root():
    return {"status": "Conference Planner API is running"}
