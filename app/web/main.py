# app/web/main.py
import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.web.api_client import ApiClient, ApiClientError
from app.web.gate import RequireSignUpMiddleware, SignUpGate
from app.web.routes import router

logger = logging.getLogger(__name__)


def create_app(api_client_factory: Callable[[], ApiClient] = ApiClient.from_settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Conference Planner site starting up...")
        api_client = api_client_factory()
        app.state.api_client = api_client
        app.state.signup_gate = SignUpGate(
            api_client,
            exempt_paths=settings.SIGNUP_EXEMPT_PATHS,
            welcome_path=settings.WELCOME_PATH,
        )
        yield
        await api_client.aclose()
        logger.info("Conference Planner site shutting down...")

    app = FastAPI(title="Conference Planner", version="1.0.0", lifespan=lifespan)
    app.add_middleware(RequireSignUpMiddleware)

    @app.exception_handler(ApiClientError)
    async def api_client_error_handler(request: Request, exc: ApiClientError):
        logger.error(f"Back-end call failed while serving {request.url.path}: {exc}")
        return JSONResponse(
            status_code=502, content={"detail": "Conference API unavailable"}
        )

    app.include_router(router)
    return app


app = create_app()
