# app/web/gate.py
"""
Sign-up gate for the front-end site.

Anonymous visitors may browse freely. An authenticated caller who has no
attendee record yet is redirected to the welcome page until they sign up,
except on the exempt paths (login, logout and the welcome page itself).
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse

from app.core.security import user_name_from_authorization
from app.web.api_client import ApiClientError

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Canonical form used for comparisons: case-folded, no trailing slash."""
    normalized = path.casefold().rstrip("/")
    return normalized or "/"


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    redirect_to: Optional[str] = None


class SignUpGate:
    def __init__(self, api_client, exempt_paths: Iterable[str], welcome_path: str):
        self._api_client = api_client
        self._welcome_path = welcome_path
        # The welcome page is always exempt, otherwise the redirect would loop.
        # Maps the comparison form of each exempt path to its configured spelling.
        self._exempt = {normalize_path(p): p for p in exempt_paths}
        self._exempt[normalize_path(welcome_path)] = welcome_path

    def is_exempt(self, path: str) -> bool:
        return normalize_path(path) in self._exempt

    def canonical_path(self, path: str) -> Optional[str]:
        """The configured spelling of an exempt path, or None if it is not exempt."""
        return self._exempt.get(normalize_path(path))

    async def decide(self, user_name: Optional[str], path: str) -> GateDecision:
        if not user_name:
            return GateDecision(allowed=True)
        if self.is_exempt(path):
            return GateDecision(allowed=True)

        attendee = await self._api_client.get_attendee(user_name)
        if attendee is None:
            logger.warning(
                f"User {user_name} has not signed up; redirecting {path} to {self._welcome_path}"
            )
            return GateDecision(allowed=False, redirect_to=self._welcome_path)
        return GateDecision(allowed=True)


class RequireSignUpMiddleware(BaseHTTPMiddleware):
    """Applies the SignUpGate built on ``app.state.signup_gate`` to every request."""

    async def dispatch(self, request: Request, call_next):
        gate: SignUpGate = request.app.state.signup_gate
        user_name = user_name_from_authorization(request.headers.get("authorization"))
        try:
            decision = await gate.decide(user_name, request.url.path)
        except ApiClientError as e:
            logger.error(f"Sign-up check failed for user {user_name}: {e}", exc_info=True)
            return JSONResponse(
                status_code=502, content={"detail": "Conference API unavailable"}
            )
        if not decision.allowed:
            return RedirectResponse(decision.redirect_to, status_code=303)

        # Routing is case-sensitive; serve exempt pages under any casing.
        canonical = gate.canonical_path(request.url.path)
        if canonical is not None and canonical != request.url.path:
            request.scope["path"] = canonical
        return await call_next(request)
