# app/web/api_client.py
"""
Async HTTP client for the Conference Planner back-end API.

Each method maps to one REST endpoint. The client adds no caching or
retries: a status the caller cannot act on raises ApiClientError so the
failure reaches the page instead of being hidden behind stale data.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx

from app.core.config import settings
from app.schemas.attendee import Attendee, AttendeeCreate
from app.schemas.search import SearchResult, SearchTerm
from app.schemas.session import Session
from app.schemas.speaker import Speaker, SpeakerDetail

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """The back-end could not be reached or answered with an unexpected status."""

    def __init__(
        self, method: str, url: str, status_code: Optional[int] = None, detail: str = ""
    ):
        if status_code is None:
            message = f"{method} {url} failed: {detail}"
        else:
            message = f"{method} {url} failed with HTTP {status_code}: {detail}"
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.detail = detail


class ApiClient:
    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    @classmethod
    def from_settings(cls, transport: Optional[httpx.AsyncBaseTransport] = None):
        base_url = settings.API_BASE_URL.rstrip("/") + "/"
        http_client = httpx.AsyncClient(
            base_url=base_url,
            timeout=settings.API_TIMEOUT_SECONDS,
            transport=transport,
        )
        return cls(http_client)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send one request; transport failures surface as ApiClientError."""
        try:
            return await self._http.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling back-end {method} {url}")
            raise ApiClientError(method, url, detail=f"timeout: {str(e)}") from e
        except httpx.HTTPError as e:
            logger.error(f"Back-end call {method} {url} failed: {str(e)}", exc_info=True)
            raise ApiClientError(method, url, detail=str(e)) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        request = response.request
        logger.error(
            f"Back-end call {request.method} {request.url} failed: HTTP {response.status_code}"
        )
        raise ApiClientError(
            request.method, str(request.url), response.status_code, response.text
        )

    # --- Attendees ---

    async def add_attendee(self, attendee: AttendeeCreate) -> bool:
        """Create the attendee. Returns False when the user name is already taken."""
        response = await self._request(
            "POST", "attendees", json=attendee.model_dump(mode="json")
        )
        if response.status_code == httpx.codes.CONFLICT:
            return False
        self._raise_for_status(response)
        return True

    async def get_attendee(self, name: str) -> Optional[Attendee]:
        if not name:
            return None
        response = await self._request("GET", f"attendees/{quote(name, safe='')}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        self._raise_for_status(response)
        return Attendee.model_validate(response.json())

    async def get_sessions_by_attendee(self, name: str) -> List[Session]:
        response = await self._request("GET", f"attendees/{quote(name, safe='')}/sessions")
        self._raise_for_status(response)
        return [Session.model_validate(item) for item in response.json()]

    async def add_session_to_attendee(self, name: str, session_id: int) -> bool:
        """Returns False when the attendee or the session does not exist."""
        response = await self._request(
            "POST", f"attendees/{quote(name, safe='')}/session/{session_id}"
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        self._raise_for_status(response)
        return True

    async def remove_session_from_attendee(self, name: str, session_id: int) -> None:
        response = await self._request(
            "DELETE", f"attendees/{quote(name, safe='')}/session/{session_id}"
        )
        self._raise_for_status(response)

    # --- Sessions ---

    async def get_sessions(self) -> List[Session]:
        response = await self._request("GET", "sessions")
        self._raise_for_status(response)
        return [Session.model_validate(item) for item in response.json()]

    async def get_session(self, session_id: int) -> Optional[Session]:
        response = await self._request("GET", f"sessions/{session_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        self._raise_for_status(response)
        return Session.model_validate(response.json())

    # --- Speakers ---

    async def get_speakers(self) -> List[Speaker]:
        response = await self._request("GET", "speakers")
        self._raise_for_status(response)
        return [Speaker.model_validate(item) for item in response.json()]

    async def get_speaker(self, speaker_id: int) -> Optional[SpeakerDetail]:
        response = await self._request("GET", f"speakers/{speaker_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        self._raise_for_status(response)
        return SpeakerDetail.model_validate(response.json())

    # --- Search ---

    async def search(self, query: str) -> SearchResult:
        response = await self._request(
            "POST", "search", json=SearchTerm(query=query).model_dump()
        )
        self._raise_for_status(response)
        return SearchResult.model_validate(response.json())
