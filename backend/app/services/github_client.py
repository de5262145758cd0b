import json
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from app.core.config import (
    GITHUB_API_URL,
    GITHUB_HTTP_CONNECT_TIMEOUT,
    GITHUB_HTTP_TIMEOUT,
    GITHUB_USER_AGENT,
)
from app.schemas.github import RemoteEvent
from app.utils.rawjson import raw_member_values

DEFAULT_TIMEOUT = httpx.Timeout(GITHUB_HTTP_TIMEOUT, connect=GITHUB_HTTP_CONNECT_TIMEOUT)
API_VERSION = "2022-11-28"

_events_adapter = TypeAdapter(List[RemoteEvent])


class ListOptions(BaseModel):
    page: int = 0
    per_page: int = 0

    def to_params(self) -> Dict[str, int]:
        params: Dict[str, int] = {}
        if self.page:
            params["page"] = self.page
        if self.per_page:
            params["per_page"] = self.per_page
        return params


def decode_events(body: bytes) -> List[RemoteEvent]:
    """Decode an events page, keeping each payload as its raw JSON text."""
    text = body.decode("utf-8")
    events = _events_adapter.validate_python(json.loads(text))
    for event, raw_payload in zip(events, raw_member_values(text, "payload")):
        event.raw_payload = raw_payload
    return events


class GitHubClientError(Exception):
    """The request failed before a usable response was obtained."""

    def __init__(self, message: str, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response


def build_auth_headers(token: str, user_agent: str = GITHUB_USER_AGENT) -> Dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": API_VERSION,
        "User-Agent": user_agent,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


class GitHubClient:
    def __init__(
        self,
        token: str = "",
        base_url: str = GITHUB_API_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            headers=build_auth_headers(token),
            timeout=DEFAULT_TIMEOUT,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_events_performed_by_user(
        self,
        username: str,
        public_only: bool,
        opts: Optional[ListOptions] = None,
    ) -> Tuple[List[RemoteEvent], httpx.Response]:
        """
        List one page of events performed by ``username``.

        The response is returned open. On a 200 the body has already been
        decoded into events; otherwise it is left unread for the caller.
        Transport failures and undecodable bodies raise GitHubClientError.
        """
        path = f"/users/{quote(username, safe='')}/events"
        if public_only:
            path += "/public"
        params = (opts or ListOptions()).to_params()

        request = self._http.build_request("GET", path, params=params)
        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise GitHubClientError(f"GET {path}: {exc}") from exc

        if response.status_code != 200:
            return [], response

        # An undecodable 200 body is reported like a failed call, not as an internal error
        try:
            body = await response.aread()
            events = decode_events(body) if body else []
        except (httpx.HTTPError, ValueError) as exc:
            await response.aclose()
            raise GitHubClientError(f"GET {path}: {exc}", response) from exc
        except BaseException:
            await response.aclose()
            raise
        return events, response
