"""HTTP GET capability used by the acquisition pipeline."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from wtr.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "wtr/0.1.0"


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: bytes


class HttpClient(Protocol):
    def get(self, url: str) -> HttpResponse: ...


class HttpxClient:
    """Single-attempt GET over httpx. Redirects are followed."""

    def __init__(self, timeout: float = 30.0, user_agent: str = DEFAULT_USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent

    def get(self, url: str) -> HttpResponse:
        headers = {"User-Agent": self.user_agent}
        try:
            resp = httpx.get(
                url, headers=headers, timeout=self.timeout, follow_redirects=True
            )
        except httpx.RequestError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e
        return HttpResponse(status_code=resp.status_code, body=resp.content)
