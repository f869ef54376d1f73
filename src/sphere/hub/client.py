"""HTTP transport used to talk to the sphere registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from sphere import __version__
from sphere.constants.hub import DEFAULT_HTTP_TIMEOUT_SECONDS
from sphere.exceptions import NetworkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Status and raw body of a completed HTTP request."""

    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPClient(Protocol):
    """Anything able to perform a bounded GET request."""

    def get(self, url: str) -> HTTPResponse: ...


class UrllibHTTPClient:
    """GET requests over ``urllib`` with a fixed timeout."""

    def __init__(self, timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout
        self._headers = {"User-Agent": f"sphere/{__version__}"}

    def get(self, url: str) -> HTTPResponse:
        logger.debug("GET %s", url)
        request = Request(url, method="GET", headers=self._headers)
        try:
            with urlopen(request, timeout=self._timeout) as response:  # noqa: S310 (registry URL is https-only)
                return HTTPResponse(status=int(response.getcode() or 0), body=response.read())
        except HTTPError as exc:
            return HTTPResponse(status=int(exc.code), body=exc.read() or b"")
        except (URLError, TimeoutError, OSError) as exc:
            reason = getattr(exc, "reason", exc)
            raise NetworkError(url, str(reason)) from exc
