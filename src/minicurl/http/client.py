"""
HTTP transport.

Thin wrapper over httpx. Any completed response is returned as-is, whatever
its status; only failures to get a response at all become NetworkError.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import time
from dataclasses import dataclass, field

import httpx

from minicurl.config import ClientConfig, get_config
from minicurl.errors import InvalidProtocol, NetworkError
from minicurl.http.request import RequestSpec

logger = logging.getLogger(__name__)


@dataclass
class HTTPResponse:
    """HTTP response details."""
    status_code: int
    reason: str
    body_bytes: bytes
    text: str
    url: str
    elapsed_ms: float = 0.0
    headers: dict[str, str] = field(default_factory=dict)
    content_type: str | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def is_json(self) -> bool:
        ct = self.content_type or ""
        return "json" in ct.lower()

    @property
    def content_length(self) -> int:
        return len(self.body_bytes)


class HTTPClient:
    """
    Synchronous HTTP client for a single invocation.

    Usage:
        with HTTPClient() as client:
            response = client.send(spec)
    """

    def __init__(self, config: ClientConfig | None = None, transport: httpx.BaseTransport | None = None):
        self.config = config or get_config()
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.config.timeout),
                verify=self.config.verify_ssl,
                follow_redirects=self.config.follow_redirects,
                max_redirects=self.config.max_redirects,
                headers={"User-Agent": self.config.user_agent},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def send(self, spec: RequestSpec) -> HTTPResponse:
        """
        Send a request and return the response.

        Raises:
            NetworkError: DNS, connection, TLS or timeout failure
            InvalidProtocol: httpx could not build a request for the URL
        """
        client = self._get_client()
        logger.info("%s %s", spec.method, spec.url)
        start_time = time.time()

        try:
            response = client.request(
                method=spec.method,
                url=str(spec.url),
                headers=spec.headers,
                content=spec.content,
            )
        except httpx.InvalidURL as e:
            logger.debug("httpx rejected URL %s: %s", spec.url, e)
            raise InvalidProtocol() from e
        except httpx.TimeoutException as e:
            reason = f"Request timed out after {self.config.timeout}s"
            logger.debug(reason)
            raise NetworkError(reason=reason) from e
        except httpx.RequestError as e:
            reason = f"{type(e).__name__}: {e}"
            logger.debug("Request to %s failed: %s", spec.url, reason)
            raise NetworkError(reason=reason) from e

        elapsed_ms = (time.time() - start_time) * 1000
        logger.info("%s %s (%.0fms)", response.status_code, response.reason_phrase, elapsed_ms)

        return HTTPResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body_bytes=response.content,
            text=response.text,
            url=str(response.url),
            elapsed_ms=elapsed_ms,
            headers=dict(response.headers),
            content_type=response.headers.get("content-type"),
        )


def send_request(spec: RequestSpec, config: ClientConfig | None = None) -> HTTPResponse:
    """Send one request on a fresh client and release it afterwards."""
    with HTTPClient(config) as client:
        return client.send(spec)
