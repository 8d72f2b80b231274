"""
Response rendering.

Classifies a completed response and produces the bytes to print: JSON is
re-serialized with sorted keys, anything else is passed through untouched.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from minicurl.errors import HttpError, MalformedJsonResponse
from minicurl.http.client import HTTPResponse

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 200

_NOT_JSON = object()


class OutcomeKind(Enum):
    SUCCESS_JSON = "success_json"
    SUCCESS_TEXT = "success_text"
    HTTP_ERROR = "http_error"


@dataclass
class RenderedBody:
    """Output for a successful response."""
    kind: OutcomeKind
    data: bytes

    @property
    def is_json(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS_JSON


def format_json(data: Any, indent: int = 2) -> str:
    """Format JSON data for display, keys sorted at every level."""
    return json.dumps(data, indent=indent, sort_keys=True, ensure_ascii=False)


def _parse_body(response: HTTPResponse) -> Any:
    """Parsed JSON body, or _NOT_JSON. Raises if the body was declared JSON."""
    body = response.body_bytes.strip()
    if not body:
        return _NOT_JSON
    # Undeclared bodies are only sniffed when they look like an object or array
    if not response.is_json and body[:1] not in (b"{", b"["):
        return _NOT_JSON

    try:
        return json.loads(response.text)
    except ValueError as e:
        if response.is_json:
            raise MalformedJsonResponse(
                f"Response declared JSON ({response.content_type}) "
                f"but the body is not valid JSON: {e}"
            ) from e
        return _NOT_JSON


def classify(response: HTTPResponse) -> OutcomeKind:
    """Classify a response without rendering it."""
    if not response.is_success:
        return OutcomeKind.HTTP_ERROR
    if _parse_body(response) is _NOT_JSON:
        return OutcomeKind.SUCCESS_TEXT
    return OutcomeKind.SUCCESS_JSON


def body_snippet(response: HTTPResponse) -> str | None:
    text = response.text.strip()
    if not text:
        return None
    return text[:SNIPPET_LENGTH]


def render(response: HTTPResponse) -> RenderedBody:
    """
    Render a response for stdout.

    Raises:
        HttpError: status is not 2xx
        MalformedJsonResponse: content type says JSON, body does not parse
    """
    if not response.is_success:
        raise HttpError(response.status_code, body_snippet(response))

    parsed = _parse_body(response)
    if parsed is _NOT_JSON:
        return RenderedBody(kind=OutcomeKind.SUCCESS_TEXT, data=response.body_bytes)

    logger.debug("Rendering %d bytes of JSON", response.content_length)
    return RenderedBody(
        kind=OutcomeKind.SUCCESS_JSON,
        data=format_json(parsed).encode("utf-8"),
    )
