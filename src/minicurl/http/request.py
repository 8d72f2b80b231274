"""
Request building.

Turns a validated URL plus the -X / -d / --json options into a
transport-ready RequestSpec. No network I/O happens here.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from urllib.parse import parse_qsl, urlencode

from minicurl.errors import (
    ConflictingBodyOptions,
    MalformedJsonInput,
    UnsupportedMethod,
)
from minicurl.url.validator import ValidatedUrl

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class BodyKind(Enum):
    NONE = "none"
    FORM = "form"
    JSON = "json"


@dataclass(frozen=True)
class RequestSpec:
    """HTTP request ready to hand to the transport."""
    method: str
    url: ValidatedUrl
    body_kind: BodyKind = BodyKind.NONE
    form_pairs: tuple[tuple[str, str], ...] = ()
    json_payload: str | None = None

    @property
    def content_type(self) -> str | None:
        if self.body_kind is BodyKind.FORM:
            return FORM_CONTENT_TYPE
        if self.body_kind is BodyKind.JSON:
            return JSON_CONTENT_TYPE
        return None

    @property
    def headers(self) -> dict[str, str]:
        if self.content_type:
            return {"Content-Type": self.content_type}
        return {}

    @property
    def content(self) -> bytes | None:
        """Encoded request body."""
        if self.body_kind is BodyKind.FORM:
            return urlencode(self.form_pairs).encode("ascii")
        if self.body_kind is BodyKind.JSON:
            return self.json_payload.encode("utf-8")
        return None


def parse_form_pairs(data: str) -> list[tuple[str, str]]:
    """Parse 'key1=value1&key2=value2' into ordered, decoded pairs.

    Values already percent- or plus-encoded are decoded here so that
    re-encoding on send does not double-encode them. Blank values are kept
    and a token without '=' becomes (token, "").
    """
    return parse_qsl(data, keep_blank_values=True)


def check_json(payload: str) -> str:
    """Return the payload unchanged if it is well-formed JSON."""
    try:
        json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedJsonInput(f"Invalid JSON: {e}") from e
    return payload


def resolve_method(
    method: str | None,
    data: str | None,
    json_data: str | None,
) -> tuple[str, BodyKind]:
    """
    Decide the request method and body kind.

    Precedence, first match wins:

        --json and -d         -> error
        --json                -> POST, JSON body (overrides -X)
        -d starting with '{'  -> POST, JSON body
        -d                    -> POST, form body
        -X GET|POST           -> that method, no body
        -X anything else      -> error
    """
    if json_data is not None and data is not None:
        raise ConflictingBodyOptions()
    if json_data is not None:
        return "POST", BodyKind.JSON
    if data is not None:
        if data.lstrip().startswith("{"):
            return "POST", BodyKind.JSON
        return "POST", BodyKind.FORM

    method = (method or "GET").upper()
    if method not in SUPPORTED_METHODS:
        raise UnsupportedMethod()
    return method, BodyKind.NONE


def build_request(
    url: ValidatedUrl,
    method: str | None = "GET",
    data: str | None = None,
    json_data: str | None = None,
) -> RequestSpec:
    """
    Build a RequestSpec from command-line intent.

    Args:
        url: Result of validate_url()
        method: Value of -X (ignored when a body is given)
        data: Value of -d, form data or a JSON object
        json_data: Value of --json

    Raises:
        ConflictingBodyOptions, MalformedJsonInput, UnsupportedMethod
    """
    resolved, body_kind = resolve_method(method, data, json_data)

    if method and method.upper() != resolved:
        logger.info("Method %s overridden to %s by request body", method.upper(), resolved)

    if body_kind is BodyKind.JSON:
        payload = check_json(json_data if json_data is not None else data)
        return RequestSpec(
            method=resolved,
            url=url,
            body_kind=body_kind,
            json_payload=payload,
        )

    if body_kind is BodyKind.FORM:
        return RequestSpec(
            method=resolved,
            url=url,
            body_kind=body_kind,
            form_pairs=tuple(parse_form_pairs(data)),
        )

    return RequestSpec(method=resolved, url=url)
