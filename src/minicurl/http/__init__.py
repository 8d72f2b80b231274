"""
HTTP request/response module.

Builds requests from command-line intent, sends them over httpx and
renders the responses.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from minicurl.http.request import (
    BodyKind,
    RequestSpec,
    build_request,
    parse_form_pairs,
)
from minicurl.http.client import (
    HTTPClient,
    HTTPResponse,
    send_request,
)
from minicurl.http.render import (
    OutcomeKind,
    RenderedBody,
    classify,
    format_json,
    render,
)

__all__ = [
    "BodyKind",
    "RequestSpec",
    "build_request",
    "parse_form_pairs",
    "HTTPClient",
    "HTTPResponse",
    "send_request",
    "OutcomeKind",
    "RenderedBody",
    "classify",
    "format_json",
    "render",
]
