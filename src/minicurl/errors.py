"""
Error taxonomy for minicurl.

Every failure a single invocation can hit is one of these exceptions. The
command line prints ``message`` to stderr and exits with ``exit_code``.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class MinicurlError(Exception):
    """Base exception for minicurl errors."""

    exit_code = 1
    # Data-integrity conditions (bad JSON in or out) are reported as fatal.
    fatal = False
    default_message = "Request failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# =============================================================================
# URL validation
# =============================================================================

class UrlValidationError(MinicurlError):
    """The URL was rejected before any request was made."""
    exit_code = 2


class InvalidIPv6(UrlValidationError):
    default_message = "The URL contains an invalid IPv6 address."


class InvalidIPv4(UrlValidationError):
    default_message = "The URL contains an invalid IPv4 address."


class InvalidPort(UrlValidationError):
    default_message = "The URL contains an invalid port number."


class InvalidProtocol(UrlValidationError):
    default_message = "The URL does not have a valid base protocol."


# =============================================================================
# Request input
# =============================================================================

class RequestInputError(MinicurlError):
    """The method/body options cannot be turned into a request."""
    exit_code = 2


class MalformedJsonInput(RequestInputError):
    fatal = True
    default_message = "Invalid JSON."


class ConflictingBodyOptions(RequestInputError):
    default_message = "Use either -d or --json, not both."


class UnsupportedMethod(RequestInputError):
    default_message = "Unsupported HTTP method."


# =============================================================================
# Transport and response
# =============================================================================

class NetworkError(MinicurlError):
    """No response was received (resolution, connection or timeout failure)."""
    exit_code = 3
    default_message = (
        "Unable to connect to the server. Perhaps the network is offline "
        "or the server hostname cannot be resolved."
    )

    def __init__(self, message: str | None = None, reason: str | None = None):
        super().__init__(message)
        self.reason = reason


class HttpError(MinicurlError):
    """The server answered with a non-2xx status."""
    exit_code = 4

    def __init__(self, status_code: int, body_snippet: str | None = None):
        super().__init__(f"Request failed with status code: {status_code}")
        self.status_code = status_code
        self.body_snippet = body_snippet


class MalformedJsonResponse(MinicurlError):
    """The response claims to be JSON but does not parse."""
    exit_code = 5
    fatal = True
    default_message = "Response declared JSON but the body is not valid JSON."
