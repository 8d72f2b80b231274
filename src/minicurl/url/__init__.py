"""
URL validation module.

Checks raw URLs for malformed IP literals, out-of-range ports and
unsupported schemes before any request is made.
"""

from minicurl.url.validator import (
    SUPPORTED_SCHEMES,
    ValidatedUrl,
    validate_url,
)

__all__ = [
    "SUPPORTED_SCHEMES",
    "ValidatedUrl",
    "validate_url",
]
