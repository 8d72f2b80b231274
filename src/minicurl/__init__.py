"""
minicurl - A small, strict command-line HTTP client

Issues GET/POST requests after validating the target URL more strictly
than a generic URL parser would, and renders responses legibly
(JSON pretty-printed with sorted keys, everything else verbatim).

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
