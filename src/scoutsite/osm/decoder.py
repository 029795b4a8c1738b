"""
Response body decoding for OSM endpoints.

The startup endpoint answers with a JavaScript assignment rather than bare
JSON::

    var data_holder = {"globals": {...}};

Older clients dropped the first 18 characters. We locate the first JSON
opener instead, so a change in the wrapper's length fails cleanly instead
of silently corrupting the payload.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import ErrorKind, OSMApiError

STARTUP_PATH_MARKER = "/generic/startup/"


def is_wrapped_endpoint(endpoint: str) -> bool:
    return STARTUP_PATH_MARKER in endpoint


def strip_js_wrapper(body: str) -> str:
    """Return the JSON portion of a ``var x = {...};`` body."""
    starts = [i for i in (body.find("{"), body.find("[")) if i >= 0]
    if not starts:
        raise ValueError("no JSON object found in wrapped response")

    payload = body[min(starts):].rstrip()
    if payload.endswith(";"):
        payload = payload[:-1]
    return payload


def decode_body(endpoint: str, body: str) -> Any:
    """
    Parse a raw response body for ``endpoint``.

    Raises:
        OSMApiError: kind DECODE when the body is not valid JSON.
    """
    try:
        text = strip_js_wrapper(body) if is_wrapped_endpoint(endpoint) else body
        return json.loads(text)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError subclass
        raise OSMApiError(
            f"Invalid JSON returned from {endpoint}: {e}",
            kind=ErrorKind.DECODE,
        ) from e
