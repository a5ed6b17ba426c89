"""CORS policy: one fixed header set, the allow-origin chosen per request."""

from typing import Sequence

ALLOW_METHODS = "GET,POST,DELETE,OPTIONS"
ALLOW_HEADERS = "Content-Type,X-Admin-Token"
MAX_AGE_SECONDS = 600


def allow_origin(origin: str, allowed: Sequence[str]) -> str:
    """
    Pick the Access-Control-Allow-Origin value.

    An empty allow-list echoes the caller's origin. A non-matching origin gets
    the first configured origin rather than a rejection; the browser then
    refuses the response on its own.
    """
    if not allowed or origin in allowed:
        return origin
    return allowed[0] or "*"


def cors_headers(origin: str, allowed: Sequence[str]) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin(origin, allowed),
        "Vary": "Origin",
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Max-Age": str(MAX_AGE_SECONDS),
    }
