"""Canonical view of an inbound request.

Mangum turns the API Gateway event (REST v1 or HTTP API v2) into an ASGI
scope; everything downstream reads from the NormalizedRequest built here
instead of poking at the raw request per field.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from fastapi import Request


@dataclass(frozen=True)
class NormalizedRequest:
    method: str
    path: str
    origin: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)  # lowercase keys
    query: Mapping[str, str] = field(default_factory=dict)
    raw_body: bytes = b""

    def header(self, name: str, default: str = "") -> str:
        return self.headers.get(name.lower(), default)

    @property
    def body(self) -> Optional[str]:
        """Strict UTF-8; raises UnicodeDecodeError rather than substituting characters."""
        return self.raw_body.decode("utf-8") if self.raw_body else None


def normalize(request: Request, body: bytes | None = None) -> NormalizedRequest:
    headers = {k.lower(): v for k, v in request.headers.items()}
    return NormalizedRequest(
        method=request.method.upper(),
        path=request.url.path or "/",
        origin=headers.get("origin", ""),
        headers=headers,
        query=dict(request.query_params),
        raw_body=body or b"",
    )


async def get_normalized_request(request: Request) -> NormalizedRequest:
    """FastAPI dependency: normalize once per request, body included."""
    return normalize(request, await request.body())


def request_id(request: Request) -> str | None:
    """Lambda request id when running under Mangum."""
    context = request.scope.get("aws.context")
    return getattr(context, "aws_request_id", None)
