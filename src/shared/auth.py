"""
Shared-secret check for the write routes.

Clients send the operator-configured secret in a header:

    X-Admin-Token: <secret>

The header name is matched case-insensitively; the value must match exactly.
"""

import hmac

from fastapi import Depends

from shared.config import get_settings
from shared.errors import AuthError, ConfigurationError
from shared.log import get_logger
from shared.request import NormalizedRequest, get_normalized_request

ADMIN_HEADER = "X-Admin-Token"

logger = get_logger(component="auth")


def check_admin(req: NormalizedRequest, secret: str | None) -> None:
    if not secret:
        logger.error("config.missing", key="ADMIN_TOKEN")
        raise ConfigurationError(error="ADMIN_TOKEN is missing")

    token = req.header(ADMIN_HEADER)
    if not hmac.compare_digest(token.encode("utf-8"), secret.encode("utf-8")):
        logger.warning("auth.rejected", header_present=bool(token))
        raise AuthError()


def require_admin(req: NormalizedRequest = Depends(get_normalized_request)) -> None:
    """Dependency injected into every mutating route."""
    check_admin(req, get_settings().admin_token)
