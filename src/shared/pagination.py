"""Page size clamping and the opaque nextToken cursor.

A token is base64(JSON(LastEvaluatedKey)). Tokens come back from clients, so
decoding validates the shape before the key is handed to DynamoDB.
"""

import base64
import binascii
import json
import re

from shared.errors import ValidationError

DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 50

KEY_FIELD = "postID"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_limit(raw: str | None) -> int:
    """
    Read the leading integer of raw ("2.5" -> 2, "5abc" -> 5).

    Absent, non-numeric and zero fall back to the default; the rest is clamped.
    """
    match = _LEADING_INT.match(raw or "")
    if not match:
        return DEFAULT_LIMIT
    limit = int(match.group(1))
    if limit == 0:
        return DEFAULT_LIMIT
    return min(max(limit, MIN_LIMIT), MAX_LIMIT)


def encode_token(resume_key: dict | None) -> str | None:
    if not resume_key:
        return None
    return base64.b64encode(json.dumps(resume_key).encode("utf-8")).decode("ascii")


def decode_token(token: str | None) -> dict | None:
    if not token:
        return None
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
        resume_key = json.loads(decoded)
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise ValidationError("Invalid nextToken")

    # Exactly the table key, non-empty; DynamoDB rejects anything else as a server error.
    if (
        not isinstance(resume_key, dict)
        or set(resume_key) != {KEY_FIELD}
        or not isinstance(resume_key[KEY_FIELD], str)
        or not resume_key[KEY_FIELD]
    ):
        raise ValidationError("Invalid nextToken")
    return resume_key
