"""Unit tests for the admin gate and request normalization."""

import pytest
from starlette.requests import Request

from shared.auth import check_admin
from shared.errors import AuthError, ConfigurationError
from shared.request import NormalizedRequest, normalize

SECRET = "s3cret"


def _req(headers: dict | None = None) -> NormalizedRequest:
    return NormalizedRequest(
        method="POST",
        path="/posts",
        headers={k.lower(): v for k, v in (headers or {}).items()},
    )


class TestCheckAdmin:
    def test_matching_secret_passes(self):
        check_admin(_req({"X-Admin-Token": SECRET}), SECRET)

    @pytest.mark.parametrize("headers", [{}, {"X-Admin-Token": ""}, {"X-Admin-Token": "S3CRET"}, {"X-Admin-Token": SECRET + " "}])
    def test_mismatch_is_401(self, headers):
        with pytest.raises(AuthError) as exc_info:
            check_admin(_req(headers), SECRET)
        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("secret", [None, ""])
    def test_unconfigured_secret_is_500(self, secret):
        with pytest.raises(ConfigurationError) as exc_info:
            check_admin(_req({"X-Admin-Token": SECRET}), secret)
        assert exc_info.value.status_code == 500
        assert exc_info.value.to_body()["message"] == "Server misconfigured"


class TestNormalize:
    def _request(self, headers: list[tuple[bytes, bytes]], path="/dev/posts", query=b"limit=5") -> Request:
        return Request(
            {
                "type": "http",
                "method": "get",
                "path": path,
                "raw_path": path.encode(),
                "query_string": query,
                "headers": headers,
                "scheme": "https",
                "server": ("api.example.com", 443),
            }
        )

    def test_canonical_fields(self):
        req = normalize(
            self._request([(b"origin", b"https://blog.example.com"), (b"x-admin-token", b"t")]),
            body=b'{"a": 1}',
        )
        assert req.method == "GET"
        assert req.path == "/dev/posts"
        assert req.origin == "https://blog.example.com"
        assert req.query == {"limit": "5"}
        assert req.body == '{"a": 1}'
        assert req.header("X-Admin-Token") == "t"
        assert req.header("x-admin-token") == "t"

    def test_missing_origin_is_empty(self):
        req = normalize(self._request([]))
        assert req.origin == ""
        assert req.body is None

    def test_body_is_decoded_strictly(self):
        req = normalize(self._request([]), body=b'{"title": "\xff"}')
        with pytest.raises(UnicodeDecodeError):
            req.body
