"""
Shared pytest fixtures.

Environment variables are set at module level — before any src/ imports —
so Settings reads the correct test values when fixtures are first evaluated.
"""

import os

# Must be set before any shared.* imports.
# Use setdefault so externally-passed env vars (integration tests) take precedence.
os.environ.setdefault("ENV", "test")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ.setdefault("AWS_REGION", "us-west-2")
os.environ.setdefault("TABLE_NAME", "posts")
os.environ.setdefault("ADMIN_TOKEN", "test-admin-token")
os.environ.setdefault("ALLOWED_ORIGINS", "")

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from shared.config import get_settings

ADMIN_TOKEN = os.environ["ADMIN_TOKEN"]


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; tests that touch the env need a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Token": ADMIN_TOKEN}


# ── AWS fixtures ────────────────────────────────────────────────────────────────

@pytest.fixture()
def aws_env():
    """Start moto mock, create the posts table, yield, teardown."""
    with mock_aws():
        ddb = boto3.client("dynamodb", region_name="us-west-2")
        ddb.create_table(
            TableName="posts",
            KeySchema=[{"AttributeName": "postID", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "postID", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield


@pytest.fixture()
def posts_table(aws_env):
    return boto3.resource("dynamodb", region_name="us-west-2").Table("posts")


@pytest.fixture()
def client(aws_env):
    """FastAPI TestClient with mocked AWS. Import app inside fixture so boto3
    resources are always created inside the mock_aws context."""
    from posts_api.handler import app  # noqa: PLC0415

    return TestClient(app, raise_server_exceptions=True)
