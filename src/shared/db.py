"""DynamoDB table helpers for the posts table (partition key: postID)."""

from contextlib import contextmanager
from datetime import datetime, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shared.config import get_settings
from shared.errors import ConfigurationError, StoreError
from shared.log import get_logger

logger = get_logger(component="db")


def _dynamodb():
    settings = get_settings()
    return boto3.resource("dynamodb", region_name=settings.aws_region, **settings.dynamodb_kwargs)


def get_posts_table():
    table_name = get_settings().table_name
    if not table_name:
        logger.error("config.missing", key="TABLE_NAME")
        raise ConfigurationError(error="TABLE_NAME is missing")
    return _dynamodb().Table(table_name)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@contextmanager
def store_call(operation: str):
    """Log any boto failure with its traceback and surface it as a generic StoreError."""
    try:
        yield
    except (ClientError, BotoCoreError) as exc:
        logger.exception("store.failed", operation=operation)
        raise StoreError() from exc


def scan_posts(table, limit: int, start_key: dict | None = None) -> tuple[list[dict], dict | None]:
    """One bounded Scan. Returns (items, LastEvaluatedKey or None)."""
    params: dict = {"Limit": limit}
    if start_key:
        params["ExclusiveStartKey"] = start_key

    with store_call("scan"):
        response = table.scan(**params)
    return response.get("Items", []), response.get("LastEvaluatedKey")


def put_post(table, item: dict) -> None:
    with store_call("put_item"):
        table.put_item(Item=item)


def delete_post(table, post_id: str) -> None:
    """Unconditional; deleting a missing key succeeds."""
    with store_call("delete_item"):
        table.delete_item(Key={"postID": post_id})
