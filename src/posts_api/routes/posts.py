"""Post routes — GET / POST /posts, DELETE /posts/{post_id}.

Every route is also mounted under an arbitrary prefix, so a gateway stage
left in the raw path (/dev/posts, /dev/posts/abc) resolves to the same
resource. Exact /posts routes are registered before the per-post route.
"""

import json

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError as PydanticValidationError

from shared.auth import require_admin
from shared.db import delete_post, get_posts_table, put_post, scan_posts
from shared.errors import ValidationError
from shared.log import get_logger
from shared.models import Deleted, Post, PostCreate, PostList
from shared.pagination import decode_token, encode_token, parse_limit
from shared.request import NormalizedRequest, get_normalized_request

router = APIRouter()

logger = get_logger(component="posts")

_COLLECTION_PATHS = ("/posts", "/{stage:path}/posts")
_ITEM_PATHS = ("/posts/{post_id}", "/{stage:path}/posts/{post_id}")


# ── Helpers ────────────────────────────────────────────────────────────────────

def _parse_body(req: NormalizedRequest) -> PostCreate:
    try:
        body = req.body
        data = json.loads(body) if body else {}
    except (UnicodeDecodeError, ValueError, RecursionError):
        raise ValidationError("Invalid JSON body")

    try:
        return PostCreate.model_validate(data)
    except PydanticValidationError:
        raise ValidationError("title and content are required")


def _newest_first(items: list[dict]) -> list[dict]:
    # Scan order is arbitrary; order within the page only.
    return sorted(items, key=lambda item: str(item.get("createdAt") or ""), reverse=True)


# ── Routes ─────────────────────────────────────────────────────────────────────

def list_posts(req: NormalizedRequest = Depends(get_normalized_request)) -> PostList:
    limit = parse_limit(req.query.get("limit"))
    start_key = decode_token(req.query.get("nextToken"))

    table = get_posts_table()
    items, last_key = scan_posts(table, limit, start_key)

    logger.info("posts.listed", limit=limit, count=len(items), has_more=last_key is not None)
    return PostList(items=_newest_first(items), nextToken=encode_token(last_key))


def create_post(
    req: NormalizedRequest = Depends(get_normalized_request),
    _: None = Depends(require_admin),
) -> Post:
    post = Post.new(_parse_body(req))

    table = get_posts_table()
    put_post(table, post.model_dump())

    logger.info("post.created", post_id=post.postID)
    return post


def remove_post(post_id: str, _: None = Depends(require_admin)) -> Deleted:
    table = get_posts_table()
    delete_post(table, post_id)

    logger.info("post.deleted", post_id=post_id)
    return Deleted(postID=post_id)


for _path in _COLLECTION_PATHS:
    router.add_api_route(_path, list_posts, methods=["GET"], response_model=PostList)
    router.add_api_route(
        _path, create_post, methods=["POST"], status_code=status.HTTP_201_CREATED, response_model=Post
    )

for _path in _ITEM_PATHS:
    router.add_api_route(_path, remove_post, methods=["DELETE"], response_model=Deleted)
