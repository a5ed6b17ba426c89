import uuid

from pydantic import BaseModel, ConfigDict, Field

from shared.db import now_iso


class PostCreate(BaseModel):
    """Request body for POST /posts. Both fields are trimmed, then must be non-empty."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class Post(BaseModel):
    """Mirrors the DynamoDB item exactly — field names are camelCase to match storage."""

    postID: str
    title: str
    content: str
    createdAt: str     # ISO-8601 UTC e.g. "2026-10-18T09:30:00.123456+00:00"

    @classmethod
    def new(cls, data: PostCreate) -> "Post":
        return cls(
            postID=str(uuid.uuid4()),
            title=data.title,
            content=data.content,
            createdAt=now_iso(),
        )


class PostList(BaseModel):
    items: list[dict]
    nextToken: str | None = None


class Deleted(BaseModel):
    message: str = "Deleted"
    postID: str
