from datetime import datetime

from comments_api.models import Comment


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def serialize_comment(comment: Comment) -> dict:
    """Serialise a Comment ORM instance to its public (camelCase) dict."""
    return {
        "id": comment.id,
        "content": comment.content,
        "createdBy": comment.created_by,
        "blogId": comment.blog_id,
        "createdAt": _isoformat(comment.created_at),
        "updatedAt": _isoformat(comment.updated_at),
    }


def serialize_comments(comments: list[Comment]) -> list[dict]:
    return [serialize_comment(c) for c in comments]
