"""
Comment endpoints.

Every handler answers through ``send_api_response``.  Mutating handlers
commit before answering, so a failed commit is reported as a failure.
Validation problems are returned with a 400 and the validator's message;
anything else (no match, not the author, store errors) collapses into a
generic failure whose cause is only logged.
"""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from comments_api.database import get_db
from comments_api.dependencies import get_current_user_id
from comments_api.responses import send_api_response
from comments_api.schemas import CommentCreate, CommentUpdate
from comments_api.serializers import serialize_comment, serialize_comments
from comments_api.services import comment_service
from comments_api.validation import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


def _bad_request(message: str | None):
    return send_api_response(
        success=False, msg=message, status_code=status.HTTP_400_BAD_REQUEST
    )


@router.get("/{blog_id}")
async def get_comments_by_blog_id(blog_id: str, db: AsyncSession = Depends(get_db)):
    try:
        comments = await comment_service.get_comments_by_blog(db, blog_id)
        return send_api_response(
            success=True, data={"comments": serialize_comments(comments)}
        )
    except Exception:
        logger.exception("Failed to get comments for blog %s", blog_id)
        await db.rollback()
        return send_api_response(success=False, msg="Failed to get comments")


@router.post("")
async def post_comment(
    payload: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = validate(payload, CommentCreate)
    if not result.success:
        return _bad_request(result.message)

    try:
        comment = await comment_service.create_comment(db, result.data, user_id)
        if not comment:
            return send_api_response(success=False, msg="Failed to post comment")
        await db.commit()
        return send_api_response(success=True, data={"comment": serialize_comment(comment)})
    except Exception:
        logger.exception("Failed to post comment on blog %s", result.data.blog_id)
        await db.rollback()
        return send_api_response(success=False, msg="Failed to post comment")


@router.api_route("/{comment_id}", methods=["PATCH", "PUT"])
async def update_comment(
    comment_id: str,
    payload: Any = Body(None),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = validate(payload, CommentUpdate)
    if not result.success:
        return _bad_request(result.message)

    try:
        comment = await comment_service.update_comment(db, comment_id, user_id, result.data)
        if not comment:
            return send_api_response(success=False, msg="Failed to update comment")
        await db.commit()
        return send_api_response(success=True, data={"comment": serialize_comment(comment)})
    except Exception:
        logger.exception("Failed to update comment %s", comment_id)
        await db.rollback()
        return send_api_response(success=False, msg="Failed to update comment")


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        deleted = await comment_service.delete_comment(db, comment_id, user_id)
        if not deleted:
            return send_api_response(success=False, msg="Unable to delete comment")
        await db.commit()
        return send_api_response(success=True, msg="Comment deleted successfully")
    except Exception:
        logger.exception("Failed to delete comment %s", comment_id)
        await db.rollback()
        return send_api_response(success=False, msg="Failed to delete comment")
