"""
Comment service: store operations for comments and the parent blog's
comment counter.

Ownership is part of the WHERE clause of every update and delete, so the
check and the write are one statement.  A comment that does not exist and
a comment owned by someone else both match zero rows; callers cannot tell
the two apart.

Creation and the counter increment are two statements.  They share the
request's session, but no guarantee is made that the counter tracks the
number of live comments: deletes never decrement it.
"""
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from comments_api.models import Blog, Comment, utcnow
from comments_api.schemas import CommentCreate, CommentUpdate


async def get_comments_by_blog(db: AsyncSession, blog_id: str) -> list[Comment]:
    """Return every comment on *blog_id*, newest first.  No pagination."""
    q = (
        select(Comment)
        .where(Comment.blog_id == blog_id)
        .order_by(Comment.created_at.desc())
    )
    result = await db.execute(q)
    return list(result.scalars().all())


async def increment_blog_comment_count(db: AsyncSession, blog_id: str) -> None:
    """
    Add one to ``Blog.comments``.  Matching zero rows (unknown blog) is not
    an error and is not reported.
    """
    q = (
        update(Blog)
        .where(Blog.id == blog_id)
        .values(comments=Blog.comments + 1)
        .execution_options(synchronize_session="fetch")
    )
    await db.execute(q)


async def create_comment(
    db: AsyncSession,
    data: CommentCreate,
    created_by: str,
) -> Comment | None:
    """
    Insert a comment authored by *created_by* and bump the blog counter.

    Returns None when the insert produced no row; the counter is left
    alone in that case.
    """
    comment = Comment(
        content=data.content,
        created_by=created_by,
        blog_id=data.blog_id,
    )
    db.add(comment)
    await db.flush()
    if comment.id is None:
        return None

    await increment_blog_comment_count(db, data.blog_id)
    return comment


async def update_comment(
    db: AsyncSession,
    comment_id: str,
    created_by: str,
    data: CommentUpdate,
) -> Comment | None:
    """
    Replace the content of *comment_id* if *created_by* wrote it.

    Returns the updated comment, or None when nothing matched.
    """
    q = (
        update(Comment)
        .where(Comment.id == comment_id, Comment.created_by == created_by)
        .values(content=data.content, updated_at=utcnow())
        .returning(Comment)
    )
    result = await db.execute(q)
    return result.scalar_one_or_none()


async def delete_comment(db: AsyncSession, comment_id: str, created_by: str) -> bool:
    """
    Delete *comment_id* if *created_by* wrote it.

    Returns True when a row was removed, False otherwise.
    """
    q = (
        delete(Comment)
        .where(Comment.id == comment_id, Comment.created_by == created_by)
    )
    result = await db.execute(q)
    return result.rowcount > 0
