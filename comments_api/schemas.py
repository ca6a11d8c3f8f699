from pydantic import BaseModel, ConfigDict, Field

from comments_api.config import settings


# --- Comment ---

class CommentBase(BaseModel):
    content: str = Field(min_length=1, max_length=settings.COMMENT_MAX_LENGTH)
    model_config = ConfigDict(str_strip_whitespace=True)


class CommentCreate(CommentBase):
    blog_id: str = Field(alias="blogId", min_length=1, max_length=64)
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)


class CommentUpdate(CommentBase):
    pass
