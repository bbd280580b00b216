from datetime import datetime

from sqlalchemy import DateTime, Text, func
from sqlmodel import Column, Field, SQLModel

__all__ = [
    "CommentBase",
    "CommentCreate",
    "CommentUpdate",
    "CommentPublic",
    "Comment",
]


class CommentBase(SQLModel):
    comment_text: str | None = Field(default=None, sa_type=Text)


class CommentCreate(CommentBase):
    pass


class CommentUpdate(CommentBase):
    pass


class CommentPublic(CommentBase):
    id: int
    movie_id: int | None = None
    updated_at: datetime | None = None


# movie_id is a plain column: the reference to movies is not enforced here
class Comment(CommentBase, table=True):
    __tablename__ = "comments"

    id: int | None = Field(default=None, primary_key=True)
    movie_id: int | None = Field(default=None, index=True)
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime, server_default=func.current_timestamp()),
    )
