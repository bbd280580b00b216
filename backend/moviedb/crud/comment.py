from collections.abc import Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlmodel import Session

from moviedb.models.comment import Comment, CommentCreate, CommentUpdate

comments_table = Comment.__table__  # type: ignore[attr-defined]


def get_comments(*, session: Session) -> Sequence[RowMapping]:
    stmt = select(comments_table)
    return session.execute(stmt).mappings().all()


def get_comments_for_movie(*, session: Session, movie_id: int) -> Sequence[RowMapping]:
    """
    Retrieve the comments attached to a movie. The movie itself is not
    looked up, an unknown movie id simply has no comments.

    Parameters:
        session (Session): The database session.
        movie_id (int): The ID of the movie.
    Returns:
        Sequence[RowMapping]: The comment rows, possibly empty.
    """
    stmt = select(comments_table).where(comments_table.c.movie_id == movie_id)
    return session.execute(stmt).mappings().all()


def create_comment(
    *,
    session: Session,
    movie_id: int,
    comment_create: CommentCreate,
) -> RowMapping:
    """
    Insert a comment for a movie. updated_at is filled in by the database.
    Does not commit.
    """
    stmt = (
        insert(comments_table)
        .values(movie_id=movie_id, comment_text=comment_create.comment_text)
        .returning(*comments_table.c)
    )
    return session.execute(stmt).mappings().one()


def update_comment(
    *,
    session: Session,
    id: int,
    comment_update: CommentUpdate,
) -> RowMapping | None:
    """
    Replace the text of a comment and refresh its updated_at timestamp.
    Does not commit.

    Returns:
        RowMapping | None: The updated row, or None if no comment has that id.
    """
    stmt = (
        update(comments_table)
        .where(comments_table.c.id == id)
        .values(
            comment_text=comment_update.comment_text,
            updated_at=func.current_timestamp(),
        )
        .returning(*comments_table.c)
    )
    return session.execute(stmt).mappings().one_or_none()


def delete_comment(*, session: Session, id: int) -> RowMapping | None:
    stmt = (
        delete(comments_table)
        .where(comments_table.c.id == id)
        .returning(*comments_table.c)
    )
    return session.execute(stmt).mappings().one_or_none()
