from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from moviedb.crud import comment as comments_crud
from moviedb.exceptions.comment_exceptions import CommentNotFoundError
from moviedb.exceptions.database_exceptions import classify_database_error
from moviedb.models.comment import CommentCreate, CommentPublic, CommentUpdate


def get_comments(*, session: Session) -> list[CommentPublic]:
    rows = comments_crud.get_comments(session=session)
    return [CommentPublic.model_validate(dict(row)) for row in rows]


def get_comments_for_movie(*, session: Session, movie_id: int) -> list[CommentPublic]:
    rows = comments_crud.get_comments_for_movie(session=session, movie_id=movie_id)
    return [CommentPublic.model_validate(dict(row)) for row in rows]


def create_comment(
    *,
    session: Session,
    movie_id: int,
    comment_create: CommentCreate,
) -> CommentPublic:
    """
    Attach a new comment to a movie and commit. The movie is not checked
    for existence.

    Raises:
        DatabaseError: If the insert fails.
    """
    try:
        row = comments_crud.create_comment(
            session=session,
            movie_id=movie_id,
            comment_create=comment_create,
        )
        comment = CommentPublic.model_validate(dict(row))
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise classify_database_error(e) from e
    return comment


def update_comment(
    *,
    session: Session,
    comment_id: int,
    comment_update: CommentUpdate,
) -> CommentPublic:
    """
    Replace the text of a comment and commit.

    Parameters:
        session (Session): Database session.
        comment_id (int): ID of the comment to update.
        comment_update (CommentUpdate): The new text.
    Returns:
        CommentPublic: The comment with its refreshed updated_at.
    Raises:
        CommentNotFoundError: If the comment with the given ID does not exist.
        DatabaseError: If the update fails.
    """
    try:
        row = comments_crud.update_comment(
            session=session,
            id=comment_id,
            comment_update=comment_update,
        )
        comment = CommentPublic.model_validate(dict(row)) if row is not None else None
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise classify_database_error(e) from e
    if comment is None:
        raise CommentNotFoundError(comment_id)
    return comment


def delete_comment(*, session: Session, comment_id: int) -> CommentPublic:
    try:
        row = comments_crud.delete_comment(session=session, id=comment_id)
        comment = CommentPublic.model_validate(dict(row)) if row is not None else None
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise classify_database_error(e) from e
    if comment is None:
        raise CommentNotFoundError(comment_id)
    return comment
