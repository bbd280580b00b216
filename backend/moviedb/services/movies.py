from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from moviedb.crud import movie as movies_crud
from moviedb.exceptions.database_exceptions import classify_database_error
from moviedb.exceptions.movie_exceptions import MovieNotFoundError
from moviedb.models.movie import MovieCreate, MoviePublic, MovieUpdate


def get_movies(*, session: Session) -> list[MoviePublic]:
    rows = movies_crud.get_movies(session=session)
    return [MoviePublic.model_validate(dict(row)) for row in rows]


def get_movie_by_id(*, session: Session, movie_id: int) -> MoviePublic:
    """
    Get a single movie.

    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    row = movies_crud.get_movie_by_id(session=session, id=movie_id)
    if row is None:
        raise MovieNotFoundError(movie_id)
    return MoviePublic.model_validate(dict(row))


def create_movie(*, session: Session, movie_create: MovieCreate) -> MoviePublic:
    """
    Insert a movie and commit.

    Parameters:
        session (Session): Database session.
        movie_create (MovieCreate): Validated movie data.
    Returns:
        MoviePublic: The stored movie including its new id.
    Raises:
        DatabaseError: If the insert fails.
    """
    try:
        row = movies_crud.create_movie(session=session, movie_create=movie_create)
        movie = MoviePublic.model_validate(dict(row))
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise classify_database_error(e) from e
    return movie


def update_movie(
    *,
    session: Session,
    movie_id: int,
    movie_update: MovieUpdate,
) -> MoviePublic:
    """
    Replace every field of an existing movie and commit.

    Parameters:
        session (Session): Database session.
        movie_id (int): ID of the movie to replace.
        movie_update (MovieUpdate): New values, omitted fields become null.
    Returns:
        MoviePublic: The movie as stored after the update.
    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
        DatabaseError: If the update fails.
    """
    try:
        row = movies_crud.update_movie(
            session=session,
            id=movie_id,
            movie_update=movie_update,
        )
        movie = MoviePublic.model_validate(dict(row)) if row is not None else None
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise classify_database_error(e) from e
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


def delete_movie(*, session: Session, movie_id: int) -> MoviePublic:
    """
    Delete a movie and commit. Its comments are left in place.

    Returns:
        MoviePublic: The deleted movie.
    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
        DatabaseError: If the delete fails.
    """
    try:
        row = movies_crud.delete_movie(session=session, id=movie_id)
        movie = MoviePublic.model_validate(dict(row)) if row is not None else None
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise classify_database_error(e) from e
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie
