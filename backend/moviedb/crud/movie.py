from collections.abc import Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlmodel import Session

from moviedb.models.movie import Movie, MovieCreate, MovieUpdate

movies_table = Movie.__table__  # type: ignore[attr-defined]


def get_movies(*, session: Session) -> Sequence[RowMapping]:
    """
    Retrieve every movie.

    Parameters:
        session (Session): The database session.
    Returns:
        Sequence[RowMapping]: All rows of the movies table.
    """
    stmt = select(movies_table)
    return session.execute(stmt).mappings().all()


def get_movie_by_id(*, session: Session, id: int) -> RowMapping | None:
    """
    Retrieve a movie by its ID.

    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to retrieve.
    Returns:
        RowMapping | None: The movie row if found, otherwise None.
    """
    stmt = select(movies_table).where(movies_table.c.id == id)
    return session.execute(stmt).mappings().one_or_none()


def create_movie(*, session: Session, movie_create: MovieCreate) -> RowMapping:
    """
    Insert a movie and return the stored row, including its generated id.
    Does not commit.

    Parameters:
        session (Session): The database session.
        movie_create (MovieCreate): The movie data to insert.
    Returns:
        RowMapping: The inserted row.
    """
    stmt = (
        insert(movies_table)
        .values(**movie_create.model_dump())
        .returning(*movies_table.c)
    )
    return session.execute(stmt).mappings().one()


def update_movie(
    *,
    session: Session,
    id: int,
    movie_update: MovieUpdate,
) -> RowMapping | None:
    """
    Overwrite all fields of a movie. Fields left out of the update are
    written as NULL. Does not commit.

    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to update.
        movie_update (MovieUpdate): The replacement movie data.
    Returns:
        RowMapping | None: The updated row, or None if no movie has that id.
    """
    stmt = (
        update(movies_table)
        .where(movies_table.c.id == id)
        .values(**movie_update.model_dump())
        .returning(*movies_table.c)
    )
    return session.execute(stmt).mappings().one_or_none()


def delete_movie(*, session: Session, id: int) -> RowMapping | None:
    """
    Delete a movie. Does not commit.

    Returns:
        RowMapping | None: The deleted row, or None if no movie has that id.
    """
    stmt = delete(movies_table).where(movies_table.c.id == id).returning(*movies_table.c)
    return session.execute(stmt).mappings().one_or_none()
