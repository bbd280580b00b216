from typing import Annotated

from fastapi import APIRouter, Depends, status

from moviedb.api.deps import SessionDep
from moviedb.inputs.movie import get_movie_create, get_movie_update
from moviedb.models.comment import CommentCreate, CommentPublic
from moviedb.models.movie import MovieCreate, MoviePublic, MovieUpdate
from moviedb.services import comments as comments_service
from moviedb.services import movies as movies_service

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[MoviePublic])
def read_movies(session: SessionDep) -> list[MoviePublic]:
    return movies_service.get_movies(session=session)


@router.post("", response_model=MoviePublic, status_code=status.HTTP_201_CREATED)
def create_movie(
    *,
    session: SessionDep,
    movie_in: Annotated[MovieCreate, Depends(get_movie_create)],
) -> MoviePublic:
    return movies_service.create_movie(session=session, movie_create=movie_in)


@router.get("/{id}", response_model=MoviePublic)
def read_movie(*, session: SessionDep, id: int) -> MoviePublic:
    return movies_service.get_movie_by_id(session=session, movie_id=id)


@router.put("/{id}", response_model=MoviePublic)
def update_movie(
    *,
    session: SessionDep,
    id: int,
    movie_in: Annotated[MovieUpdate, Depends(get_movie_update)],
) -> MoviePublic:
    return movies_service.update_movie(
        session=session,
        movie_id=id,
        movie_update=movie_in,
    )


@router.delete("/{id}", response_model=MoviePublic)
def delete_movie(*, session: SessionDep, id: int) -> MoviePublic:
    return movies_service.delete_movie(session=session, movie_id=id)


@router.get("/{id}/comments", response_model=list[CommentPublic])
def read_movie_comments(*, session: SessionDep, id: int) -> list[CommentPublic]:
    return comments_service.get_comments_for_movie(session=session, movie_id=id)


@router.post(
    "/{id}/comments",
    response_model=CommentPublic,
    status_code=status.HTTP_201_CREATED,
)
def create_movie_comment(
    *,
    session: SessionDep,
    id: int,
    comment_in: CommentCreate | None = None,
) -> CommentPublic:
    # A missing body inserts a comment without text
    return comments_service.create_comment(
        session=session,
        movie_id=id,
        comment_create=comment_in or CommentCreate(),
    )
