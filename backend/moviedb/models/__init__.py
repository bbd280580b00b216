from .comment import Comment, CommentCreate, CommentPublic, CommentUpdate
from .movie import (
    REQUIRED_MOVIE_FIELDS,
    Movie,
    MovieCreate,
    MoviePublic,
    MovieUpdate,
)

__all__ = [
    "Comment",
    "CommentCreate",
    "CommentPublic",
    "CommentUpdate",
    "Movie",
    "MovieCreate",
    "MoviePublic",
    "MovieUpdate",
    "REQUIRED_MOVIE_FIELDS",
]
