import json
from typing import Any

from pydantic import ConfigDict, field_validator
from sqlalchemy import Text
from sqlmodel import Field, SQLModel

__all__ = [
    "MovieBase",
    "MovieBody",
    "MovieCreate",
    "MovieUpdate",
    "MoviePublic",
    "Movie",
    "REQUIRED_MOVIE_FIELDS",
]

# Fields a new movie must carry, in the order they are reported when missing
REQUIRED_MOVIE_FIELDS = (
    "title",
    "director",
    "year",
    "rating",
    "poster",
    "movie_details",
)


def _details_to_text(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value)


# Shared properties
class MovieBase(SQLModel):
    title: str | None = None
    director: str | None = None
    year: int | None = None
    rating: float | None = None
    poster: str | None = None
    movie_details: str | None = Field(default=None, sa_type=Text)


# Request bodies: numbers sent for text fields are kept as text and
# structured details are stored as JSON text
class MovieBody(MovieBase):
    model_config = ConfigDict(coerce_numbers_to_str=True)  # type: ignore[assignment]

    @field_validator("movie_details", mode="before")
    @classmethod
    def serialize_details(cls, value: Any) -> Any:
        return _details_to_text(value)


# Properties to receive on movie creation
class MovieCreate(MovieBody):
    title: str
    director: str
    year: int
    rating: float
    poster: str
    movie_details: str


# Properties to receive on movie update, omitted fields are written as null
class MovieUpdate(MovieBody):
    pass


# Properties to return via API
class MoviePublic(MovieBase):
    id: int
    # json/jsonb columns come back decoded
    movie_details: Any = None


# Database model
class Movie(MovieBase, table=True):
    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
