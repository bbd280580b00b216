from collections.abc import Mapping
from typing import Annotated, Any

from fastapi import Body
from pydantic import ValidationError

from moviedb.exceptions.validation_exceptions import (
    InvalidFieldsError,
    MissingFieldsError,
)
from moviedb.models.movie import REQUIRED_MOVIE_FIELDS, MovieCreate, MovieUpdate

MoviePayload = Annotated[dict[str, Any] | None, Body()]


def is_missing(value: Any) -> bool:
    # 0 and False are real values, only absent/null/blank count as missing
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_movie_fields(payload: Mapping[str, Any]) -> list[str]:
    return [field for field in REQUIRED_MOVIE_FIELDS if is_missing(payload.get(field))]


def _invalid_fields(exc: ValidationError) -> list[str]:
    fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
    ordered = [field for field in REQUIRED_MOVIE_FIELDS if field in fields]
    return ordered + sorted(fields - set(ordered))


def validate_movie_create(payload: Mapping[str, Any] | None) -> MovieCreate:
    """
    Check that every required movie field is present and well typed.

    Parameters:
        payload (Mapping | None): The decoded JSON body, None when no body was sent.
    Returns:
        MovieCreate: The payload as a typed movie.
    Raises:
        MissingFieldsError: Naming each absent field as "<field> required ".
        InvalidFieldsError: Naming each field whose value has the wrong type.
    """
    payload = payload or {}
    missing = missing_movie_fields(payload)
    if missing:
        raise MissingFieldsError(missing)
    try:
        return MovieCreate.model_validate(dict(payload))
    except ValidationError as e:
        raise InvalidFieldsError(_invalid_fields(e)) from e


def validate_movie_update(payload: Mapping[str, Any] | None) -> MovieUpdate:
    try:
        return MovieUpdate.model_validate(dict(payload or {}))
    except ValidationError as e:
        raise InvalidFieldsError(_invalid_fields(e)) from e


def get_movie_create(payload: MoviePayload = None) -> MovieCreate:
    return validate_movie_create(payload)


def get_movie_update(payload: MoviePayload = None) -> MovieUpdate:
    return validate_movie_update(payload)
