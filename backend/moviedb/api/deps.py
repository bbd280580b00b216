from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from moviedb.core.db import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    yield from database.session()


SessionDep = Annotated[Session, Depends(get_db)]
