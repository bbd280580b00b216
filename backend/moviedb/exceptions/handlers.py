from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from .base import AppError
from .database_exceptions import DatabaseError, classify_database_error
from .validation_exceptions import PayloadError


def body_error_message(exc: RequestValidationError) -> str | None:
    """
    Describe the body errors of a failed request as one string, or return
    None when the failure is not about the body (e.g. a non-integer path id).
    """
    messages = []
    for error in exc.errors():
        loc = error.get("loc", ())
        if not loc or loc[0] != "body":
            return None
        field = ".".join(str(part) for part in loc[1:] if not isinstance(part, int))
        messages.append(f"{field} {error['msg']}" if field else error["msg"])
    return "; ".join(messages) if messages else None


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError):
        if isinstance(exc, DatabaseError):
            logger.error(f"{type(exc).__name__}: {exc.detail}")
        else:
            logger.warning(f"{exc.status_code} Error: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = body_error_message(exc)
        if message is None:
            return await request_validation_exception_handler(request, exc)
        error = PayloadError(message)
        logger.warning(f"{error.status_code} Error: {error.detail}")
        return JSONResponse(status_code=error.status_code, content=error.to_content())

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        error = classify_database_error(exc)
        logger.error(
            f"{type(error).__name__} on {request.method} {request.url.path}: {error.detail}"
        )
        return JSONResponse(status_code=error.status_code, content=error.to_content())

    @app.exception_handler(Exception)
    async def generic_exception_handler(_: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled exception")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred."},
        )
