from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger

from moviedb.api.main import api_router
from moviedb.core.config import Settings, settings
from moviedb.core.db import Database
from moviedb.exceptions.handlers import register_exception_handlers
from moviedb.logging_.logger import setup_logger


def create_app(
    config: Settings = settings,
    database: Database | None = None,
) -> FastAPI:
    """
    Build the application. The database is constructed from the settings
    unless one is passed in, and is disposed again on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        db = database or Database.from_settings(config)
        if config.CREATE_TABLES:
            db.create_tables()
        app.state.database = db
        logger.info(f"Server is running on port {config.PORT}")
        yield
        if database is None:
            db.dispose()

    app = FastAPI(title=config.PROJECT_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=config.API_PREFIX)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "hello world"

    return app


setup_logger("api")
app = create_app()
