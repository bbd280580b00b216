from fastapi import APIRouter

from moviedb.api.routes import comments, movies

api_router = APIRouter()
api_router.include_router(movies.router)
api_router.include_router(comments.router)
