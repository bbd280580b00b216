import uvicorn

from moviedb.core.config import settings

if __name__ == "__main__":
    uvicorn.run("moviedb.main:app", host=settings.HOST, port=settings.PORT)
