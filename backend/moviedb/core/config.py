from pydantic import AliasChoices, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "moviedb-api"
    API_PREFIX: str = "/api"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    DEBUG: bool = False
    LOG_DIR: str | None = None

    DATABASE_URL: str = Field(
        default="sqlite:///./moviedb.sqlite3",
        validation_alias=AliasChoices(
            "DATABASE_URL",
            "ELEPHANT_SQL_CONNECTION_STRING",
        ),
    )
    # Development only, the schema is normally managed outside this service
    CREATE_TABLES: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        url = self.DATABASE_URL
        # Hosted Postgres providers hand out libpq style URLs
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+psycopg://" + url[len(prefix) :]
        return url


settings = Settings()
