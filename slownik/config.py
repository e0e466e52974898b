from typing import List, Union
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings
from pydantic import validator

class Settings(BaseSettings):
    # Project settings
    PROJECT_NAME: str = "Śląski Słownik Majsterkowy"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Silesian-Polish technical dictionary with public submissions and admin review"
    API_PREFIX: str = "/api"

    # Admin credentials (single configured administrator)
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""
    ADMIN_SESSION_SECRET: str = ""
    ADMIN_SESSION_COOKIE_NAME: str = "ssm_admin_session"
    ADMIN_SESSION_MAX_AGE_HOURS: int = 12

    # Cookie settings
    # Note: keep False for local development over plain http
    COOKIE_SECURE: bool = False
    COOKIE_HTTPONLY: bool = True
    COOKIE_SAMESITE: str = "lax"

    # Database - prefer discrete Postgres settings; fallback to DATABASE_URL
    DATABASE_URL: str = ""  # Optional explicit URL; leave empty to assemble from fields below
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "slownik"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    DATABASE_DIALECT: str = "postgresql+psycopg2"  # e.g., postgresql+psycopg2, sqlite
    DATABASE_ECHO: bool = False

    # Migrations
    AUTO_MIGRATE_ON_STARTUP: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_CONFIG_FILE: str = "logging.ini"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 100

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

# Helper to assemble DB URL when not explicitly provided
def get_database_url() -> str:
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    # URL-encode credentials to handle special characters like @ : /
    user = quote_plus(settings.POSTGRES_USER or "")
    password = quote_plus(settings.POSTGRES_PASSWORD or "")
    host = settings.POSTGRES_HOST
    port = settings.POSTGRES_PORT
    db = settings.POSTGRES_DB
    dialect = settings.DATABASE_DIALECT
    if password:
        cred = f"{user}:{password}@"
    elif user:
        cred = f"{user}@"
    else:
        cred = ""
    return f"{dialect}://{cred}{host}:{port}/{db}"


def to_async_database_url(database_url: str) -> str:
    """Swap a sync driver for its asyncio counterpart (asyncpg / aiosqlite)."""
    if database_url.startswith("postgresql+psycopg2://"):
        return database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url
