from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def _env_file() -> Path:
    """.env when present, otherwise the committed .env.example defaults."""
    env_path = _PROJECT_ROOT / '.env'
    return env_path if env_path.exists() else _PROJECT_ROOT / '.env.example'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_env_file()),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Comma separated in env: BACKEND_CORS_ORIGINS=http://localhost:3000,https://events.example.com
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def split_cors_origins(cls, v: str | List[str] | None) -> List[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return list(v or [])

    # Backing store; ConnectionManager refuses to start without it
    DATABASE_URL: str = ''

    # SQLAlchemy pool
    DB_POOL_SIZE: int = 5
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds waiting for a pooled connection
    DB_POOL_RECYCLE: int = 1800  # seconds
    DB_CONNECT_TIMEOUT: float = 10.0  # engine creation + ping
    DB_WRITE_TIMEOUT: float = 10.0  # booking insert

    # Uploaded event images, served from the /static mount
    STATIC_DIR: str = 'static'
    EVENT_IMAGE_FOLDER: str = 'events'


settings = Settings()  # type: ignore
