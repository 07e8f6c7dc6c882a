from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Database settings shared by the migration scripts."""

    database_url: str = Field(..., alias="DATABASE_URL")
    # "require" = TLS without server certificate validation
    database_sslmode: str = Field("require", alias="DATABASE_SSLMODE")
    slow_query_ms: int = Field(1000, alias="SLOW_QUERY_MS")

    class Config:
        # Try to find .env in current directory or app directory
        current_dir = Path.cwd()
        if (current_dir / ".env").exists():
            env_file = ".env"
        elif (current_dir / "app" / ".env").exists():
            env_file = "app/.env"
        else:
            env_file = ".env"  # Default fallback

        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
