"""Application configuration loaded from environment variables."""

from pydantic import BaseModel
import os

from app.errors import ConfigError


class Settings(BaseModel):
    """Typed settings with defaults for local development."""

    app_env: str = os.getenv("APP_ENV", "dev")
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    openai_api_key: str | None = os.getenv("OPENAI_API_KEY")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
    openai_timeout: float = float(os.getenv("OPENAI_TIMEOUT", "60"))

    fetch_timeout: float = float(os.getenv("FETCH_TIMEOUT", "20"))
    max_content_chars: int = int(os.getenv("MAX_CONTENT_CHARS", "15000"))

    session_cookie: str = os.getenv("SESSION_COOKIE", "sb-access-token")
    drafts_path: str = os.getenv("DRAFTS_PATH", ".distill/drafts.json")

    @property
    def cors_origins_list(self) -> list[str]:
        """Return CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def check(self) -> None:
        """Fail fast when credentials needed to serve requests are missing."""
        if not self.openai_api_key:
            raise ConfigError("OPENAI_API_KEY environment variable is not set")


settings = Settings()
