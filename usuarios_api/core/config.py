"""Application configuration."""

from os import getenv
from pathlib import Path

from pydantic import BaseModel

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def _flag(name: str, default: str = "0") -> bool:
    return getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "Usuarios API"
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"
    request_logging: bool = True
    log_level: str = "INFO"
    preserve_get_fallthrough: bool = False

    @property
    def static_path(self) -> Path:
        """Static directory resolved against the project root when relative."""
        path = Path(self.static_dir)
        if path.is_absolute():
            return path
        return BASE_DIR / path


def load_settings() -> Settings:
    """Build settings from the environment, falling back to documented defaults."""
    app_env: str = getenv("APP_ENV", "development")
    return Settings(
        app_name=getenv("APP_NAME", "Usuarios API"),
        app_env=app_env,
        host=getenv("HOST", "0.0.0.0"),
        port=int(getenv("PORT") or "3000"),
        static_dir=getenv("STATIC_DIR", "public"),
        request_logging=_flag("REQUEST_LOGGING", "1" if app_env == "development" else "0"),
        log_level=getenv("LOG_LEVEL", "INFO").upper(),
        preserve_get_fallthrough=_flag("PRESERVE_GET_FALLTHROUGH"),
    )


settings: Settings = load_settings()
