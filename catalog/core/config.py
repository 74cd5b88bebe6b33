import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


DEFAULT_SESSION_SECRET_KEY = "change-me"

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./catalog.db")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

SESSION_SECRET_KEY = os.getenv("SESSION_SECRET_KEY", DEFAULT_SESSION_SECRET_KEY)
SESSION_ALGORITHM = os.getenv("SESSION_ALGORITHM", "HS256")
SESSION_TTL_HOURS = _get_int(os.getenv("SESSION_TTL_HOURS"), 24)
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "catalog_session")


def is_production() -> bool:
    return APP_ENV.strip().lower() in {"prod", "production", "stage", "staging"}


def validate_runtime_config() -> None:
    if is_production() and SESSION_SECRET_KEY in {"", DEFAULT_SESSION_SECRET_KEY}:
        raise RuntimeError("SESSION_SECRET_KEY must be set in production.")
