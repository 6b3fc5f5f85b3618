from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


ERROR_FORMATS = ("humanized", "detailed")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings, read once from the environment.

    COERCION_ERROR_FORMAT:
      humanized -> 400 body is the nested field -> messages map
      detailed  -> 400 body also lists every error with its path and offending value
    """

    error_format: str = "humanized"
    log_errors: bool = True
    cors_allow_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    api_host: str = "127.0.0.1"
    api_port: int = 8000


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def load_env_file() -> None:
    env_path = Path(__file__).resolve().parents[2] / ".env"
    if env_path.exists():
        # Do not override shell env vars.
        load_dotenv(dotenv_path=env_path, override=False)


def load_settings() -> Settings:
    error_format = (os.getenv("COERCION_ERROR_FORMAT") or "humanized").strip().lower()
    if error_format not in ERROR_FORMATS:
        raise ValueError(
            f"COERCION_ERROR_FORMAT must be one of {', '.join(ERROR_FORMATS)} (got '{error_format}')"
        )

    origins_raw = (os.getenv("CORS_ALLOW_ORIGINS") or "").strip()
    if origins_raw:
        origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())
    else:
        origins = DEFAULT_CORS_ORIGINS

    return Settings(
        error_format=error_format,
        log_errors=_env_bool("COERCION_LOG_ERRORS", True),
        cors_allow_origins=origins,
        api_host=(os.getenv("API_HOST") or "127.0.0.1").strip(),
        api_port=int((os.getenv("API_PORT") or "8000").strip()),
    )
