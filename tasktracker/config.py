"""Settings loaded from environment variables and a local .env file."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKTRACKER"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    app_name: str
    host: str
    port: int
    log_level: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "tasktracker"),
            host=_env(_k("HOST"), "0.0.0.0"),
            port=_env_int(_k("PORT"), 9091),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
        )


def get_settings() -> Settings:
    # real environment variables win over .env entries
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
