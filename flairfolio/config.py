import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env", override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _log_level_default() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    # getLevelName maps known names to their numeric level.
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


class Settings(BaseModel):
    mongo_uri: str = Field(
        default_factory=lambda: (
            os.getenv("MONGO_URI")
            or os.getenv("MONGODB_URI")
            or os.getenv("MONGO_URL")
            or ""
        )
    )
    mongo_db: str = Field(default_factory=lambda: os.getenv("MONGO_DB_NAME", "flairfolio"))
    # Tried when the primary URI fails, e.g. a direct mongodb://host:port when SRV lookup is down
    mongo_alt_uri: str = Field(default_factory=lambda: os.getenv("MONGO_ALT_URI", ""))
    mongo_direct: bool = Field(default_factory=lambda: _env_flag("MONGO_DIRECT"))
    # Unique indexes make name/username uniqueness atomic with the insert
    mongo_unique_indexes: bool = Field(default_factory=lambda: _env_flag("MONGO_UNIQUE_INDEXES"))

    # Unknown level names fall back to INFO
    log_level: str = Field(default_factory=_log_level_default)

    # JSON file with {"flairs": [...], "interests": [...], "profiles": [...]} loaded on first start
    default_data_path: str = Field(default_factory=lambda: os.getenv("DEFAULT_DATA_PATH", ""))


@lru_cache()
def get_settings() -> Settings:
    return Settings()
