"""Application settings loaded from environment variables (and .env)."""
import os
import logging
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False
    log_level: str = "INFO"
    static_dir: str = "public"
    seed_strategy: Literal["random", "fixture"] = "random"
    seed_count: int = Field(30, ge=0)
    seed_window_days: int = Field(60, ge=1)
    seed_random_state: Optional[int] = None
    rate_limit: Optional[str] = None  # slowapi limit string, e.g. "60/minute"

ENV_VARS = {
    "host": "HOST",
    "port": "PORT",
    "reload": "RELOAD",
    "log_level": "LOG_LEVEL",
    "static_dir": "STATIC_DIR",
    "seed_strategy": "SEED_STRATEGY",
    "seed_count": "SEED_COUNT",
    "seed_window_days": "SEED_WINDOW_DAYS",
    "seed_random_state": "SEED_RANDOM_STATE",
    "rate_limit": "RATE_LIMIT",
}

def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Builds Settings from the environment. Unset or blank variables keep their defaults;
    pydantic handles type coercion and raises ValidationError on bad values.
    Call load_dotenv() beforehand to pick up a .env file.
    """
    environ = os.environ if environ is None else environ
    values = {}
    for field_name, var in ENV_VARS.items():
        raw = environ.get(var)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()
    settings = Settings(**values)
    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings
