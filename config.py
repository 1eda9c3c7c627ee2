"""
Server settings read from the environment, and default logging setup.
"""

import logging
import os
from functools import lru_cache
from typing import Union

from pydantic import BaseModel, Field

ENV_PREFIX = "COLOR_ENGINE_"


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8973, ge=1, le=65535)
    log_level: str = "INFO"
    mcp: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}
        for name in cls.model_fields:
            raw = os.environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def setup_default_logging(level: Union[int, str] = "INFO") -> None:
    """Apply a minimal logging configuration once.

    Does nothing when the root logger already has handlers.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
