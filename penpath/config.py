"""Package configuration from environment variables."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    penpath_log_level: str = "info"

    # Sampling defaults (see penpath.engine.config.FlattenConfig)
    penpath_tick_step: float = 0.001
    penpath_lane_tolerance: float = 0.05
    penpath_adaptive_sampling: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for scripts and services embedding penpath."""
    load_dotenv()
    name = (level or settings.penpath_log_level).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
