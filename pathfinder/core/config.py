"""
Runtime configuration for the PathFinder data layer.

Values come from environment variables, falling back to the defaults declared
on PathFinderConfig:

* PATHFINDER_DATA_URL      base URL the JSON documents are fetched from
* PATHFINDER_DATA_DIR      local directory used when no URL is configured
* PATHFINDER_FETCH_TIMEOUT per-request timeout in seconds (unset: no timeout)
* PATHFINDER_LOG_LEVEL     logging level name
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DATA_URL_ENV_VAR = "PATHFINDER_DATA_URL"
DATA_DIR_ENV_VAR = "PATHFINDER_DATA_DIR"
FETCH_TIMEOUT_ENV_VAR = "PATHFINDER_FETCH_TIMEOUT"
LOG_LEVEL_ENV_VAR = "PATHFINDER_LOG_LEVEL"

# Repository root: the documents live under <root>/data/ like on the site.
_REPO_ROOT = Path(__file__).resolve().parents[2]


class PathFinderConfig(BaseModel):
    data_url: Optional[str] = Field(
        default=None,
        description="Base URL of the site; dataset paths are resolved against it.",
    )
    data_dir: Path = Field(
        default=_REPO_ROOT,
        description="Directory dataset paths are resolved against when data_url is unset.",
    )
    career_path: str = "data/career.json"
    streams_path: str = "data/streams.json"
    exams_path: str = "data/exams.json"
    fetch_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Timeout for each dataset fetch. None waits indefinitely.",
    )
    log_level: str = "INFO"
    quick_results_limit: int = Field(
        default=5,
        description="Number of results shown in the live-search dropdown.",
    )
    live_search_min_length: int = Field(
        default=3,
        description="Live search only runs for terms at least this long.",
    )


def _env_str(name: str) -> Optional[str]:
    v = os.getenv(name)
    if v is None or not v.strip():
        return None
    return v.strip()


def _env_float(name: str) -> Optional[float]:
    v = _env_str(name)
    if v is None:
        return None
    try:
        value = float(v)
    except ValueError:
        logger.warning(f"Ignoring {name}={v!r}: not a number")
        return None
    if value <= 0:
        logger.warning(f"Ignoring {name}={v!r}: must be positive")
        return None
    return value


def load_config() -> PathFinderConfig:
    """Build the configuration from the environment."""
    config = PathFinderConfig(
        data_url=_env_str(DATA_URL_ENV_VAR),
        fetch_timeout_seconds=_env_float(FETCH_TIMEOUT_ENV_VAR),
    )

    data_dir = _env_str(DATA_DIR_ENV_VAR)
    if data_dir:
        config.data_dir = Path(data_dir).expanduser()

    log_level = _env_str(LOG_LEVEL_ENV_VAR)
    if log_level:
        config.log_level = log_level.upper()

    return config
