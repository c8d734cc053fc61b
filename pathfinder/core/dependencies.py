import logging
from typing import Optional

from pathfinder.core.config import PathFinderConfig, load_config
from pathfinder.data.store import DataStore, ReadyCallback
from pathfinder.domain.search import SearchEngine
from pathfinder.storage.file_source import FileDatasetSource
from pathfinder.storage.http_source import HttpDatasetSource
from pathfinder.storage.source import DatasetSource

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the package log format. ``level`` defaults to PATHFINDER_LOG_LEVEL."""
    if level is None:
        level = load_config().log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_source(config: PathFinderConfig) -> DatasetSource:
    """HTTP when a data URL is configured, otherwise the local data directory."""
    if config.data_url:
        return HttpDatasetSource(config.data_url, timeout=config.fetch_timeout_seconds)
    return FileDatasetSource(config.data_dir)


def create_data_store(
    config: Optional[PathFinderConfig] = None,
    on_ready: Optional[ReadyCallback] = None,
) -> DataStore:
    """
    Build an unloaded DataStore. Callers own its lifecycle: await
    ``load_all()`` (or use it as an async context manager) and ``close()`` it.
    """
    config = config or load_config()
    return DataStore(create_source(config), config=config, on_ready=on_ready)


def create_search_engine(store: DataStore) -> SearchEngine:
    return SearchEngine(store)
