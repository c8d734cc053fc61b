"""
PathFinder data layer: loads the career, streams and exams documents and
serves typed reads and search over them.
"""

from pathfinder.core.config import PathFinderConfig, load_config
from pathfinder.core.dependencies import configure_logging, create_data_store, create_search_engine
from pathfinder.data.store import DataStore
from pathfinder.domain.search import SearchEngine

__all__ = [
    "DataStore",
    "PathFinderConfig",
    "SearchEngine",
    "configure_logging",
    "create_data_store",
    "create_search_engine",
    "load_config",
]
