from abc import ABC, abstractmethod
from typing import Any


class DatasetLoadError(Exception):
    """
    A dataset could not be loaded: network error, non-2xx response,
    unreadable file, invalid JSON or a document of the wrong shape.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path
        self.reason = reason


class DatasetSource(ABC):
    """
    Abstract base class for the places the JSON datasets are read from.
    """

    @abstractmethod
    async def fetch_json(self, path: str) -> Any:
        """
        Read the resource at ``path`` (relative to the source root) and
        return the decoded JSON. Raises DatasetLoadError on any failure.
        """
        pass

    async def aclose(self) -> None:
        """Release any resources held by the source."""
        pass

    def describe(self) -> str:
        """Human-readable location, used in log messages."""
        return self.__class__.__name__
