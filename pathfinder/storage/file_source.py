"""
Dataset source that reads the JSON documents from a local directory.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import aiofiles

from pathfinder.storage.source import DatasetLoadError, DatasetSource

logger = logging.getLogger(__name__)


class FileDatasetSource(DatasetSource):
    def __init__(self, root: Path):
        self.root = Path(root).expanduser()

    async def fetch_json(self, path: str) -> Any:
        file_path = self.root / path
        logger.debug(f"Reading {file_path}")
        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                text = await f.read()
        except OSError as e:
            raise DatasetLoadError(path, f"{e.__class__.__name__}: {e}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DatasetLoadError(path, f"invalid JSON: {e}") from e

    def describe(self) -> str:
        return str(self.root)
