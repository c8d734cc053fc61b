from __future__ import annotations

import logging
from typing import List, Optional, Set

from pathfinder.data.store import DataStore
from pathfinder.domain.models import SearchResult
from pathfinder.domain.text_utils import match_any

logger = logging.getLogger(__name__)

STREAM_ICON = "fas fa-stream"
EXAM_ICON = "fas fa-file-alt"


class SearchEngine:
    """
    Case-insensitive substring search over a DataStore.

    Results keep insertion order: career-dataset streams, then streams-dataset
    streams whose name was not already returned, then exams in category order.
    There is no ranking and no cap on the number of results.
    """

    def __init__(self, store: DataStore):
        self.store = store

    def search(self, term: Optional[str]) -> List[SearchResult]:
        if not term:
            return []

        results: List[SearchResult] = []
        stream_names: Set[str] = set()

        for stream in self.store.career_data.streams:
            if match_any((stream.name, stream.description), term):
                results.append(self._stream_result(stream))
                stream_names.add(stream.name)

        for stream in self.store.streams_data.streams.values():
            if stream.name in stream_names:
                continue
            if match_any((stream.name, stream.description), term):
                results.append(self._stream_result(stream))
                stream_names.add(stream.name)

        for category in self.store.exams_data.exam_categories:
            for exam in category.exams:
                if match_any((exam.name, exam.full_form, exam.purpose), term):
                    results.append(
                        SearchResult(
                            type="exam",
                            name=exam.name,
                            description=exam.purpose or "",
                            icon=EXAM_ICON,
                            category=category.category,
                            data=exam,
                        )
                    )

        logger.debug(f"Search {term!r} returned {len(results)} results")
        return results

    @staticmethod
    def _stream_result(stream) -> SearchResult:
        return SearchResult(
            type="stream",
            name=stream.name,
            description=stream.description or "",
            icon=STREAM_ICON,
            data=stream,
        )
