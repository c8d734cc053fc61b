"""
Caller-side search policies used by the site's search box.

The search engine itself has no notion of readiness or result limits; these
helpers apply the page's rules on top of it:
* live (as-you-type) search runs only once the store is ready and the term is
  long enough, and shows a handful of quick results;
* the explicit search action falls back to a small built-in list while the
  data is still loading.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from pathfinder.data.store import DataStore
from pathfinder.domain.models import SearchResult
from pathfinder.domain.search import EXAM_ICON, STREAM_ICON, SearchEngine
from pathfinder.domain.text_utils import match_any

logger = logging.getLogger(__name__)

FALLBACK_ENTRIES = [
    ("stream", "Science Stream", "Engineering, Medical, Research careers"),
    ("stream", "Commerce Stream", "Business, Finance, Accounting careers"),
    ("stream", "Arts Stream", "Civil Services, Humanities, Creative arts"),
    ("exam", "JEE Main", "Engineering entrance exam"),
    ("exam", "NEET UG", "Medical entrance exam"),
]


def live_search(store: DataStore, engine: SearchEngine, term: Optional[str]) -> List[SearchResult]:
    """
    Quick results for the search-as-you-type dropdown.

    Returns nothing until the store is ready or while the term is shorter
    than ``live_search_min_length``.
    """
    if not store.is_ready:
        return []
    term = (term or "").strip()
    if len(term) < store.config.live_search_min_length:
        return []
    return engine.search(term)[: store.config.quick_results_limit]


def fallback_search(term: str) -> List[SearchResult]:
    results: List[SearchResult] = []
    for kind, name, description in FALLBACK_ENTRIES:
        if match_any((name, description), term):
            results.append(
                SearchResult(
                    type=kind,
                    name=name,
                    description=description,
                    icon=STREAM_ICON if kind == "stream" else EXAM_ICON,
                )
            )
    return results


def search_careers(store: DataStore, engine: SearchEngine, term: Optional[str]) -> List[SearchResult]:
    """The explicit search action (Enter key or search button)."""
    term = (term or "").strip()
    if not term:
        logger.info("Ignoring empty search")
        return []

    if store.is_ready:
        return engine.search(term)

    logger.debug(f"Data not loaded yet, using fallback search for {term!r}")
    return fallback_search(term)
