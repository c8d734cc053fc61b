"""
In-memory store for the three PathFinder datasets.

The store is explicitly constructed around a DatasetSource, loaded once with
``load_all()`` and read-only afterwards. Every load failure is converted into
the dataset's empty default, so loading always ends with the store ready.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

from pathfinder.core.config import PathFinderConfig
from pathfinder.data.parsing import (
    parse_career_dataset,
    parse_exams_dataset,
    parse_streams_dataset,
)
from pathfinder.domain.models import (
    CareerDataset,
    CareerRecommendations,
    DatasetName,
    Exam,
    ExamCategory,
    ExamsDataset,
    GovernmentExamItem,
    JobOpportunityItem,
    LoadReport,
    QuickStats,
    Stream,
    StreamOption,
    StreamsDataset,
    TrendingCareer,
)
from pathfinder.storage.source import DatasetLoadError, DatasetSource

logger = logging.getLogger(__name__)

ReadyCallback = Callable[["DataStore"], None]

# Order of LoadReport.degraded, independent of which fetch settles first.
DATASET_ORDER = ("career", "streams", "exams")

# Shown on the home page; not part of any dataset.
TRENDING_CAREERS = [
    TrendingCareer(name="Data Scientist", growth="25%", salary="₹8-30 LPA"),
    TrendingCareer(name="AI Engineer", growth="30%", salary="₹10-35 LPA"),
    TrendingCareer(name="Cybersecurity Analyst", growth="28%", salary="₹6-25 LPA"),
    TrendingCareer(name="Digital Marketer", growth="20%", salary="₹4-15 LPA"),
]


class DataStore:
    """Holds the career, streams and exams datasets and serves reads over them."""

    def __init__(
        self,
        source: DatasetSource,
        config: Optional[PathFinderConfig] = None,
        on_ready: Optional[ReadyCallback] = None,
    ):
        self.source = source
        self.config = config or PathFinderConfig()

        self._career: Optional[CareerDataset] = None
        self._streams: Optional[StreamsDataset] = None
        self._exams: Optional[ExamsDataset] = None

        self._report = LoadReport()
        self._ready = asyncio.Event()
        self._load_task: Optional[asyncio.Task] = None
        self._callbacks: List[ReadyCallback] = []
        if on_ready is not None:
            self._callbacks.append(on_ready)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    async def __aenter__(self) -> "DataStore":
        await self.load_all()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.source.aclose()

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    @property
    def load_report(self) -> LoadReport:
        return self._report

    def on_ready(self, callback: ReadyCallback) -> None:
        """
        Register a one-shot callback run once all datasets have settled.
        If the store is already ready the callback runs immediately.
        """
        if self.is_ready:
            self._run_callback(callback)
        else:
            self._callbacks.append(callback)

    async def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for readiness. Returns False if ``timeout`` elapsed first.
        """
        if timeout is None:
            await self._ready.wait()
            return True
        try:
            await asyncio.wait_for(self._ready.wait(), timeout)
        except asyncio.TimeoutError:
            return False
        return True

    async def load_all(self) -> None:
        """
        Load the three datasets concurrently and mark the store ready.

        Never raises because of a dataset: each load substitutes its empty
        default on failure. Concurrent and repeated calls share one load.
        """
        if self.is_ready:
            return
        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self._load_all())
        await asyncio.shield(self._load_task)

    async def _load_all(self) -> None:
        logger.info(f"Loading PathFinder data from {self.source.describe()}")
        await asyncio.gather(
            self._load_career(),
            self._load_streams(),
            self._load_exams(),
        )
        self._report.degraded.sort(key=DATASET_ORDER.index)
        self._ready.set()

        if self._report.is_degraded:
            logger.warning(
                f"PathFinder is ready with defaults for: {', '.join(self._report.degraded)} "
                f"(data source: {self.source.describe()})"
            )
        else:
            logger.info("PathFinder is ready. All data loaded successfully.")

        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            self._run_callback(callback)

    def _run_callback(self, callback: ReadyCallback) -> None:
        try:
            callback(self)
        except Exception as e:
            logger.error(f"Ready callback {callback!r} failed: {e}", exc_info=True)

    async def _fetch(self, name: DatasetName, path: str, parse: Callable[..., Any]) -> Optional[Any]:
        warnings: List[str] = []
        try:
            raw = await self.source.fetch_json(path)
            dataset = parse(raw, path, warnings)
        except DatasetLoadError as e:
            logger.error(f"Error loading {path} from {self.source.describe()}: {e.reason}. Using empty {name} data.")
            self._report.degraded.append(name)
            return None
        except Exception as e:
            logger.error(f"Unexpected error loading {path} from {self.source.describe()}: {e}. Using empty {name} data.", exc_info=True)
            self._report.degraded.append(name)
            return None
        finally:
            self._report.warnings.extend(warnings)

        logger.info(f"Loaded {name} data from {path}")
        return dataset

    async def _load_career(self) -> None:
        dataset = await self._fetch("career", self.config.career_path, parse_career_dataset)
        self._career = dataset if dataset is not None else CareerDataset()

    async def _load_streams(self) -> None:
        dataset = await self._fetch("streams", self.config.streams_path, parse_streams_dataset)
        self._streams = dataset if dataset is not None else StreamsDataset()

    async def _load_exams(self) -> None:
        dataset = await self._fetch("exams", self.config.exams_path, parse_exams_dataset)
        self._exams = dataset if dataset is not None else ExamsDataset()

    # ========================================================================
    # Raw datasets (read-only; used by the search engine)
    # ========================================================================

    @property
    def career_data(self) -> CareerDataset:
        return self._career if self._career is not None else CareerDataset()

    @property
    def streams_data(self) -> StreamsDataset:
        return self._streams if self._streams is not None else StreamsDataset()

    @property
    def exams_data(self) -> ExamsDataset:
        return self._exams if self._exams is not None else ExamsDataset()

    # ========================================================================
    # Streams
    # ========================================================================

    def get_all_streams(self) -> List[Stream]:
        return list(self.career_data.streams)

    def get_stream(self, stream_id: str) -> Optional[Stream]:
        """
        Find a stream by id. The career dataset takes precedence over the
        streams dataset; the two representations are never merged.
        """
        for stream in self.career_data.streams:
            if stream.id == stream_id:
                return stream
        return self.streams_data.streams.get(stream_id)

    def get_career_recommendations(self, stream_id: str) -> Optional[CareerRecommendations]:
        stream = self.get_stream(stream_id)
        if stream is None:
            return None

        return CareerRecommendations(
            stream=stream,
            career_paths=list(stream.career_paths or []),
            job_opportunities=list(stream.job_opportunities or []),
            government_exams=list(stream.government_exams or []),
            professional_courses=list(stream.professional_courses or []),
        )

    def get_jobs_by_stream(self, stream_id: str) -> List[JobOpportunityItem]:
        stream = self.get_stream(stream_id)
        if stream is None:
            return []
        return list(stream.job_opportunities or [])

    def get_exams_by_stream(self, stream_id: str) -> List[GovernmentExamItem]:
        stream = self.get_stream(stream_id)
        if stream is None:
            return []
        return list(stream.government_exams or [])

    def get_stream_options(self) -> List[StreamOption]:
        return [StreamOption(value=s.id, label=s.name) for s in self.career_data.streams]

    # ========================================================================
    # Exams
    # ========================================================================

    def get_exam_categories(self) -> List[ExamCategory]:
        return list(self.exams_data.exam_categories)

    def get_exams_by_category(self, category: str) -> List[Exam]:
        wanted = category.lower()
        for cat in self.exams_data.exam_categories:
            if cat.category.lower() == wanted:
                return list(cat.exams)
        return []

    def get_exams_by_level(self, level: str) -> List[Exam]:
        return list(self.exams_data.exam_levels.get(level, []))

    def get_preparation_resources(self) -> Dict[str, Any]:
        return dict(self.exams_data.preparation_resources)

    # ========================================================================
    # Home page
    # ========================================================================

    def get_trending_careers(self) -> List[TrendingCareer]:
        return list(TRENDING_CAREERS)

    def get_quick_stats(self) -> QuickStats:
        streams = self.career_data.streams
        return QuickStats(
            total_streams=len(streams),
            total_exams=sum(len(cat.exams) for cat in self.exams_data.exam_categories),
            total_careers=sum(len(s.job_opportunities or []) for s in streams),
        )
