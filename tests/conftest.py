import asyncio
import copy
from typing import Any, Dict, Optional

import pytest

from pathfinder.storage.source import DatasetLoadError, DatasetSource

CAREER_DOC = {
    "streams": [
        {
            "id": "science",
            "name": "Science Stream",
            "description": "Engineering, Medical and Research careers",
            "careerPaths": [{"name": "Engineering", "duration": "4 years"}, "Research"],
            "jobOpportunities": [{"title": "Software Engineer", "salary": "₹6-20 LPA"}, "Doctor"],
            "governmentExams": [{"name": "ISRO Scientist"}],
        },
        {
            "id": "commerce",
            "name": "Commerce Stream",
            "description": "Business, Finance and Accounting careers",
            "jobOpportunities": ["Accountant"],
            "professionalCourses": [{"name": "CA", "fullForm": "Chartered Accountant"}],
        },
    ],
    "exams": [],
    "careers": [{"name": "Data Scientist"}],
}

STREAMS_DOC = {
    "streams": {
        "science": {"name": "Science (PCM/PCB)", "description": "Physics, Chemistry, Maths or Biology"},
        "arts": {"name": "Arts Stream", "description": "Humanities and Civil Services"},
        "commerce-dup": {"name": "Commerce Stream", "description": "Business studies"},
    }
}

EXAMS_DOC = {
    "examCategories": [
        {
            "category": "Engineering",
            "exams": [
                {"name": "JEE Main", "fullForm": "Joint Entrance Examination", "purpose": "Engineering Entrance Exam"},
                {"name": "BITSAT", "purpose": "Admission to BITS campuses"},
            ],
        },
        {
            "category": "Medical",
            "exams": [
                {"name": "NEET UG", "fullForm": "National Eligibility cum Entrance Test", "purpose": "Medical entrance"},
            ],
        },
    ],
    "examLevels": {
        "after12th": [{"name": "JEE Main", "purpose": "Engineering Entrance Exam"}],
    },
    "preparationResources": {"books": ["NCERT"]},
}

DEFAULT_DOCS = {
    "data/career.json": CAREER_DOC,
    "data/streams.json": STREAMS_DOC,
    "data/exams.json": EXAMS_DOC,
}


class FakeSource(DatasetSource):
    """
    In-memory source. Paths mapped to an Exception are raised; when ``gates``
    is given, each fetch waits for its path's event before answering.
    """

    def __init__(self, docs: Dict[str, Any], gates: Optional[Dict[str, asyncio.Event]] = None):
        self.docs = docs
        self.gates = gates or {}
        self.fetched = []
        self.closed = False

    async def fetch_json(self, path: str) -> Any:
        self.fetched.append(path)
        gate = self.gates.get(path)
        if gate is not None:
            await gate.wait()
        if path not in self.docs:
            raise DatasetLoadError(path, "HTTP 404")
        doc = self.docs[path]
        if isinstance(doc, Exception):
            raise doc
        return copy.deepcopy(doc)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def docs():
    return copy.deepcopy(DEFAULT_DOCS)


@pytest.fixture
def make_source(docs):
    def _make(overrides: Optional[Dict[str, Any]] = None, gates=None) -> FakeSource:
        merged = dict(docs)
        for path, doc in (overrides or {}).items():
            if doc is None:
                merged.pop(path, None)
            else:
                merged[path] = doc
        return FakeSource(merged, gates=gates)

    return _make


@pytest.fixture
def loaded_store(make_source):
    from pathfinder.data.store import DataStore

    store = DataStore(make_source())
    asyncio.run(store.load_all())
    return store
