"""
Pydantic models for the PathFinder data layer.

This module defines all data models used throughout the package, including:
- The three root datasets (career, streams, exams)
- Stream and exam entities and their loosely-structured sub-records
- Search results and the derived read models served to presentation code
- The load report describing fallbacks and dropped entries

JSON documents use camelCase keys; the models expose snake_case attributes
with camelCase aliases, so both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Base for records loaded from the JSON documents."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


DatasetName = Literal["career", "streams", "exams"]

ResultType = Literal["stream", "exam"]


# ---------------------------------------------------------------------------
# Stream sub-records
# ---------------------------------------------------------------------------


class CareerPath(_Record):
    """A path a student can follow after a stream (e.g. Engineering)."""

    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    courses: List[Any] = Field(default_factory=list)


class JobOpportunity(_Record):
    """A job role reachable from a stream."""

    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[str] = None
    sector: Optional[str] = None


class GovernmentExam(_Record):
    """A government recruitment exam open to graduates of a stream."""

    name: Optional[str] = None
    full_form: Optional[str] = Field(default=None, alias="fullForm")
    eligibility: Optional[str] = None
    description: Optional[str] = None


class ProfessionalCourse(_Record):
    """A professional qualification (CA, CS, ...) linked to a stream."""

    name: Optional[str] = None
    full_form: Optional[str] = Field(default=None, alias="fullForm")
    duration: Optional[str] = None
    description: Optional[str] = None


# Items of the stream collections are either bare labels or records.
CareerPathItem = Union[CareerPath, str]
JobOpportunityItem = Union[JobOpportunity, str]
GovernmentExamItem = Union[GovernmentExam, str]
ProfessionalCourseItem = Union[ProfessionalCourse, str]


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Stream(_Record):
    """
    An academic/career track such as Science, Commerce or Arts.

    ``id`` is optional because entries of the streams document are keyed by
    their id in the enclosing mapping.
    """

    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    career_paths: Optional[List[CareerPathItem]] = Field(default=None, alias="careerPaths")
    job_opportunities: Optional[List[JobOpportunityItem]] = Field(default=None, alias="jobOpportunities")
    government_exams: Optional[List[GovernmentExamItem]] = Field(default=None, alias="governmentExams")
    professional_courses: Optional[List[ProfessionalCourseItem]] = Field(
        default=None, alias="professionalCourses"
    )


class Exam(_Record):
    """A named entrance or qualifying examination."""

    name: str
    full_form: Optional[str] = Field(default=None, alias="fullForm")
    purpose: Optional[str] = None
    category: Optional[str] = None
    level: Optional[str] = None


class ExamCategory(_Record):
    category: str
    exams: List[Exam] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Root datasets
# ---------------------------------------------------------------------------


class CareerDataset(_Record):
    """Contents of ``data/career.json``."""

    streams: List[Stream] = Field(default_factory=list)
    exams: List[Exam] = Field(default_factory=list)
    careers: List[Dict[str, Any]] = Field(default_factory=list)


class StreamsDataset(_Record):
    """Contents of ``data/streams.json``."""

    streams: Dict[str, Stream] = Field(default_factory=dict)


class ExamsDataset(_Record):
    """Contents of ``data/exams.json``."""

    exam_categories: List[ExamCategory] = Field(default_factory=list, alias="examCategories")
    exam_levels: Dict[str, List[Exam]] = Field(default_factory=dict, alias="examLevels")
    preparation_resources: Dict[str, Any] = Field(default_factory=dict, alias="preparationResources")


# ---------------------------------------------------------------------------
# Read models
# ---------------------------------------------------------------------------


class SearchResult(BaseModel):
    """
    A single search hit. Transient: built per query and never stored.

    ``data`` carries the matched entity so presentation code can render
    details without a second lookup.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: ResultType
    name: str
    description: str
    icon: str
    category: Optional[str] = None
    data: Optional[Union[Stream, Exam]] = None


class CareerRecommendations(BaseModel):
    """Everything a stream leads to, with every collection present."""

    model_config = ConfigDict(populate_by_name=True)

    stream: Stream
    career_paths: List[CareerPathItem] = Field(default_factory=list, alias="careerPaths")
    job_opportunities: List[JobOpportunityItem] = Field(default_factory=list, alias="jobOpportunities")
    government_exams: List[GovernmentExamItem] = Field(default_factory=list, alias="governmentExams")
    professional_courses: List[ProfessionalCourseItem] = Field(
        default_factory=list, alias="professionalCourses"
    )


class QuickStats(BaseModel):
    """Counters shown on the home page."""

    model_config = ConfigDict(populate_by_name=True)

    total_streams: int = Field(default=0, alias="totalStreams")
    total_exams: int = Field(default=0, alias="totalExams")
    total_careers: int = Field(default=0, alias="totalCareers")


class StreamOption(BaseModel):
    """An entry of a stream selector (``<option value=id>name</option>``)."""

    value: Optional[str]
    label: str


class TrendingCareer(BaseModel):
    name: str
    growth: str
    salary: str


class LoadReport(BaseModel):
    """
    Outcome of ``DataStore.load_all``.

    ``degraded`` names the datasets that fell back to their empty default,
    which lets callers tell "failed to load" apart from "genuinely empty".
    ``warnings`` lists entries dropped because they did not validate.
    """

    degraded: List[DatasetName] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @property
    def is_degraded(self) -> bool:
        return bool(self.degraded)
