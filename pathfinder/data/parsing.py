"""
Load-boundary validation of the raw JSON documents.

Documents are validated entry by entry: an entry that does not fit its model
is dropped and reported as a warning, while its valid siblings are kept.
Missing top-level fields become empty defaults. Only a document whose top
level is not a JSON object is rejected as a whole.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from pathfinder.domain.models import (
    CareerDataset,
    Exam,
    ExamCategory,
    ExamsDataset,
    Stream,
    StreamsDataset,
)
from pathfinder.storage.source import DatasetLoadError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _warn(warnings: List[str], message: str) -> None:
    logger.warning(message)
    warnings.append(message)


def _describe_error(e: ValidationError) -> str:
    first = e.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    return f"{loc}: {first.get('msg')}"


def _validate(model: Type[ModelT], raw: Any, where: str, warnings: List[str]):
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        _warn(warnings, f"Dropped malformed entry {where} ({_describe_error(e)})")
        return None


def _parse_list(raw: Any, model: Type[ModelT], where: str, warnings: List[str]) -> List[ModelT]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        _warn(warnings, f"Ignored {where}: expected a list, got {type(raw).__name__}")
        return []

    items: List[ModelT] = []
    for i, entry in enumerate(raw):
        item = _validate(model, entry, f"{where}[{i}]", warnings)
        if item is not None:
            items.append(item)
    return items


def _parse_mapping(raw: Any, where: str, warnings: List[str]) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        _warn(warnings, f"Ignored {where}: expected an object, got {type(raw).__name__}")
        return {}
    return raw


def _require_object(raw: Any, path: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise DatasetLoadError(path, f"expected a JSON object, got {type(raw).__name__}")
    return raw


def parse_career_dataset(raw: Any, path: str, warnings: List[str]) -> CareerDataset:
    doc = _require_object(raw, path)

    careers: List[Dict[str, Any]] = []
    for i, entry in enumerate(doc.get("careers") or []):
        if isinstance(entry, dict):
            careers.append(entry)
        else:
            _warn(warnings, f"Dropped malformed entry careers[{i}] (expected an object)")

    return CareerDataset(
        streams=_parse_list(doc.get("streams"), Stream, "streams", warnings),
        exams=_parse_list(doc.get("exams"), Exam, "exams", warnings),
        careers=careers,
    )


def parse_streams_dataset(raw: Any, path: str, warnings: List[str]) -> StreamsDataset:
    doc = _require_object(raw, path)

    streams: Dict[str, Stream] = {}
    for stream_id, entry in _parse_mapping(doc.get("streams"), "streams", warnings).items():
        stream = _validate(Stream, entry, f"streams.{stream_id}", warnings)
        if stream is not None:
            streams[stream_id] = stream
    return StreamsDataset(streams=streams)


def parse_exams_dataset(raw: Any, path: str, warnings: List[str]) -> ExamsDataset:
    doc = _require_object(raw, path)

    categories: List[ExamCategory] = []
    raw_categories = doc.get("examCategories")
    if raw_categories is not None and not isinstance(raw_categories, list):
        _warn(warnings, f"Ignored examCategories: expected a list, got {type(raw_categories).__name__}")
        raw_categories = []

    for i, entry in enumerate(raw_categories or []):
        where = f"examCategories[{i}]"
        if not isinstance(entry, dict):
            _warn(warnings, f"Dropped malformed entry {where} (expected an object)")
            continue
        # Validate exams one by one so a single bad exam keeps its category.
        exams = _parse_list(entry.get("exams"), Exam, f"{where}.exams", warnings)
        category = _validate(ExamCategory, {**entry, "exams": exams}, where, warnings)
        if category is not None:
            categories.append(category)

    levels: Dict[str, List[Exam]] = {}
    for level, entry in _parse_mapping(doc.get("examLevels"), "examLevels", warnings).items():
        levels[level] = _parse_list(entry, Exam, f"examLevels.{level}", warnings)

    return ExamsDataset(
        exam_categories=categories,
        exam_levels=levels,
        preparation_resources=_parse_mapping(
            doc.get("preparationResources"), "preparationResources", warnings
        ),
    )
