from typing import Any, Iterable, Optional


def match_text(value: Optional[str], term: Optional[str]) -> bool:
    """
    Case-insensitive substring match of ``term`` within ``value``.

    Missing values never match, and only strings are considered: numbers and
    other JSON values are skipped rather than stringified.
    """
    if not term:
        return False
    if not isinstance(value, str):
        return False
    return term.lower() in value.lower()


def match_any(values: Iterable[Any], term: Optional[str]) -> bool:
    for value in values:
        if match_text(value, term):
            return True
    return False
