"""
Payload normalization helpers applied around Firestore reads and writes.

Firestore rejects values it cannot encode and hands timestamps back as
``DatetimeWithNanoseconds`` instead of plain ``datetime`` objects. The
walkers below recurse through dicts and lists (tuples are treated as
lists) and always build new containers, so callers' payloads are never
mutated.
"""

from datetime import datetime, timezone
from typing import Any, Mapping

from google.api_core.datetime_helpers import DatetimeWithNanoseconds
from pydantic import BaseModel


class _AbsentType:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


# Marks a field that is not present and must not be written.
ABSENT = _AbsentType()


def strip_absent(value: Any) -> Any:
    """Drop every ``ABSENT`` field, at any depth. ``None`` and falsy values are kept."""
    if isinstance(value, Mapping):
        return {key: strip_absent(item) for key, item in value.items() if item is not ABSENT}
    if isinstance(value, (list, tuple)):
        return [strip_absent(item) for item in value]
    return value


def to_timestamps(value: Any) -> Any:
    """Replace every ``datetime`` with the Firestore timestamp type.

    Firestore stores instants and reads them back in UTC, and it would
    read a naive value as UTC. Naive values are taken as local time and
    converted to UTC here so the stored instant is the one the caller meant.
    """
    if isinstance(value, DatetimeWithNanoseconds):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.astimezone(timezone.utc)
        return DatetimeWithNanoseconds(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tzinfo=value.tzinfo,
            fold=value.fold,
        )
    if isinstance(value, Mapping):
        return {key: to_timestamps(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_timestamps(item) for item in value]
    return value


def from_timestamps(value: Any) -> Any:
    """Replace every Firestore timestamp with a plain ``datetime``."""
    if isinstance(value, DatetimeWithNanoseconds):
        return datetime(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tzinfo=value.tzinfo,
            fold=value.fold,
        )
    if isinstance(value, Mapping):
        return {key: from_timestamps(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [from_timestamps(item) for item in value]
    return value


def to_document(entity: Any) -> dict:
    """Turn a model or mapping into a plain dict ready for normalization.

    Model fields that were never set are left out, the same way an
    ``ABSENT`` value is.
    """
    if isinstance(entity, BaseModel):
        return entity.model_dump(mode="python", exclude_unset=True)
    if isinstance(entity, Mapping):
        return dict(entity)
    raise TypeError(f"Cannot convert {type(entity).__name__} to a Firestore document")
