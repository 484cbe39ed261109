"""Candidate kinds — the closed set of value types a validator accepts.

Upstream binding hands verity already-typed values. Anything outside this
set is a caller bug and is rejected by ``classify()`` with
``UnsupportedCandidateError`` instead of quietly failing a check.
"""

from datetime import date, datetime
from enum import Enum

from verity.errors import UnsupportedCandidateError


class CandidateKind(Enum):
    ABSENT = "absent"
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    LIST = "list"
    TIMESTAMP = "timestamp"


def classify(value: object) -> CandidateKind:
    """Return the kind of *value*.

    ``bool`` is checked before ``int`` so ``True`` is never treated as 1.
    ``datetime`` is a ``date`` subclass, so both land on TIMESTAMP.
    """
    if value is None:
        return CandidateKind.ABSENT
    if isinstance(value, str):
        return CandidateKind.STRING
    if isinstance(value, bool):
        return CandidateKind.BOOLEAN
    if isinstance(value, int):
        return CandidateKind.INTEGER
    if isinstance(value, (list, tuple)):
        return CandidateKind.LIST
    if isinstance(value, date):
        return CandidateKind.TIMESTAMP
    raise UnsupportedCandidateError(value)


def is_zero_timestamp(value: date) -> bool:
    """True for the "unset" timestamp (``datetime.min`` / ``date.min``)."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == datetime.min
    return value == date.min
