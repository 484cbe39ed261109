"""Validation — typed checks, accumulated errors, one message per field.

Usage::

    import re

    from verity.validation import PatternMatch, Required, ValidationContext

    USERNAME_RE = re.compile(r"^[a-z0-9_]+$")

    def signup(name: str, age: int, tags: list[str]) -> dict[str, str]:
        ctx = ValidationContext()
        ctx.check(name, Required(), PatternMatch(USERNAME_RE)).key("name")
        ctx.range(age, 13, 120).key("age")
        ctx.max_size(tags, 5).key("tags")
        return ctx.messages()  # {} when everything passed
"""

from verity.validation.candidate import CandidateKind, classify
from verity.validation.context import ValidationContext
from verity.validation.result import ValidationError, ValidationOutcome
from verity.validation.rules import (
    Maximum,
    MaximumSize,
    Minimum,
    MinimumSize,
    PatternMatch,
    Range,
    Required,
    Validator,
)

__all__ = [
    "CandidateKind",
    "Maximum",
    "MaximumSize",
    "Minimum",
    "MinimumSize",
    "PatternMatch",
    "Range",
    "Required",
    "ValidationContext",
    "ValidationError",
    "ValidationOutcome",
    "Validator",
    "classify",
]
