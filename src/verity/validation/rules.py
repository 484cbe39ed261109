"""Built-in validators.

Each validator is a small frozen dataclass satisfying the ``Validator``
protocol::

    class Validator(Protocol):
        def is_satisfied(self, candidate: object) -> bool: ...
        def default_message(self) -> str: ...

Custom validators follow the same protocol — any object with those two
methods works with ``ValidationContext.check()``.

Every built-in classifies its candidate first (see ``candidate.py``), so a
value outside the supported kinds raises ``UnsupportedCandidateError``
rather than failing the check.
"""

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from verity.errors import ConfigurationError, ContractViolation
from verity.validation.candidate import CandidateKind, classify, is_zero_timestamp


@runtime_checkable
class Validator(Protocol):
    """A named rule that tests one property of a candidate value."""

    def is_satisfied(self, candidate: object) -> bool: ...

    def default_message(self) -> str: ...


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise ConfigurationError(msg)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Required:
    """Value must be present and not empty.

    Empty strings, empty lists and the zero timestamp count as empty.
    Integers and booleans are always present, ``0`` and ``False`` included.
    """

    def is_satisfied(self, candidate: object) -> bool:
        match classify(candidate):
            case CandidateKind.ABSENT:
                return False
            case CandidateKind.STRING | CandidateKind.LIST:
                return len(candidate) > 0  # type: ignore[arg-type]
            case CandidateKind.TIMESTAMP:
                return not is_zero_timestamp(candidate)  # type: ignore[arg-type]
            case _:
                return True

    def default_message(self) -> str:
        return "Required"


# ---------------------------------------------------------------------------
# Numeric bounds
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Minimum:
    """Integer not less than *threshold*. Non-integers fail."""

    threshold: int

    def __post_init__(self) -> None:
        _require_int("Minimum threshold", self.threshold)

    def is_satisfied(self, candidate: object) -> bool:
        if classify(candidate) is CandidateKind.INTEGER:
            return candidate >= self.threshold  # type: ignore[operator]
        return False

    def default_message(self) -> str:
        return f"Minimum is {self.threshold}"


@dataclass(frozen=True, slots=True)
class Maximum:
    """Integer not greater than *threshold*. Non-integers fail."""

    threshold: int

    def __post_init__(self) -> None:
        _require_int("Maximum threshold", self.threshold)

    def is_satisfied(self, candidate: object) -> bool:
        if classify(candidate) is CandidateKind.INTEGER:
            return candidate <= self.threshold  # type: ignore[operator]
        return False

    def default_message(self) -> str:
        return f"Maximum is {self.threshold}"


@dataclass(frozen=True, slots=True)
class Range:
    """Integer within ``[low, high]``, both ends inclusive.

    Unlike ``Minimum``/``Maximum``, a non-integer candidate is a
    ``ContractViolation``: a range check only makes sense on a number the
    caller has already bound.
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        _require_int("Range low", self.low)
        _require_int("Range high", self.high)
        if self.low > self.high:
            msg = f"Range low ({self.low}) is greater than high ({self.high})"
            raise ConfigurationError(msg)

    def is_satisfied(self, candidate: object) -> bool:
        kind = classify(candidate)
        if kind is not CandidateKind.INTEGER:
            msg = f"Range requires an integer, got {kind.value}"
            raise ContractViolation(msg)
        return self.low <= candidate <= self.high  # type: ignore[operator]

    def default_message(self) -> str:
        return f"Valid range is {self.low} to {self.high}, inclusive."


# ---------------------------------------------------------------------------
# Size
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MinimumSize:
    """String or list of at least *threshold* items. Other kinds fail."""

    threshold: int

    def __post_init__(self) -> None:
        _require_int("MinimumSize threshold", self.threshold)
        if self.threshold < 0:
            msg = f"MinimumSize threshold must be >= 0, got {self.threshold}"
            raise ConfigurationError(msg)

    def is_satisfied(self, candidate: object) -> bool:
        if classify(candidate) in (CandidateKind.STRING, CandidateKind.LIST):
            return len(candidate) >= self.threshold  # type: ignore[arg-type]
        return False

    def default_message(self) -> str:
        return f"Minimum size is {self.threshold}"


@dataclass(frozen=True, slots=True)
class MaximumSize:
    """String or list of at most *threshold* items. Other kinds fail."""

    threshold: int

    def __post_init__(self) -> None:
        _require_int("MaximumSize threshold", self.threshold)
        if self.threshold < 0:
            msg = f"MaximumSize threshold must be >= 0, got {self.threshold}"
            raise ConfigurationError(msg)

    def is_satisfied(self, candidate: object) -> bool:
        if classify(candidate) in (CandidateKind.STRING, CandidateKind.LIST):
            return len(candidate) <= self.threshold  # type: ignore[arg-type]
        return False

    def default_message(self) -> str:
        return f"Maximum size is {self.threshold}"


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """String containing a match for a compiled regex (``search``, not ``fullmatch``).

    Anchor the pattern (``^...$``) to require the whole value to match.
    Compiling is the caller's job; pass ``re.compile(...)``, not a string.
    """

    pattern: re.Pattern[str]

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, re.Pattern) or not isinstance(self.pattern.pattern, str):
            msg = f"PatternMatch requires a compiled str pattern, got {type(self.pattern).__name__}"
            raise ContractViolation(msg)

    def is_satisfied(self, candidate: object) -> bool:
        kind = classify(candidate)
        if kind is not CandidateKind.STRING:
            msg = f"PatternMatch requires a string, got {kind.value}"
            raise ContractViolation(msg)
        return self.pattern.search(candidate) is not None  # type: ignore[arg-type]

    def default_message(self) -> str:
        return f"Must match {self.pattern.pattern}"
