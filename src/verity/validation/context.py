"""ValidationContext — collects the errors of one validation session.

Usage::

    import re

    from verity.validation import ValidationContext

    ctx = ValidationContext()
    ctx.required(name).key("name")
    ctx.range(age, 1, 120).key("age")
    ctx.match(email, EMAIL_RE).key("email")

    if ctx.has_errors:
        return Template("signup.html", errors=ctx.messages())

Create one context per request and do not share it across threads: every
failing check appends to the same list.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import replace

from verity.config import ValidationConfig
from verity.errors import KeyAlreadySetError, StaleOutcomeError
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

logger = logging.getLogger("verity.validation")


class ValidationContext:
    """Ordered record of every failed check since the last ``clear()``.

    Failures never raise. Each check returns a ``ValidationOutcome``; the
    failed ones are also appended to ``errors`` in call order. Use
    ``error_map()`` (or ``messages()``) to get one error per key, the
    first one recorded winning.
    """

    __slots__ = ("_errors", "_generation", "_kept", "config")

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self.config = config or ValidationConfig()
        self._errors: list[ValidationError] = []
        self._generation = 0
        self._kept = False

    # -- Typed checks --

    def required(self, value: object) -> ValidationOutcome:
        return self._check(Required(), value)

    def minimum(self, value: object, n: int) -> ValidationOutcome:
        return self._check(Minimum(n), value)

    def maximum(self, value: object, n: int) -> ValidationOutcome:
        return self._check(Maximum(n), value)

    def range(self, value: object, low: int, high: int) -> ValidationOutcome:
        return self._check(Range(low, high), value)

    def min_size(self, value: object, n: int) -> ValidationOutcome:
        return self._check(MinimumSize(n), value)

    def max_size(self, value: object, n: int) -> ValidationOutcome:
        return self._check(MaximumSize(n), value)

    def match(self, value: object, pattern: re.Pattern[str]) -> ValidationOutcome:
        return self._check(PatternMatch(pattern), value)

    def check(self, value: object, *validators: Validator) -> ValidationOutcome:
        """Apply *validators* to *value* in order.

        Stops at the first failure and returns its outcome, so put the
        cheap or prerequisite rules first::

            ctx.check(code, Required(), PatternMatch(CODE_RE)).key("code")

        Returns the last success if every validator passes, or a success
        outcome when called with no validators.
        """
        outcome = ValidationOutcome.success()
        for validator in validators:
            outcome = self._check(validator, value)
            if not outcome.ok:
                return outcome
        return outcome

    def _check(self, validator: Validator, value: object) -> ValidationOutcome:
        if validator.is_satisfied(value):
            return ValidationOutcome.success()

        error = ValidationError(validator.default_message())
        self._errors.append(error)
        if self.config.log_failures:
            logger.debug("%s failed: %s", type(validator).__name__, error.message)
        return ValidationOutcome(self, len(self._errors) - 1, self._generation)

    # -- Reporting --

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        """Every recorded error, in the order the checks ran."""
        return tuple(self._errors)

    @property
    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def error_map(self) -> dict[str, ValidationError]:
        """Return errors by key. The first error recorded for a key wins.

        Typically the first check on a field is the most basic one
        (``required`` before ``match``), so its message is the useful one.
        Unkeyed errors all share the ``""`` key.
        """
        mapping: dict[str, ValidationError] = {}
        for error in self._errors:
            if error.key not in mapping:
                mapping[error.key] = error
        return mapping

    def messages(self) -> dict[str, str]:
        """``error_map()`` reduced to message strings, for templates."""
        return {key: error.message for key, error in self.error_map().items()}

    # -- Lifecycle --

    @property
    def generation(self) -> int:
        """Incremented by every ``clear()``; outcomes from older generations are stale."""
        return self._generation

    @property
    def kept(self) -> bool:
        return self._kept

    def keep(self) -> None:
        """Mark the errors for retention past this request.

        Verity only records the flag; a session or flash layer decides
        what retention means.
        """
        self._kept = True

    def clear(self) -> None:
        """Drop every recorded error. ``kept`` is left as is."""
        if self._errors:
            logger.debug("Clearing %d validation error(s)", len(self._errors))
        self._errors = []
        self._generation += 1

    # -- Outcome handle support --

    def _error_at(self, index: int, generation: int) -> ValidationError:
        if generation != self._generation:
            raise StaleOutcomeError()
        return self._errors[index]

    def _rekey(self, index: int, generation: int, key: str) -> None:
        error = self._error_at(index, generation)
        if error.key == key:
            return
        if error.key and not self.config.allow_rekey:
            raise KeyAlreadySetError(error.key, key)
        self._errors[index] = replace(error, key=key)

    def _reword(self, index: int, generation: int, message: str) -> None:
        error = self._error_at(index, generation)
        self._errors[index] = replace(error, message=message)

    # -- Container protocol --

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(tuple(self._errors))

    def __bool__(self) -> bool:
        """Falsy when there are errors, so ``if not ctx:`` reads as "invalid"."""
        return not self._errors

    def __repr__(self) -> str:
        return f"<ValidationContext errors={len(self._errors)} kept={self._kept}>"
