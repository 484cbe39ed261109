"""Validation records — the error a failed check leaves behind, and the
outcome every check returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from verity.errors import StaleOutcomeError

if TYPE_CHECKING:
    from verity.validation.context import ValidationContext


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One failed check: a message and the key of the field it belongs to.

    ``key`` is empty until the caller names it through the outcome::

        ctx.required(form_name).key("name")

    ``str(error)`` is the message, so errors drop straight into templates.
    """

    message: str
    key: str = ""

    def __str__(self) -> str:
        return self.message


class ValidationOutcome:
    """The result of a single check.

    ``ok`` is True when the check passed; ``error`` is the recorded
    ``ValidationError`` when it failed, and ``None`` otherwise. The outcome
    is truthy when ok.

    A failed outcome is a handle into its context's error list, not a copy:
    ``key()`` and ``message()`` update the stored error in place and return
    the outcome for chaining::

        ctx.range(age, 1, 120).key("age").message("Enter a real age")

    Both are no-ops on a successful outcome.
    """

    __slots__ = ("_context", "_generation", "_index")

    def __init__(
        self,
        context: ValidationContext | None = None,
        index: int | None = None,
        generation: int = 0,
    ) -> None:
        self._context = context
        self._index = index
        self._generation = generation

    @classmethod
    def success(cls) -> ValidationOutcome:
        return cls()

    @property
    def ok(self) -> bool:
        return self._index is None

    @property
    def error(self) -> ValidationError | None:
        if self._index is None or self._context is None:
            return None
        return self._context._error_at(self._index, self._generation)

    def key(self, key: str) -> ValidationOutcome:
        """Associate the recorded error with *key* (usually a field name)."""
        if self._index is not None and self._context is not None:
            self._context._rekey(self._index, self._generation, key)
        return self

    def message(self, message: str) -> ValidationOutcome:
        """Replace the recorded error's default message."""
        if self._index is not None and self._context is not None:
            self._context._reword(self._index, self._generation, message)
        return self

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return "<ValidationOutcome ok>"
        try:
            return f"<ValidationOutcome failed {self.error!r}>"
        except StaleOutcomeError:
            return "<ValidationOutcome stale>"
