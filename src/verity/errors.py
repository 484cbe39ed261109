"""Verity exception hierarchy.

Validation *failures* are data: they are recorded on a
``ValidationContext`` and never raised. The exceptions here cover the
other class of problem, where the calling code itself is wrong.
"""


class VerityError(Exception):
    """Base for all verity-specific errors."""


class ConfigurationError(VerityError):
    """Raised when a config or validator is built with invalid parameters.

    Typically raised at construction time, e.g. ``Range(10, 1)``.
    """


class ContractViolation(VerityError, TypeError):  # noqa: N818 — names the condition
    """A check was called with a value it can never accept.

    This is a caller bug, not a user-input problem, so it aborts the
    check instead of recording a validation error.
    """


class UnsupportedCandidateError(ContractViolation):
    """The value is not one of the supported candidate kinds."""

    def __init__(self, value: object) -> None:
        self.value_type = type(value)
        super().__init__(
            f"Cannot validate a value of type {self.value_type.__name__!r}; "
            "expected str, int, bool, list, tuple, date, datetime or None"
        )


class StaleOutcomeError(ContractViolation):
    """An outcome was used after its context was cleared."""

    def __init__(self) -> None:
        super().__init__("Validation outcome refers to errors that were cleared")


class KeyAlreadySetError(ContractViolation):
    """A second, different key was assigned to a validation error."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(
            f"Validation error is already keyed {current!r}; refusing to re-key as {requested!r}"
        )
