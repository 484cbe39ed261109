"""Verity — typed validation checks with per-field error reporting.

Basic usage::

    from verity import ValidationContext

    ctx = ValidationContext()
    ctx.required(name).key("name")
    ctx.range(age, 1, 120).key("age")

    if ctx.has_errors:
        errors = ctx.messages()  # {"age": "Valid range is 1 to 120, inclusive."}

Request scoping::

    from verity import get_validation, validation_scope

    with validation_scope():
        get_validation().required(token).key("token")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "Maximum",
    "MaximumSize",
    "Minimum",
    "MinimumSize",
    "PatternMatch",
    "Range",
    "Required",
    "ValidationConfig",
    "ValidationContext",
    "ValidationError",
    "ValidationOutcome",
    "Validator",
    "VerityError",
    "get_validation",
    "validation_scope",
]

_VALIDATION_NAMES = frozenset(
    {
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
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import verity`` fast while providing a clean top-level API.
    """
    if name in _VALIDATION_NAMES:
        from verity import validation as _validation

        return getattr(_validation, name)

    if name == "ValidationConfig":
        from verity.config import ValidationConfig

        return ValidationConfig

    if name in ("VerityError", "ConfigurationError", "ContractViolation"):
        from verity import errors as _errors

        return getattr(_errors, name)

    if name in ("get_validation", "validation_scope"):
        from verity import context as _ctx

        return getattr(_ctx, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
