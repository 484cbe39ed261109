"""Assertion helpers for tests of code that validates.

Each assertion produces a clear error message on failure::

    from verity.testing import assert_error, assert_valid

    ctx = ValidationContext()
    register(ctx, form)
    assert_error(ctx, "email", "Required")
"""

from verity.validation.context import ValidationContext


def assert_valid(ctx: ValidationContext) -> None:
    """Assert no check has failed on *ctx*."""
    assert not ctx.has_errors, f"Expected no validation errors, got {ctx.messages()!r}"


def assert_error(ctx: ValidationContext, key: str, message: str | None = None) -> None:
    """Assert *key* has an error and, if given, that its reported message is *message*.

    "Reported" means the first error recorded for the key, as ``error_map()``
    returns it.
    """
    errors = ctx.error_map()
    assert key in errors, (
        f"Expected a validation error for {key!r}.\n"
        f"Errors: {ctx.messages()!r}"
    )
    if message is not None:
        assert errors[key].message == message, (
            f"Expected {key!r} error {message!r}, got {errors[key].message!r}"
        )


def assert_no_error(ctx: ValidationContext, key: str) -> None:
    """Assert *key* has no recorded error."""
    errors = ctx.error_map()
    assert key not in errors, (
        f"Unexpected validation error for {key!r}: {errors[key].message!r}"
    )
