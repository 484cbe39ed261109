"""Request-scoped validation context via ContextVar.

Provides:
- ``validation_var``: The ``ValidationContext`` for the current task/thread.
- ``get_validation()``: Accessor that fails loudly outside a scope.
- ``validation_scope()``: Installs a fresh context for the duration of a block.

Request middleware opens a scope per request; handlers and helpers deeper
in the call stack reach the same context without threading it through
every signature.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local otherwise.
    No locks needed, as long as one context is never shared between scopes.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from verity.config import ValidationConfig
from verity.validation.context import ValidationContext

validation_var: ContextVar[ValidationContext] = ContextVar("verity_validation")
"""The current validation context. Set by ``validation_scope()``."""


def get_validation() -> ValidationContext:
    """Return the current validation context.

    Raises ``LookupError`` if called outside a validation scope.
    """
    return validation_var.get()


@contextmanager
def validation_scope(config: ValidationConfig | None = None) -> Iterator[ValidationContext]:
    """Run a block with its own ``ValidationContext``.

    Usage::

        with validation_scope() as ctx:
            handle(request)  # calls get_validation() internally
            if ctx.has_errors:
                ...

    The previous context (if any) is restored on exit, even on error.
    """
    ctx = ValidationContext(config)
    token = validation_var.set(ctx)
    try:
        yield ctx
    finally:
        validation_var.reset(token)
