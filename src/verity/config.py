"""Validation configuration.

ValidationConfig is a frozen dataclass — immutable after creation, shared
freely between contexts.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Per-context validation settings. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(allow_rekey=True, log_failures=False)
    """

    # Keys
    allow_rekey: bool = False  # Permit outcome.key() to replace an existing, different key

    # Logging
    log_failures: bool = True  # DEBUG-log every failed check on "verity.validation"
