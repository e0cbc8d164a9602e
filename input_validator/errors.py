"""
Exceptions raised for malformed validation setups.
Field-level failures are never raised; they are collected as ValidationError values.
"""
from typing import Any, Optional


class InputValidatorError(Exception):
    pass


class ConfigurationError(InputValidatorError):
    """A programming mistake in the rules or descriptor. Aborts the whole run."""


class InvalidRule(ConfigurationError):
    def __init__(self, kind: Any, field: Optional[Any] = None):
        self.kind = kind
        self.field = field
        name = getattr(field, "name", None) if field is not None else None
        super().__init__(f"Invalid rule: {kind!r} (input: {name})")


class ArgumentError(ConfigurationError, ValueError):
    pass
