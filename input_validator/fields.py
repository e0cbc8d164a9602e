"""
Field references: a single field handle, or a group whose first member is authoritative.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union, runtime_checkable

from input_validator.errors import ArgumentError


@runtime_checkable
class FieldHandle(Protocol):
    value: Any
    parent: Any


@dataclass(eq=False)
class InputField:
    """Plain in-memory field handle."""
    name: str
    value: Optional[str] = ""
    parent: Any = None


def _read(handle: Any) -> str:
    value = getattr(handle, "value", None)
    return "" if value is None else str(value)


@dataclass(frozen=True, eq=False)
class SingleField:
    handle: Any

    @property
    def name(self) -> Optional[str]:
        return getattr(self.handle, "name", None)

    def value(self) -> str:
        return _read(self.handle)

    def parent(self) -> Any:
        return getattr(self.handle, "parent", None)


@dataclass(frozen=True, eq=False)
class FieldGroup:
    handles: tuple = field(default_factory=tuple)

    def __post_init__(self):
        if not self.handles:
            raise ArgumentError("Field group must contain at least one field")
        object.__setattr__(self, "handles", tuple(self.handles))

    @property
    def first(self) -> Any:
        return self.handles[0]

    @property
    def name(self) -> Optional[str]:
        return getattr(self.first, "name", None)

    def value(self) -> str:
        return _read(self.first)

    def parent(self) -> Any:
        return getattr(self.first, "parent", None)


FieldReference = Union[SingleField, FieldGroup]


def as_field_reference(obj: Any) -> FieldReference:
    """Wrap a raw handle (or a list of handles) into a FieldReference."""
    if isinstance(obj, (SingleField, FieldGroup)):
        return obj
    if isinstance(obj, (list, tuple)):
        return FieldGroup(tuple(obj))
    if obj is None:
        raise ArgumentError("Field reference cannot be None")
    return SingleField(obj)
