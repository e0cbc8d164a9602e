"""
Renderers surface collected validation errors to the user and clear them again.
The core only talks to the Renderer protocol; MarkupRenderer is an in-memory reference
implementation over containers that expose `classes` and `children`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence

from input_validator.fields import FieldGroup, FieldReference
from input_validator.models import ValidationError
from input_validator.logging_config import get_logger

logger = get_logger("rendering")

ERROR_CLASS = "has-error"
MARKER_CLASS = "error-span"


class Renderer(Protocol):
    def clear(self) -> None: ...

    def render(self, errors: Sequence[ValidationError]) -> None: ...


class LogRenderer:
    """Default renderer: logs errors instead of drawing them."""

    def clear(self) -> None:
        logger.debug("validation_errors_cleared")

    def render(self, errors: Sequence[ValidationError]) -> None:
        logger.info(
            "validation_errors_rendered",
            count=len(errors),
            errors=[{"field": getattr(e.field, "name", None), "message": e.message} for e in errors],
        )


@dataclass(eq=False)
class ErrorMarker:
    text: str
    css_class: str = MARKER_CLASS


@dataclass(eq=False)
class Container:
    """Minimal UI container: a set of state classes plus ordered children."""
    name: str = ""
    classes: set = field(default_factory=set)
    children: list = field(default_factory=list)


class MarkupRenderer:
    """
    Marks each failing field's container with `has-error` and appends the message.
    A container already marked is left untouched, so each shows one message at most.
    Every member of a FieldGroup has its own container marked.
    """

    def __init__(self):
        self._marked: list[Any] = []

    def clear(self) -> None:
        for container in self._marked:
            container.children[:] = [
                c for c in container.children
                if getattr(c, "css_class", None) != MARKER_CLASS
            ]
            container.classes.discard(ERROR_CLASS)
        self._marked.clear()

    def render(self, errors: Sequence[ValidationError]) -> None:
        self.clear()
        for error in errors:
            for container in _containers(error.field):
                self._annotate(container, error.message)

    def _annotate(self, container: Optional[Any], message: str) -> None:
        if container is None:
            logger.warning("validation_error_without_container", message=message)
            return
        if ERROR_CLASS in container.classes:
            return
        container.classes.add(ERROR_CLASS)
        container.children.append(ErrorMarker(text=message))
        self._marked.append(container)


def _containers(ref: FieldReference) -> list:
    if isinstance(ref, FieldGroup):
        return [getattr(h, "parent", None) for h in ref.handles]
    return [ref.parent()]


_default_renderer: Renderer = LogRenderer()


def get_default_renderer() -> Renderer:
    return _default_renderer


def set_default_renderer(renderer: Renderer) -> None:
    global _default_renderer
    _default_renderer = renderer
