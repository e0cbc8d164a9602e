"""
Validation orchestrator.
Ties together: shape normalization -> rule evaluation -> error collection -> optional rendering.
"""
from __future__ import annotations

from typing import Any, Optional

from input_validator.errors import ArgumentError, ConfigurationError
from input_validator.models import ValidationError
from input_validator.rendering import Renderer, get_default_renderer
from input_validator.settings import get_settings
from input_validator.validators import ErrorCollector, evaluate, normalize_descriptors
from input_validator.logging_config import get_logger

logger = get_logger("pipeline")


def _is_empty_descriptor(descriptor: Any) -> bool:
    if descriptor is None:
        return True
    try:
        return len(descriptor) == 0
    except TypeError:
        return False


def collect_errors(descriptor: Any) -> list[ValidationError]:
    """
    Evaluate every (field, rule) pair of the descriptor and return the failures in order.
    The first configuration error aborts the run; no partial list is returned.
    """
    if _is_empty_descriptor(descriptor):
        raise ArgumentError("Invalid arguments!")

    tasks = normalize_descriptors(descriptor)
    log = logger.bind(tasks=len(tasks))
    log.debug("validation_start")

    collector = ErrorCollector()
    try:
        for task in tasks:
            error = evaluate(task)
            if error is not None:
                collector.add(error)
    except ConfigurationError as e:
        log.error("configuration_error", error=str(e))
        raise

    log.debug("validation_complete", errors=len(collector))
    return collector.all()


def validate_inputs(
    descriptor: Any,
    handle_errors: bool = True,
    renderer: Optional[Renderer] = None,
) -> bool:
    """
    Validate the descriptor and return True when every rule passes.
    With handle_errors, the renderer is cleared on success or handed the full error list on failure.
    """
    if get_settings().force_error_handling:
        handle_errors = True

    errors = collect_errors(descriptor)

    if not handle_errors:
        return not errors

    renderer = renderer if renderer is not None else get_default_renderer()
    if not errors:
        renderer.clear()
        return True

    renderer.render(errors)
    return False
