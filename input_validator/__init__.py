"""
Declarative rule validation for user input fields.

    from input_validator import validate_inputs, InputField

    age = InputField("age", "17")
    validate_inputs({"input": age, "rule": "minvalue", "value": 18})
"""
from input_validator.errors import (
    InputValidatorError, ConfigurationError, InvalidRule, ArgumentError,
)
from input_validator.fields import (
    FieldHandle, InputField, SingleField, FieldGroup, FieldReference, as_field_reference,
)
from input_validator.models import (
    RuleKind, RuleSpec, Descriptor, ValidationTask, ValidationError,
)
from input_validator.rendering import (
    Renderer, LogRenderer, MarkupRenderer, Container, ErrorMarker,
    get_default_renderer, set_default_renderer,
)
from input_validator.config import RuleSetConfig, load_rule_set, load_rule_set_file
from input_validator.pipeline import collect_errors, validate_inputs

__all__ = [
    "InputValidatorError", "ConfigurationError", "InvalidRule", "ArgumentError",
    "FieldHandle", "InputField", "SingleField", "FieldGroup", "FieldReference", "as_field_reference",
    "RuleKind", "RuleSpec", "Descriptor", "ValidationTask", "ValidationError",
    "Renderer", "LogRenderer", "MarkupRenderer", "Container", "ErrorMarker",
    "get_default_renderer", "set_default_renderer",
    "RuleSetConfig", "load_rule_set", "load_rule_set_file",
    "collect_errors", "validate_inputs",
]
