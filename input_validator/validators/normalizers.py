"""
Descriptor shape normalization.
Flattens a descriptor (or list of descriptors) into an ordered list of ValidationTask,
so the evaluator never has to branch on shape.
"""
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as SchemaError

from input_validator.errors import ConfigurationError
from input_validator.fields import FieldReference, as_field_reference
from input_validator.models import Descriptor, RuleSpec, ValidationTask

_DESCRIPTOR_KEYS = ("input", "rule", "message", "value", "optional")


def normalize_descriptors(descriptor: Any) -> list[ValidationTask]:
    """
    Expand descriptors into tasks: descriptor order, then field order, then rule order.
    Plural fields and plural rules produce the full cross product.
    """
    items = descriptor if isinstance(descriptor, (list, tuple)) else [descriptor]
    tasks = []
    for item in items:
        tasks.extend(_expand_descriptor(_as_descriptor(item)))
    return tasks


def _as_descriptor(item: Any) -> Descriptor:
    if isinstance(item, Descriptor):
        return item
    if isinstance(item, Mapping):
        if "input" not in item or "rule" not in item:
            raise ConfigurationError(f"Descriptor needs 'input' and 'rule' keys, got {sorted(item)}")
        unknown = set(item) - set(_DESCRIPTOR_KEYS)
        if unknown:
            raise ConfigurationError(f"Unknown descriptor keys: {sorted(unknown)}")
        return Descriptor(**item)
    raise ConfigurationError(f"Unsupported descriptor type: {type(item).__name__}")


def _expand_descriptor(desc: Descriptor) -> list[ValidationTask]:
    rules = _rules_for(desc)
    raw_fields = desc.input if isinstance(desc.input, (list, tuple)) else [desc.input]
    fields: list[FieldReference] = [as_field_reference(f) for f in raw_fields]
    return [ValidationTask(field=f, rule=r) for f in fields for r in rules]


def _rules_for(desc: Descriptor) -> list[RuleSpec]:
    if isinstance(desc.rule, str):
        # Bare kind: message/value/optional come from the descriptor itself
        return [_build_rule({
            "rule": desc.rule,
            "value": desc.value,
            "message": desc.message,
            "optional": desc.optional,
        })]
    if isinstance(desc.rule, (list, tuple)):
        return [_coerce_rule(r) for r in desc.rule]
    return [_coerce_rule(desc.rule)]


def _coerce_rule(rule: Any) -> RuleSpec:
    if isinstance(rule, RuleSpec):
        return rule
    if isinstance(rule, str):
        return _build_rule({"rule": rule})
    if isinstance(rule, Mapping):
        return _build_rule(dict(rule))
    raise ConfigurationError(f"Unsupported rule type: {type(rule).__name__}")


def _build_rule(data: dict) -> RuleSpec:
    try:
        return RuleSpec.model_validate(data)
    except SchemaError as e:
        raise ConfigurationError(f"Malformed rule {data!r}: {e}") from e
