"""
Rule evaluation.
Each rule kind maps to a pure check `(value, parameter) -> bool` plus a default message.
Malformed rules raise ConfigurationError; failed checks return a ValidationError.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from input_validator.errors import ConfigurationError, InvalidRule
from input_validator.models import RuleKind, ValidationError, ValidationTask
from input_validator.logging_config import get_logger

logger = get_logger("validators")

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)\s*$")
_EMAIL = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$", re.ASCII)


def parse_int(raw: Any) -> Optional[int]:
    """
    Integer parsing with parseInt semantics: leading sign and digits, rest ignored.
    "12.9" -> 12, "7kg" -> 7, "abc" -> None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    m = _INT_PREFIX.match(str(raw))
    return int(m.group(1)) if m else None


def is_empty(value: str) -> bool:
    return value == ""


# ─── Parameter preconditions ─────────────────────────────────────────────────

def _numeric_threshold(kind: RuleKind) -> Callable[[Any], float]:
    """The whole threshold must be numeric; '12abc' is rejected, 12.5 is kept as is."""
    def prepare(parameter: Any) -> float:
        if isinstance(parameter, (int, float)) and not isinstance(parameter, bool):
            if math.isfinite(parameter):
                return parameter
        elif isinstance(parameter, str) and _NUMBER.match(parameter):
            return float(parameter)
        raise ConfigurationError(f"Error validating {kind.value}: {parameter!r} isn't a number!")
    return prepare


def _length_limit(kind: RuleKind) -> Callable[[Any], int]:
    def prepare(parameter: Any) -> int:
        if isinstance(parameter, int) and not isinstance(parameter, bool):
            return parameter
        if isinstance(parameter, str) and parameter.strip().isdigit():
            return int(parameter)
        raise ConfigurationError(f"Error validating {kind.value}: {parameter!r} isn't a length!")
    return prepare


def _choices(parameter: Any) -> list[Optional[int]]:
    if parameter is None:
        raise ConfigurationError("Error validating equal: no value to compare against!")
    if isinstance(parameter, (list, tuple)):
        return [parse_int(p) for p in parameter]
    return [parse_int(parameter)]


def _formats(parameter: Any) -> list[str]:
    if isinstance(parameter, str):
        parameter = [parameter]
    if (
        not isinstance(parameter, (list, tuple))
        or not parameter
        or not all(isinstance(f, str) and f for f in parameter)
    ):
        raise ConfigurationError(f"Error validating phone: {parameter!r} isn't a list of formats!")
    return list(parameter)


# ─── Checks ──────────────────────────────────────────────────────────────────

def _matches_format(value: str, fmt: str) -> bool:
    """Every character of the format must appear at the same position; trailing input is ignored."""
    if len(value) < len(fmt):
        return False
    return all(fmt[i] == value[i] for i in range(len(fmt)))


def _int_check(predicate: Callable[[int, Any], bool]) -> Callable[[str, Any], bool]:
    def check(value: str, parameter: Any) -> bool:
        n = parse_int(value)
        return n is not None and predicate(n, parameter)
    return check


@dataclass(frozen=True)
class RuleDefinition:
    check: Callable[[str, Any], bool]
    message: str
    prepare: Optional[Callable[[Any], Any]] = None


RULES: dict[RuleKind, RuleDefinition] = {
    RuleKind.REQUIRED: RuleDefinition(
        lambda v, _: not is_empty(v), "Required field!"),
    RuleKind.NUMBER: RuleDefinition(
        lambda v, _: bool(_NUMBER.match(v)), "Numeric field!"),
    RuleKind.EVEN: RuleDefinition(
        _int_check(lambda n, _: n % 2 == 0), "Value must be even!"),
    RuleKind.POSITIVE: RuleDefinition(
        _int_check(lambda n, _: n > 0), "Field must be positive!"),
    RuleKind.MAXVALUE: RuleDefinition(
        _int_check(lambda n, p: n <= p), "Value must be below {parameter}!",
        _numeric_threshold(RuleKind.MAXVALUE)),
    RuleKind.MINVALUE: RuleDefinition(
        _int_check(lambda n, p: n >= p), "Value must be above {parameter}!",
        _numeric_threshold(RuleKind.MINVALUE)),
    RuleKind.EQUAL: RuleDefinition(
        _int_check(lambda n, p: n in p), "Value must be one of the following: {parameter}!",
        _choices),
    RuleKind.MAXLEN: RuleDefinition(
        lambda v, p: len(v) <= p, "Maximum value length: {parameter}!",
        _length_limit(RuleKind.MAXLEN)),
    RuleKind.MINLEN: RuleDefinition(
        lambda v, p: len(v) >= p, "Minimum value length: {parameter}!",
        _length_limit(RuleKind.MINLEN)),
    RuleKind.EMAIL: RuleDefinition(
        lambda v, _: bool(_EMAIL.match(v)), "Invalid email!"),
    RuleKind.PHONE: RuleDefinition(
        lambda v, p: any(_matches_format(v, f) for f in p), "Values don't match!",
        _formats),
}


def _display(parameter: Any) -> str:
    if isinstance(parameter, (list, tuple)):
        return ", ".join(str(p) for p in parameter)
    return str(parameter)


def resolve_kind(kind: Any, field: Any = None) -> RuleKind:
    try:
        return RuleKind(kind)
    except (ValueError, TypeError):
        raise InvalidRule(kind, field) from None


def evaluate(task: ValidationTask) -> Optional[ValidationError]:
    """
    Evaluate one task. Returns None when the rule passes, a ValidationError when it fails.
    Raises ConfigurationError (or InvalidRule) when the rule itself is malformed.
    """
    rule = task.rule
    value = task.field.value()

    if rule.optional and is_empty(value):
        return None

    kind = resolve_kind(rule.kind, task.field)
    definition = RULES[kind]
    parameter = definition.prepare(rule.parameter) if definition.prepare else rule.parameter

    if definition.check(value, parameter):
        return None

    message = rule.message or definition.message.format(parameter=_display(rule.parameter))
    logger.debug("rule_failed", rule=kind.value, field=getattr(task.field, "name", None))
    return ValidationError(message=message, field=task.field)
