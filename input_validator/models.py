"""
Canonical data models for rule validation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from input_validator.fields import FieldReference


# ─── Enums ──────────────────────────────────────────────────────────────────

class RuleKind(str, Enum):
    REQUIRED = "required"
    NUMBER = "number"
    EVEN = "even"
    POSITIVE = "positive"
    MAXVALUE = "maxvalue"
    MINVALUE = "minvalue"
    EQUAL = "equal"
    MAXLEN = "maxlen"
    MINLEN = "minlen"
    EMAIL = "email"
    PHONE = "phone"


# ─── Rule / descriptor models ─────────────────────────────────────────────────

class RuleSpec(BaseModel):
    """One rule as written by the caller. `kind` is resolved at evaluation time."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Any = Field(alias="rule")
    parameter: Any = Field(default=None, alias="value")
    message: Optional[str] = None
    optional: bool = False


RuleInput = Union[str, RuleSpec, dict]


@dataclass
class Descriptor:
    input: Any
    rule: Union[RuleInput, Sequence[RuleInput]]
    # Used only when `rule` is a bare kind string
    message: Optional[str] = None
    value: Any = None
    optional: bool = False


# ─── Internal task / result models ───────────────────────────────────────────

@dataclass(frozen=True)
class ValidationTask:
    field: FieldReference
    rule: RuleSpec


@dataclass(frozen=True)
class ValidationError:
    message: str
    field: FieldReference
