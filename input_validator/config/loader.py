"""
YAML rule-set loader. One YAML per form; fields are bound to handles at validation time.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping, Optional

import yaml
from pydantic import ValidationError as SchemaError

from input_validator.errors import ArgumentError, ConfigurationError
from input_validator.models import Descriptor, RuleSpec
from input_validator.settings import get_settings
from input_validator.logging_config import get_logger

CONFIG_DIR = os.path.join(os.path.dirname(__file__))

logger = get_logger("config")


@dataclass
class RuleSetConfig:
    name: str
    fields: dict[str, list[RuleSpec]] = field(default_factory=dict)

    def bind(self, handles: Mapping[str, Any]) -> list[Descriptor]:
        """Pair each configured field with its handle, in file order."""
        missing = [fname for fname in self.fields if fname not in handles]
        if missing:
            raise ArgumentError(f"No input given for fields: {missing}")
        return [
            Descriptor(input=handles[fname], rule=list(rules))
            for fname, rules in self.fields.items()
        ]


def _parse_rule(raw: Any, where: str) -> RuleSpec:
    if isinstance(raw, str):
        raw = {"rule": raw}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{where}: rule must be a mapping or a kind name")
    try:
        return RuleSpec.model_validate(raw)
    except SchemaError as e:
        raise ConfigurationError(f"{where}: {e}") from e


def parse_rule_set(raw: Any, default_name: str = "") -> RuleSetConfig:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Rule set {default_name!r} must be a mapping")

    fields = {}
    for fname, fdata in (raw.get("fields") or {}).items():
        rules = fdata.get("rules", []) if isinstance(fdata, dict) else fdata
        if not isinstance(rules, list):
            rules = [rules]
        fields[fname] = [_parse_rule(r, f"{default_name}.{fname}") for r in rules]

    return RuleSetConfig(name=raw.get("rule_set", default_name), fields=fields)


def load_rule_set_file(path: str) -> RuleSetConfig:
    if not os.path.exists(path):
        raise FileNotFoundError(f"No rule set found at {path}")

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    name = os.path.splitext(os.path.basename(path))[0]
    config = parse_rule_set(raw, name)
    logger.debug("rule_set_loaded", rule_set=config.name, fields=list(config.fields))
    return config


@lru_cache(maxsize=32)
def load_rule_set(name: str, config_dir: Optional[str] = None) -> RuleSetConfig:
    config_dir = config_dir or get_settings().rules_dir or CONFIG_DIR
    return load_rule_set_file(os.path.join(config_dir, f"{name}.yaml"))
