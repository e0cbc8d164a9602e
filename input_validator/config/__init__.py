from input_validator.config.loader import (
    RuleSetConfig, load_rule_set, load_rule_set_file, parse_rule_set,
)

__all__ = ["RuleSetConfig", "load_rule_set", "load_rule_set_file", "parse_rule_set"]
