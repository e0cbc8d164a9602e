from input_validator.validators.normalizers import normalize_descriptors
from input_validator.validators.rules import evaluate, parse_int, RULES
from input_validator.validators.collector import ErrorCollector

__all__ = [
    "normalize_descriptors",
    "evaluate", "parse_int", "RULES",
    "ErrorCollector",
]
