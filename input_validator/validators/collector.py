from typing import Iterator

from input_validator.models import ValidationError


class ErrorCollector:
    """Ordered accumulator of failed rules. Two failures on one field stay two entries."""

    def __init__(self):
        self._errors: list[ValidationError] = []

    def add(self, error: ValidationError) -> None:
        self._errors.append(error)

    def is_empty(self) -> bool:
        return not self._errors

    def all(self) -> list[ValidationError]:
        return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)
