"""Standard validation rules."""

import re
from datetime import datetime
from typing import Any, Iterable, Pattern, Union

from document_mapper.dot_path import MISSING
from document_mapper.utils.dates import strict_strptime
from document_mapper.validators.base import ValidationRule


def _is_set(value: Any) -> bool:
    return value is not MISSING and value is not None


class IsNotNull(ValidationRule):
    """Value must be present and not None."""

    async def evaluate(self, value: Any, document: Any) -> bool:
        return _is_set(value)


class Min(ValidationRule):
    """Value must be greater than or equal to ``minimum``."""

    def __init__(self, minimum: Any) -> None:
        self.minimum = minimum

    async def evaluate(self, value: Any, document: Any) -> bool:
        if not _is_set(value):
            return False
        try:
            return self.minimum <= value
        except TypeError:
            return False


class Max(ValidationRule):
    """Value must be less than or equal to ``maximum``."""

    def __init__(self, maximum: Any) -> None:
        self.maximum = maximum

    async def evaluate(self, value: Any, document: Any) -> bool:
        if not _is_set(value):
            return False
        try:
            return value <= self.maximum
        except TypeError:
            return False


class Range(ValidationRule):
    """Value must lie within ``[minimum, maximum]``."""

    def __init__(self, minimum: Any, maximum: Any) -> None:
        self.minimum = minimum
        self.maximum = maximum

    async def evaluate(self, value: Any, document: Any) -> bool:
        if not _is_set(value):
            return False
        try:
            return self.minimum <= value <= self.maximum
        except TypeError:
            return False


class MinLength(ValidationRule):
    """Value (string or sequence) must have at least ``minimum`` items."""

    def __init__(self, minimum: int) -> None:
        self.minimum = minimum

    async def evaluate(self, value: Any, document: Any) -> bool:
        return hasattr(value, "__len__") and len(value) >= self.minimum


class MaxLength(ValidationRule):
    """Value (string or sequence) must have at most ``maximum`` items."""

    def __init__(self, maximum: int) -> None:
        self.maximum = maximum

    async def evaluate(self, value: Any, document: Any) -> bool:
        return hasattr(value, "__len__") and len(value) <= self.maximum


class HasDateFormat(ValidationRule):
    """Value must be a datetime or a string matching ``date_format`` exactly."""

    def __init__(self, date_format: str) -> None:
        self.date_format = date_format

    async def evaluate(self, value: Any, document: Any) -> bool:
        if isinstance(value, datetime):
            return True
        if not isinstance(value, str):
            return False
        try:
            strict_strptime(value, self.date_format)
        except ValueError:
            return False
        return True


class OneOf(ValidationRule):
    """Value must be one of ``options``."""

    def __init__(self, options: Iterable[Any]) -> None:
        self.options = list(options)

    async def evaluate(self, value: Any, document: Any) -> bool:
        return value in self.options


class Matches(ValidationRule):
    """String value must fully match ``pattern``."""

    def __init__(self, pattern: Union[str, Pattern]) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    async def evaluate(self, value: Any, document: Any) -> bool:
        return isinstance(value, str) and self.pattern.fullmatch(value) is not None
