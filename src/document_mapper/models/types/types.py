"""Concrete type implementations for the supported field types."""

import math
from datetime import date, datetime, timezone
from typing import Any, List, Optional, Union

from bson import ObjectId

from document_mapper.models.types.base import BaseType
from document_mapper.models.types.constants import (
    DEFAULT_DATE_FORMATS,
    FALSE_VALUES,
    TRUE_VALUES,
    FieldType,
)
from document_mapper.utils.dates import strict_strptime


def _as_number(value: Any) -> Union[int, float]:
    """Read a numeric value, rejecting booleans and non-finite numbers."""
    if isinstance(value, bool):
        raise ValueError("Boolean values cannot be converted to a number")
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            number = float(text)
    else:
        raise ValueError(f"Cannot convert {type(value).__name__} to a number")
    if isinstance(number, float) and not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number


class BooleanType(BaseType):
    """Boolean fields accept only the literal true and false spellings."""

    field_type = FieldType.BOOLEAN

    def parse(self, value: Any) -> bool:
        if isinstance(value, (bool, int, float, str)):
            if value in FALSE_VALUES:
                return False
            if value in TRUE_VALUES:
                return True
        raise ValueError(f"Cannot convert {value!r} to boolean")


class IntegerType(BaseType):
    """Integer fields truncate toward zero."""

    field_type = FieldType.INTEGER

    def parse(self, value: Any) -> int:
        return int(_as_number(value))


class FloatType(BaseType):
    field_type = FieldType.FLOAT

    def parse(self, value: Any) -> float:
        return float(_as_number(value))


class StringType(BaseType):
    field_type = FieldType.STRING

    def parse(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if value is None:
            raise ValueError("Cannot convert None to string")
        return str(value)


class ObjectIdType(BaseType):
    """ObjectId fields accept ids that are already well formed."""

    field_type = FieldType.OBJECT_ID

    def parse(self, value: Any) -> ObjectId:
        if not ObjectId.is_valid(value):
            raise ValueError(f"Invalid ObjectId: {value!r}")
        return value if isinstance(value, ObjectId) else ObjectId(value)


class DateType(BaseType):
    """Date fields are stored as timezone-aware UTC datetimes.

    Strings must match one of the configured formats exactly and are read as UTC.
    """

    field_type = FieldType.DATE

    def __init__(self):
        super().__init__()
        self._formats: List[str] = list(DEFAULT_DATE_FORMATS)

    def set_formats(self, formats: Optional[List[str]]) -> None:
        """Set accepted parse formats; an empty list restores the defaults.

        Args:
            formats: strptime formats, tried in order
        """
        self._formats = list(formats) if formats else list(DEFAULT_DATE_FORMATS)

    @property
    def formats(self) -> List[str]:
        return list(self._formats)

    def parse(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return self._to_utc(value)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        if isinstance(value, str):
            for fmt in self._formats:
                try:
                    parsed = strict_strptime(value, fmt)
                except ValueError:
                    continue
                return self._to_utc(parsed)
            raise ValueError(f"Date {value!r} does not match any of the formats: {', '.join(self._formats)}")
        raise ValueError(f"Cannot convert {type(value).__name__} to date")

    @staticmethod
    def _to_utc(value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
