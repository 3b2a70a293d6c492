"""Constants and enums for type system."""

from enum import Enum
from typing import List


class FieldType(str, Enum):
    """Supported field types for a field specification."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT_ID = "objectId"


# strptime equivalents of the HTML5 local date-time formats, tried in order
DEFAULT_DATE_FORMATS: List[str] = [
    "%Y-%m-%dT%H:%M",  # datetime-local
    "%Y-%m-%dT%H:%M:%S",  # with seconds
    "%Y-%m-%dT%H:%M:%S.%f",  # with milliseconds
    "%Y-%m-%d",  # date only
]

FALSE_VALUES = (False, 0, "false")
TRUE_VALUES = (True, 1, "true")
