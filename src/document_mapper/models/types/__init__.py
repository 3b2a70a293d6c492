"""Type definitions and implementations for the document mapper."""

from document_mapper.models.types.base import BaseType
from document_mapper.models.types.constants import DEFAULT_DATE_FORMATS, FieldType
from document_mapper.models.types.registry import TypeRegistry
from document_mapper.models.types.types import (
    BooleanType,
    DateType,
    FloatType,
    IntegerType,
    ObjectIdType,
    StringType,
)

__all__ = [
    "BaseType",
    "BooleanType",
    "DEFAULT_DATE_FORMATS",
    "DateType",
    "FieldType",
    "FloatType",
    "IntegerType",
    "ObjectIdType",
    "StringType",
    "TypeRegistry",
]
