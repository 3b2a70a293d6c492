"""Validation rules for document fields."""

from document_mapper.validators.base import FunctionRule, ValidationRule
from document_mapper.validators.rules import (
    HasDateFormat,
    IsNotNull,
    Matches,
    Max,
    MaxLength,
    Min,
    MinLength,
    OneOf,
    Range,
)

__all__ = [
    "ValidationRule",
    "FunctionRule",
    "HasDateFormat",
    "IsNotNull",
    "Matches",
    "Max",
    "MaxLength",
    "Min",
    "MinLength",
    "OneOf",
    "Range",
]
