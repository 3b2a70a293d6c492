"""Field model definitions for the document mapper."""

import copy
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from document_mapper.dot_path import MISSING
from document_mapper.exceptions import InvalidFieldSpecificationError, ParsingError
from document_mapper.models.types import DateType, FieldType, TypeRegistry
from document_mapper.validators import FunctionRule, ValidationRule


class FieldSpec(BaseModel):
    """Declarative description of one field of a collection."""

    type: Optional[FieldType] = Field(default=None, description="Type the raw value is coerced to; untyped values pass through")
    default_value: Any = Field(
        default=None,
        alias="defaultValue",
        description="Value, or callable taking the document, used when the field is absent",
    )
    validations: Dict[str, ValidationRule] = Field(default_factory=dict, description="Rules run in order by name before persistence")
    sanitizers: List[Callable[..., Any]] = Field(default_factory=list, description="Transforms applied to incoming values after coercion")
    hidden: bool = Field(default=False, description="Whether the field is left out of the external projection")
    formats: List[str] = Field(default_factory=list, description="strptime formats accepted by date fields")

    model_config = {"arbitrary_types_allowed": True, "populate_by_name": True}

    @field_validator("type", mode="before")
    @classmethod
    def validate_field_type(cls, v: Any) -> Optional[FieldType]:
        """Validate and convert field type."""
        if v is None or isinstance(v, FieldType):
            return v
        try:
            return FieldType(v)
        except ValueError:
            raise InvalidFieldSpecificationError(f"Invalid field type: {v}")

    @field_validator("validations", mode="before")
    @classmethod
    def wrap_validation_functions(cls, v: Any) -> Dict[str, ValidationRule]:
        """Wrap plain callables so every rule shares the ValidationRule interface."""
        if v is None:
            return {}
        rules = {}
        for name, rule in dict(v).items():
            if isinstance(rule, ValidationRule):
                rules[name] = rule
            elif callable(rule):
                rules[name] = FunctionRule(rule)
            else:
                raise InvalidFieldSpecificationError(f"Validation '{name}' is not callable: {rule!r}")
        return rules

    @property
    def has_default(self) -> bool:
        """Whether a default value was declared, None included."""
        return "default_value" in self.model_fields_set

    def resolve_default(self, document: Any) -> Any:
        """Produce the default for a document, calling it if it is a function."""
        if callable(self.default_value):
            return self.default_value(document)
        return copy.deepcopy(self.default_value)

    def coerce(self, field_name: str, value: Any) -> Any:
        """Coerce a raw value to the declared type.

        Absent values are returned unchanged. None is handed to the type like
        any other value, so only untyped fields keep it.

        Raises:
            ParsingError: If the value cannot be coerced
        """
        if value is MISSING:
            return value

        if self.type is not None:
            type_impl = TypeRegistry.get_type(self.type)
            if isinstance(type_impl, DateType):
                type_impl.set_formats(self.formats)
            try:
                value = type_impl.parse(value)
            except ValueError:
                raise ParsingError(field_name, value, self.type.value)
        return value

    def sanitize(self, value: Any, document: Any = None) -> Any:
        """Run the sanitizers in order on a present, non-None value."""
        if value is MISSING or value is None:
            return value
        for sanitizer in self.sanitizers:
            value = sanitizer(value, document)
        return value
