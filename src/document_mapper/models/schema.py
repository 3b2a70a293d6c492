"""Field specification of a collection and the algorithms driven by it."""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from document_mapper import dot_path
from document_mapper.dot_path import MISSING
from document_mapper.exceptions import InvalidFieldSpecificationError, ValidationError
from document_mapper.models.field import FieldSpec


class FieldSpecification(BaseModel):
    """Ordered mapping of dotted field names to their descriptors.

    The three pipeline stages operate on a document exposing ``get_value(path)``
    and ``set_value(path, value)``:

    1. ``add_default_values`` fills absent fields,
    2. ``parse_document`` coerces every typed field,
    3. ``validate_document`` runs validation rules, failing on the first rejection.

    ``sanitize_document`` runs after coercion on incoming values only.
    """

    fields: Dict[str, FieldSpec] = Field(default_factory=dict, description="Field descriptors keyed by dotted name")

    @field_validator("fields")
    @classmethod
    def validate_field_names(cls, v: Dict[str, FieldSpec]) -> Dict[str, FieldSpec]:
        """Validate dotted field names have no empty segments."""
        for name in v:
            if not name or any(not segment for segment in dot_path.split(name)):
                raise InvalidFieldSpecificationError(f"Invalid field name: '{name}'")
        return v

    @classmethod
    def from_mapping(cls, fields: Union["FieldSpecification", Mapping[str, Any], None]) -> "FieldSpecification":
        """Build a specification from a mapping of names to FieldSpec or plain dicts."""
        if fields is None:
            return cls()
        if isinstance(fields, FieldSpecification):
            return fields
        return cls(fields=dict(fields))

    def __len__(self) -> int:
        """Get number of fields in the specification."""
        return len(self.fields)

    def __iter__(self) -> Iterator[Tuple[str, FieldSpec]]:
        """Iterate over ``(name, field)`` pairs in declaration order."""
        return iter(self.fields.items())

    def __contains__(self, field_name: str) -> bool:
        return field_name in self.fields

    def __getitem__(self, field_name: str) -> FieldSpec:
        return self.fields[field_name]

    def get_field_names(self) -> List[str]:
        """Get list of all field names in declaration order."""
        return list(self.fields)

    def get_hidden_fields(self) -> List[str]:
        """Get names of fields left out of the external projection."""
        return [name for name, field in self.fields.items() if field.hidden]

    def add_default_values(self, document: Any) -> None:
        """Fill every absent field that declares a default.

        Present values, None included, are never replaced.
        """
        for name, field in self.fields.items():
            if field.has_default and document.get_value(name) is MISSING:
                document.set_value(name, field.resolve_default(document))

    def parse_document(self, document: Any) -> None:
        """Coerce every declared field in place.

        Fields are written back one at a time; when a field fails, the fields
        before it stay coerced and the ones after it are left untouched.

        Raises:
            ParsingError: On the first field that cannot be coerced
        """
        for name, field in self.fields.items():
            value = document.get_value(name)
            if value is MISSING:
                continue
            document.set_value(name, field.coerce(name, value))

    def sanitize_document(self, document: Any, paths: Optional[Iterable[str]] = None) -> None:
        """Run sanitizers on declared fields holding incoming values.

        With ``paths``, only fields equal to, inside or containing one of the
        given dotted paths are sanitized.
        """
        touched = None if paths is None else list(paths)
        for name, field in self.fields.items():
            if not field.sanitizers:
                continue
            if touched is not None and not any(_overlaps(name, path) for path in touched):
                continue
            value = document.get_value(name)
            if value is MISSING:
                continue
            document.set_value(name, field.sanitize(value, document))

    async def validate_document(self, document: Any) -> None:
        """Run every field's validation rules in declaration order.

        Raises:
            ValidationError: For the first rule returning a falsy result
        """
        for name, field in self.fields.items():
            if not field.validations:
                continue
            value = document.get_value(name)
            for rule_name, rule in field.validations.items():
                if not await rule.evaluate(value, document):
                    raise ValidationError(name, rule_name, value)


def _overlaps(name: str, path: str) -> bool:
    return name == path or path.startswith(name + ".") or name.startswith(path + ".")
