"""Base type class for field type implementations."""

from abc import ABC, abstractmethod
from typing import Any

from document_mapper.models.types.constants import FieldType


class BaseType(ABC):
    """Base class for all field types."""

    field_type: FieldType

    @abstractmethod
    def parse(self, value: Any) -> Any:
        """Coerce a raw value to this type.

        Args:
            value: Raw value read from the document, None included

        Returns:
            Coerced value

        Raises:
            ValueError: If value cannot be coerced to this type
        """
        pass

    @classmethod
    def get_field_type(cls) -> FieldType:
        """Get the field type this implementation handles."""
        return cls.field_type
