"""Object-document mapping for MongoDB collections."""

from document_mapper.collection import Collection
from document_mapper.connection import Connection
from document_mapper.document import Document
from document_mapper.dot_path import MISSING
from document_mapper.exceptions import (
    DocumentMapperError,
    DocumentNotFoundError,
    DocumentNotPersistedError,
    ImmutableFieldError,
    InvalidFieldSpecificationError,
    ParsingError,
    ValidationError,
)
from document_mapper.models import FieldSpec, FieldSpecification, FieldType, IndexDeclaration

__all__ = [
    # Main classes
    "Collection",
    "Connection",
    "Document",
    # Models
    "FieldSpec",
    "FieldSpecification",
    "FieldType",
    "IndexDeclaration",
    "MISSING",
    # Exceptions
    "DocumentMapperError",
    "DocumentNotFoundError",
    "DocumentNotPersistedError",
    "ImmutableFieldError",
    "InvalidFieldSpecificationError",
    "ParsingError",
    "ValidationError",
]
