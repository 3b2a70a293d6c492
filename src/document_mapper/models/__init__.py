"""Models package for the document mapper."""

from document_mapper.models.field import FieldSpec
from document_mapper.models.index import IndexDeclaration
from document_mapper.models.schema import FieldSpecification
from document_mapper.models.types import FieldType

__all__ = [
    "FieldSpec",
    "FieldSpecification",
    "FieldType",
    "IndexDeclaration",
]
