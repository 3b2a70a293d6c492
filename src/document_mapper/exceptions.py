"""Custom exceptions for the document mapper."""

from typing import Any, Dict


class DocumentMapperError(Exception):
    """Base exception for document mapper errors.

    Every error carries an HTTP-like ``status`` so callers can map it to a response.
    """

    status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary representation."""
        result = {"name": type(self).__name__, "message": self.message, "status": self.status}
        for key, value in vars(self).items():
            if key not in result:
                result[key] = value
        return result


class InvalidFieldSpecificationError(DocumentMapperError):
    """Raised when a field specification is malformed."""

    pass


class ParsingError(DocumentMapperError):
    """Raised when a raw value cannot be coerced to the type declared for its field."""

    status = 422

    def __init__(self, field: str, value: Any, type: str) -> None:
        super().__init__(f'There has been an error parsing the "{field}" field as "{type}". Value={value!r}')
        self.field = field
        self.raw_value = value
        self.type = type


class ValidationError(DocumentMapperError):
    """Raised when a validation rule rejects a field value."""

    status = 422

    def __init__(self, field: str, validation: str, value: Any) -> None:
        super().__init__(f'The "{validation}" validation on the "{field}" field has failed. Value={value!r}')
        self.field = field
        self.validation = validation
        self.value = value


class DocumentNotPersistedError(DocumentMapperError):
    """Raised when an operation needs a stored document but it has no identifier yet."""

    status = 422

    def __init__(self, document: Any) -> None:
        super().__init__(f"The document has not been persisted in the database. doc={document!r}")
        self.document = document


class DocumentNotFoundError(DocumentMapperError):
    """Raised when a persisted document no longer exists in its collection."""

    status = 404

    def __init__(self, collection_name: str, document_id: Any) -> None:
        super().__init__(f"Document {document_id} not found in collection '{collection_name}'")
        self.collection_name = collection_name
        self.document_id = document_id


class ImmutableFieldError(DocumentMapperError):
    """Raised when trying to change a field that cannot change once set."""

    status = 422

    def __init__(self, field: str, current: Any, value: Any) -> None:
        super().__init__(f"Field '{field}' is immutable once set. Current={current!r}, attempted={value!r}")
        self.field = field
        self.current = current
        self.value = value
