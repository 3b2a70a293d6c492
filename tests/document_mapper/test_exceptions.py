"""Tests for the error taxonomy."""

from bson import ObjectId

from document_mapper.exceptions import (
    DocumentMapperError,
    DocumentNotFoundError,
    InvalidFieldSpecificationError,
    ParsingError,
    ValidationError,
)


def test_statuses():
    """Should carry HTTP-like statuses."""
    assert InvalidFieldSpecificationError("bad").status == 500
    assert ParsingError("age", "x", "integer").status == 422
    assert ValidationError("age", "min", -1).status == 422
    assert DocumentNotFoundError("cats", ObjectId()).status == 404


def test_common_base():
    """Should share one base class."""
    assert isinstance(ParsingError("age", "x", "integer"), DocumentMapperError)
    assert isinstance(DocumentNotFoundError("cats", 1), DocumentMapperError)


def test_to_dict():
    """Should expose name, message, status and error details."""
    error = ValidationError("age", "min", -1)
    result = error.to_dict()
    assert result["name"] == "ValidationError"
    assert result["status"] == 422
    assert result["field"] == "age"
    assert result["validation"] == "min"
    assert result["value"] == -1
    assert "age" in result["message"]
