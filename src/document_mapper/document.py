from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Iterator, Mapping, MutableMapping, Optional

from pydantic_core import to_jsonable_python

from document_mapper import dot_path
from document_mapper.dot_path import MISSING
from document_mapper.exceptions import DocumentNotFoundError, DocumentNotPersistedError, ImmutableFieldError
from document_mapper.models.schema import FieldSpecification
from document_mapper.utils.logging import logger

if TYPE_CHECKING:
    from document_mapper.collection import Collection

ID_KEY = "_id"


@dataclass(frozen=True)
class DocumentBinding:
    """
    What a document knows about its collection. Never part of the document data.
    """

    collection: "Collection"
    collection_name: str
    fields: FieldSpecification
    created_at_key: str
    updated_at_key: str
    virtuals: Dict[str, Callable[[Any], Any]] = field(default_factory=dict)

    @classmethod
    def from_collection(cls, collection: "Collection") -> DocumentBinding:
        return cls(
            collection=collection,
            collection_name=collection.name,
            fields=collection.fields,
            created_at_key=collection.created_at_key,
            updated_at_key=collection.updated_at_key,
            virtuals=dict(collection.virtuals),
        )


class Document(MutableMapping):
    """
    A schema-bound record of a collection.

    Field values live in an ordered dict and are addressed by dotted paths, so
    ``document["address.city"]`` reads a nested value. Construction fills
    defaults, coerces typed fields and sanitizes incoming values. Records
    loaded from the store are built with ``sanitize=False``. Validation only
    happens on ``validate``, ``save`` or through the collection.
    """

    def __init__(self, collection: "Collection", data: Optional[Mapping[str, Any]] = None, *, sanitize: bool = True) -> None:
        self._binding = DocumentBinding.from_collection(collection)
        self._data: Dict[str, Any] = {key: copy.deepcopy(value) for key, value in (data or {}).items()}
        self.add_default_values()
        self.parse()
        if sanitize:
            self.sanitize()

    @property
    def binding(self) -> DocumentBinding:
        return self._binding

    @property
    def id(self) -> Any:
        """
        Store-assigned identifier, None until the document is persisted.
        """
        return self._data.get(ID_KEY)

    def get_value(self, path: str) -> Any:
        """
        Read a field by dotted path, ``MISSING`` if absent.
        """
        return dot_path.get(path, self._data)

    def set_value(self, path: str, value: Any) -> None:
        """
        Write a field by dotted path. The identifier cannot change once set.
        """
        if path == ID_KEY:
            current = self._data.get(ID_KEY)
            if current is not None and current != value:
                raise ImmutableFieldError(ID_KEY, current, value)
        dot_path.set(path, value, self._data)

    def __getitem__(self, key: str) -> Any:
        value = self.get_value(key)
        if value is MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_value(key, value)

    def __delitem__(self, key: str) -> None:
        if key == ID_KEY and self.id is not None:
            raise ImmutableFieldError(ID_KEY, self.id, MISSING)
        if dot_path.remove(key, self._data) is MISSING:
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Document({self._binding.collection_name!r}, {self._data!r})"

    def add_default_values(self) -> Document:
        self._binding.fields.add_default_values(self)
        return self

    def parse(self) -> Document:
        """
        Coerce every typed field in place.
        """
        self._binding.fields.parse_document(self)
        return self

    def sanitize(self, paths: Optional[Iterable[str]] = None) -> Document:
        """
        Run sanitizers on incoming values, all fields or only those under ``paths``.
        """
        self._binding.fields.sanitize_document(self, paths)
        return self

    async def validate(self) -> Document:
        """
        Run the validation rules; raises ``ValidationError`` on the first failure.
        """
        await self._binding.fields.validate_document(self)
        return self

    def merge(self, data: Mapping[str, Any]) -> Document:
        """
        Apply a partial update leaf by leaf, coerce again and sanitize the merged values.
        """
        changes = dot_path.flatten(data)
        for path, value in changes.items():
            self.set_value(path, copy.deepcopy(value))
        return self.parse().sanitize(changes)

    def add_created_at(self) -> Document:
        self.set_value(self._binding.created_at_key, datetime.now(timezone.utc))
        return self

    def add_updated_at(self) -> Document:
        self.set_value(self._binding.updated_at_key, datetime.now(timezone.utc))
        return self

    def to_record(self) -> Dict[str, Any]:
        """
        Full copy of the stored data, hidden fields included.
        """
        return copy.deepcopy(self._data)

    def lean(self) -> Dict[str, Any]:
        """
        Copy of the data without hidden fields.
        """
        result = self.to_record()
        for name in self._binding.fields.get_hidden_fields():
            dot_path.remove(name, result)
        return result

    def to_json(self) -> Dict[str, Any]:
        """
        External representation: virtual fields added, hidden fields removed,
        ids and dates rendered as strings.
        """
        result = self.to_record()
        for name, compute in self._binding.virtuals.items():
            dot_path.set(name, compute(self), result)
        for name in self._binding.fields.get_hidden_fields():
            dot_path.remove(name, result)
        return to_jsonable_python(result, fallback=str)

    async def refresh(self) -> Document:
        """
        Reload the document from its collection.
        """
        if self.id is None:
            raise DocumentNotPersistedError(self)
        record = await self._binding.collection.find_record({ID_KEY: self.id})
        if record is None:
            raise DocumentNotFoundError(self._binding.collection_name, self.id)
        self._adopt(record)
        return self

    async def save(self) -> Document:
        """
        Validate, then insert or update the document and adopt the stored record.
        """
        await self.validate()
        collection = self._binding.collection
        if self.id is not None:
            self.add_updated_at()
            record = await collection.update_record(self.id, self.to_record())
            if record is None:
                raise DocumentNotFoundError(self._binding.collection_name, self.id)
            logger.info("Document %s updated in '%s'", self.id, self._binding.collection_name)
        else:
            self.add_created_at()
            record = await collection.insert_record(self.to_record())
            logger.info("Document %s inserted in '%s'", record[ID_KEY], self._binding.collection_name)
        self._adopt(record)
        return self

    def _adopt(self, record: Mapping[str, Any]) -> None:
        self._data = {key: copy.deepcopy(value) for key, value in record.items()}
        self.parse()
