from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from document_mapper.connection import Connection
from document_mapper.document import ID_KEY, Document
from document_mapper.models.index import IndexDeclaration
from document_mapper.models.schema import FieldSpecification
from document_mapper.settings import settings
from document_mapper.utils.logging import logger

Filter = Dict[str, Any]
Projection = Dict[str, int]
Sort = Union[Mapping[str, int], Sequence[Tuple[str, int]]]


def to_object_id(document_id: Any) -> Any:
    """Convert a well-formed id string to an ObjectId; other ids pass through."""
    if isinstance(document_id, str) and ObjectId.is_valid(document_id):
        return ObjectId(document_id)
    return document_id


class Collection:
    """
    Schema-bound MongoDB collection.

    Builds documents for one backing collection and exposes its CRUD surface.
    The connection is shared and owned by the caller; a collection handle is
    acquired from it on every operation.
    """

    def __init__(
        self,
        name: str,
        connection: Connection,
        fields: Union[FieldSpecification, Mapping[str, Any], None] = None,
        *,
        indexes: Optional[List[Union[IndexDeclaration, Dict[str, Any]]]] = None,
        virtuals: Optional[Dict[str, Callable[[Document], Any]]] = None,
        created_at_key: Optional[str] = None,
        updated_at_key: Optional[str] = None,
        database: Optional[str] = None,
    ) -> None:
        if connection is None:
            raise TypeError("A Collection requires a connection")
        self.name = name
        self.connection = connection
        self.fields = FieldSpecification.from_mapping(fields)
        self.indexes = [index if isinstance(index, IndexDeclaration) else IndexDeclaration.model_validate(index) for index in indexes or []]
        self.virtuals = dict(virtuals or {})
        self.created_at_key = created_at_key or settings.created_at_key
        self.updated_at_key = updated_at_key or settings.updated_at_key
        self.database = database

    async def get_mongo_collection(self) -> AsyncIOMotorCollection:
        """Acquire the backing collection handle."""
        return await self.connection.get_collection(self.name, self.database)

    def build(self, data: Optional[Mapping[str, Any]] = None) -> Document:
        """
        Create an unsaved document: defaults filled and fields coerced.

        Raises:
            ParsingError: If a field cannot be coerced
        """
        return Document(self, data)

    def _wrap(self, record: Optional[Mapping[str, Any]]) -> Optional[Document]:
        return Document(self, record, sanitize=False) if record is not None else None

    async def find_record(self, filter_dict: Filter, projection: Optional[Projection] = None) -> Optional[Dict[str, Any]]:
        """Fetch one raw record."""
        col = await self.get_mongo_collection()
        logger.debug("find_one on '%s' filter=%s", self.name, filter_dict)
        return await col.find_one(filter_dict, projection)

    async def insert_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a raw record and return it with its generated id."""
        col = await self.get_mongo_collection()
        logger.debug("insert_one on '%s'", self.name)
        result = await col.insert_one(record)
        record[ID_KEY] = result.inserted_id
        return record

    async def update_record(self, document_id: Any, record: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Set the fields of a record and return its post-update state."""
        col = await self.get_mongo_collection()
        changes = {key: value for key, value in record.items() if key != ID_KEY}
        logger.debug("find_one_and_update on '%s' id=%s", self.name, document_id)
        return await col.find_one_and_update(
            {ID_KEY: to_object_id(document_id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )

    async def list(
        self,
        filter_dict: Optional[Filter] = None,
        projection: Optional[Projection] = None,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        sort: Optional[Sort] = None,
    ) -> List[Document]:
        """
        List documents matching the filter.

        Args:
            filter_dict: Query filter, passed to the store unchanged
            projection: Fields to include or exclude
            limit: Maximum number of documents
            skip: Number of documents to skip
            sort: Mapping or list of (field, direction) pairs

        Returns:
            List[Document]: Matching documents, in store order unless sorted
        """
        col = await self.get_mongo_collection()
        options: Dict[str, Any] = {}
        if limit is not None:
            options["limit"] = limit
        if skip is not None:
            options["skip"] = skip
        if sort:
            options["sort"] = list(sort.items()) if isinstance(sort, Mapping) else list(sort)
        logger.debug("find on '%s' filter=%s options=%s", self.name, filter_dict, options)
        documents = []
        cursor = col.find(filter_dict or {}, projection, **options)
        async for record in cursor:
            documents.append(Document(self, record, sanitize=False))
        return documents

    async def count(self, filter_dict: Optional[Filter] = None) -> int:
        """Count documents matching the filter."""
        col = await self.get_mongo_collection()
        return await col.count_documents(filter_dict or {})

    async def get(self, filter_dict: Optional[Filter] = None, projection: Optional[Projection] = None) -> Optional[Document]:
        """Get the first document matching the filter, or None."""
        return self._wrap(await self.find_record(filter_dict or {}, projection))

    async def get_by_id(self, document_id: Any, projection: Optional[Projection] = None) -> Optional[Document]:
        """Get a document by identifier, or None."""
        return await self.get({ID_KEY: to_object_id(document_id)}, projection)

    async def create(self, data: Mapping[str, Any]) -> Document:
        """
        Create and insert a document.

        Raises:
            ParsingError: If a field cannot be coerced
            ValidationError: If a validation rule fails
        """
        document = self.build(data)
        document.add_created_at()
        await document.validate()
        record = await self.insert_record(document.to_record())
        logger.info("Document %s created in '%s'", record[ID_KEY], self.name)
        return Document(self, record, sanitize=False)

    async def patch_by_id(self, document_id: Any, data: Mapping[str, Any]) -> Optional[Document]:
        """
        Merge a partial update into a stored document.

        The read and the write are separate round trips; a concurrent writer in
        between can be overwritten.

        Returns:
            Optional[Document]: The post-update document, or None if not found

        Raises:
            ParsingError: If a merged field cannot be coerced
            ValidationError: If a validation rule fails
        """
        document = await self.get_by_id(document_id)
        if document is None:
            return None
        document.merge(data)
        document.add_updated_at()
        document.parse()
        await document.validate()
        record = await self.update_record(document.id, document.to_record())
        logger.info("Document %s patched in '%s'", document.id, self.name)
        return self._wrap(record)

    async def delete_by_id(self, document_id: Any) -> Optional[Document]:
        """
        Delete a document by identifier.

        Returns:
            Optional[Document]: The document as it was before deletion, or None
        """
        col = await self.get_mongo_collection()
        record = await col.find_one_and_delete({ID_KEY: to_object_id(document_id)})
        if record is not None:
            logger.info("Document %s deleted from '%s'", record[ID_KEY], self.name)
        return self._wrap(record)

    async def ensure_indexes(self) -> List[str]:
        """Create the declared indexes; returns their names."""
        col = await self.get_mongo_collection()
        names = []
        for index in self.indexes:
            names.append(await col.create_index(index.keys, name=index.name, **index.options))
        return names
