from typing import Any, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from document_mapper.settings import Settings, settings
from document_mapper.utils.logging import logger


class Connection:
    """
    Handles connection to the MongoDB database and hands out collection handles.
    """

    def __init__(
        self,
        connection_string: str,
        database_name: Optional[str] = None,
        client: Optional[AsyncIOMotorClient] = None,
        **client_options: Any,
    ) -> None:
        self.connection_string = connection_string
        self.database_name = database_name
        self.client_options = client_options
        self.client: Optional[AsyncIOMotorClient] = client
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "Connection":
        """
        Build a connection from application settings.
        """
        return cls(
            config.database_url,
            database_name=config.database_name,
            serverSelectionTimeoutMS=config.server_selection_timeout_ms,
        )

    @classmethod
    def from_client(cls, client: AsyncIOMotorClient, database_name: Optional[str] = None) -> "Connection":
        """
        Wrap an already created client; its lifetime stays with the caller and
        ``disconnect`` leaves it open.
        """
        return cls("", database_name=database_name, client=client)

    async def connect(self) -> None:
        """
        Establish a connection to MongoDB.
        """
        if self.client is None:
            self.client = AsyncIOMotorClient(self.connection_string, **self.client_options)
            self._owns_client = True
        # Test connection
        await self.client.server_info()
        logger.debug("Connected to MongoDB")

    async def disconnect(self) -> None:
        """
        Disconnect from MongoDB, closing the client only if this connection created it.
        """
        if self.client is not None and self._owns_client:
            self.client.close()
            self.client = None
            logger.debug("Disconnected from MongoDB")

    def is_connected(self) -> bool:
        """
        Check if the connection to MongoDB is active.
        """
        return self.client is not None

    def get_database(self, name: Optional[str] = None) -> AsyncIOMotorDatabase:
        """
        Get a database handle, defaulting to the configured name or the one in the URI.
        """
        database_name = name or self.database_name
        if database_name:
            return self.client.get_database(database_name)
        return self.client.get_default_database()

    async def get_collection(self, name: str, database: Optional[str] = None) -> AsyncIOMotorCollection:
        """
        Acquire a handle for a collection, connecting first if needed.
        """
        if not self.is_connected():
            await self.connect()
        return self.get_database(database).get_collection(name)
