"""Tests for Connection."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from document_mapper.connection import Connection
from document_mapper.settings import Settings


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock motor client."""
    client = MagicMock()
    client.server_info = AsyncMock(return_value={"version": "7.0"})
    return client


def test_from_settings():
    """Should read the URI, database name and timeout from settings."""
    config = Settings(database_url="mongodb://db:27017/app", database_name="cats", server_selection_timeout_ms=500)
    connection = Connection.from_settings(config)
    assert connection.connection_string == "mongodb://db:27017/app"
    assert connection.database_name == "cats"
    assert connection.client_options == {"serverSelectionTimeoutMS": 500}
    assert not connection.is_connected()


@pytest.mark.asyncio
async def test_connect_creates_client(mock_client: MagicMock):
    """Should create the client lazily and ping the server."""
    connection = Connection("mongodb://db:27017/app", serverSelectionTimeoutMS=500)
    with patch("document_mapper.connection.AsyncIOMotorClient", return_value=mock_client) as client_class:
        await connection.connect()
    client_class.assert_called_once_with("mongodb://db:27017/app", serverSelectionTimeoutMS=500)
    mock_client.server_info.assert_awaited_once()
    assert connection.is_connected()


@pytest.mark.asyncio
async def test_get_collection_connects_first(mock_client: MagicMock):
    """Should connect on first use and return a collection from the named database."""
    connection = Connection("mongodb://db:27017/app", database_name="cats")
    with patch("document_mapper.connection.AsyncIOMotorClient", return_value=mock_client):
        collection = await connection.get_collection("kittens")
    mock_client.get_database.assert_called_once_with("cats")
    mock_client.get_database.return_value.get_collection.assert_called_once_with("kittens")
    assert collection is mock_client.get_database.return_value.get_collection.return_value


@pytest.mark.asyncio
async def test_get_collection_uses_default_database(mock_client: MagicMock):
    """Should fall back to the database named in the URI."""
    connection = Connection.from_client(mock_client)
    await connection.get_collection("kittens")
    mock_client.get_default_database.assert_called_once_with()
    mock_client.get_database.assert_not_called()


@pytest.mark.asyncio
async def test_get_collection_database_override(mock_client: MagicMock):
    """Should prefer an explicitly requested database."""
    connection = Connection.from_client(mock_client, "cats")
    await connection.get_collection("kittens", "archive")
    mock_client.get_database.assert_called_once_with("archive")


@pytest.mark.asyncio
async def test_disconnect_closes_own_client(mock_client: MagicMock):
    """Should close a client it created and forget it."""
    connection = Connection("mongodb://db:27017/app")
    with patch("document_mapper.connection.AsyncIOMotorClient", return_value=mock_client):
        await connection.connect()
    await connection.disconnect()
    mock_client.close.assert_called_once_with()
    assert not connection.is_connected()
    await connection.disconnect()
    mock_client.close.assert_called_once_with()


@pytest.mark.asyncio
async def test_disconnect_leaves_caller_client_open(mock_client: MagicMock):
    """Should not close a client handed in by the caller."""
    connection = Connection.from_client(mock_client, "cats")
    assert connection.is_connected()
    await connection.disconnect()
    mock_client.close.assert_not_called()
    assert connection.is_connected()
