"""Unit tests for the MySQL-backed key-value store (driver mocked)."""

import pytest
from unittest.mock import MagicMock, patch

import mysql.connector

from adapters.output.database.mysql_adapter import MySQLKeyValueStore
from adapters.output.storage.namespaced_kv_repository import NamespacedKVCheckInRepository
from app.ports.output.checkin_repository_port import StorageStatus


@pytest.fixture
def mock_cursor():
    return MagicMock()


@pytest.fixture
def mock_conn(mock_cursor):
    conn = MagicMock()
    conn.cursor = MagicMock(return_value=mock_cursor)
    conn.is_connected = MagicMock(return_value=True)
    return conn


@pytest.fixture
def store(mock_conn):
    with patch("adapters.output.database.mysql_adapter.mysql.connector.connect", return_value=mock_conn):
        yield MySQLKeyValueStore(host="db", user="u", password="p", database="hotel")


class TestMySQLKeyValueStore:
    def test_creates_table_on_connect(self, store, mock_cursor, mock_conn):
        ddl = mock_cursor.execute.call_args_list[0].args[0]
        assert "CREATE TABLE IF NOT EXISTS checkin_store" in ddl
        mock_conn.commit.assert_called()

    @pytest.mark.asyncio
    async def test_set_upserts(self, store, mock_cursor):
        await store.set("checkin:1", "{}")

        sql, params = mock_cursor.execute.call_args.args
        assert "ON DUPLICATE KEY UPDATE" in sql
        assert params == ("checkin:1", "{}")

    @pytest.mark.asyncio
    async def test_get(self, store, mock_cursor):
        mock_cursor.fetchone = MagicMock(return_value=('{"id": 1}',))

        assert await store.get("checkin:1") == '{"id": 1}'

    @pytest.mark.asyncio
    async def test_get_missing(self, store, mock_cursor):
        mock_cursor.fetchone = MagicMock(return_value=None)

        assert await store.get("checkin:404") is None

    @pytest.mark.asyncio
    async def test_list_escapes_like_wildcards(self, store, mock_cursor):
        mock_cursor.fetchall = MagicMock(return_value=[("check_in:1",)])

        keys = await store.list("check_in:")

        assert keys == ["check_in:1"]
        assert mock_cursor.execute.call_args.args[1] == ("check\\_in:%",)

    @pytest.mark.asyncio
    async def test_reconnects_once_when_connection_dropped(self, store, mock_conn, mock_cursor):
        mock_conn.is_connected = MagicMock(return_value=False)
        mock_cursor.fetchone = MagicMock(return_value=None)

        await store.get("checkin:1")

        mock_conn.reconnect.assert_called_once_with(attempts=1, delay=0)


class TestWithoutConnection:
    @pytest.mark.asyncio
    async def test_failures_are_absorbed_by_repository(self):
        with patch("adapters.output.database.mysql_adapter.mysql.connector.connect",
                   side_effect=mysql.connector.Error("server down")):
            store = MySQLKeyValueStore(host="db", user="u", password="p", database="hotel")

        assert store.conn is None
        with pytest.raises(ConnectionError):
            await store.get("checkin:1")

        repository = NamespacedKVCheckInRepository(store)
        written = await repository.put("checkin:1", "{}")
        assert written.status == StorageStatus.FAILED
        assert await repository.list_keys() == []
