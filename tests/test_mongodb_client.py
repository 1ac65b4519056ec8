"""Tests for MongoDBClient."""

from unittest.mock import MagicMock, call, patch

import pytest
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import CollectionInvalid, ServerSelectionTimeoutError

from grocer_ease.db.mongodb_client import COLLECTIONS, MongoDBClient


class TestMongoDBClient:
    @pytest.fixture
    def mock_mongo(self):
        with patch("grocer_ease.db.mongodb_client.MongoClient") as mock_mongo:
            yield mock_mongo

    @pytest.fixture
    def mongo(self, mock_mongo):
        return MongoDBClient(uri="mongodb://example:27017", database="grocer_ease_db")

    @pytest.fixture
    def mock_database(self, mock_mongo):
        return mock_mongo.return_value.__getitem__.return_value

    @pytest.fixture
    def collections(self, mock_database):
        cols = {}

        def get_collection(name):
            if name not in cols:
                col = MagicMock()
                col.create_index.side_effect = lambda keys: "_".join(f"{f}_{d}" for f, d in keys)
                cols[name] = col
            return cols[name]

        mock_database.get_collection.side_effect = get_collection
        mock_database.__getitem__.side_effect = get_collection
        return cols

    def test_selects_database_by_name(self, mock_mongo, mongo):
        """Test the client opens the named database."""
        mock_mongo.assert_called_once_with("mongodb://example:27017")
        mock_mongo.return_value.__getitem__.assert_called_once_with("grocer_ease_db")

    def test_ensure_collections_creates_missing(self, mongo, mock_database):
        """Test all collections are created on an empty database."""
        mock_database.list_collection_names.return_value = []

        created = mongo.ensure_collections()

        assert created == list(COLLECTIONS)
        assert mock_database.create_collection.call_args_list == [call(name) for name in COLLECTIONS]

    def test_ensure_collections_skips_existing(self, mongo, mock_database):
        """Test existing collections are left alone."""
        mock_database.list_collection_names.return_value = ["chat_history", "user_preferences", "other"]

        created = mongo.ensure_collections()

        assert created == ["shopping_list"]
        mock_database.create_collection.assert_called_once_with("shopping_list")

    def test_ensure_collections_tolerates_concurrent_creation(self, mongo, mock_database):
        """Test a collection created between listing and creating is treated as present."""
        mock_database.list_collection_names.return_value = []
        mock_database.create_collection.side_effect = [None, CollectionInvalid("exists"), None]

        created = mongo.ensure_collections()

        assert created == ["chat_history", "user_preferences"]

    def test_create_indexes(self, mongo, collections):
        """Test the exact index table is declared."""
        names = mongo.create_indexes()

        assert collections["chat_history"].create_index.call_args_list == [
            call([("user_id", ASCENDING), ("timestamp", DESCENDING)]),
            call([("timestamp", DESCENDING)]),
        ]
        assert collections["shopping_list"].create_index.call_args_list == [
            call([("user_id", ASCENDING)]),
            call([("updated_at", DESCENDING)]),
        ]
        assert collections["user_preferences"].create_index.call_args_list == [
            call([("user_id", ASCENDING)]),
            call([("last_updated", DESCENDING)]),
        ]
        assert names == [
            "user_id_1_timestamp_-1",
            "timestamp_-1",
            "user_id_1",
            "updated_at_-1",
            "user_id_1",
            "last_updated_-1",
        ]

    def test_create_indexes_not_unique(self, mongo, collections):
        """Test no index is declared unique."""
        mongo.create_indexes()

        for col in collections.values():
            for c in col.create_index.call_args_list:
                assert "unique" not in c.kwargs

    def test_create_indexes_twice(self, mongo, collections):
        """Test repeated declaration issues the same requests."""
        first = mongo.create_indexes()
        second = mongo.create_indexes()

        assert first == second
        assert collections["chat_history"].create_index.call_count == 4

    def test_ping(self, mock_mongo, mongo):
        """Test ping runs the admin command."""
        mock_mongo.return_value.admin.command.return_value = {"ok": 1.0}

        assert mongo.ping() == {"ok": 1.0}
        mock_mongo.return_value.admin.command.assert_called_once_with("ping")

    def test_ping_unreachable(self, mock_mongo, mongo):
        """Test ping propagates the driver error."""
        mock_mongo.return_value.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(ServerSelectionTimeoutError):
            mongo.ping()

    def test_close(self, mock_mongo, mongo):
        mongo.close()

        mock_mongo.return_value.close.assert_called_once()
