"""MongoDB connection and utilities."""

import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import CollectionInvalid

from grocer_ease.config import MONGO_CONFIG

logger = logging.getLogger(__name__)

COLLECTIONS = ("chat_history", "shopping_list", "user_preferences")

# Compound keys keep their declared field order.
INDEXES = {
    "chat_history": [
        [("user_id", ASCENDING), ("timestamp", DESCENDING)],
        [("timestamp", DESCENDING)],
    ],
    "shopping_list": [
        [("user_id", ASCENDING)],
        [("updated_at", DESCENDING)],
    ],
    "user_preferences": [
        [("user_id", ASCENDING)],
        [("last_updated", DESCENDING)],
    ],
}


class MongoDBClient:
    def __init__(self, uri: str | None = None, database: str | None = None):
        self.client = MongoClient(uri or MONGO_CONFIG["uri"])
        self.db: Database = self.client[database or MONGO_CONFIG["database"]]

    @property
    def database_name(self) -> str:
        return self.db.name

    def get_collection(self, name: str):
        """Get a MongoDB collection."""
        return self.db[name]

    def ping(self) -> dict:
        """Round-trip to the server; raises if it cannot be reached."""
        return self.client.admin.command("ping")

    def ensure_collections(self, names=COLLECTIONS) -> list[str]:
        """Create the named collections that don't exist yet.

        Returns the names that were actually created.
        """
        existing = set(self.db.list_collection_names())
        created = []
        for name in names:
            if name in existing:
                logger.info("Collection %s already exists", name)
                continue
            try:
                self.db.create_collection(name)
            except CollectionInvalid:
                # created by someone else since list_collection_names()
                logger.info("Collection %s already exists", name)
                continue
            logger.info("Created collection %s", name)
            created.append(name)
        return created

    def create_indexes(self) -> list[str]:
        """Create necessary indexes."""
        names = []
        for collection, keys_list in INDEXES.items():
            col = self.db.get_collection(collection)
            for keys in keys_list:
                name = col.create_index(keys)
                logger.info("Index %s ready on %s", name, collection)
                names.append(name)
        return names

    def close(self):
        self.client.close()


# Singleton instance
mongo_client = MongoDBClient()
