"""Load GrocerEase seed documents into MongoDB."""

import logging

from grocer_ease.db.mongodb_client import COLLECTIONS, mongo_client
from grocer_ease.models import ChatHistory, ShoppingItem, ShoppingList, UserPreferences

logger = logging.getLogger(__name__)

SEED_USER_ID = "test_user"


class DocumentLoader:
    def __init__(self, client=None):
        self.client = client or mongo_client

    def ensure_collections(self):
        """Create the application collections if missing."""
        return self.client.ensure_collections(COLLECTIONS)

    def create_indexes(self):
        return self.client.create_indexes()

    def _insert(self, collection: str, model):
        col = self.client.get_collection(collection)
        result = col.insert_one(model.to_document())
        logger.info("Inserted %s into %s", result.inserted_id, collection)
        return result.inserted_id

    def load_user_preferences(self):
        """Insert the test user's preferences."""
        prefs = UserPreferences(user_id=SEED_USER_ID, preferences={"vegetarian": "not_set"})
        return self._insert("user_preferences", prefs)

    def load_shopping_list(self):
        """Insert a sample shopping list."""
        shopping_list = ShoppingList(
            user_id=SEED_USER_ID,
            items=[
                ShoppingItem(name="milk", quantity=1, unit="gallon"),
                ShoppingItem(name="bread", quantity=2, unit="loaf"),
            ],
        )
        return self._insert("shopping_list", shopping_list)

    def load_chat_history(self):
        """Insert a sample chat exchange."""
        chat = ChatHistory(
            user_id=SEED_USER_ID,
            user_message="Hello, I need help with my shopping list",
            bot_response="Hello! I'm here to help you with your shopping list. What would you like to add?",
        )
        return self._insert("chat_history", chat)

    def report(self, seeded: bool = True):
        print("MongoDB initialization completed successfully!")
        print(f"Database: {self.client.database_name}")
        print(f"Collections created: {', '.join(COLLECTIONS)}")
        if seeded:
            print(f"Sample data inserted for {SEED_USER_ID}")

    def load_all(self, seed: bool = True):
        """Execute all initialization steps.

        Seed documents are inserted on every call, so running twice leaves
        two copies of each.
        """
        self.ensure_collections()
        self.create_indexes()
        if seed:
            self.load_user_preferences()
            self.load_shopping_list()
            self.load_chat_history()
        self.report(seeded=seed)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    loader = DocumentLoader()
    loader.load_all()
