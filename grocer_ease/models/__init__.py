"""
Pydantic models for the GrocerEase MongoDB collections.
"""

from .chat_history import ChatHistory
from .shopping_list import ShoppingItem, ShoppingList
from .user_preferences import UserPreferences

__all__ = [
    "ChatHistory",
    "ShoppingItem",
    "ShoppingList",
    "UserPreferences",
]
