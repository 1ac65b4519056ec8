"""
Pydantic models for MongoDB 'shopping_list' collection.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .base import Document, utcnow


class ShoppingItem(BaseModel):
    name: str
    quantity: int | float
    unit: str


class ShoppingList(Document):
    user_id: str  # one active list per user
    items: list[ShoppingItem] = []
    updated_at: datetime = Field(default_factory=utcnow)
