"""
Pydantic model for MongoDB 'chat_history' collection.
"""

from datetime import datetime

from pydantic import Field

from .base import Document, utcnow


class ChatHistory(Document):
    user_id: str
    user_message: str
    bot_response: str
    timestamp: datetime = Field(default_factory=utcnow)
