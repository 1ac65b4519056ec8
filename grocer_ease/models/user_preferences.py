"""
Pydantic model for MongoDB 'user_preferences' collection.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from .base import Document, utcnow

VEGETARIAN_CHOICES = ("yes", "no", "not_set")


class UserPreferences(Document):
    user_id: str
    preferences: dict[str, Any] = {}
    last_updated: datetime = Field(default_factory=utcnow)

    @field_validator("preferences")
    @classmethod
    def check_vegetarian(cls, value: dict[str, Any]) -> dict[str, Any]:
        if "vegetarian" in value and value["vegetarian"] not in VEGETARIAN_CHOICES:
            raise ValueError(f"vegetarian must be one of {', '.join(VEGETARIAN_CHOICES)}")
        return value
