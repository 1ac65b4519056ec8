"""Shared base for document models."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, alias="_id")

    def to_document(self) -> dict[str, Any]:
        """Plain dict ready for insert_one; _id is left to MongoDB when unset."""
        doc = self.model_dump(by_alias=True)
        if doc["_id"] is None:
            del doc["_id"]
        return doc
