"""Firestore document schema for chat messages.

This represents the structure of documents stored in Firestore. Fields beyond
the ones declared here are kept as-is and returned to clients unchanged.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class MessageDocument(BaseModel):
    """Chat message document stored in Firestore.

    Path: {messages_collection}/{message_id}
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Message ID")
    sender: str = Field(..., description="ID of the user who sent the message")
    receiver: str = Field(..., description="ID of the user who received the message")
    message: str | None = Field(None, description="Message body")
    timestamp: datetime = Field(..., description="When the message was sent")

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.isoformat()

    @classmethod
    def from_firestore(cls, doc_id: str, data: dict[str, Any]) -> "MessageDocument":
        """Build a message from a Firestore snapshot's id and data."""
        return cls(**{**data, "id": doc_id})
