"""Chat history lookups between two users.

Wraps the message store so callers get a `ConversationResult` instead of an
exception when the store fails.
"""

import logging
from dataclasses import dataclass, field

from apps.chat.models.message import MessageDocument
from db import BaseMessageStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversationResult:
    """Outcome of a conversation lookup: messages on success, error on failure."""

    messages: list[MessageDocument] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, messages: list[MessageDocument]) -> "ConversationResult":
        return cls(messages=messages)

    @classmethod
    def failure(cls, error: Exception) -> "ConversationResult":
        return cls(error=error)


class ChatHistoryService:
    """Reads the conversation between two users from the message store."""

    def __init__(self, message_store: BaseMessageStore) -> None:
        self.message_store = message_store

    async def get_conversation(self, user_a: str, user_b: str) -> ConversationResult:
        """Get all messages between two users, oldest first.

        Store failures are logged and returned as a failed result.
        """
        try:
            messages = await self.message_store.find_conversation(user_a, user_b)
            # sorted() is stable, so equal timestamps keep the store's order
            messages = sorted(messages, key=lambda m: m.timestamp)
        except Exception as e:
            logger.warning(
                "Failed to fetch conversation between %s and %s: %s", user_a, user_b, e
            )
            return ConversationResult.failure(e)

        return ConversationResult.success(messages)
