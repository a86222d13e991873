"""FastAPI dependency injection for services.

The message store is created once and shared across requests; its connection
is opened and closed by the application lifespan in main.py.
"""

from functools import lru_cache

from fastapi import Depends

from apps.chat.chat_history import ChatHistoryService
from config import get_settings
from db import BaseMessageStore, FirestoreMessageStore

# --- Cached Singletons ---


@lru_cache
def get_message_store() -> BaseMessageStore:
    """Get cached message store (expensive - holds the Firestore client)."""
    return FirestoreMessageStore(get_settings())


# --- Composed Services ---


def get_chat_history_service(
    message_store: BaseMessageStore = Depends(get_message_store),
) -> ChatHistoryService:
    """Get chat history service with the injected message store."""
    return ChatHistoryService(message_store=message_store)
