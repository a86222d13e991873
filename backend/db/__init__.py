"""Persistence layer for chat messages."""

from db.base import BaseMessageStore, MessageStoreError
from db.firestore import FirestoreMessageStore

__all__ = ["BaseMessageStore", "FirestoreMessageStore", "MessageStoreError"]
