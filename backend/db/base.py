"""Base message store interface.

Defines the contract that every message store backend must implement.
"""

from abc import ABC, abstractmethod
from typing import Any

from apps.chat.models.message import MessageDocument


class MessageStoreError(Exception):
    """Raised when the message store cannot be reached or a query fails."""


class BaseMessageStore(ABC):
    """Abstract base class for message stores.

    Stores are opened once at startup and closed at shutdown.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection to the backing store."""

    @abstractmethod
    async def close(self) -> None:
        """Release the connection to the backing store."""

    @abstractmethod
    async def find_conversation(
        self, user_a: str, user_b: str
    ) -> list[MessageDocument]:
        """Get every message exchanged between two users.

        Args:
            user_a: One participant's user ID.
            user_b: The other participant's user ID.

        Returns:
            Messages sent from either user to the other, ordered by
            ascending timestamp. Empty if they never talked.

        Raises:
            MessageStoreError: If the store is unreachable or the query fails.
        """

    @abstractmethod
    async def health_check(self) -> dict[str, Any]:
        """Report store health as a dict with at least a ``status`` key."""
