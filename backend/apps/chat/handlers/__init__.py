"""Chat handlers."""

from apps.chat.handlers.get_messages import get_messages

__all__ = ["get_messages"]
