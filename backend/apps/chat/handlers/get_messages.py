"""GET /chat/messages/{user_id1}/{user_id2} - Get chat history between two users."""

import logging

from fastapi import Depends, Path
from fastapi.responses import JSONResponse

from apps.chat.chat_history import ChatHistoryService
from apps.chat.models.message import MessageDocument
from dependencies import get_chat_history_service
from responses import fetch_messages_error_response

logger = logging.getLogger(__name__)


async def get_messages(
    user_id1: str = Path(..., description="ID of one participant"),
    user_id2: str = Path(..., description="ID of the other participant"),
    chat_history: ChatHistoryService = Depends(get_chat_history_service),
) -> list[MessageDocument] | JSONResponse:
    """Get every message exchanged between two users, oldest first."""
    result = await chat_history.get_conversation(user_id1, user_id2)

    if not result.ok:
        return fetch_messages_error_response()

    logger.debug(
        "Fetched %d messages between %s and %s",
        len(result.messages),
        user_id1,
        user_id2,
    )
    return result.messages
