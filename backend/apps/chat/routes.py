"""Chat routes - registers all chat endpoints."""

from fastapi import APIRouter

from apps.chat.handlers import get_messages
from apps.chat.models.message import MessageDocument

router = APIRouter(prefix="/chat", tags=["Chat"])

# GET /chat/messages/{user_id1}/{user_id2} - Get chat history between two users
router.get(
    "/messages/{user_id1}/{user_id2}",
    response_model=list[MessageDocument],
)(get_messages)
