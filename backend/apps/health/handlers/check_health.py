"""GET /health - Report whether the API can reach its message store."""

from datetime import UTC, datetime

from fastapi import Depends
from pydantic import BaseModel, Field

from config import get_app_config, get_settings
from db import BaseMessageStore
from dependencies import get_message_store

STORE_NAME = "firestore"

# --- Response Schemas ---


class StoreStatus(BaseModel):
    """Reachability of the message store."""

    name: str = Field(STORE_NAME, description="Backend serving chat messages")
    status: str = Field(..., description="healthy or unhealthy")
    latency_ms: float | None = Field(None, description="Probe round trip in ms")
    error: str | None = Field(None, description="Probe failure, if any")


class HealthResponse(BaseModel):
    """Health of the chat history API."""

    status: str = Field(..., description="healthy only if every store is healthy")
    version: str
    environment: str
    services: list[StoreStatus]
    timestamp: datetime


# --- Handler ---


async def check_health(
    message_store: BaseMessageStore = Depends(get_message_store),
) -> HealthResponse:
    """Probe the message store and summarise the result."""
    probe = await message_store.health_check()
    store = StoreStatus(**probe)

    return HealthResponse(
        status=store.status,
        version=get_app_config()["version"],
        environment=get_settings().environment,
        services=[store],
        timestamp=datetime.now(UTC),
    )
