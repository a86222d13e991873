"""Pytest configuration and fixtures for chat history tests."""

import os
import sys

# Set required env vars BEFORE any imports that might trigger Settings
os.environ.setdefault(
    "FIREBASE_CREDENTIALS", '{"type":"service_account","project_id":"test"}'
)

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from apps.chat.models.message import MessageDocument  # noqa: E402
from db import BaseMessageStore, MessageStoreError  # noqa: E402

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def make_message(
    msg_id: str, sender: str, receiver: str, seconds: int, **extra
) -> MessageDocument:
    """Build a message sent `seconds` after BASE_TIME."""
    return MessageDocument(
        id=msg_id,
        sender=sender,
        receiver=receiver,
        message=f"message {msg_id}",
        timestamp=BASE_TIME + timedelta(seconds=seconds),
        **extra,
    )


class InMemoryMessageStore(BaseMessageStore):
    """Message store holding messages in a list."""

    def __init__(self, messages: list[MessageDocument] | None = None) -> None:
        self.messages = list(messages or [])
        self.connected = False
        self.closed = False
        self.find_calls: list[tuple[str, str]] = []

    async def connect(self) -> None:
        self.connected = True

    async def close(self) -> None:
        self.connected = False
        self.closed = True

    async def find_conversation(
        self, user_a: str, user_b: str
    ) -> list[MessageDocument]:
        self.find_calls.append((user_a, user_b))
        pairs = {(user_a, user_b), (user_b, user_a)}
        matching = [m for m in self.messages if (m.sender, m.receiver) in pairs]
        return sorted(matching, key=lambda m: m.timestamp)

    async def health_check(self) -> dict:
        return {"status": "healthy", "latency_ms": 0.5}


class FailingMessageStore(InMemoryMessageStore):
    """Message store whose queries always fail."""

    async def find_conversation(
        self, user_a: str, user_b: str
    ) -> list[MessageDocument]:
        self.find_calls.append((user_a, user_b))
        raise MessageStoreError("connection refused")

    async def health_check(self) -> dict:
        return {"status": "unhealthy", "error": "connection refused"}


@pytest.fixture
def mock_settings():
    """Mock application settings."""
    settings = MagicMock()
    settings.firebase_credentials = '{"type":"service_account","project_id":"test"}'
    settings.firestore_messages_collection = "test_messages"
    settings.firestore_query_timeout = 5.0
    settings.environment = "test"
    settings.debug = True
    settings.log_level = "DEBUG"
    return settings


@pytest.fixture
def sample_messages():
    """Two messages between u1 and u2, one from u3 to u2."""
    return [
        make_message("m1", "u1", "u2", 1),
        make_message("m2", "u2", "u1", 2),
        make_message("m3", "u3", "u2", 3),
    ]


@pytest.fixture
def message_store(sample_messages):
    """In-memory store seeded with sample messages."""
    return InMemoryMessageStore(sample_messages)


@pytest.fixture
def failing_store():
    """Store that fails every query."""
    return FailingMessageStore()


@pytest.fixture
def make_client():
    """Build a TestClient whose message store is replaced by the given one."""
    from fastapi.testclient import TestClient

    from dependencies import get_message_store
    from main import app

    def _make(store: BaseMessageStore) -> TestClient:
        app.dependency_overrides[get_message_store] = lambda: store
        return TestClient(app)

    yield _make

    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, message_store):
    """TestClient backed by the seeded in-memory store."""
    return make_client(message_store)
