"""Firestore-backed message store for chat history.

Messages live in a single top-level collection (``messages`` by default),
one document per message with ``sender``, ``receiver`` and ``timestamp``
fields. The conversation query needs a composite index on
(sender, receiver, timestamp).
"""

import base64
import json
import logging
import os
import time
from typing import Any

import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore_v1 import AsyncClient
from google.cloud.firestore_v1.base_query import And, FieldFilter, Or
from google.oauth2 import service_account

from apps.chat.models.message import MessageDocument
from config import Settings
from db.base import BaseMessageStore, MessageStoreError

logger = logging.getLogger(__name__)


def _load_firebase_credentials(creds_value: str) -> dict:
    """Load Firebase credentials from JSON string, file path, or base64."""
    if os.path.isfile(creds_value):
        with open(creds_value) as f:
            return json.load(f)

    try:
        return json.loads(creds_value)
    except json.JSONDecodeError:
        pass

    try:
        decoded = base64.b64decode(creds_value, validate=True).decode("utf-8")
        return json.loads(decoded)
    except ValueError:
        pass

    raise ValueError("FIREBASE_CREDENTIALS is not valid JSON, file path, or base64")


def conversation_filter(user_a: str, user_b: str) -> Or:
    """Filter matching messages sent between two users in either direction."""
    return Or(
        filters=[
            And(
                filters=[
                    FieldFilter("sender", "==", user_a),
                    FieldFilter("receiver", "==", user_b),
                ]
            ),
            And(
                filters=[
                    FieldFilter("sender", "==", user_b),
                    FieldFilter("receiver", "==", user_a),
                ]
            ),
        ]
    )


class FirestoreMessageStore(BaseMessageStore):
    """Message store backed by a Firestore collection.

    The client is created by `connect()` and released by `close()`; both are
    driven by the application lifespan.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.collection_name = settings.firestore_messages_collection
        self.db: AsyncClient | None = None

    async def connect(self) -> None:
        """Create the Firestore client. Safe to call more than once."""
        if self.db is not None:
            return

        try:
            creds_dict = _load_firebase_credentials(self.settings.firebase_credentials)

            if not firebase_admin._apps:
                cred = credentials.Certificate(creds_dict)
                firebase_admin.initialize_app(cred)

            gcp_credentials = service_account.Credentials.from_service_account_info(
                creds_dict
            )

            self.db = AsyncClient(
                project=creds_dict.get("project_id"),
                credentials=gcp_credentials,
            )
            logger.info(
                "Firestore client initialized (collection: %s)", self.collection_name
            )
        except Exception as e:
            logger.error("Failed to initialize Firestore: %s", e)
            raise MessageStoreError("Failed to initialize Firestore") from e

    async def close(self) -> None:
        """Release the Firestore client. Safe to call more than once."""
        if self.db is None:
            return

        db, self.db = self.db, None
        # AsyncClient has no close of its own; shut down the gRPC channel
        await db._firestore_api.transport.close()
        logger.info("Firestore client closed")

    async def find_conversation(
        self, user_a: str, user_b: str
    ) -> list[MessageDocument]:
        """Get every message exchanged between two users, oldest first."""
        if self.db is None:
            raise MessageStoreError("Message store is not connected")

        try:
            query = (
                self.db.collection(self.collection_name)
                .where(filter=conversation_filter(user_a, user_b))
                .order_by("timestamp", direction=firestore.Query.ASCENDING)
            )

            docs = await query.get(timeout=self.settings.firestore_query_timeout)
            return [MessageDocument.from_firestore(doc.id, doc.to_dict()) for doc in docs]

        except Exception as e:
            raise MessageStoreError("Failed to get conversation messages") from e

    async def health_check(self) -> dict[str, Any]:
        """Check Firestore connection health."""
        if self.db is None:
            return {"status": "unhealthy", "error": "not connected"}

        start = time.time()
        try:
            await self.db.collection(self.collection_name).limit(1).get(
                timeout=self.settings.firestore_query_timeout
            )

            latency = (time.time() - start) * 1000
            return {"status": "healthy", "latency_ms": round(latency, 2)}
        except Exception as e:
            return {"status": "unhealthy", "error": str(e)}
