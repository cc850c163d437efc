"""
Remote document store integrations.

Currently supported stores:
- Firebase Realtime Database (REST)
"""

from services.document_store.base import (
    DocumentStoreBase,
    DocumentStoreError,
    DocumentStoreHTTPError,
    DocumentStoreConnectionError,
    DocumentStoreDecodeError,
)
from services.document_store.firebase import FirebaseRealtimeDB

__all__ = [
    "DocumentStoreBase",
    "DocumentStoreError",
    "DocumentStoreHTTPError",
    "DocumentStoreConnectionError",
    "DocumentStoreDecodeError",
    "FirebaseRealtimeDB",
]
