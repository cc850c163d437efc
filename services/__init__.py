"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.grocery_list_service import GroceryListService, ItemFormResult
from services.document_store import (
    DocumentStoreBase,
    DocumentStoreError,
    DocumentStoreHTTPError,
    FirebaseRealtimeDB,
)

__all__ = [
    "GroceryListService",
    "ItemFormResult",
    "DocumentStoreBase",
    "DocumentStoreError",
    "DocumentStoreHTTPError",
    "FirebaseRealtimeDB",
]
