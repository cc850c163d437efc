"""
Base class for remote JSON document stores.

The grocery list only needs a flat collection of records keyed by a
server-generated id, so the interface is limited to reading a whole
collection and creating, patching or deleting a single child.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class DocumentStoreError(Exception):
    """Base error for document store failures."""


class DocumentStoreHTTPError(DocumentStoreError):
    """The store answered with an error status (>= 400)."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Document store error (HTTP {status_code})")


class DocumentStoreConnectionError(DocumentStoreError):
    """The store could not be reached or the request timed out."""


class DocumentStoreDecodeError(DocumentStoreError):
    """The store returned a body that is not the expected JSON."""


class DocumentStoreBase(ABC):
    """Abstract base class for document stores."""

    @property
    @abstractmethod
    def store_name(self) -> str:
        """Return the store name (e.g., 'Firebase')."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the store location is configured."""
        pass

    @abstractmethod
    def get_collection(self, path: str) -> dict[str, Any]:
        """
        Read every child of a collection.

        Returns:
            Mapping of child key to record; empty if the collection does not exist
        """
        pass

    @abstractmethod
    def push(self, path: str, data: dict[str, Any]) -> str:
        """
        Append a record to a collection.

        Returns:
            The key generated by the store for the new child
        """
        pass

    @abstractmethod
    def update(self, path: str, key: str, data: dict[str, Any]) -> None:
        """Merge fields into an existing child."""
        pass

    @abstractmethod
    def delete(self, path: str, key: str) -> None:
        """Remove a child from a collection."""
        pass
