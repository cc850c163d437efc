"""
Firebase Realtime Database REST client.

Firebase REST Documentation: https://firebase.google.com/docs/reference/rest/database

Every path is addressed by appending ".json" to the database URL:
- GET    /shopping-list.json         - Read the whole collection
- POST   /shopping-list.json         - Push a child, returns {"name": "<key>"}
- PATCH  /shopping-list/<key>.json   - Update fields of a child
- DELETE /shopping-list/<key>.json   - Remove a child

Authentication is optional: when a token is configured it is sent as the
"auth" query parameter.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from config.settings import get_settings
from models.schemas import PushResponse
from services.document_store.base import (
    DocumentStoreBase,
    DocumentStoreConnectionError,
    DocumentStoreDecodeError,
    DocumentStoreHTTPError,
)

logger = logging.getLogger(__name__)


class FirebaseRealtimeDB(DocumentStoreBase):
    """Client for a Firebase Realtime Database over REST."""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self.settings = get_settings()
        self._transport = transport

    @property
    def store_name(self) -> str:
        return "Firebase"

    def is_configured(self) -> bool:
        """Check if a database URL is configured."""
        return bool(self.settings.firebase_url.strip())

    def _url(self, path: str, key: Optional[str] = None) -> str:
        """Build the REST URL for a collection or one of its children."""
        path = path.strip("/")
        if key:
            path = f"{path}/{key}"
        return f"{self.settings.firebase_base_url}/{path}.json"

    def _params(self) -> dict[str, str]:
        if self.settings.firebase_auth_token:
            return {"auth": self.settings.firebase_auth_token}
        return {}

    def _request(
        self,
        method: str,
        url: str,
        json_body: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a request and raise a DocumentStoreError on any failure.

        Status codes >= 400 are treated as errors.
        """
        headers = {"Accept": "application/json"}
        if json_body is not None:
            headers["Content-Type"] = "application/json; charset=UTF-8"

        try:
            with httpx.Client(
                timeout=self.settings.request_timeout,
                transport=self._transport,
            ) as client:
                response = client.request(
                    method,
                    url,
                    headers=headers,
                    params=self._params(),
                    json=json_body,
                )
        except httpx.TimeoutException as e:
            logger.error(f"Firebase {method} {url} timed out: {e}")
            raise DocumentStoreConnectionError("Firebase request timed out") from e
        except httpx.TransportError as e:
            logger.error(f"Firebase {method} {url} failed: {e}")
            raise DocumentStoreConnectionError("Could not connect to Firebase") from e

        if response.status_code >= 400:
            logger.error(f"Firebase {method} {url} returned {response.status_code} - {response.text}")
            raise DocumentStoreHTTPError(response.status_code)

        return response

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Firebase returned invalid JSON: {response.text[:200]}")
            raise DocumentStoreDecodeError("Invalid JSON from Firebase") from e

    def get_collection(self, path: str) -> dict[str, Any]:
        """
        Read every child of a collection.

        Firebase answers "null" for a path that holds no data, which is
        returned as an empty mapping.
        """
        response = self._request("GET", self._url(path))
        data = self._decode(response)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DocumentStoreDecodeError(
                f"Expected an object at {path}, got {type(data).__name__}"
            )
        return data

    def push(self, path: str, data: dict[str, Any]) -> str:
        """Push a child and return the generated key."""
        response = self._request("POST", self._url(path), json_body=data)

        try:
            key = PushResponse.model_validate(self._decode(response)).name
        except ValidationError as e:
            logger.error(f"Unexpected push response: {response.text[:200]}")
            raise DocumentStoreDecodeError("Push response has no key") from e

        logger.info(f"Pushed {path}/{key}")
        return key

    def update(self, path: str, key: str, data: dict[str, Any]) -> None:
        """Patch the given fields of a child."""
        self._request("PATCH", self._url(path, key), json_body=data)
        logger.info(f"Updated {path}/{key}")

    def delete(self, path: str, key: str) -> None:
        """Delete a child."""
        self._request("DELETE", self._url(path, key))
        logger.info(f"Deleted {path}/{key}")
