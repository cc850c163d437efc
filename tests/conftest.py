"""Shared fixtures for the grocery list tests."""

from __future__ import annotations

from typing import Any

import pytest
import streamlit as st

from config.settings import get_settings
from services.document_store import DocumentStoreBase, DocumentStoreHTTPError

TEST_FIREBASE_URL = "https://grocery-test.firebaseio.com"


class SessionStateStub(dict):
    """Dict with attribute access, standing in for st.session_state."""

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value


class InMemoryStore(DocumentStoreBase):
    """Document store kept in a dict, with switches to simulate failures."""

    def __init__(self, data: dict[str, dict[str, Any]] | None = None) -> None:
        self.collections: dict[str, dict[str, Any]] = {}
        if data is not None:
            self.collections["shopping-list"] = dict(data)
        self.fail_get_status: int | None = None
        self.fail_push = False
        self.fail_update = False
        self.fail_delete = False
        self.calls: list[tuple[str, str]] = []
        self._next_id = 0

    @property
    def store_name(self) -> str:
        return "memory"

    def is_configured(self) -> bool:
        return True

    def get_collection(self, path: str) -> dict[str, Any]:
        self.calls.append(("GET", path))
        if self.fail_get_status:
            raise DocumentStoreHTTPError(self.fail_get_status)
        return dict(self.collections.get(path, {}))

    def push(self, path: str, data: dict[str, Any]) -> str:
        self.calls.append(("POST", path))
        if self.fail_push:
            raise DocumentStoreHTTPError(500)
        self._next_id += 1
        key = f"-key{self._next_id}"
        self.collections.setdefault(path, {})[key] = dict(data)
        return key

    def update(self, path: str, key: str, data: dict[str, Any]) -> None:
        self.calls.append(("PATCH", f"{path}/{key}"))
        if self.fail_update:
            raise DocumentStoreHTTPError(500)
        self.collections.setdefault(path, {}).setdefault(key, {}).update(data)

    def delete(self, path: str, key: str) -> None:
        self.calls.append(("DELETE", f"{path}/{key}"))
        if self.fail_delete:
            raise DocumentStoreHTTPError(401)
        self.collections.get(path, {}).pop(key, None)


@pytest.fixture(autouse=True)
def settings(monkeypatch: pytest.MonkeyPatch):
    """Point settings at a test database and reset the cached instance."""
    monkeypatch.setenv("FIREBASE_URL", TEST_FIREBASE_URL)
    monkeypatch.delenv("FIREBASE_AUTH_TOKEN", raising=False)
    monkeypatch.delenv("SHOPPING_LIST_PATH", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def session_state(monkeypatch: pytest.MonkeyPatch) -> SessionStateStub:
    state = SessionStateStub()
    monkeypatch.setattr(st, "session_state", state)
    return state


@pytest.fixture
def sample_records() -> dict[str, dict[str, Any]]:
    return {
        "-a": {"name": "Milk", "quantity": 2, "category": "Dairy"},
        "-b": {"name": "Apples", "quantity": 6, "category": "Fruit"},
        "-c": {"name": "Soap", "quantity": 1, "category": "Hygiene"},
    }


@pytest.fixture
def store(sample_records: dict[str, dict[str, Any]]) -> InMemoryStore:
    return InMemoryStore(sample_records)
