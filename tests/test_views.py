"""Tests for the Streamlit pages, driven headlessly with AppTest."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from controllers.grocery_controller import GENERIC_ERROR, LOAD_FAILED_ERROR
from services.grocery_list_service import NAME_ERROR, QUANTITY_ERROR
from tests.conftest import InMemoryStore
from views.components.grocery_item import escape_markdown

ROOT = Path(__file__).resolve().parent.parent
MAIN_SCRIPT = str(ROOT / "streamlit_app.py")
NEW_ITEM_PAGE = "pages/1_➕_New_Item.py"


class SendingStateStore(InMemoryStore):
    """Records whether the add form was locked when each push arrived."""

    def __init__(self, data: dict[str, dict[str, Any]] | None = None) -> None:
        super().__init__(data)
        self.sending_flags: list[bool] = []

    def push(self, path: str, data: dict[str, Any]) -> str:
        self.sending_flags.append(st.session_state.new_item["is_sending"])
        return super().push(path, data)


@pytest.fixture
def use_store(monkeypatch: pytest.MonkeyPatch):
    """Make every controller built by the pages use the given store."""

    def install(store: InMemoryStore) -> InMemoryStore:
        monkeypatch.setattr("controllers.grocery_controller.FirebaseRealtimeDB", lambda: store)
        return store

    return install


def run_list_page() -> AppTest:
    at = AppTest.from_file(MAIN_SCRIPT, default_timeout=10)
    return at.run()


def markdown_values(at: AppTest) -> list[str]:
    return [m.value for m in at.markdown]


def button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


# ---------------------------------------------------------------------------
# escape_markdown
# ---------------------------------------------------------------------------


class TestEscapeMarkdown:
    def test_plain_text_unchanged(self) -> None:
        assert escape_markdown("Milk 2") == "Milk 2"

    def test_emphasis_is_escaped(self) -> None:
        assert escape_markdown("*x*") == r"\*x\*"
        assert escape_markdown("__init__") == r"\_\_init\_\_"

    def test_links_and_headings_are_escaped(self) -> None:
        assert escape_markdown("# [a](b)") == r"\# \[a\]\(b\)"


# ---------------------------------------------------------------------------
# Grocery list page
# ---------------------------------------------------------------------------


class TestGroceryListPage:
    def test_http_error_replaces_list(self, use_store, sample_records) -> None:
        store = use_store(InMemoryStore(sample_records))
        store.fail_get_status = 500

        at = run_list_page()

        assert not at.exception
        assert any(LOAD_FAILED_ERROR in v for v in markdown_values(at))
        assert "**Milk**" not in markdown_values(at)

    def test_bad_record_shows_generic_error(self, use_store) -> None:
        use_store(InMemoryStore({"-z": {"name": "Lego", "quantity": 1, "category": "Toys"}}))

        at = run_list_page()

        assert any(GENERIC_ERROR in v for v in markdown_values(at))

    def test_empty_list_message(self, use_store) -> None:
        use_store(InMemoryStore())

        at = run_list_page()

        assert [i.value for i in at.info] == ["List is empty. Add some items!"]

    def test_items_are_listed_in_order(self, use_store, sample_records) -> None:
        use_store(InMemoryStore(sample_records))

        at = run_list_page()

        names = [v for v in markdown_values(at) if v.startswith("**")]
        assert names == ["**Milk**", "**Apples**", "**Soap**"]
        assert not at.info

    def test_names_are_not_read_as_markdown(self, use_store) -> None:
        use_store(InMemoryStore({"-a": {"name": "__init__", "quantity": 1, "category": "Other"}}))

        at = run_list_page()

        assert r"**\_\_init\_\_**" in markdown_values(at)

    def test_delete_removes_row(self, use_store, sample_records) -> None:
        store = use_store(InMemoryStore(sample_records))
        at = run_list_page()

        at.button(key="delete_-b").click().run()

        assert "-b" not in store.collections["shopping-list"]
        assert "**Apples**" not in markdown_values(at)

    def test_failed_delete_keeps_row(self, use_store, sample_records) -> None:
        store = use_store(InMemoryStore(sample_records))
        store.fail_delete = True
        at = run_list_page()

        at.button(key="delete_-b").click().run()

        names = [v for v in markdown_values(at) if v.startswith("**")]
        assert names == ["**Milk**", "**Apples**", "**Soap**"]


# ---------------------------------------------------------------------------
# New item page
# ---------------------------------------------------------------------------


class TestNewItemPage:
    def open_form(self) -> AppTest:
        at = run_list_page()
        return at.switch_page(NEW_ITEM_PAGE).run()

    def test_buttons_enabled_before_submit(self, use_store) -> None:
        use_store(InMemoryStore())

        at = self.open_form()

        assert not button(at, "Reset").disabled
        assert not button(at, "Add Item").disabled

    def test_field_errors_are_shown(self, use_store) -> None:
        store = use_store(InMemoryStore())
        at = self.open_form()

        at.text_input(key="new_item_name_0").input("E")
        at.text_input(key="new_item_quantity_0").input("0")
        button(at, "Add Item").click().run()

        errors = [e.value for e in at.error]
        assert NAME_ERROR in errors
        assert QUANTITY_ERROR in errors
        assert ("POST", "shopping-list") not in store.calls
        assert not at.session_state["new_item"]["is_sending"]

    def test_unparsable_quantity_is_rejected(self, use_store) -> None:
        store = use_store(InMemoryStore())
        at = self.open_form()

        at.text_input(key="new_item_name_0").input("Eggs")
        at.text_input(key="new_item_quantity_0").input("1_000")
        button(at, "Add Item").click().run()

        assert QUANTITY_ERROR in [e.value for e in at.error]
        assert store.collections == {}

    def test_submit_stores_item_once_with_form_locked(self, use_store) -> None:
        store = use_store(SendingStateStore())
        at = self.open_form()

        at.text_input(key="new_item_name_0").input("Eggs")
        at.text_input(key="new_item_quantity_0").input("12")
        button(at, "Add Item").click().run()

        assert store.collections["shopping-list"] == {
            "-key1": {"name": "Eggs", "quantity": 12, "category": "Vegetables"},
        }
        assert store.sending_flags == [True]
        assert [i.name for i in at.session_state["grocery"]["items"]] == ["Eggs"]
        assert not at.session_state["new_item"]["is_sending"]

    def test_failed_save_shows_error_and_unlocks(self, use_store) -> None:
        store = use_store(InMemoryStore())
        store.fail_push = True
        at = self.open_form()

        at.text_input(key="new_item_name_0").input("Eggs")
        button(at, "Add Item").click().run()

        assert "Could not save the item. Please try again later." in [e.value for e in at.error]
        assert not button(at, "Add Item").disabled
        assert not button(at, "Reset").disabled
