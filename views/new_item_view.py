"""
New Item View - form for adding a grocery item.

Validates name and quantity, stores the item and returns to the list.
The form buttons stay disabled while the item is being sent.
"""

import streamlit as st

from controllers.grocery_controller import GroceryController
from views.components.category_select import render_category_select

LIST_PAGE = "streamlit_app.py"


class NewItemView:
    """View for the add item form."""

    def __init__(self):
        self.controller = GroceryController()
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "new_item" not in st.session_state:
            st.session_state.new_item = {
                "form_version": 0,  # Bumped to reset the form widgets
                "errors": {},
                "error": None,
                "is_sending": False,
                "pending": None,  # (name, quantity, category_title) queued for sending
            }

    def render(self):
        """Main render method."""
        st.title("Add a new item")

        state = st.session_state.new_item
        version = state["form_version"]
        is_sending = state["is_sending"]

        with st.form(key=f"new_item_form_{version}"):
            name = st.text_input(
                "Name",
                max_chars=50,
                placeholder="Enter the name of the item",
                key=f"new_item_name_{version}",
            )
            if "name" in state["errors"]:
                st.error(state["errors"]["name"])

            col_qty, col_category = st.columns(2)
            with col_qty:
                quantity = st.text_input(
                    "Quantity (pcs)",
                    value="1",
                    placeholder="Enter the quantity",
                    key=f"new_item_quantity_{version}",
                )
                if "quantity" in state["errors"]:
                    st.error(state["errors"]["quantity"])
            with col_category:
                category = render_category_select(key=f"new_item_category_{version}")

            col_spacer, col_reset, col_submit = st.columns([4, 1, 1])
            with col_reset:
                reset = st.form_submit_button(
                    "Reset",
                    disabled=is_sending,
                    use_container_width=True,
                )
            with col_submit:
                submitted = st.form_submit_button(
                    "Add Item",
                    type="primary",
                    disabled=is_sending,
                    use_container_width=True,
                )

        if state["error"]:
            st.error(state["error"])

        if is_sending:
            self._send_pending()
            return

        if reset:
            self._reset_form()
            st.rerun()

        if submitted:
            # Rerun first so the buttons are drawn disabled during the request
            state["pending"] = (name, quantity, category.title)
            state["is_sending"] = True
            st.rerun()

    def _reset_form(self):
        state = st.session_state.new_item
        state["form_version"] += 1
        state["errors"] = {}
        state["error"] = None

    def _send_pending(self):
        """Validate and store the queued item, then go back to the list."""
        state = st.session_state.new_item
        pending = state["pending"]
        state["pending"] = None

        if pending is None:
            state["is_sending"] = False
            st.rerun()

        name, quantity, category_title = pending
        try:
            with st.spinner("Saving..."):
                result = self.controller.create_item(name, quantity, category_title)
        finally:
            state["is_sending"] = False

        if result.success:
            self._reset_form()
            st.switch_page(LIST_PAGE)

        state["errors"] = result.errors
        state["error"] = result.error
        st.rerun()
