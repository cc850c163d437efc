"""
Grocery List - Home Page

A shopping list backed by a Firebase Realtime Database. Items can be
added, edited and deleted; changes are written straight to the server.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Grocery List",
    page_icon="🛒",
    layout="centered"
)

from views.grocery_list_view import GroceryListView

view = GroceryListView()
view.render()
