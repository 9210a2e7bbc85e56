"""Adapters exposing use cases to users (CLI and Streamlit)."""
