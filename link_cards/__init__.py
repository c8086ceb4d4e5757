"""
Link cards.

This package provides:
- A FastAPI gateway that relays link preview requests to the provider
- A client-side store that keeps preview cards in local storage
- A single Streamlit page on top of that store.
"""

__version__ = "0.1.0"
