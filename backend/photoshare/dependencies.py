"""
Dependency wiring for the FastAPI app.
"""

from fastapi import Request

from photoshare.database import DocumentStore


def get_store(request: Request) -> DocumentStore:
    """Return the store created by the app factory for this process."""
    return request.app.state.store
