"""
PhotoShare Backend: Application Package
========================================

A small read-only web server over a MongoDB photo-sharing dataset.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Query Logic)      │  ← lookups, joins, counts
    ├─────────────────────────────────────┤
    │        Models & Schemas (Data)      │  ← pydantic record shapes
    ├─────────────────────────────────────┤
    │       Database (DocumentStore)      │  ← pymongo asyncio client
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
