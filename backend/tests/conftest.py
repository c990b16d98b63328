"""
PhotoShare Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── ids:           ObjectIds of the seeded records, by nickname
    ├── seeded_store:  InMemoryStore holding users, photos and one SchemaInfo
    ├── static_dir:    Temporary directory exported by the static mount
    └── test_client:   HTTPX AsyncClient bound to an app serving seeded_store
"""

import asyncio
import copy
import os
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

# Keep test output quiet and never pick up a developer's .env database
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["MONGODB_URL"] = "mongodb://127.0.0.1:1"

from photoshare.config import Settings  # noqa: E402
from photoshare.database import to_object_id  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# In-memory DocumentStore
# ══════════════════════════════════════════════════════════════════════════


class InMemoryStore:
    """
    DocumentStore double backed by plain lists of documents.

    Returns deep copies so callers can mutate results freely, like documents
    decoded from the wire. `fail(operation, collection, exc)` makes the next
    matching call raise `exc`; `calls` records every call in order.
    """

    def __init__(self, collections: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.collections: Dict[str, List[Dict[str, Any]]] = {
            name: list(docs) for name, docs in (collections or {}).items()
        }
        self.failures: Dict[Tuple[str, str], BaseException] = {}
        self.calls: List[Tuple[str, str]] = []
        self.connected = False
        self.closed = False

    def fail(self, operation: str, collection: str, exc: BaseException) -> None:
        self.failures[(operation, collection)] = exc

    def _enter(self, operation: str, collection: str) -> List[Dict[str, Any]]:
        self.calls.append((operation, collection))
        exc = self.failures.get((operation, collection))
        if exc is not None:
            raise exc
        return self.collections.get(collection, [])

    async def connect(self) -> None:
        self.connected = True

    async def close(self) -> None:
        self.closed = True

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._enter("find_all", collection))

    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        docs = self._enter("find_by_id", collection)
        oid = to_object_id(doc_id)
        for doc in docs:
            if oid is not None and doc["_id"] == oid:
                return copy.deepcopy(doc)
        return None

    async def find_by_ids(self, collection: str, doc_ids: Iterable[str]) -> List[Dict[str, Any]]:
        docs = self._enter("find_by_ids", collection)
        wanted = {to_object_id(i) for i in doc_ids}
        return [copy.deepcopy(d) for d in docs if d["_id"] in wanted]

    async def find_by_reference(
        self, collection: str, field: str, ref_id: str
    ) -> List[Dict[str, Any]]:
        docs = self._enter("find_by_reference", collection)
        oid = to_object_id(ref_id)
        if oid is None:
            return []
        return [copy.deepcopy(d) for d in docs if d.get(field) == oid]

    async def count(self, collection: str) -> int:
        docs = self._enter("count", collection)
        await asyncio.sleep(0)
        return len(docs)


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def ids() -> Dict[str, ObjectId]:
    """
    Identifiers of the seeded records.

    ian owns two photos, ellen owns one, pippin owns none. `ghost` is a
    commenter id with no matching user.
    """
    return {
        "ian": ObjectId(),
        "ellen": ObjectId(),
        "pippin": ObjectId(),
        "ghost": ObjectId(),
        "photo1": ObjectId(),
        "photo2": ObjectId(),
        "photo3": ObjectId(),
        "info": ObjectId(),
    }


@pytest.fixture
def seeded_collections(ids) -> Dict[str, List[Dict[str, Any]]]:
    users = [
        {
            "_id": ids["ian"],
            "first_name": "Ian",
            "last_name": "Malcolm",
            "location": "Austin, TX",
            "description": "Should've stayed in the car.",
            "occupation": "Mathematician",
        },
        {
            "_id": ids["ellen"],
            "first_name": "Ellen",
            "last_name": "Ripley",
            "location": "Nostromo",
            "description": "Lvl 6 rating. Pilot.",
            "occupation": "Warrant Officer",
        },
        {
            "_id": ids["pippin"],
            "first_name": "Peregrin",
            "last_name": "Took",
            "location": "Gondor",
            "description": "Home is behind, the world ahead...",
            "occupation": "Guard of the Citadel",
        },
    ]
    photos = [
        {
            "_id": ids["photo1"],
            "file_name": "malcolm1.jpg",
            "date_time": datetime(2013, 9, 20, 17, 30),
            "user_id": ids["ian"],
            "comments": [
                {
                    "_id": ObjectId(),
                    "comment": "Learn to stop worrying and love the dinosaurs.",
                    "date_time": datetime(2013, 9, 20, 18, 2),
                    "user_id": ids["ellen"],
                },
                {
                    "_id": ObjectId(),
                    "comment": "That doesn't look safe.",
                    "date_time": datetime(2013, 9, 21, 9, 15),
                    "user_id": ids["pippin"],
                },
            ],
        },
        {
            "_id": ids["photo2"],
            "file_name": "malcolm2.jpg",
            "date_time": datetime(2013, 9, 22, 11, 0),
            "user_id": ids["ian"],
            "comments": [
                {
                    "_id": ObjectId(),
                    "comment": "Who am I?",
                    "date_time": datetime(2013, 9, 22, 12, 0),
                    "user_id": ids["ghost"],
                },
                {
                    "_id": ObjectId(),
                    "comment": "Again, Ellen.",
                    "date_time": datetime(2013, 9, 22, 12, 5),
                    "user_id": ids["ellen"],
                },
            ],
        },
        {
            "_id": ids["photo3"],
            "file_name": "ripley1.jpg",
            "date_time": datetime(2014, 2, 11, 8, 42),
            "user_id": ids["ellen"],
            "comments": [],
        },
    ]
    schema_infos = [
        {
            "_id": ids["info"],
            "version": "1.0",
            "load_date_time": datetime(2024, 1, 15, 12, 0),
        }
    ]
    return {"users": users, "photos": photos, "schemainfos": schema_infos}


@pytest.fixture
def seeded_store(seeded_collections) -> InMemoryStore:
    return InMemoryStore(seeded_collections)


@pytest.fixture
def static_dir(tmp_path):
    """A temporary exported directory containing one text file."""
    root = tmp_path / "www"
    root.mkdir()
    (root / "hello.txt").write_text("hello from disk")
    return root


@pytest.fixture
def app_settings(static_dir) -> Settings:
    return Settings(static_root=str(static_dir), log_level="WARNING")


@pytest_asyncio.fixture
async def test_client(app_settings, seeded_store):
    """
    HTTPX AsyncClient talking to an app that serves `seeded_store`.

    ASGITransport does not run the lifespan, so the injected store is used
    as-is without connect()/close().
    """
    from photoshare.main import create_app

    app = create_app(app_settings, store=seeded_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
