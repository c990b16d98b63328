"""
PhotoShare Backend: Document Store Client
==========================================

What:  The `DocumentStore` interface and its MongoDB implementation.
How:   `MongoStore` wraps pymongo's asyncio client. One client is created per
       process; the entry point owns its lifecycle (connect on startup,
       close on shutdown) and hands it to request handlers through
       `app.state.store`.
Who:   Used by the services layer; tests substitute an in-memory double.

Identifiers:
    Records are keyed by BSON ObjectIds. Callers always pass identifiers as
    strings; a string that is not a valid 24-hex ObjectId can never match a
    record, so lookups return "nothing" instead of raising.

Error Handling:
    Every driver failure (PyMongoError and subclasses) is re-raised as
    StoreError so the HTTP layer can map it without importing pymongo.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from photoshare.exceptions import StoreError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a string identifier to an ObjectId, or None when malformed."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class DocumentStore(Protocol):
    """Interface for read access to the document collections."""

    async def connect(self) -> None:
        ...

    async def close(self) -> None:
        ...

    async def find_all(self, collection: str) -> List[Document]:
        ...

    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Document]:
        ...

    async def find_by_ids(self, collection: str, doc_ids: Iterable[str]) -> List[Document]:
        ...

    async def find_by_reference(
        self, collection: str, field: str, ref_id: str
    ) -> List[Document]:
        ...

    async def count(self, collection: str) -> int:
        ...


class MongoStore:
    """
    pymongo-backed implementation of DocumentStore.

    The underlying AsyncMongoClient manages its own connection pool; this
    class only adds identifier handling and error translation.
    """

    def __init__(self, mongodb_url: str, database: str):
        if not mongodb_url:
            raise ValueError("mongodb_url is required for MongoStore")
        self.mongodb_url = mongodb_url
        self.database_name = database
        self.client: AsyncMongoClient = AsyncMongoClient(mongodb_url)
        self.db = self.client[database]

    async def connect(self) -> None:
        """
        Open the connection and verify the server answers.

        Failure is not handled here: it propagates and aborts startup.
        """
        await self.client.aconnect()
        await self.db.command("ping")
        logger.info("Connected to MongoDB database '%s'", self.database_name)

    async def close(self) -> None:
        await self.client.close()
        logger.info("MongoDB connection closed")

    async def find_all(self, collection: str) -> List[Document]:
        try:
            return await self.db[collection].find({}).to_list()
        except PyMongoError as e:
            logger.error("find_all on %s failed: %s", collection, e)
            raise StoreError(e, operation="find_all", context={"collection": collection})

    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Document]:
        oid = to_object_id(doc_id)
        if oid is None:
            logger.debug("Malformed identifier for %s: %r", collection, doc_id)
            return None
        try:
            return await self.db[collection].find_one({"_id": oid})
        except PyMongoError as e:
            logger.error("find_by_id on %s failed: %s", collection, e)
            raise StoreError(
                e,
                operation="find_by_id",
                context={"collection": collection, "id": doc_id},
            )

    async def find_by_ids(self, collection: str, doc_ids: Iterable[str]) -> List[Document]:
        oids = [oid for oid in (to_object_id(i) for i in doc_ids) if oid is not None]
        if not oids:
            return []
        try:
            return await self.db[collection].find({"_id": {"$in": oids}}).to_list()
        except PyMongoError as e:
            logger.error("find_by_ids on %s failed: %s", collection, e)
            raise StoreError(e, operation="find_by_ids", context={"collection": collection})

    async def find_by_reference(
        self, collection: str, field: str, ref_id: str
    ) -> List[Document]:
        """Documents whose `field` holds the ObjectId `ref_id`."""
        oid = to_object_id(ref_id)
        if oid is None:
            return []
        try:
            return await self.db[collection].find({field: oid}).to_list()
        except PyMongoError as e:
            logger.error("find_by_reference on %s.%s failed: %s", collection, field, e)
            raise StoreError(
                e,
                operation="find_by_reference",
                context={"collection": collection, "field": field, "id": ref_id},
            )

    async def count(self, collection: str) -> int:
        try:
            return await self.db[collection].count_documents({})
        except PyMongoError as e:
            logger.error("count on %s failed: %s", collection, e)
            raise StoreError(e, operation="count", context={"collection": collection})
