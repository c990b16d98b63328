"""
PhotoShare Backend: Schema Service
===================================

What:  Connectivity probes behind /test: the SchemaInfo record and the
       population counts of every collection.
How:   The three counts are issued concurrently with asyncio.gather; the
       first failure propagates and no partial result is returned.
"""

import asyncio
import logging

from photoshare.database import DocumentStore
from photoshare.exceptions import MissingSchemaInfoError
from photoshare.models import Photo, SchemaInfo, User
from photoshare.schemas.responses import CountsResponse

logger = logging.getLogger(__name__)


class SchemaService:
    async def get_info(self, store: DocumentStore) -> SchemaInfo:
        """
        Return the singleton SchemaInfo record.

        Raises:
            MissingSchemaInfoError: the collection is empty
            StoreError: the query failed
        """
        documents = await store.find_all(SchemaInfo.collection)
        if not documents:
            logger.error("No SchemaInfo record in the database")
            raise MissingSchemaInfoError()
        if len(documents) > 1:
            logger.warning("Found %d SchemaInfo records; using the first", len(documents))
        return SchemaInfo.model_validate(documents[0])

    async def get_counts(self, store: DocumentStore) -> CountsResponse:
        """Count users, photos and SchemaInfo records concurrently."""
        user_count, photo_count, info_count = await asyncio.gather(
            store.count(User.collection),
            store.count(Photo.collection),
            store.count(SchemaInfo.collection),
        )
        return CountsResponse(user=user_count, photo=photo_count, schema_info=info_count)


schema_service = SchemaService()
