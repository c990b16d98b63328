"""
PhotoShare Backend: Schema Service Unit Tests
==============================================

What we test:
    ✅ get_info returns the singleton SchemaInfo
    ✅ Missing SchemaInfo raises MissingSchemaInfoError
    ✅ Counts match the collection sizes
    ✅ The three counts are in flight at the same time
    ✅ Any count failure fails the whole call
"""

import asyncio

import pytest
from pymongo.errors import PyMongoError

from photoshare.exceptions import MissingSchemaInfoError, StoreError
from photoshare.services.schema_service import SchemaService


class TestGetInfo:
    def setup_method(self):
        self.service = SchemaService()

    @pytest.mark.asyncio
    async def test_returns_record(self, seeded_store, ids):
        info = await self.service.get_info(seeded_store)

        assert info.id == str(ids["info"])
        assert info.version == "1.0"
        assert info.load_date_time.year == 2024

    @pytest.mark.asyncio
    async def test_missing_record(self, seeded_store):
        seeded_store.collections["schemainfos"] = []

        with pytest.raises(MissingSchemaInfoError, match="Missing SchemaInfo"):
            await self.service.get_info(seeded_store)

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, seeded_store):
        seeded_store.fail("find_all", "schemainfos", StoreError(PyMongoError("down")))

        with pytest.raises(StoreError):
            await self.service.get_info(seeded_store)


class TestGetCounts:
    def setup_method(self):
        self.service = SchemaService()

    @pytest.mark.asyncio
    async def test_counts_match_collections(self, seeded_store):
        counts = await self.service.get_counts(seeded_store)

        assert counts.model_dump(by_alias=True) == {"user": 3, "photo": 3, "schemaInfo": 1}

    @pytest.mark.asyncio
    async def test_counts_run_concurrently(self, seeded_store):
        """Each count blocks until all three have started; sequential code would hang."""
        started = []
        all_started = asyncio.Event()

        async def gated_count(collection):
            started.append(collection)
            if len(started) == 3:
                all_started.set()
            await all_started.wait()
            return len(seeded_store.collections.get(collection, []))

        seeded_store.count = gated_count

        counts = await asyncio.wait_for(self.service.get_counts(seeded_store), timeout=2)

        assert sorted(started) == ["photos", "schemainfos", "users"]
        assert counts.user == 3

    @pytest.mark.asyncio
    async def test_any_failure_fails_all(self, seeded_store):
        seeded_store.fail("count", "photos", StoreError(PyMongoError("photos unavailable")))

        with pytest.raises(StoreError, match="photos unavailable"):
            await self.service.get_counts(seeded_store)
