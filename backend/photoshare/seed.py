"""
PhotoShare Backend: Dataset Loader
===================================

What:  Loads a JSON dataset of users, photos and comments into MongoDB.
How:   Reads the file with aiofiles, assigns fresh ObjectIds to users,
       rewrites every owner/commenter reference from dataset keys to those
       ids, then replaces the contents of the three collections.
Who:   Run by hand before starting the server:

           python -m photoshare.seed backend/data/sample_data.json

Dataset format:
    {
      "schemaInfo": {"version": "1.0"},
      "users":  [{"key": "ian", "first_name": "Ian", ...}],
      "photos": [{"file_name": "ouster.jpg", "date_time": "2013-09-20T17:30:00",
                  "user": "ian",
                  "comments": [{"comment": "...", "date_time": "...", "user": "ellen"}]}]
    }

This is operator tooling; the HTTP API never writes.
"""

import argparse
import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import aiofiles
from bson import ObjectId

from photoshare.config import settings
from photoshare.database import Document, MongoStore
from photoshare.models import Photo, SchemaInfo, User

logger = logging.getLogger(__name__)


async def read_dataset(path: str) -> Dict[str, Any]:
    """Read and parse a dataset file."""
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        raw = await f.read()
    dataset = json.loads(raw)
    if not isinstance(dataset, dict) or "users" not in dataset:
        raise ValueError(f"{path}: dataset must be an object with a 'users' list")
    return dataset


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value)


def build_documents(
    dataset: Dict[str, Any], loaded_at: Optional[datetime] = None
) -> Tuple[List[Document], List[Document], Document]:
    """
    Turn a parsed dataset into insertable documents.

    Returns:
        (users, photos, schema_info) with ObjectIds assigned and every
        user reference resolved.

    Raises:
        ValueError: a photo or comment names a user key that is not defined
    """
    ids_by_key: Dict[str, ObjectId] = {}
    users: List[Document] = []
    for entry in dataset.get("users", []):
        user = dict(entry)
        key = str(user.pop("key"))
        if key in ids_by_key:
            raise ValueError(f"Duplicate user key '{key}'")
        ids_by_key[key] = ObjectId()
        user["_id"] = ids_by_key[key]
        users.append(user)

    def resolve(key: Any, where: str) -> ObjectId:
        try:
            return ids_by_key[str(key)]
        except KeyError:
            raise ValueError(f"{where} references unknown user '{key}'") from None

    photos: List[Document] = []
    for entry in dataset.get("photos", []):
        name = entry.get("file_name", "?")
        comments = [
            {
                "_id": ObjectId(),
                "comment": c.get("comment", ""),
                "date_time": _parse_datetime(c.get("date_time")),
                "user_id": resolve(c.get("user"), f"comment on {name}"),
            }
            for c in entry.get("comments", [])
        ]
        photos.append(
            {
                "_id": ObjectId(),
                "file_name": entry.get("file_name"),
                "date_time": _parse_datetime(entry.get("date_time")),
                "user_id": resolve(entry.get("user"), f"photo {name}"),
                "comments": comments,
            }
        )

    info = dataset.get("schemaInfo") or {}
    schema_info: Document = {
        "_id": ObjectId(),
        "version": str(info.get("version", "1.0")),
        "load_date_time": loaded_at or datetime.now(timezone.utc),
    }
    return users, photos, schema_info


async def load_dataset(store: MongoStore, dataset: Dict[str, Any], keep: bool = False) -> Dict[str, int]:
    """
    Write a dataset into the store's database.

    Unless `keep` is set the three collections are emptied first, so the
    database ends up with exactly one SchemaInfo record.
    """
    users, photos, schema_info = build_documents(dataset)
    db = store.db

    if not keep:
        for name in (User.collection, Photo.collection, SchemaInfo.collection):
            result = await db[name].delete_many({})
            logger.info("Cleared %d document(s) from %s", result.deleted_count, name)

    if users:
        await db[User.collection].insert_many(users)
    if photos:
        await db[Photo.collection].insert_many(photos)
    await db[SchemaInfo.collection].insert_one(schema_info)

    counts = {"user": len(users), "photo": len(photos), "schemaInfo": 1}
    logger.info("Loaded %(user)d user(s), %(photo)d photo(s)", counts)
    return counts


async def _run(path: str, keep: bool) -> Dict[str, int]:
    dataset = await read_dataset(path)
    store = MongoStore(settings.mongodb_url, settings.mongodb_database)
    await store.connect()
    try:
        return await load_dataset(store, dataset, keep=keep)
    finally:
        await store.close()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Load a PhotoShare dataset into MongoDB.")
    parser.add_argument("dataset", help="Path to the dataset JSON file")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Do not clear existing users, photos and SchemaInfo first",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    counts = asyncio.run(_run(args.dataset, args.keep))
    print(json.dumps(counts))


if __name__ == "__main__":
    main()
