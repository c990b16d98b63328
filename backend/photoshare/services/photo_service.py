"""
PhotoShare Backend: Photo Service
==================================

What:  Photos of a user, with each comment's author expanded in place.
How:   An explicit join instead of a driver-side "populate":

    ┌────────────┐    ┌──────────────┐    ┌──────────────┐    ┌────────────┐
    │ Check owner│───▶│ Fetch photos │───▶│ Batch-fetch  │───▶│ Substitute │
    │ exists     │    │ by user_id   │    │ commenters   │    │ into       │
    └────────────┘    └──────────────┘    └──────────────┘    │ comments   │
                                                              └────────────┘

    A commenter reference with no matching user is left as the bare id.

Owner semantics:
    Unknown or malformed owner id → NotFoundError (400).
    Known owner with no photos    → empty list (200).
"""

import logging
from typing import Any, Dict, Iterable, List, Set

from photoshare.database import Document, DocumentStore
from photoshare.exceptions import NotFoundError, StoreError
from photoshare.models import Photo, User
from photoshare.services.user_service import UserService, user_service

logger = logging.getLogger(__name__)


def commenter_ids(photos: Iterable[Document]) -> Set[str]:
    """Distinct commenter identifiers across all comments of `photos`."""
    ids: Set[str] = set()
    for photo in photos:
        for comment in photo.get("comments") or []:
            ref = comment.get("user_id")
            if ref is not None:
                ids.add(str(ref))
    return ids


def populate_commenters(
    photos: List[Document], users_by_id: Dict[str, Document]
) -> List[Document]:
    """
    Replace each comment's `user_id` with the matching user document.

    Mutates and returns `photos`. References missing from `users_by_id`
    are left untouched.
    """
    for photo in photos:
        for comment in photo.get("comments") or []:
            ref = comment.get("user_id")
            if ref is None:
                continue
            user = users_by_id.get(str(ref))
            if user is not None:
                comment["user_id"] = user
    return photos


class PhotoService:
    def __init__(self, users: UserService = user_service):
        self.users = users

    async def photos_of_user(self, store: DocumentStore, user_id: str) -> List[Photo]:
        """
        All photos owned by `user_id`, commenters expanded.

        Raises:
            NotFoundError: the owner does not exist, the id is malformed,
                           or any lookup failed
        """
        await self.users.get_user(store, user_id)

        try:
            photos = await store.find_by_reference(Photo.collection, "user_id", user_id)
            wanted = commenter_ids(photos)
            commenters = await store.find_by_ids(User.collection, wanted) if wanted else []
        except StoreError as e:
            logger.error("Photos for user with _id:%s not loaded: %s", user_id, e.message)
            raise NotFoundError(resource="photos", resource_id=user_id) from e

        users_by_id: Dict[str, Any] = {str(u["_id"]): u for u in commenters}
        unresolved = wanted - users_by_id.keys()
        if unresolved:
            logger.warning(
                "Photos of %s reference %d unknown commenter(s): %s",
                user_id,
                len(unresolved),
                ", ".join(sorted(unresolved)),
            )

        populate_commenters(photos, users_by_id)
        logger.debug("Loaded %d photo(s) for user %s", len(photos), user_id)
        return [Photo.model_validate(doc) for doc in photos]


photo_service = PhotoService()
