"""
PhotoShare Backend: User Service
=================================

What:  Read access to User records.
How:   Thin pass-through to the injected DocumentStore plus translation of
       "no record" into NotFoundError.
Who:   Called by the /user route handlers and by PhotoService.
"""

import logging
from typing import List

from photoshare.database import DocumentStore
from photoshare.exceptions import NotFoundError, StoreError
from photoshare.models import User

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic layer for user lookups.

    Error Handling Strategy:
        list_users lets StoreError propagate (→ 500).
        get_user folds every failure into NotFoundError (→ 400): an unknown
        id, a malformed id and a failed lookup look the same to the client.
    """

    async def list_users(self, store: DocumentStore) -> List[User]:
        """Return every User record, unfiltered and unpaginated."""
        documents = await store.find_all(User.collection)
        return [User.model_validate(doc) for doc in documents]

    async def get_user(self, store: DocumentStore, user_id: str) -> User:
        """
        Retrieve a single user by identifier.

        Raises:
            NotFoundError: no such user, malformed id, or the lookup failed
        """
        try:
            document = await store.find_by_id(User.collection, user_id)
        except StoreError as e:
            logger.error("Lookup of user %s failed: %s", user_id, e.message)
            raise NotFoundError(resource="user", resource_id=user_id) from e

        if document is None:
            logger.info("User with _id:%s not found.", user_id)
            raise NotFoundError(resource="user", resource_id=user_id)

        return User.model_validate(document)


user_service = UserService()
