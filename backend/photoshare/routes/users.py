"""
PhotoShare Backend: User Route Handlers
========================================

What:  GET /user/list (every user) and GET /user/{user_id} (one user).
How:   Delegates to UserService with the injected store; errors are turned
       into responses by the global exception handlers.

/user/list is declared before /user/{user_id} so "list" is never taken for
an identifier.
"""

from typing import List

from fastapi import APIRouter, Depends

from photoshare.database import DocumentStore
from photoshare.dependencies import get_store
from photoshare.models import User
from photoshare.services.user_service import user_service

router = APIRouter(prefix="/user", tags=["Users"])


@router.get(
    "/list",
    response_model=List[User],
    responses={500: {"description": "Database error"}},
    summary="List all users",
)
async def list_users(store: DocumentStore = Depends(get_store)) -> List[User]:
    return await user_service.list_users(store)


@router.get(
    "/{user_id}",
    response_model=User,
    responses={400: {"description": "Not found"}},
    summary="Get a single user by ID",
)
async def get_user(user_id: str, store: DocumentStore = Depends(get_store)) -> User:
    """
    Return the user with `_id` equal to `user_id`.

    Unknown and malformed identifiers both answer 400 "Not found".
    """
    return await user_service.get_user(store, user_id)
