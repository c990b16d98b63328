"""
PhotoShare Backend: Photo Route Handlers
=========================================

What:  GET /photosOfUser/{user_id}: the user's photos with every comment's
       author expanded to a full user record.
"""

from typing import List

from fastapi import APIRouter, Depends

from photoshare.database import DocumentStore
from photoshare.dependencies import get_store
from photoshare.models import Photo
from photoshare.services.photo_service import photo_service

router = APIRouter(tags=["Photos"])


@router.get(
    "/photosOfUser/{user_id}",
    response_model=List[Photo],
    responses={400: {"description": "Not found"}},
    summary="Photos of a user, with comments",
)
async def photos_of_user(
    user_id: str, store: DocumentStore = Depends(get_store)
) -> List[Photo]:
    """
    Unknown or malformed user ids answer 400; a known user without photos
    gets an empty array.
    """
    return await photo_service.photos_of_user(store, user_id)
