"""
PhotoShare Backend: Photo and Comment Records
==============================================

What:  Shape of a document in the `photos` collection and of the comments
       embedded in it.

Relationships:
    Photo.user_id    → User._id  (owner, reference)
    Photo.comments   → Comment   (embedded, ordered)
    Comment.user_id  → User._id  (commenter, reference)

Population:
    After PhotoService joins commenters in, `Comment.user_id` holds the full
    User record. A reference that does not resolve stays a bare id string,
    and a missing or null reference stays null.
"""

from datetime import datetime
from typing import ClassVar, List, Optional, Union

from pydantic import Field

from photoshare.models.base import ObjectIdStr, Record, StoredModel
from photoshare.models.user import User


class Comment(StoredModel):
    """A comment left on a photo by some user."""

    id: Optional[ObjectIdStr] = Field(default=None, alias="_id")
    comment: str = Field(default="", description="Comment text")
    date_time: Optional[datetime] = Field(default=None, description="When the comment was made")
    # User first: a populated dict validates as User, a bare id falls through to str
    user_id: Optional[Union[User, ObjectIdStr]] = Field(
        default=None, description="Commenter, expanded when populated; null when unknown"
    )


class Photo(Record):
    """A photo owned by one user, with its comments."""

    collection: ClassVar[str] = "photos"

    file_name: Optional[str] = Field(default=None, description="Image file name under images/")
    date_time: Optional[datetime] = Field(default=None, description="When the photo was taken")
    user_id: ObjectIdStr = Field(description="Owner's user id")
    comments: List[Comment] = Field(default_factory=list)
