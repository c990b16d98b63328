"""
PhotoShare Backend: Record Models
==================================

Pydantic shapes of the three stored collections. Each top-level model
exposes its collection name as the `collection` class attribute.
"""

from photoshare.models.base import ObjectIdStr, Record, StoredModel
from photoshare.models.photo import Comment, Photo
from photoshare.models.schema_info import SchemaInfo
from photoshare.models.user import User

__all__ = ["ObjectIdStr", "Record", "StoredModel", "Comment", "Photo", "SchemaInfo", "User"]
