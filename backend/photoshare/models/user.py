"""
PhotoShare Backend: User Record
================================

What:  Shape of a document in the `users` collection.
Who:   Returned by /user/list and /user/{id}; embedded in comments after
       photo population.

Users are created and removed outside this service (see photoshare.seed);
the API never writes them.
"""

from typing import ClassVar, Optional

from pydantic import Field

from photoshare.models.base import Record


class User(Record):
    """A person who owns photos and writes comments."""

    collection: ClassVar[str] = "users"

    first_name: Optional[str] = Field(default=None, description="Given name")
    last_name: Optional[str] = Field(default=None, description="Family name")
    location: Optional[str] = Field(default=None, description="Free-form location")
    description: Optional[str] = Field(default=None, description="Short profile text")
    occupation: Optional[str] = Field(default=None, description="Occupation")
