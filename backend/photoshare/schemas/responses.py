"""
PhotoShare Backend: API Response Schemas
=========================================

What:  Response models that are not plain stored records.
       Record-shaped responses (User, Photo, SchemaInfo) reuse the models
       in photoshare.models directly.
"""

from pydantic import BaseModel, ConfigDict, Field


class CountsResponse(BaseModel):
    """
    What:  Population counts of the three collections.
    Who:   Returned by GET /test/counts.

    Example:
        {"user": 7, "photo": 24, "schemaInfo": 1}
    """

    user: int = Field(ge=0, description="Number of User records")
    photo: int = Field(ge=0, description="Number of Photo records")
    schema_info: int = Field(ge=0, alias="schemaInfo", description="Number of SchemaInfo records")

    model_config = ConfigDict(populate_by_name=True)
