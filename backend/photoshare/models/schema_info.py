"""
PhotoShare Backend: SchemaInfo Record
======================================

What:  The singleton metadata document in the `schemainfos` collection.
When:  Written by the dataset loader; read by /test and /test/info to check
       database connectivity. Exactly one instance is expected.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from photoshare.models.base import Record


class SchemaInfo(Record):
    collection: ClassVar[str] = "schemainfos"

    version: Optional[str] = Field(default=None, description="Dataset/schema version")
    load_date_time: Optional[datetime] = Field(
        default=None, description="When the dataset was loaded"
    )
