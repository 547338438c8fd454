"""
StreetMap Backend — Line Request/Response Schemas
===================================================

What:  Pydantic models for /api/save-line, /api/get-lines and
       /api/delete-line/{id}.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from streetmap.schemas.common import Point


class SaveLineRequest(BaseModel):
    """
    Body of POST /api/save-line.

    `polyline` and `color` are required by the operation, not by the schema:
    the repository checks presence so that a missing field yields a 400.
    An empty polyline counts as present.
    """
    name: Optional[str] = None
    polyline: Optional[List[Point]] = None
    color: Optional[str] = None


class SaveLineResponse(BaseModel):
    success: bool = Field(default=True)
    id: uuid.UUID = Field(description="Identifier of the saved line")


class LineResponse(BaseModel):
    id: uuid.UUID = Field(serialization_alias="_id", description="Line identifier")
    name: Optional[str] = None
    color: str
    polyline: List[Point] = Field(default_factory=list)

    model_config = {"from_attributes": True}
