"""
StreetMap Backend — Street Request/Response Schemas
=====================================================

What:  Pydantic models for the /streets and /api/update-color contract.
How:   FastAPI validates request bodies against these models and serializes
       responses through them (aliases included, so ids go out as `_id`).

Accepted `coordinates` shapes:
    Street geometry is opaque. The map client sends whatever its drawing
    layer produced, typically one of
        [{"lat": 1.0, "lng": 2.0}, ...]             flat point list
        [[{"lat": 1.0, "lng": 2.0}, ...], ...]      list of point lists
        [[1.0, 2.0], [3.0, 4.0]]                    raw coordinate pairs
    Values are stored and returned verbatim; nothing inside the list is
    validated or normalized.
"""

import uuid
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field

from streetmap.schemas.common import Point


class Bounds(BaseModel):
    """
    Bounding box of a street.

    Input accepts both `northEast` and the map library's own `_northEast`
    serialization (same for south-west). Output always uses `northEast` /
    `southWest`.
    """
    north_east: Optional[Point] = Field(
        default=None,
        validation_alias=AliasChoices("northEast", "_northEast", "north_east"),
        serialization_alias="northEast",
    )
    south_west: Optional[Point] = Field(
        default=None,
        validation_alias=AliasChoices("southWest", "_southWest", "south_west"),
        serialization_alias="southWest",
    )


class StreetCreate(BaseModel):
    """Body of POST /streets. Every field is optional; unknown fields are ignored."""
    name: Optional[str] = None
    coordinates: Optional[List[Any]] = Field(
        default=None,
        description="Opaque geometry, stored verbatim",
    )
    bounds: Optional[Bounds] = None
    color: Optional[str] = Field(default=None, description="Display color, e.g. #ff0000")


class StreetResponse(BaseModel):
    id: uuid.UUID = Field(serialization_alias="_id", description="Street identifier")
    name: Optional[str] = None
    coordinates: List[Any] = Field(default_factory=list)
    bounds: Optional[Bounds] = None
    color: Optional[str] = None

    model_config = {"from_attributes": True}


class UpdateColorRequest(BaseModel):
    """
    Body of POST /api/update-color.

    Both fields are declared optional so that a missing value reaches the
    repository, which reports it as a 400 rather than a schema error.
    `id` accepts any JSON value; one that is not a UUID simply matches no
    street.
    """
    id: Optional[Any] = None
    color: Optional[str] = None


class UpdateColorResponse(BaseModel):
    success: bool = Field(default=True)
    color: str
