"""
StreetMap Backend — Street SQLAlchemy Model
=============================================

What:  ORM model for the `streets` table.
Who:   StreetRepository reads and writes it; init_models creates the table.

Column notes:
    - coordinates: whatever geometry the map client sent, kept verbatim as JSON
      (flat point lists, nested arrays of points, mixed shapes).
    - bounds: {"northEast": {lat, lng}, "southWest": {lat, lng}} or NULL.
    - color is the only column ever updated after insert.
"""

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from streetmap.database import Base, JSONVariant


class Street(Base):
    __tablename__ = "streets"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    coordinates: Mapped[List[Any]] = mapped_column(
        JSONVariant,
        nullable=False,
        default=list,
    )

    bounds: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSONVariant, nullable=True)

    color: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<Street(id={self.id}, name='{self.name}', color='{self.color}')>"
