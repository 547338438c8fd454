"""
StreetMap Backend — Line SQLAlchemy Model
===========================================

What:  ORM model for the `lines` table: a named polyline drawn on the map.
Who:   LineRepository reads and writes it; init_models creates the table.

Lines are immutable once saved. They are only ever listed or deleted.
"""

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from streetmap.database import Base, JSONVariant

DEFAULT_LINE_COLOR = "#009900"


class Line(Base):
    __tablename__ = "lines"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    color: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=DEFAULT_LINE_COLOR,
        server_default=text(f"'{DEFAULT_LINE_COLOR}'"),
    )

    # Ordered [{"lat": float, "lng": float}, ...]; may be empty
    polyline: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSONVariant,
        nullable=False,
        default=list,
    )

    def __repr__(self) -> str:
        return (
            f"<Line(id={self.id}, name='{self.name}', color='{self.color}', "
            f"points={len(self.polyline or [])})>"
        )
