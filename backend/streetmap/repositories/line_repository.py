"""
StreetMap Backend — Line Repository
=====================================

What:  Data access for drawn lines: list, create, delete. Lines have no
       update path.
Who:   Called by the handlers in streetmap.routes.lines.
"""

import logging
import uuid
from typing import List, Optional, Sequence

from sqlalchemy import delete, select

from streetmap.exceptions import InvalidRequestError
from streetmap.models.line import Line
from streetmap.repositories.base import BaseRepository, parse_identifier
from streetmap.schemas.common import Point
from streetmap.schemas.line import LineResponse

logger = logging.getLogger(__name__)


class LineRepository(BaseRepository):

    async def list_lines(self) -> List[LineResponse]:

        async def _select():
            result = await self.session.execute(select(Line))
            return result.scalars().all()

        lines = await self._run("list lines", _select())
        return [LineResponse.model_validate(line) for line in lines]

    async def create_line(
        self,
        name: Optional[str],
        polyline: Optional[Sequence[Point]],
        color: Optional[str],
    ) -> uuid.UUID:
        """
        Persist a new line and return only its identifier.

        `polyline` must be present (an empty list is accepted) and `color`
        must be a non-empty string; otherwise InvalidRequestError is raised
        and nothing is written.
        """
        if polyline is None:
            raise InvalidRequestError(
                message="Invalid data: 'polyline' is required",
                field="polyline",
            )
        if not color:
            raise InvalidRequestError(
                message="Invalid data: 'color' is required",
                field="color",
            )

        line = Line(
            id=uuid.uuid4(),
            name=name,
            color=color,
            polyline=[point.model_dump() for point in polyline],
        )

        async def _insert():
            self.session.add(line)
            await self.session.commit()

        await self._run("create line", _insert())
        logger.info("Line created: %s (%d points, color=%s)", line.id, len(line.polyline), color)
        return line.id

    async def delete_line(self, line_id: str) -> None:
        """Remove a line if it exists. Missing or malformed ids are a no-op."""
        uid = parse_identifier(line_id)
        if uid is None:
            logger.info("Delete skipped, malformed line id %r", line_id)
            return

        async def _delete():
            result = await self.session.execute(delete(Line).where(Line.id == uid))
            await self.session.commit()
            return result.rowcount

        removed = await self._run("delete line", _delete())
        logger.info("Line %s delete requested (removed=%s)", uid, removed)
