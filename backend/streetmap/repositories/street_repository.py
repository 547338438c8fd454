"""
StreetMap Backend — Street Repository
=======================================

What:  Data access for streets: list, create, update color, delete.
Who:   Called by the handlers in streetmap.routes.streets.

Write semantics:
    - create_street stores the body as-is; absent coordinates become [].
    - update_color touches the `color` column of exactly one row.
    - delete_street is idempotent; a missing or malformed id is a no-op.
Concurrent update_color calls on one street are last-write-wins.
"""

import logging
import uuid
from typing import Any, List, Optional

from sqlalchemy import delete, select

from streetmap.exceptions import InvalidRequestError, NotFoundError
from streetmap.models.street import Street
from streetmap.repositories.base import BaseRepository, parse_identifier
from streetmap.schemas.street import StreetCreate, StreetResponse

logger = logging.getLogger(__name__)


class StreetRepository(BaseRepository):

    async def list_streets(self) -> List[StreetResponse]:
        """Return every stored street. Order is not guaranteed."""

        async def _select():
            result = await self.session.execute(select(Street))
            return result.scalars().all()

        streets = await self._run("list streets", _select())
        return [StreetResponse.model_validate(street) for street in streets]

    async def create_street(self, payload: StreetCreate) -> StreetResponse:
        """Persist a new street and return it with its generated identifier."""
        street = Street(
            id=uuid.uuid4(),
            name=payload.name,
            coordinates=payload.coordinates if payload.coordinates is not None else [],
            bounds=payload.bounds.model_dump(by_alias=True) if payload.bounds else None,
            color=payload.color,
        )

        async def _insert():
            self.session.add(street)
            await self.session.commit()

        await self._run("create street", _insert())
        logger.info("Street created: %s (name=%r)", street.id, street.name)
        return StreetResponse.model_validate(street)

    async def update_color(self, street_id: Optional[Any], color: Optional[str]) -> str:
        """
        Set the color of one street and return the stored value.

        Raises:
            InvalidRequestError: `street_id` or `color` missing or empty
            NotFoundError: no street has that identifier
            StorageError: the backend call failed or timed out
        """
        if not street_id or not color:
            missing = "id" if not street_id else "color"
            raise InvalidRequestError(
                message=f"Invalid data: '{missing}' is required",
                field=missing,
            )

        uid = parse_identifier(street_id)
        if uid is None:
            raise NotFoundError(resource="street", resource_id=str(street_id))

        async def _update():
            street = await self.session.get(Street, uid)
            if street is None:
                return None
            street.color = color
            await self.session.commit()
            return street

        street = await self._run("update street color", _update())
        if street is None:
            raise NotFoundError(resource="street", resource_id=str(street_id))

        logger.info("Street %s color set to %s", uid, street.color)
        return street.color

    async def delete_street(self, street_id: str) -> None:
        uid = parse_identifier(street_id)
        if uid is None:
            logger.info("Delete skipped, malformed street id %r", street_id)
            return

        async def _delete():
            result = await self.session.execute(delete(Street).where(Street.id == uid))
            await self.session.commit()
            return result.rowcount

        removed = await self._run("delete street", _delete())
        logger.info("Street %s delete requested (removed=%s)", uid, removed)
