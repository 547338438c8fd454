"""FastAPI dependency providers that hand repositories to route handlers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from streetmap.database import get_db_session
from streetmap.repositories import LineRepository, StreetRepository


def _storage_timeout(request: Request) -> float:
    return request.app.state.settings.storage_timeout


async def get_street_repository(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> StreetRepository:
    return StreetRepository(db, timeout=_storage_timeout(request))


async def get_line_repository(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> LineRepository:
    return LineRepository(db, timeout=_storage_timeout(request))
