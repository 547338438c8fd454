"""
StreetMap Backend — Repository Base
=====================================

What:  Shared plumbing for the street and line repositories.
How:   Every database round-trip goes through `_run()`, which bounds it with
       the configured storage timeout and converts any backend failure into
       a StorageError. Application exceptions raised inside pass through.
Who:   Subclassed by StreetRepository and LineRepository.

Error Translation:
    asyncio timeout            → StorageError(context={"reason": "timeout"})
    SQLAlchemy / driver error  → StorageError(context={"reason": <type name>})
    StreetMapError subclasses  → re-raised unchanged
"""

import asyncio
import logging
import uuid
from typing import Any, Awaitable, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from streetmap.exceptions import StorageError, StreetMapError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_identifier(raw: Any) -> Optional[uuid.UUID]:
    """
    Parse a client-supplied identifier.

    Returns None for anything that is not a well-formed UUID; callers treat
    that exactly like an identifier with no matching record.
    """
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError, AttributeError):
        return None


class BaseRepository:
    """
    Holds the per-request session and the storage timeout.

    Repositories are cheap: one is built per request by the FastAPI
    dependency providers in streetmap.dependencies.
    """

    def __init__(self, session: AsyncSession, timeout: float = 10.0):
        self.session = session
        self.timeout = timeout

    async def _run(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except StreetMapError:
            raise
        except asyncio.TimeoutError:
            logger.error("Storage call '%s' timed out after %.1fs", operation, self.timeout)
            raise StorageError(context={"operation": operation, "reason": "timeout"})
        except Exception as e:
            logger.error("Storage call '%s' failed: %s", operation, str(e), exc_info=True)
            raise StorageError(context={"operation": operation, "reason": type(e).__name__})
