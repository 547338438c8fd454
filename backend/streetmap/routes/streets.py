"""
StreetMap Backend — Street Route Handlers
===========================================

What:  GET/POST /streets, DELETE /streets/{id} and POST /api/update-color.
How:   Each handler pulls a StreetRepository from the dependency provider,
       makes one call, and wraps the result in the response envelope the
       map frontend expects. Failures propagate as StreetMapError subclasses
       and are rendered by the handlers registered in main.py.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from streetmap.dependencies import get_street_repository
from streetmap.repositories import StreetRepository
from streetmap.schemas.common import ErrorResponse, MessageResponse
from streetmap.schemas.street import (
    StreetCreate,
    StreetResponse,
    UpdateColorRequest,
    UpdateColorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Streets"])


@router.get(
    "/streets",
    response_model=List[StreetResponse],
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
    summary="List all streets",
)
async def list_streets(
    repo: StreetRepository = Depends(get_street_repository),
) -> List[StreetResponse]:
    return await repo.list_streets()


@router.post(
    "/streets",
    response_model=StreetResponse,
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
    summary="Add a street",
    description=(
        "Stores a street exactly as sent. No field is required; "
        "`coordinates` is kept verbatim and defaults to an empty list."
    ),
)
async def create_street(
    payload: Optional[StreetCreate] = None,
    repo: StreetRepository = Depends(get_street_repository),
) -> StreetResponse:
    return await repo.create_street(payload or StreetCreate())


@router.post(
    "/api/update-color",
    response_model=UpdateColorResponse,
    responses={
        400: {"description": "id or color missing", "model": ErrorResponse},
        404: {"description": "Street not found", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Change the display color of a street",
)
async def update_color(
    payload: Optional[UpdateColorRequest] = None,
    repo: StreetRepository = Depends(get_street_repository),
) -> UpdateColorResponse:
    payload = payload or UpdateColorRequest()
    color = await repo.update_color(payload.id, payload.color)
    return UpdateColorResponse(success=True, color=color)


@router.delete(
    "/streets/{street_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
    summary="Delete a street",
    description="Idempotent: deleting an unknown id still succeeds.",
)
async def delete_street(
    street_id: str,
    repo: StreetRepository = Depends(get_street_repository),
) -> MessageResponse:
    await repo.delete_street(street_id)
    return MessageResponse(message="Street deleted")
