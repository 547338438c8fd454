"""
StreetMap Backend — Line Route Handlers
=========================================

What:  POST /api/save-line, GET /api/get-lines, DELETE /api/delete-line/{id}.
How:   Thin wrappers over LineRepository; errors are rendered by the global
       handlers in main.py.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from streetmap.dependencies import get_line_repository
from streetmap.repositories import LineRepository
from streetmap.schemas.common import ErrorResponse, SuccessResponse
from streetmap.schemas.line import LineResponse, SaveLineRequest, SaveLineResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Lines"])


@router.post(
    "/save-line",
    response_model=SaveLineResponse,
    responses={
        400: {"description": "polyline or color missing", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Save a drawn line",
)
async def save_line(
    payload: Optional[SaveLineRequest] = None,
    repo: LineRepository = Depends(get_line_repository),
) -> SaveLineResponse:
    payload = payload or SaveLineRequest()
    logger.debug(
        "save-line: name=%r points=%s color=%r",
        payload.name,
        len(payload.polyline) if payload.polyline is not None else None,
        payload.color,
    )
    line_id = await repo.create_line(payload.name, payload.polyline, payload.color)
    return SaveLineResponse(success=True, id=line_id)


@router.get(
    "/get-lines",
    response_model=List[LineResponse],
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
    summary="List all saved lines",
)
async def get_lines(
    repo: LineRepository = Depends(get_line_repository),
) -> List[LineResponse]:
    return await repo.list_lines()


@router.delete(
    "/delete-line/{line_id}",
    response_model=SuccessResponse,
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
    summary="Delete a saved line",
    description="Idempotent: deleting an unknown id still returns success.",
)
async def delete_line(
    line_id: str,
    repo: LineRepository = Depends(get_line_repository),
) -> SuccessResponse:
    await repo.delete_line(line_id)
    return SuccessResponse(success=True)
