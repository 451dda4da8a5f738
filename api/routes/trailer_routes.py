"""
Trailer Routes.

Create, list and fetch trailer records.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from models.errors import (
    TrailerAlreadyExistsError,
    TrailerDomainError,
    TrailerNotFoundError,
)
from models.trailer_request import CreateTrailerRequest
from models.trailer_response import TrailerListResponse, TrailerProfile, TrailerResponse
from services.trailer_service import TrailerService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/trailers",
    tags=["trailers"],
    responses={
        400: {"description": "Bad request - invalid trailer data"},
        404: {"description": "Trailer not found"},
        409: {"description": "Trailer ID or VIN already exists"},
    }
)
service = TrailerService()


@router.post("/", response_model=TrailerResponse, status_code=status.HTTP_201_CREATED)
async def create_trailer(request: CreateTrailerRequest):
    """Create a new trailer"""
    try:
        return service.create_trailer(request)
    except TrailerAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except TrailerDomainError as e:
        logger.info(f"Rejected trailer: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/", response_model=TrailerListResponse)
async def get_trailers(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, ge=1, description="Trailers per page"),
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
    trailer_type: Optional[str] = Query(None, description="Filter by trailer type")
):
    """Get trailers with pagination and filters"""
    try:
        return service.list_trailers(
            page=page, limit=limit, status=status_filter, trailer_type=trailer_type
        )
    except TrailerDomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{identifier}", response_model=TrailerProfile)
async def get_trailer(identifier: str):
    """Get a trailer profile by entity id or unit number (e.g. TR1001)"""
    try:
        return service.get_trailer(identifier)
    except TrailerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
