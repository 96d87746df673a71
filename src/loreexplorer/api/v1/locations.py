"""Saved location API endpoints."""

from fastapi import APIRouter, HTTPException, Query

from loreexplorer.api.dependencies import ExplorerDep, LocationStoreDep
from loreexplorer.api.v1.errors import status_for
from loreexplorer.api.v1.schemas import (
    CoordinatesResponse,
    LocationRequest,
    SavedLocationResponse,
)
from loreexplorer.domain.location import format_coordinates
from loreexplorer.domain.result import Failure

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[SavedLocationResponse])
async def list_locations(store: LocationStoreDep) -> list[SavedLocationResponse]:
    """List saved locations, most recent first."""
    locations = await store.list_locations()
    return [SavedLocationResponse.model_validate(loc) for loc in locations]


@router.post("", response_model=SavedLocationResponse, status_code=201)
async def save_location(
    request: LocationRequest,
    explorer: ExplorerDep,
) -> SavedLocationResponse:
    """Summarize and save a location."""
    result = await explorer.save(request.location)
    if isinstance(result, Failure):
        raise HTTPException(status_code=status_for(result, "save"), detail=result.message)
    return SavedLocationResponse.model_validate(result.value)


@router.get("/coordinates", response_model=CoordinatesResponse)
async def location_from_coordinates(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
) -> CoordinatesResponse:
    """Format device coordinates as a location query."""
    return CoordinatesResponse(location=format_coordinates(latitude, longitude))
