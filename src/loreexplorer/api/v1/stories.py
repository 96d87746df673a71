"""Story API endpoints."""

from fastapi import APIRouter, HTTPException

from loreexplorer.api.dependencies import ExplorerDep
from loreexplorer.api.v1.errors import status_for
from loreexplorer.api.v1.schemas import LocationRequest, StoryResponse
from loreexplorer.domain.result import Failure

router = APIRouter(prefix="/stories", tags=["stories"])


@router.post("", response_model=StoryResponse)
async def generate_story(
    request: LocationRequest,
    explorer: ExplorerDep,
) -> StoryResponse:
    """Generate a titled story for a location."""
    result = await explorer.generate(request.location)
    if isinstance(result, Failure):
        raise HTTPException(status_code=status_for(result), detail=result.message)
    return StoryResponse.model_validate(result.value)
