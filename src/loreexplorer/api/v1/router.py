"""API v1 router aggregator."""

from fastapi import APIRouter

from loreexplorer.api.v1.locations import router as locations_router
from loreexplorer.api.v1.stories import router as stories_router

router = APIRouter(prefix="/api/v1")
router.include_router(stories_router)
router.include_router(locations_router)
