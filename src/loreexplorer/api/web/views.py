"""HTMX-powered web views."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from loreexplorer.api.dependencies import ExplorerDep
from loreexplorer.domain.result import Success
from loreexplorer.services.explorer import notice_for

router = APIRouter(tags=["web"])

# Templates configuration
templates = Jinja2Templates(directory="templates")


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, explorer: ExplorerDep) -> HTMLResponse:
    """Render the main page with the location form and saved locations."""
    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context={
            "saved_locations": explorer.saved_locations,
            "store_configured": explorer.store.is_configured,
        },
    )


@router.post("/story", response_class=HTMLResponse)
async def generate_story(
    request: Request,
    explorer: ExplorerDep,
    location: str = Form(""),
    detected: bool = Form(False),
) -> HTMLResponse:
    """HTMX endpoint that renders a story card, or an error toast."""
    result = await explorer.generate(location)
    operation = "detect" if detected else "generate"

    return templates.TemplateResponse(
        request=request,
        name="partials/story.html",
        context={
            "story": result.value if isinstance(result, Success) else None,
            "location": explorer.current_location,
            "notice": notice_for(result, operation),
        },
    )


@router.get("/locations", response_class=HTMLResponse)
async def saved_locations(request: Request, explorer: ExplorerDep) -> HTMLResponse:
    """HTMX endpoint for the saved locations list."""
    return templates.TemplateResponse(
        request=request,
        name="partials/saved_locations.html",
        context={"saved_locations": explorer.saved_locations, "notice": None},
    )


@router.post("/locations", response_class=HTMLResponse)
async def save_location(
    request: Request,
    explorer: ExplorerDep,
    location: str = Form(""),
) -> HTMLResponse:
    """HTMX endpoint that saves a location and re-renders the saved list."""
    result = await explorer.save(location)

    return templates.TemplateResponse(
        request=request,
        name="partials/saved_locations.html",
        context={
            "saved_locations": explorer.saved_locations,
            "notice": notice_for(result, "save"),
        },
    )
