import logging

from fastapi import APIRouter, HTTPException, Request

from sitegen.models.landing_page import LandingPage
from sitegen.routers.routes import limiter
from sitegen.services.taxonomy import resolve_slug_combination

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/solutions/{slug_combination}",
    response_model=LandingPage,
    summary="Resolve a programmatic landing page",
)
@limiter.limit("60/minute")
async def landing_page(request: Request, slug_combination: str) -> LandingPage:
    """Return the page for ``{niche}-{location}``; unknown combinations are a 404."""
    page = resolve_slug_combination(slug_combination)
    if page is None:
        logger.info("Unknown landing page requested", extra={"slug": slug_combination})
        raise HTTPException(status_code=404, detail="Landing page not found.")
    return page
