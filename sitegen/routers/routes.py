import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from sitegen.models.canonical_response import CanonicalResponse
from sitegen.models.route import RouteManifestEntry
from sitegen.services.manifest import (
    canonical_for_path,
    find_route,
    get_all_seo_routes,
    get_indexable_seo_routes,
    get_programmatic_seo_routes,
    get_static_seo_routes,
    normalize_path,
)

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/seo")

RouteScope = Literal["all", "static", "programmatic", "indexable"]


@router.get(
    "/routes",
    response_model=List[RouteManifestEntry],
    summary="List manifest routes",
)
@limiter.limit("60/minute")
async def list_routes(
    request: Request,
    scope: RouteScope = Query(default="all", description="Which slice of the manifest to return."),
) -> List[RouteManifestEntry]:
    """Return the deduplicated manifest, or one of its slices, in manifest order."""
    if scope == "static":
        return get_static_seo_routes()
    if scope == "programmatic":
        return get_programmatic_seo_routes()
    if scope == "indexable":
        return get_indexable_seo_routes()
    return get_all_seo_routes()


@router.get("/routes/lookup", response_model=RouteManifestEntry, summary="Look up one route")
@limiter.limit("60/minute")
async def lookup_route(request: Request, path: str = Query(..., min_length=1)) -> RouteManifestEntry:
    route = find_route(path)
    if route is None:
        logger.info("Route lookup miss", extra={"path": path})
        raise HTTPException(status_code=404, detail=f"No manifest route for {normalize_path(path)}")
    return route


@router.get("/canonical", response_model=CanonicalResponse, summary="Compute a canonical URL")
@limiter.limit("60/minute")
async def canonical(
    request: Request,
    path: str = Query(..., min_length=1),
    override: Optional[str] = Query(default=None),
) -> CanonicalResponse:
    return CanonicalResponse(
        path=normalize_path(path),
        override=override,
        canonical=canonical_for_path(path, override),
    )
