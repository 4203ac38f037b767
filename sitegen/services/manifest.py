"""Route manifest: the single source of truth for every addressable route.

The manifest is the union of the hand-authored marketing routes and the
generated ``/solutions/{niche}-{city}`` pages, deduplicated on the normalized
path.  The sitemap generator, the prerender engine, the tripwire and the live
verifier all derive their expectations from the functions in this module, and
all of them compute canonical URLs through :func:`canonical_for_path`.
"""

import enum
from typing import Dict, Iterable, List, Optional

from sitegen.config import get_settings
from sitegen.data.static_routes import static_route_definitions
from sitegen.models.route import RouteManifestEntry
from sitegen.services.taxonomy import generate_landing_pages

PROGRAMMATIC_CHANGEFREQ = "monthly"
PROGRAMMATIC_PRIORITY = 0.7


class RoutePrecedence(str, enum.Enum):
    """Which side wins when a static and a programmatic route share a path."""

    PROGRAMMATIC = "programmatic"
    STATIC = "static"


def normalize_path(path: Optional[str]) -> str:
    """Strip query and fragment, then any trailing slash (except on the root).

    Case is preserved.  The function is idempotent and maps empty input to
    ``"/"``.
    """
    path_only = (path or "/").split("?", 1)[0].split("#", 1)[0] or "/"
    if path_only == "/":
        return "/"
    return path_only[:-1] if path_only.endswith("/") else path_only


def canonical_for_path(
    path: str,
    override: Optional[str] = None,
    base_url: Optional[str] = None,
) -> str:
    """Return the canonical URL for *path*.

    An explicit *override* wins.  Otherwise the root maps to ``{base}/`` (with
    a trailing slash) and every other path to ``{base}{path}`` (without one).
    """
    if override:
        return override
    base = (base_url or get_settings().base_url).rstrip("/")
    normalized = normalize_path(path)
    return f"{base}/" if normalized == "/" else f"{base}{normalized}"


def dedupe_by_path(routes: Iterable[RouteManifestEntry]) -> List[RouteManifestEntry]:
    """Collapse *routes* on their normalized path.

    A later entry replaces an earlier one but keeps the earlier entry's
    position.  Returned entries carry the normalized path.
    """
    by_path: Dict[str, RouteManifestEntry] = {}
    for route in routes:
        normalized = normalize_path(route.path)
        by_path[normalized] = route.model_copy(update={"path": normalized})
    return list(by_path.values())


def merge_routes(
    static: Iterable[RouteManifestEntry],
    programmatic: Iterable[RouteManifestEntry],
    precedence: RoutePrecedence = RoutePrecedence.PROGRAMMATIC,
) -> List[RouteManifestEntry]:
    """Union *static* and *programmatic* routes under an explicit precedence.

    Static routes always come first in the result; *precedence* only decides
    which definition survives when both sides declare the same path.
    """
    static = dedupe_by_path(static)
    programmatic = dedupe_by_path(programmatic)

    if precedence is RoutePrecedence.PROGRAMMATIC:
        return dedupe_by_path([*static, *programmatic])

    static_paths = {route.path for route in static}
    return static + [route for route in programmatic if route.path not in static_paths]


def get_static_seo_routes(base_url: Optional[str] = None) -> List[RouteManifestEntry]:
    base = base_url or get_settings().base_url
    return dedupe_by_path(static_route_definitions(base.rstrip("/")))


def get_programmatic_seo_routes() -> List[RouteManifestEntry]:
    return [
        RouteManifestEntry(
            path=page.url,
            title=page.title,
            description=page.meta_description,
            indexable=page.indexable,
            changefreq=PROGRAMMATIC_CHANGEFREQ,
            priority=PROGRAMMATIC_PRIORITY,
            intent="location",
        )
        for page in generate_landing_pages()
    ]


def get_all_seo_routes(base_url: Optional[str] = None) -> List[RouteManifestEntry]:
    return merge_routes(get_static_seo_routes(base_url), get_programmatic_seo_routes())


def get_indexable_seo_routes(base_url: Optional[str] = None) -> List[RouteManifestEntry]:
    return [route for route in get_all_seo_routes(base_url) if route.indexable]


def find_route(
    path: str,
    routes: Optional[Iterable[RouteManifestEntry]] = None,
) -> Optional[RouteManifestEntry]:
    """Return the manifest entry for *path* (compared normalized), or *None*."""
    target = normalize_path(path)
    candidates = get_all_seo_routes() if routes is None else routes
    for route in candidates:
        if normalize_path(route.path) == target:
            return route
    return None
