"""Build-time tripwire: field quality and sitemap parity.

Every check appends human-readable issue strings to a list instead of raising,
so a single run reports every problem in the manifest and the sitemap.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set

from sitegen.models.route import RouteManifestEntry
from sitegen.models.tripwire_report import TripwireReport
from sitegen.services.manifest import canonical_for_path, normalize_path
from sitegen.services.sitemap import parse_sitemap_locs
from sitegen.services.taxonomy import SOLUTIONS_PREFIX

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 10
MAX_TITLE_LENGTH = 65
MAX_LOCATION_TITLE_LENGTH = 80
MIN_DESCRIPTION_LENGTH = 70
MIN_UTILITY_DESCRIPTION_LENGTH = 20
MAX_DESCRIPTION_LENGTH = 165


def _route_issues(route: RouteManifestEntry) -> List[str]:
    issues: List[str] = []
    is_utility = not route.indexable or route.intent == "utility"
    max_title = MAX_LOCATION_TITLE_LENGTH if route.intent == "location" else MAX_TITLE_LENGTH
    min_description = MIN_UTILITY_DESCRIPTION_LENGTH if is_utility else MIN_DESCRIPTION_LENGTH

    if not route.path or not route.path.startswith("/"):
        issues.append(f"Invalid path: {route.path or '<empty>'}")

    if not route.title or len(route.title.strip()) < MIN_TITLE_LENGTH:
        issues.append(f"Weak title for {route.path}")
    if route.title and len(route.title) > max_title:
        issues.append(f"Title too long ({len(route.title)}) for {route.path}")

    if not route.description or len(route.description.strip()) < min_description:
        issues.append(f"Weak description for {route.path}")
    if route.description and len(route.description) > MAX_DESCRIPTION_LENGTH:
        issues.append(f"Description too long ({len(route.description)}) for {route.path}")

    return issues


def validate_routes(routes: Iterable[RouteManifestEntry]) -> List[str]:
    """Return every field-quality issue across *routes*."""
    issues: List[str] = []
    for route in routes:
        issues.extend(_route_issues(route))
    return issues


def validate_reserved_prefix(static_routes: Iterable[RouteManifestEntry]) -> List[str]:
    """Flag hand-authored routes living under the generated ``/solutions/`` prefix."""
    return [
        f"Reserved prefix used by static route: {route.path}"
        for route in static_routes
        if normalize_path(route.path).startswith(SOLUTIONS_PREFIX)
    ]


def validate_sitemap_parity(
    routes: Sequence[RouteManifestEntry],
    sitemap_locs: Iterable[str],
    base_url: Optional[str] = None,
) -> List[str]:
    """Check both directions between the manifest and the sitemap's ``<loc>`` set.

    Every indexable canonical must be present.  A non-indexable route's
    canonical must be absent, unless it is an alias whose canonical belongs to
    an indexable route (e.g. ``/business`` pointing at the home page).
    """
    locs: Set[str] = set(sitemap_locs)
    issues: List[str] = []

    expected: List[str] = []
    for route in routes:
        if route.indexable:
            loc = canonical_for_path(route.path, route.canonical, base_url)
            if loc not in expected:
                expected.append(loc)
    expected_set = set(expected)

    for loc in expected:
        if loc not in locs:
            issues.append(f"Missing in sitemap: {loc}")

    for route in routes:
        if route.indexable:
            continue
        blocked = canonical_for_path(route.path, route.canonical, base_url)
        if blocked in locs and blocked not in expected_set:
            issues.append(f"Non-indexable route leaked into sitemap: {blocked}")

    return issues


def run_tripwire(
    routes: Sequence[RouteManifestEntry],
    sitemap_xml: str,
    base_url: Optional[str] = None,
    static_routes: Sequence[RouteManifestEntry] = (),
) -> TripwireReport:
    """Run every check and aggregate the issues into one report."""
    sitemap_locs = parse_sitemap_locs(sitemap_xml)

    issues = validate_routes(routes)
    issues.extend(validate_reserved_prefix(static_routes))
    issues.extend(validate_sitemap_parity(routes, sitemap_locs, base_url))

    if issues:
        logger.warning("Tripwire found %d issue(s)", len(issues))
    return TripwireReport(
        routes_checked=len(routes),
        sitemap_urls=len(sitemap_locs),
        issues=issues,
    )
