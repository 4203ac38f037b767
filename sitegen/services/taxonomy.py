"""Location × niche combinator powering the programmatic ``/solutions`` pages.

Every page is derived from a pure string template over one
:class:`~sitegen.models.location.Location` and one
:class:`~sitegen.models.niche.Niche`.  Nothing here reads the clock, the
network or a random source, so the sitemap generator and the prerender engine
can each call :func:`generate_landing_pages` and get identical output.
"""

from typing import List, Optional, Sequence

from sitegen.data.locations import LOCATIONS
from sitegen.data.niches import NICHES
from sitegen.models.landing_page import Breadcrumb, LandingPage
from sitegen.models.location import Location
from sitegen.models.niche import Niche

SOLUTIONS_PREFIX = "/solutions/"

# Range of the flavor number shown in page copy: [offset, offset + modulo)
_FLAVOR_MODULO = 100
_FLAVOR_OFFSET = 50


def deterministic_flavor_seed(
    key: str,
    modulo: int = _FLAVOR_MODULO,
    offset: int = _FLAVOR_OFFSET,
) -> int:
    """Map *key* to a stable number in ``[offset, offset + modulo)``.

    The number is the sum of the character codes of *key* reduced modulo
    *modulo*, so the same key always yields the same value across builds and
    processes (unlike :func:`hash`, which is salted per process).
    """
    return sum(ord(char) for char in key) % modulo + offset


def landing_page_url(niche_slug: str, location_slug: str) -> str:
    return f"{SOLUTIONS_PREFIX}{niche_slug}-{location_slug}"


def _build_page(location: Location, niche: Niche) -> LandingPage:
    city = location.name
    plural = niche.plural_name
    url = landing_page_url(niche.slug, location.slug)
    adopters = deterministic_flavor_seed(f"{location.slug}-{niche.slug}")

    return LandingPage(
        url=url,
        location=location,
        niche=niche,
        title=f"Booking Software for {city} {plural} | Elite Booker",
        meta_description=(
            f"The #1 no-commission booking system for {city} {plural.lower()}. "
            "£0 setup, £0.99 fee on Basic plan. Stop paying 20% to Fresha. "
            "Get started free today."
        ),
        h1=f"The #1 No-Commission Booking System for {city} {plural}",
        keywords=[
            f"booking software {city.lower()}",
            f"{plural.lower()} {city.lower()}",
            f"appointment software {plural.lower()}",
            f"{city.lower()} {niche.singular_name.lower()} booking system",
            f"no commission booking {city.lower()}",
        ],
        hero_subheading=(
            f"Join {adopters} {city} {plural.lower()} who stopped paying 20% commission "
            "to marketplaces. Start free, pay £0/month on our Basic plan forever."
        ),
        breadcrumbs=[
            Breadcrumb(label="Home", url="/"),
            Breadcrumb(label="Solutions", url="/solutions"),
            Breadcrumb(label=f"{city} {plural}", url=url),
        ],
    )


def generate_landing_pages(
    locations: Sequence[Location] = LOCATIONS,
    niches: Sequence[Niche] = NICHES,
) -> List[LandingPage]:
    """Return one page per (location, niche) pair.

    Iteration order is every niche of the first location, then every niche of
    the next one.  Downstream artifacts rely on this order for diffability.
    """
    return [_build_page(location, niche) for location in locations for niche in niches]


def get_all_landing_page_paths(
    locations: Sequence[Location] = LOCATIONS,
    niches: Sequence[Niche] = NICHES,
) -> List[str]:
    return [landing_page_url(n.slug, loc.slug) for loc in locations for n in niches]


def total_landing_pages(
    locations: Sequence[Location] = LOCATIONS,
    niches: Sequence[Niche] = NICHES,
) -> int:
    return len(locations) * len(niches)


def get_landing_page_data(
    niche_slug: str,
    location_slug: str,
    locations: Sequence[Location] = LOCATIONS,
    niches: Sequence[Niche] = NICHES,
) -> Optional[LandingPage]:
    """Return the page for the slug pair, or *None* when either slug is unknown."""
    niche = next((n for n in niches if n.slug == niche_slug), None)
    location = next((loc for loc in locations if loc.slug == location_slug), None)
    if niche is None or location is None:
        return None
    return _build_page(location, niche)


def is_indexable_landing_page(niche_slug: str, location_slug: str) -> bool:
    page = get_landing_page_data(niche_slug, location_slug)
    return page is not None and page.indexable


def resolve_slug_combination(
    slug_combination: str,
    locations: Sequence[Location] = LOCATIONS,
    niches: Sequence[Niche] = NICHES,
) -> Optional[LandingPage]:
    """Resolve a ``{niche}-{location}`` path segment to its landing page.

    Location slugs may themselves contain hyphens (``stoke-on-trent``), so the
    location is matched on the longest slug that terminates the segment and
    the remainder is treated as the niche slug.

    Returns *None* for any segment that does not name a generated page.
    """
    normalized = (slug_combination or "").strip().lower()
    by_length = sorted(locations, key=lambda loc: len(loc.slug), reverse=True)
    location = next(
        (loc for loc in by_length if normalized.endswith(f"-{loc.slug}")),
        None,
    )
    if location is None:
        return None

    niche_slug = normalized[: -(len(location.slug) + 1)]
    if not niche_slug:
        return None
    return get_landing_page_data(niche_slug, location.slug, locations, niches)
