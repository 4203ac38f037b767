"""Sitemap generation and ``<loc>`` extraction."""

import logging
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List
from xml.etree import ElementTree

from sitegen.models.route import RouteManifestEntry
from sitegen.models.sitemap_entry import SitemapEntry
from sitegen.services.manifest import canonical_for_path

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def today_utc() -> date:
    """Return the build date; computed once per run by the CLI."""
    return datetime.now(timezone.utc).date()


def build_sitemap_entries(
    routes: Iterable[RouteManifestEntry],
    build_date: date,
    base_url: str,
) -> List[SitemapEntry]:
    """Return one entry per distinct canonical URL of the indexable *routes*.

    Non-indexable routes are skipped.  When two routes share a canonical, the
    first one in manifest order wins, so the output order follows the
    manifest (static routes first, then programmatic ones).
    """
    lastmod = build_date.isoformat()
    by_canonical: Dict[str, SitemapEntry] = {}

    for route in routes:
        if not route.indexable:
            continue
        loc = canonical_for_path(route.path, route.canonical, base_url)
        if loc in by_canonical:
            continue
        by_canonical[loc] = SitemapEntry(
            loc=loc,
            lastmod=lastmod,
            changefreq=route.changefreq,
            priority=f"{route.priority:.1f}",
        )

    return list(by_canonical.values())


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    """Serialise *entries* as a sitemap-protocol ``urlset`` document."""
    ElementTree.register_namespace("", SITEMAP_NAMESPACE)
    root = ElementTree.Element(f"{{{SITEMAP_NAMESPACE}}}urlset")

    for entry in entries:
        url = ElementTree.SubElement(root, f"{{{SITEMAP_NAMESPACE}}}url")
        for field in ("loc", "lastmod", "changefreq", "priority"):
            child = ElementTree.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}{field}")
            child.text = getattr(entry, field)

    ElementTree.indent(root, space="  ")
    body = ElementTree.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def generate_sitemap(
    routes: Iterable[RouteManifestEntry],
    build_date: date,
    base_url: str,
) -> str:
    """Pure function of ``(routes, build_date, base_url)`` returning the XML."""
    entries = build_sitemap_entries(routes, build_date, base_url)
    logger.debug("Rendering sitemap with %d URLs", len(entries))
    return render_sitemap(entries)


def parse_sitemap_locs(xml_text: str) -> List[str]:
    """Extract all ``<loc>`` values from a sitemap or sitemap-index XML.

    Returns an empty list (and logs a warning) when the document is not
    well-formed.
    """
    urls: List[str] = []
    try:
        root = ElementTree.fromstring(xml_text)
        ns = root.tag.split("}")[0] + "}" if root.tag.startswith("{") else ""
        for elem in root.iter(f"{ns}loc"):
            if elem.text:
                urls.append(elem.text.strip())
    except ElementTree.ParseError as exc:
        logger.warning("Failed to parse sitemap XML: %s", exc)
    return urls
