"""Live verification of a deployed origin against the route manifest.

Each sampled route is fetched and its head metadata compared with what the
manifest says the route should carry; the deployed sitemap is checked for
its root element, the home URL and at least one programmatic page.  Checks
are independent: a failure in one is recorded on its own
:class:`~sitegen.models.check_result.CheckResult` and never stops the others.
"""

import asyncio
import logging
import re
from typing import Dict, List, Optional, Sequence

import httpx
from bs4 import BeautifulSoup

from sitegen.config import get_settings
from sitegen.models.check_result import CheckResult
from sitegen.models.route import RouteManifestEntry
from sitegen.services.fetcher import build_client, fetch_page
from sitegen.services.manifest import (
    canonical_for_path,
    find_route,
    get_all_seo_routes,
    normalize_path,
)
from sitegen.services.sitemap import parse_sitemap_locs
from sitegen.services.taxonomy import SOLUTIONS_PREFIX

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 5

DEFAULT_ROUTE_SAMPLE = (
    "/",
    "/features",
    "/features/sms-reminders",
    "/features/no-show-protection",
    "/features/calendar-sync",
    "/features/online-booking",
    "/compare",
    "/compare/vs-fresha",
    "/compare/vs-treatwell",
    "/solutions",
    "/solutions/lash-techs-london",
    "/menu",
    "/signup/success",
    "/referral-login",
    "/referral-dashboard",
)

_REQUEST_ERRORS = (httpx.HTTPError, ValueError, RuntimeError)


def _meta_content(soup: BeautifulSoup, attr: str, value: str) -> str:
    meta = soup.find("meta", attrs={attr: re.compile(rf"^\s*{re.escape(value)}\s*$", re.I)})
    if meta and meta.get("content"):
        return str(meta["content"]).strip()
    return ""


def extract_head_meta(html: str) -> Dict[str, str]:
    """Return title, description, robots and canonical found in *html*.

    Missing values come back as empty strings.  Attribute order and case do
    not matter.
    """
    soup = BeautifulSoup(html, "lxml")

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    canonical = ""
    for link in soup.find_all("link", href=True):
        rel = link.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        if any(value.lower() == "canonical" for value in rel):
            canonical = str(link["href"]).strip()
            break

    return {
        "title": title,
        "description": _meta_content(soup, "name", "description"),
        "robots": _meta_content(soup, "name", "robots"),
        "canonical": canonical,
    }


def evaluate_route(
    path: str,
    indexable: bool,
    expected_canonical: str,
    html: str,
    status: int,
) -> CheckResult:
    """Compare one fetched document with its manifest expectations."""
    meta = extract_head_meta(html)
    issues: List[str] = []

    if status < 200 or status >= 400:
        issues.append(f"Unexpected status {status}")

    if not meta["title"]:
        issues.append("Missing <title>")
    if not meta["description"]:
        issues.append("Missing meta description")

    if not meta["canonical"]:
        issues.append("Missing canonical")
    elif meta["canonical"] != expected_canonical:
        issues.append(f"Canonical mismatch (expected: {expected_canonical}, got: {meta['canonical']})")

    robots = meta["robots"]
    if not robots:
        issues.append("Missing robots meta")
    elif indexable and "noindex" in robots.lower():
        issues.append(f"Indexable route has noindex robots: {robots}")
    elif not indexable and "noindex" not in robots.lower():
        issues.append(f"Non-indexable route missing noindex robots: {robots}")

    return CheckResult(path=path, status=status, ok=not issues, issues=issues, title=meta["title"])


async def check_route(
    client: httpx.AsyncClient,
    base_url: str,
    route: RouteManifestEntry,
    canonical_base: Optional[str] = None,
    allow_private: bool = False,
) -> CheckResult:
    """Fetch *route* from *base_url* and evaluate it.

    The expected canonical is rooted at *canonical_base* (the manifest's base
    URL by default), since that is what the build wrote into the documents.
    """
    path = normalize_path(route.path)
    page = await fetch_page(client, f"{base_url}{path}", allow_private=allow_private)
    expected = canonical_for_path(path, route.canonical, canonical_base)
    return evaluate_route(path, route.indexable, expected, page.text, page.status_code)


async def check_sitemap(
    client: httpx.AsyncClient,
    base_url: str,
    canonical_base: Optional[str] = None,
    allow_private: bool = False,
) -> CheckResult:
    origin = (canonical_base or get_settings().base_url).rstrip("/")
    page = await fetch_page(
        client,
        f"{base_url}/sitemap.xml",
        accept="application/xml,text/xml,*/*",
        allow_private=allow_private,
    )
    issues: List[str] = []

    if page.status_code < 200 or page.status_code >= 400:
        issues.append(f"Unexpected status {page.status_code}")
    if "<urlset" not in page.text:
        issues.append("Missing <urlset> root")

    locs = parse_sitemap_locs(page.text)
    if f"{origin}/" not in locs:
        issues.append("Homepage URL missing in sitemap")
    if not any(loc.startswith(f"{origin}{SOLUTIONS_PREFIX}") for loc in locs):
        issues.append("No programmatic page URL in sitemap")

    return CheckResult(path="/sitemap.xml", status=page.status_code, ok=not issues, issues=issues)


def _failure(path: str, exc: BaseException) -> CheckResult:
    message = str(exc) or exc.__class__.__name__
    return CheckResult(path=path, status=0, ok=False, issues=[message])


async def verify_live(
    base_url: str,
    sample: Sequence[str] = DEFAULT_ROUTE_SAMPLE,
    routes: Optional[Sequence[RouteManifestEntry]] = None,
    canonical_base: Optional[str] = None,
    concurrency: int = DEFAULT_CONCURRENCY,
    allow_private: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> List[CheckResult]:
    """Check every sampled path plus the sitemap of *base_url*.

    Results come back in sample order, with the sitemap check last.  At most
    *concurrency* requests are in flight at once.
    """
    base_url = base_url.strip().rstrip("/")
    manifest = get_all_seo_routes() if routes is None else routes
    semaphore = asyncio.Semaphore(max(1, concurrency))
    owned_client = client is None
    http = build_client(get_settings().http_timeout) if client is None else client

    async def _run_route(path: str) -> CheckResult:
        route = find_route(path, manifest)
        if route is None:
            return CheckResult(
                path=normalize_path(path), status=0, ok=False, issues=["Route is not in the manifest"]
            )
        async with semaphore:
            try:
                return await check_route(http, base_url, route, canonical_base, allow_private)
            except _REQUEST_ERRORS as exc:
                logger.warning("Live check failed for %s: %s", path, exc)
                return _failure(normalize_path(path), exc)

    async def _run_sitemap() -> CheckResult:
        async with semaphore:
            try:
                return await check_sitemap(http, base_url, canonical_base, allow_private)
            except _REQUEST_ERRORS as exc:
                logger.warning("Sitemap check failed for %s: %s", base_url, exc)
                return _failure("/sitemap.xml", exc)

    try:
        results = await asyncio.gather(*(_run_route(path) for path in sample), _run_sitemap())
    finally:
        if owned_client:
            await http.aclose()
    return list(results)


def format_report(results: Sequence[CheckResult]) -> List[str]:
    """Return the printable PASS/FAIL lines and the final summary line."""
    lines: List[str] = []
    for result in results:
        label = "PASS" if result.ok else "FAIL"
        detail = f"status {result.status}" if result.status else "request error"
        lines.append(f"{label} {result.path} ({detail})")
        lines.extend(f"  - {issue}" for issue in result.issues)

    passed = sum(1 for result in results if result.ok)
    lines.append("")
    lines.append(f"{passed}/{len(results)} checks passed")
    return lines
