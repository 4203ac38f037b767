"""Per-route prerendering of the SPA shell's ``<head>``.

The built single-page-application entry document ships only default head
tags.  For every manifest route this module renders the route-specific tags
(title, description, canonical, robots, Open Graph and Twitter cards) as an
ordered map of *tag kind → rendered tag*, then splices that map into the shell
once: a tag whose kind already exists in the shell replaces it in place, and
the remaining tags are inserted together just before ``</head>``.

Re-applying the same map to its own output is a no-op, so a document never
ends up with two titles, two canonicals or two robots directives.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from sitegen.config import get_settings
from sitegen.models.document import PrerenderedDocument
from sitegen.models.route import RouteManifestEntry
from sitegen.services.manifest import canonical_for_path, dedupe_by_path, normalize_path

logger = logging.getLogger(__name__)

ROBOTS_INDEX = "index, follow"
ROBOTS_NOINDEX = "noindex, nofollow"

_HEAD_CLOSE = re.compile(r"</head\s*>", re.IGNORECASE)


def _meta_pattern(attr: str, value: str) -> "re.Pattern[str]":
    # Matches the attribute anywhere inside the tag, in either quote style
    return re.compile(
        rf"<meta\b[^>]*\b{attr}\s*=\s*[\"']{re.escape(value)}[\"'][^>]*>",
        re.IGNORECASE,
    )


@dataclass(frozen=True)
class HeadTagKind:
    name: str
    pattern: "re.Pattern[str]"


HEAD_TAG_KINDS = (
    HeadTagKind("title", re.compile(r"<title\b[^>]*>.*?</title\s*>", re.IGNORECASE | re.DOTALL)),
    HeadTagKind("description", _meta_pattern("name", "description")),
    HeadTagKind(
        "canonical",
        re.compile(r"<link\b[^>]*\brel\s*=\s*[\"']canonical[\"'][^>]*>", re.IGNORECASE),
    ),
    HeadTagKind("robots", _meta_pattern("name", "robots")),
    HeadTagKind("og:title", _meta_pattern("property", "og:title")),
    HeadTagKind("og:description", _meta_pattern("property", "og:description")),
    HeadTagKind("og:url", _meta_pattern("property", "og:url")),
    HeadTagKind("twitter:title", _meta_pattern("name", "twitter:title")),
    HeadTagKind("twitter:description", _meta_pattern("name", "twitter:description")),
)


def escape_html(value: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for attribute and text content."""
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def robots_directive(route: RouteManifestEntry) -> str:
    return ROBOTS_INDEX if route.indexable else ROBOTS_NOINDEX


def build_head_tags(
    route: RouteManifestEntry,
    base_url: Optional[str] = None,
    default_title: Optional[str] = None,
    default_description: Optional[str] = None,
) -> Dict[str, str]:
    """Render every head tag kind for *route*, keyed by kind, in a fixed order."""
    settings = get_settings()
    title = escape_html(route.title or default_title or settings.site_name)
    description = escape_html(
        route.description or default_description or settings.default_description
    )
    canonical = escape_html(canonical_for_path(route.path, route.canonical, base_url))
    robots = robots_directive(route)

    return {
        "title": f"<title>{title}</title>",
        "description": f'<meta name="description" content="{description}" />',
        "canonical": f'<link rel="canonical" href="{canonical}" />',
        "robots": f'<meta name="robots" content="{robots}" />',
        "og:title": f'<meta property="og:title" content="{title}" />',
        "og:description": f'<meta property="og:description" content="{description}" />',
        "og:url": f'<meta property="og:url" content="{canonical}" />',
        "twitter:title": f'<meta name="twitter:title" content="{title}" />',
        "twitter:description": f'<meta name="twitter:description" content="{description}" />',
    }


def apply_head_tags(shell: str, tags: Dict[str, str]) -> str:
    """Upsert each rendered tag of *tags* into *shell*.

    Raises:
        ValueError: if *shell* has no ``</head>`` and some tag must be inserted.
    """
    html = shell
    missing: List[str] = []

    for kind in HEAD_TAG_KINDS:
        rendered = tags.get(kind.name)
        if rendered is None:
            continue
        if kind.pattern.search(html):
            # A callable replacement keeps backslashes in the tag literal
            html = kind.pattern.sub(lambda _match, tag=rendered: tag, html, count=1)
        else:
            missing.append(rendered)

    if not missing:
        return html

    head_close = _HEAD_CLOSE.search(html)
    if head_close is None:
        raise ValueError("HTML shell has no </head> to insert head tags before.")
    inserted = "".join(f"  {tag}\n" for tag in missing)
    return html[: head_close.start()] + inserted + html[head_close.start():]


def render_route(
    shell: str,
    route: RouteManifestEntry,
    base_url: Optional[str] = None,
) -> str:
    return apply_head_tags(shell, build_head_tags(route, base_url))


def output_file_for_route(output_dir: Path, path: str) -> Path:
    """Return where a static file server resolves *path* to ``index.html``."""
    normalized = normalize_path(path)
    if normalized == "/":
        return output_dir / "index.html"
    return output_dir / normalized.lstrip("/") / "index.html"


def ensure_prerender_inputs(output_dir: Path, shell_path: Path) -> str:
    """Check every precondition before any route is written and return the shell.

    Raises:
        FileNotFoundError: if the output directory or the shell file is missing.
        ValueError: if the shell has no ``</head>``.
    """
    if not output_dir.is_dir():
        raise FileNotFoundError(
            f"Build output folder not found at {output_dir}. Build the app before prerendering."
        )
    if not shell_path.is_file():
        raise FileNotFoundError(f"HTML shell not found at {shell_path}.")

    shell = shell_path.read_text(encoding="utf-8")
    if not _HEAD_CLOSE.search(shell):
        raise ValueError(f"HTML shell at {shell_path} has no </head>.")
    return shell


def prerender_routes(
    routes: Iterable[RouteManifestEntry],
    output_dir: Path,
    shell_path: Path,
    base_url: Optional[str] = None,
) -> List[PrerenderedDocument]:
    """Write one customised copy of the shell per route under *output_dir*.

    Routes are deduplicated on their normalized path first, so a path declared
    twice still produces a single file.  The shell is read before the loop
    starts, so overwriting the root ``index.html`` does not affect later routes.
    """
    shell = ensure_prerender_inputs(output_dir, shell_path)
    documents: List[PrerenderedDocument] = []

    for route in dedupe_by_path(routes):
        target = output_file_for_route(output_dir, route.path)
        html = render_route(shell, route, base_url)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug("Prerendered %s -> %s", route.path, target)
        documents.append(
            PrerenderedDocument(path=route.path, output_file=str(target), html=html)
        )

    logger.info("Prerendered %d routes into %s", len(documents), output_dir)
    return documents
