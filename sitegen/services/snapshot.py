"""CSV snapshot of the head metadata shipped for business-critical URLs."""

import csv
import io
import logging
import re
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from sitegen.models.snapshot_row import SnapshotRow
from sitegen.services.prerender import output_file_for_route
from sitegen.services.verifier import extract_head_meta

logger = logging.getLogger(__name__)

PRIORITY_URLS = (
    "/",
    "/pricing",
    "/compare",
    "/compare/vs-fresha",
    "/compare/vs-treatwell",
    "/salon-booking-software-uk",
    "/barbershop-booking-software-uk",
    "/nail-salon-booking-software-uk",
    "/beauty-salon-booking-system-uk",
    "/hairdresser-booking-software-uk",
)

CSV_HEADERS = (
    "urlPath",
    "status",
    "title",
    "description",
    "canonical",
    "robots",
    "hasPrerenderFallback",
    "htmlFile",
)

_FALLBACK_MARKER = re.compile(r"""id=["']seo-prerender-content["']""", re.IGNORECASE)


def _relative(path: Path, root: Optional[Path]) -> str:
    if root is not None:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            pass
    return path.as_posix()


def snapshot_row(output_dir: Path, url_path: str, root: Optional[Path] = None) -> SnapshotRow:
    """Read the prerendered document for *url_path*; ``status`` is ``missing`` if absent."""
    html_file = output_file_for_route(output_dir, url_path)
    relative = _relative(html_file, root)

    if not html_file.is_file():
        return SnapshotRow(url_path=url_path, status="missing", html_file=relative)

    html = html_file.read_text(encoding="utf-8")
    meta = extract_head_meta(html)
    return SnapshotRow(
        url_path=url_path,
        status="ok",
        title=meta["title"],
        description=meta["description"],
        canonical=meta["canonical"],
        robots=meta["robots"],
        has_prerender_fallback="yes" if _FALLBACK_MARKER.search(html) else "no",
        html_file=relative,
    )


def rows_to_csv(rows: Iterable[SnapshotRow]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in rows:
        writer.writerow(
            [
                " ".join(value.split())
                for value in (
                    row.url_path,
                    row.status,
                    row.title,
                    row.description,
                    row.canonical,
                    row.robots,
                    row.has_prerender_fallback,
                    row.html_file,
                )
            ]
        )
    return buffer.getvalue()


def write_snapshot(
    rows: Sequence[SnapshotRow],
    reports_dir: Path,
    build_date: date,
) -> Tuple[Path, Path]:
    """Write the dated and the ``latest`` CSV and return both paths."""
    reports_dir.mkdir(parents=True, exist_ok=True)
    content = rows_to_csv(rows)

    dated = reports_dir / f"seo-priority-snapshot-{build_date.isoformat()}.csv"
    latest = reports_dir / "seo-priority-snapshot-latest.csv"
    dated.write_text(content, encoding="utf-8")
    latest.write_text(content, encoding="utf-8")

    missing = sum(1 for row in rows if row.status == "missing")
    if missing:
        logger.warning("Missing prerendered pages: %d", missing)
    return dated, latest


def build_snapshot(
    output_dir: Path,
    urls: Sequence[str] = PRIORITY_URLS,
    root: Optional[Path] = None,
) -> List[SnapshotRow]:
    """Raise FileNotFoundError when *output_dir* does not exist yet."""
    if not output_dir.is_dir():
        raise FileNotFoundError(
            f"Missing build output folder at {output_dir}. Build and prerender before taking a snapshot."
        )
    return [snapshot_row(output_dir, url, root) for url in urls]
