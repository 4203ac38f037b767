"""CLI entrypoint exporting the priority-URL head metadata snapshot."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from sitegen.config import get_settings
from sitegen.log import configure_logging
from sitegen.services.sitemap import today_utc
from sitegen.services.snapshot import build_snapshot, write_snapshot


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Export a CSV snapshot of prerendered priority pages")
    parser.add_argument("--dist", default=settings.dist_dir)
    parser.add_argument("--reports", default=settings.reports_dir)
    args = parser.parse_args(argv)
    configure_logging()

    try:
        rows = build_snapshot(Path(args.dist), root=Path.cwd())
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    dated, latest = write_snapshot(rows, Path(args.reports), today_utc())
    print(f"SEO priority snapshot exported: {dated}")
    print(f"Latest snapshot updated: {latest}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
