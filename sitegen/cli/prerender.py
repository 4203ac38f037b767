"""CLI entrypoint that prerenders one head-customised document per route."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sitegen.config import get_settings
from sitegen.log import configure_logging
from sitegen.services.manifest import get_all_seo_routes
from sitegen.services.prerender import prerender_routes

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Prerender route-specific <head> tags into the SPA build")
    parser.add_argument("--dist", default=settings.dist_dir, help="Build output directory")
    parser.add_argument("--shell", default=None, help="HTML shell (default: <dist>/index.html)")
    parser.add_argument("--base-url", default=settings.base_url, help="Site origin for canonical URLs")
    args = parser.parse_args(argv)
    configure_logging()

    dist = Path(args.dist)
    shell = Path(args.shell) if args.shell else dist / "index.html"
    base_url = args.base_url.rstrip("/")

    try:
        documents = prerender_routes(get_all_seo_routes(base_url), dist, shell, base_url)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Prerender aborted: %s", exc)
        print(f"Prerender failed: {exc}", file=sys.stderr)
        return 1

    print(f"Prerendered HTML head for {len(documents)} routes.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
