"""CLI entrypoint for the build-time SEO tripwire."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from sitegen.config import get_settings
from sitegen.log import configure_logging
from sitegen.services.manifest import get_all_seo_routes, get_static_seo_routes
from sitegen.services.validator import run_tripwire


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Cross-check the route manifest against sitemap.xml")
    parser.add_argument(
        "--sitemap",
        default=str(Path(settings.public_dir) / "sitemap.xml"),
        help="Generated sitemap to check",
    )
    parser.add_argument("--base-url", default=settings.base_url, help="Site origin used for canonicals")
    args = parser.parse_args(argv)
    configure_logging()

    sitemap_path = Path(args.sitemap)
    if not sitemap_path.is_file():
        print(f"Missing sitemap at {sitemap_path}. Run sitegen-sitemap first.", file=sys.stderr)
        return 1

    base_url = args.base_url.rstrip("/")
    report = run_tripwire(
        get_all_seo_routes(base_url),
        sitemap_path.read_text(encoding="utf-8"),
        base_url,
        static_routes=get_static_seo_routes(base_url),
    )

    if not report.ok:
        print("SEO tripwire check failed:", file=sys.stderr)
        for issue in report.issues:
            print(f"- {issue}", file=sys.stderr)
        return 1

    print(
        f"SEO tripwire check passed: {report.routes_checked} routes validated, "
        f"{report.sitemap_urls} sitemap URLs verified."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
