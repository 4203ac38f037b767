"""CLI entrypoint that writes the sitemap derived from the route manifest."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from sitegen.config import get_settings
from sitegen.log import configure_logging
from sitegen.services.manifest import (
    get_all_seo_routes,
    get_programmatic_seo_routes,
    get_static_seo_routes,
)
from sitegen.services.sitemap import generate_sitemap, today_utc


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Generate sitemap.xml from the route manifest")
    parser.add_argument("--stdout", action="store_true", help="Print the XML instead of writing it")
    parser.add_argument(
        "--output",
        default=str(Path(settings.public_dir) / "sitemap.xml"),
        help="Target file for the sitemap",
    )
    parser.add_argument("--base-url", default=settings.base_url, help="Site origin for <loc> values")
    args = parser.parse_args(argv)
    configure_logging()

    base_url = args.base_url.rstrip("/")
    routes = get_all_seo_routes(base_url)
    xml = generate_sitemap(routes, today_utc(), base_url)

    if args.stdout:
        sys.stdout.write(xml)
    else:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(xml, encoding="utf-8")
        print(f"Sitemap written to: {output}", file=sys.stderr)

    tools = sum(1 for route in get_static_seo_routes(base_url) if route.intent == "tool")
    indexable = sum(1 for route in routes if route.indexable)
    print(f"Generated {len(get_programmatic_seo_routes())} programmatic pages", file=sys.stderr)
    print(f"Generated {tools} tool pages", file=sys.stderr)
    print(f"Total indexable URLs: {indexable} ({base_url})", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
