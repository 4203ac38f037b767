"""CLI entrypoint that checks a deployed origin against the route manifest."""

import argparse
import asyncio
from typing import List, Optional

from sitegen.config import get_settings
from sitegen.log import configure_logging
from sitegen.services.verifier import (
    DEFAULT_CONCURRENCY,
    DEFAULT_ROUTE_SAMPLE,
    format_report,
    verify_live,
)


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Verify live SEO tags and sitemap of a deployment")
    parser.add_argument("--base", default=settings.live_base_url, help="Deployed origin to check")
    parser.add_argument(
        "--path",
        action="append",
        dest="paths",
        help="Route to check (repeatable; default: built-in sample)",
    )
    parser.add_argument("--concurrency", type=int, default=DEFAULT_CONCURRENCY)
    parser.add_argument(
        "--allow-private",
        action="store_true",
        help="Allow private/loopback hosts, e.g. a local preview server",
    )
    args = parser.parse_args(argv)
    configure_logging()

    base_url = args.base.strip().rstrip("/")
    print(f"Verifying live SEO tags against: {base_url}")

    results = asyncio.run(
        verify_live(
            base_url,
            sample=args.paths or DEFAULT_ROUTE_SAMPLE,
            concurrency=args.concurrency,
            allow_private=args.allow_private,
        )
    )
    for line in format_report(results):
        print(line)

    return 0 if all(result.ok for result in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
