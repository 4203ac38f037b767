"""CLI entrypoint for the robots.txt required-rules check."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from sitegen.config import get_settings
from sitegen.services.robots import missing_robots_rules, required_robots_rules


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Check robots.txt for required crawl rules")
    parser.add_argument("--robots", default=str(Path(settings.public_dir) / "robots.txt"))
    parser.add_argument("--base-url", default=settings.base_url)
    args = parser.parse_args(argv)

    robots_path = Path(args.robots)
    if not robots_path.is_file():
        print(f"Missing robots.txt at {robots_path}", file=sys.stderr)
        return 1

    missing = missing_robots_rules(robots_path.read_text(encoding="utf-8"), args.base_url)
    if missing:
        print("SEO robots check failed:", file=sys.stderr)
        for rule in missing:
            print(f"- Missing rule: {rule}", file=sys.stderr)
        return 1

    print(f"SEO robots check passed: {len(required_robots_rules(args.base_url))} required rules present.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
