"""Required-rule check for the published ``robots.txt``."""

from typing import List, Optional

from sitegen.config import get_settings

# Account, checkout and API surfaces that must never be crawled
REQUIRED_DISALLOW_RULES = (
    "Disallow: /client/",
    "Disallow: /admin/",
    "Disallow: /api/",
    "Disallow: /salon/*/login",
    "Disallow: /salon/*/register",
    "Disallow: /salon/*/profile",
    "Disallow: /salon/*/profile/*",
    "Disallow: /salon/*/checkout",
    "Disallow: /salon/*/product-checkout",
    "Disallow: /salon/*/confirmation",
    "Disallow: /salon/*/success",
    "Disallow: /salon/*/cancel",
    "Disallow: /salon/*/shop/success",
    "Disallow: /salon/*/shop/cancel",
    "Disallow: /salon/*/token-debug",
    "Disallow: /salon/*/auth/success",
    "Disallow: /order-success/*",
)


def required_robots_rules(base_url: Optional[str] = None) -> List[str]:
    base = (base_url or get_settings().base_url).rstrip("/")
    return [*REQUIRED_DISALLOW_RULES, f"Sitemap: {base}/sitemap.xml"]


def missing_robots_rules(robots_text: str, base_url: Optional[str] = None) -> List[str]:
    """Return every required rule absent from *robots_text*, in declaration order."""
    lines = {line.strip() for line in robots_text.splitlines() if line.strip()}
    return [rule for rule in required_robots_rules(base_url) if rule not in lines]
