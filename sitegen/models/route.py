from typing import Literal, Optional

from pydantic import BaseModel, Field

RouteIntent = Literal[
    "core",
    "utility",
    "money-page",
    "conversion",
    "support",
    "discovery",
    "feature-hub",
    "feature",
    "comparison-hub",
    "comparison",
    "solution-hub",
    "industry",
    "blog",
    "tool",
    "referral",
    "legal",
    "location",
]

ChangeFreq = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class RouteManifestEntry(BaseModel):
    """SEO metadata for one addressable route of the site."""

    path: str
    title: str
    description: str
    canonical: Optional[str] = None
    """Absolute URL overriding the self-referential canonical (alias routes)."""
    indexable: bool = True
    changefreq: ChangeFreq = "monthly"
    priority: float = Field(default=0.6, ge=0, le=1)
    intent: RouteIntent = "core"
