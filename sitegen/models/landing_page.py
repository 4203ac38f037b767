from typing import List

from pydantic import BaseModel

from sitegen.models.location import Location
from sitegen.models.niche import Niche


class Breadcrumb(BaseModel):
    label: str
    url: str


class LandingPage(BaseModel):
    """A programmatic page derived from one (niche, location) pair."""

    url: str
    location: Location
    niche: Niche
    title: str
    meta_description: str
    h1: str
    keywords: List[str]
    hero_subheading: str
    """Page copy carrying the deterministic flavor number for this pair."""
    breadcrumbs: List[Breadcrumb]
    indexable: bool = True
