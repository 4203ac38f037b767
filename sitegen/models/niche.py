from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Niche(BaseModel):
    """One business niche of the taxonomy catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    name: str
    plural_name: str
    singular_name: str
    description: str
    pain_points: Tuple[str, ...]
    average_treatment_price: int
    average_monthly_bookings: int
    typical_services: Tuple[str, ...]
