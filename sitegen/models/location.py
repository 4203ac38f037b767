from pydantic import BaseModel, ConfigDict


class Location(BaseModel):
    """One city of the location catalog; ``slug`` is its URL-safe key."""

    model_config = ConfigDict(frozen=True)

    name: str
    slug: str
    region: str
    population: int
