from typing import List

from pydantic import BaseModel


class TripwireReport(BaseModel):
    routes_checked: int
    sitemap_urls: int
    issues: List[str]

    @property
    def ok(self) -> bool:
        return not self.issues
