from typing import List

from pydantic import BaseModel


class CheckResult(BaseModel):
    """Outcome of one live check (a sampled route or the sitemap)."""

    path: str
    status: int  # 0 when the request itself failed
    ok: bool
    issues: List[str]
    title: str = ""
