from typing import Literal

from pydantic import BaseModel


class SnapshotRow(BaseModel):
    url_path: str
    status: Literal["ok", "missing"]
    title: str = ""
    description: str = ""
    canonical: str = ""
    robots: str = ""
    has_prerender_fallback: Literal["yes", "no"] = "no"
    html_file: str
