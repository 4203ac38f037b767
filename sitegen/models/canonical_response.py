from typing import Optional

from pydantic import BaseModel


class CanonicalResponse(BaseModel):
    path: str
    override: Optional[str] = None
    canonical: str
