from pydantic import BaseModel


class SitemapEntry(BaseModel):
    loc: str
    lastmod: str  # YYYY-MM-DD, shared by every entry of one build
    changefreq: str
    priority: str  # one decimal place, e.g. "0.8"
