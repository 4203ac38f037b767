from fastapi import APIRouter, Response

from sitegen.config import get_settings
from sitegen.services.manifest import get_all_seo_routes
from sitegen.services.sitemap import generate_sitemap, today_utc

router = APIRouter()


@router.get("/sitemap.xml", summary="Sitemap rendered from the current manifest")
async def sitemap() -> Response:
    base_url = get_settings().base_url
    xml = generate_sitemap(get_all_seo_routes(base_url), today_utc(), base_url)
    return Response(content=xml, media_type="application/xml")
