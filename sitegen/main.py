import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from sitegen.log import configure_logging
from sitegen.routers.routes import limiter, router as routes_router
from sitegen.routers.sitemap import router as sitemap_router
from sitegen.routers.solutions import router as solutions_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="sitegen – Route Manifest API",
    description="Serves route metadata, canonical URLs, landing pages, and the sitemap.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(routes_router)
app.include_router(solutions_router)
app.include_router(sitemap_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from sitegen"}
