"""Runtime configuration for the route manifest pipeline."""

import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://www.elitebooker.co.uk"
DEFAULT_SITE_NAME = "Elite Booker"
DEFAULT_DESCRIPTION = "Commission-free booking software for UK service businesses."


class Settings(BaseModel):
    """Validated settings shared by the CLIs and the manifest API."""

    base_url: str = DEFAULT_BASE_URL
    live_base_url: str = DEFAULT_BASE_URL
    public_dir: str = "public"
    dist_dir: str = "dist"
    reports_dir: str = "reports"
    http_timeout: float = Field(default=15.0, gt=0)
    site_name: str = DEFAULT_SITE_NAME
    default_description: str = DEFAULT_DESCRIPTION
    log_level: str = "INFO"

    @field_validator("base_url", "live_base_url")
    @classmethod
    def _check_origin(cls, value: str) -> str:
        value = value.strip()
        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError("Base URLs must start with http:// or https://")
        return value.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        base_url = source.get("SEO_BASE_URL", DEFAULT_BASE_URL)
        values = {
            "base_url": base_url,
            # The live check targets production unless told otherwise
            "live_base_url": source.get("SITEGEN_LIVE_BASE_URL", base_url),
            "public_dir": source.get("SITEGEN_PUBLIC_DIR", "public"),
            "dist_dir": source.get("SITEGEN_DIST_DIR", "dist"),
            "reports_dir": source.get("SITEGEN_REPORTS_DIR", "reports"),
            "http_timeout": source.get("SITEGEN_HTTP_TIMEOUT", "15"),
            "site_name": source.get("SITEGEN_SITE_NAME", DEFAULT_SITE_NAME),
            "default_description": source.get(
                "SITEGEN_DEFAULT_DESCRIPTION", DEFAULT_DESCRIPTION
            ),
            "log_level": source.get("SITEGEN_LOG_LEVEL", "INFO").upper(),
        }
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
