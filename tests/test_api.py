"""Tests for the route manifest API."""

import pytest
from fastapi.testclient import TestClient

from sitegen.config import get_settings
from sitegen.main import app
from sitegen.services.manifest import (
    get_all_seo_routes,
    get_programmatic_seo_routes,
    get_static_seo_routes,
)
from sitegen.services.sitemap import parse_sitemap_locs

client = TestClient(app)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the slowapi in-memory counter before every test."""
    app.state.limiter._storage.reset()
    yield


def test_health():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Hello from sitegen"}


class TestRoutes:
    def test_all_routes(self):
        response = client.get("/seo/routes")
        assert response.status_code == 200
        assert len(response.json()) == len(get_all_seo_routes())

    def test_static_scope(self):
        body = client.get("/seo/routes", params={"scope": "static"}).json()
        assert [r["path"] for r in body] == [r.path for r in get_static_seo_routes()]

    def test_programmatic_scope(self):
        body = client.get("/seo/routes", params={"scope": "programmatic"}).json()
        assert len(body) == len(get_programmatic_seo_routes())
        assert all(r["intent"] == "location" for r in body)

    def test_indexable_scope(self):
        body = client.get("/seo/routes", params={"scope": "indexable"}).json()
        assert body
        assert all(r["indexable"] for r in body)

    def test_unknown_scope_is_rejected(self):
        assert client.get("/seo/routes", params={"scope": "everything"}).status_code == 422

    def test_lookup_normalizes_path(self):
        response = client.get("/seo/routes/lookup", params={"path": "/pricing/?ref=nav"})
        assert response.status_code == 200
        assert response.json()["path"] == "/pricing"

    def test_lookup_miss(self):
        response = client.get("/seo/routes/lookup", params={"path": "/nowhere"})
        assert response.status_code == 404
        assert response.json()["detail"] == "No manifest route for /nowhere"


class TestCanonical:
    def test_root_has_trailing_slash(self):
        body = client.get("/seo/canonical", params={"path": "/"}).json()
        assert body["canonical"] == f"{get_settings().base_url}/"

    def test_other_paths_do_not(self):
        body = client.get("/seo/canonical", params={"path": "/compare/"}).json()
        assert body["path"] == "/compare"
        assert body["canonical"] == f"{get_settings().base_url}/compare"

    def test_override_wins(self):
        body = client.get(
            "/seo/canonical", params={"path": "/business", "override": "https://example/"}
        ).json()
        assert body["canonical"] == "https://example/"


class TestSolutions:
    def test_known_combination(self):
        response = client.get("/solutions/barbers-london")
        assert response.status_code == 200
        body = response.json()
        assert body["url"] == "/solutions/barbers-london"
        assert body["niche"]["slug"] == "barbers"
        assert body["location"]["slug"] == "london"

    def test_unknown_combination(self):
        response = client.get("/solutions/plumbers-london")
        assert response.status_code == 404
        assert response.json()["detail"] == "Landing page not found."


class TestSitemap:
    def test_sitemap_is_xml(self):
        response = client.get("/sitemap.xml")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        locs = parse_sitemap_locs(response.text)
        assert f"{get_settings().base_url}/" in locs


class TestRateLimiting:
    def test_limit_is_enforced(self):
        for _ in range(60):
            assert client.get("/seo/canonical", params={"path": "/"}).status_code == 200
        assert client.get("/seo/canonical", params={"path": "/"}).status_code == 429
