"""Tests for sitegen.services.sitemap."""

from datetime import date

from sitegen.models.route import RouteManifestEntry
from sitegen.services.manifest import canonical_for_path, get_all_seo_routes
from sitegen.services.sitemap import (
    SITEMAP_NAMESPACE,
    build_sitemap_entries,
    generate_sitemap,
    parse_sitemap_locs,
)

_BASE = "https://example"
_BUILD_DATE = date(2026, 3, 14)

_ROI = RouteManifestEntry(
    path="/tools/roi-calculator",
    title="Salon Commission Calculator UK",
    description="Free calculator to see how much you'll save by switching booking platforms now.",
    indexable=True,
    priority=0.8,
    intent="tool",
)
_REFERRAL_LOGIN = RouteManifestEntry(
    path="/referral-login",
    title="Referral Partner Login | Elite Booker",
    description="Sign in to access your referral dashboard.",
    indexable=False,
    intent="utility",
)


class TestBuildSitemapEntries:
    def test_indexable_route_is_emitted_with_canonical(self):
        entries = build_sitemap_entries([_ROI], _BUILD_DATE, _BASE)
        assert [e.loc for e in entries] == ["https://example/tools/roi-calculator"]

    def test_non_indexable_route_is_skipped(self):
        entries = build_sitemap_entries([_ROI, _REFERRAL_LOGIN], _BUILD_DATE, _BASE)
        assert "https://example/referral-login" not in [e.loc for e in entries]

    def test_lastmod_is_shared_build_date(self):
        entries = build_sitemap_entries(get_all_seo_routes(_BASE), _BUILD_DATE, _BASE)
        assert {e.lastmod for e in entries} == {"2026-03-14"}

    def test_priority_has_one_decimal(self):
        home = RouteManifestEntry(path="/", title="Home page title", description="x" * 80, priority=1)
        entries = build_sitemap_entries([home, _ROI], _BUILD_DATE, _BASE)
        assert [e.priority for e in entries] == ["1.0", "0.8"]

    def test_shared_canonical_is_emitted_once(self):
        first = RouteManifestEntry(
            path="/referral-signup", title="Referral signup", description="x" * 80, priority=0.5
        )
        alias = RouteManifestEntry(
            path="/join",
            title="Referral signup alias",
            description="x" * 80,
            canonical="https://example/referral-signup",
            priority=0.9,
        )
        entries = build_sitemap_entries([first, alias], _BUILD_DATE, _BASE)
        assert len(entries) == 1
        assert entries[0].priority == "0.5"

    def test_static_routes_precede_programmatic(self):
        locs = [e.loc for e in build_sitemap_entries(get_all_seo_routes(_BASE), _BUILD_DATE, _BASE)]
        first_programmatic = next(i for i, loc in enumerate(locs) if "/solutions/" in loc)
        assert all("/solutions/" in loc for loc in locs[first_programmatic:])
        assert locs[0] == "https://example/"


class TestGenerateSitemap:
    def test_document_shape(self):
        xml = generate_sitemap([_ROI], _BUILD_DATE, _BASE)
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert f'<urlset xmlns="{SITEMAP_NAMESPACE}">' in xml
        assert "<loc>https://example/tools/roi-calculator</loc>" in xml
        assert "<lastmod>2026-03-14</lastmod>" in xml
        assert "<changefreq>monthly</changefreq>" in xml
        assert "<priority>0.8</priority>" in xml

    def test_output_is_deterministic(self):
        routes = get_all_seo_routes(_BASE)
        assert generate_sitemap(routes, _BUILD_DATE, _BASE) == generate_sitemap(
            routes, _BUILD_DATE, _BASE
        )

    def test_full_manifest_locs_match_indexable_canonicals(self):
        routes = get_all_seo_routes(_BASE)
        locs = parse_sitemap_locs(generate_sitemap(routes, _BUILD_DATE, _BASE))
        expected = []
        for route in routes:
            loc = canonical_for_path(route.path, route.canonical, _BASE)
            if route.indexable and loc not in expected:
                expected.append(loc)
        assert locs == expected
        assert len(locs) == len(set(locs))

    def test_special_characters_are_escaped(self):
        route = RouteManifestEntry(path="/a&b", title="Ampersand route", description="x" * 80)
        xml = generate_sitemap([route], _BUILD_DATE, _BASE)
        assert "<loc>https://example/a&amp;b</loc>" in xml
        assert parse_sitemap_locs(xml) == ["https://example/a&b"]


class TestParseSitemapLocs:
    def test_without_namespace(self):
        xml = "<urlset><url><loc> https://example/a </loc></url></urlset>"
        assert parse_sitemap_locs(xml) == ["https://example/a"]

    def test_malformed_returns_empty(self):
        assert parse_sitemap_locs("<urlset><url>") == []
