"""Tests for sitegen.services.prerender."""

import pytest

from sitegen.models.route import RouteManifestEntry
from sitegen.services.manifest import canonical_for_path
from sitegen.services.prerender import (
    ROBOTS_INDEX,
    ROBOTS_NOINDEX,
    apply_head_tags,
    build_head_tags,
    ensure_prerender_inputs,
    escape_html,
    output_file_for_route,
    prerender_routes,
    render_route,
)
from sitegen.services.verifier import extract_head_meta

_BASE = "https://example"

_SHELL = """<!doctype html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>Elite Booker</title>
  <meta name="description" content="Default description" />
  <link rel="canonical" href="https://example/" />
</head>
<body><div id="root"></div></body>
</html>
"""

_ROI = RouteManifestEntry(
    path="/tools/roi-calculator",
    title="Salon Commission Calculator UK",
    description="Free calculator to see how much you'll save by switching booking platforms now.",
    indexable=True,
    intent="tool",
)
_REFERRAL_LOGIN = RouteManifestEntry(
    path="/referral-login",
    title="Referral Partner Login | Elite Booker",
    description="Sign in to access your referral dashboard.",
    indexable=False,
    intent="utility",
)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestRenderRoute:
    def test_indexable_route(self):
        html = render_route(_SHELL, _ROI, _BASE)
        assert html.count("<title>") == 1
        assert "<title>Salon Commission Calculator UK</title>" in html
        assert '<link rel="canonical" href="https://example/tools/roi-calculator" />' in html
        assert f'<meta name="robots" content="{ROBOTS_INDEX}" />' in html
        assert "Default description" not in html

    def test_non_indexable_route(self):
        html = render_route(_SHELL, _REFERRAL_LOGIN, _BASE)
        assert f'<meta name="robots" content="{ROBOTS_NOINDEX}" />' in html
        assert '<link rel="canonical" href="https://example/referral-login" />' in html

    def test_every_tag_kind_appears_once(self):
        html = render_route(_SHELL, _ROI, _BASE)
        for marker in (
            "<title>",
            'name="description"',
            'rel="canonical"',
            'name="robots"',
            'property="og:title"',
            'property="og:description"',
            'property="og:url"',
            'name="twitter:title"',
            'name="twitter:description"',
        ):
            assert html.count(marker) == 1, marker

    def test_missing_tags_are_inserted_before_head_close(self):
        html = render_route(_SHELL, _ROI, _BASE)
        head_close = html.index("</head>")
        assert html.index('name="robots"') < head_close
        assert html.index('property="og:url"') < head_close
        assert html.index('<meta charset="UTF-8" />') < html.index("<title>")

    def test_existing_tags_are_replaced_in_place(self):
        html = render_route(_SHELL, _ROI, _BASE)
        assert html.index("<title>") < html.index('name="robots"')

    def test_rendering_its_own_output_is_a_no_op(self):
        once = render_route(_SHELL, _ROI, _BASE)
        assert render_route(once, _ROI, _BASE) == once

    def test_rendering_over_another_route_keeps_single_tags(self):
        first = render_route(_SHELL, _REFERRAL_LOGIN, _BASE)
        second = render_route(first, _ROI, _BASE)
        assert second == render_route(_SHELL, _ROI, _BASE)
        assert ROBOTS_NOINDEX not in second

    def test_attribute_order_and_case_are_tolerated(self):
        shell = (
            "<html><HEAD><TITLE>Old</TITLE>"
            "<meta content='old' NAME='description'>"
            "<link href='https://old/' rel='canonical'></HEAD><body></body></html>"
        )
        html = render_route(shell, _ROI, _BASE)
        assert html.count("Old") == 0
        assert "'old'" not in html
        assert "https://old/" not in html
        assert html.index("</HEAD>") > html.index('name="robots"')

    def test_alias_route_uses_its_canonical_override(self):
        alias = RouteManifestEntry(
            path="/business",
            title="Elite Booker for Businesses",
            description="x" * 80,
            canonical="https://example/",
            indexable=False,
            intent="utility",
        )
        html = render_route(_SHELL, alias, _BASE)
        assert '<link rel="canonical" href="https://example/" />' in html
        assert ROBOTS_NOINDEX in html


class TestEscaping:
    def test_escape_html(self):
        assert escape_html('Tom & "Jerry" <b>') == "Tom &amp; &quot;Jerry&quot; &lt;b&gt;"

    def test_escape_leaves_single_quotes(self):
        assert escape_html("you'll") == "you'll"

    def test_title_and_description_are_escaped(self):
        route = RouteManifestEntry(
            path="/compare",
            title='Fresha vs "Us" <Compare>',
            description="Fees & commission compared for salons, barbers and clinics across the UK.",
        )
        tags = build_head_tags(route, _BASE)
        assert tags["title"] == "<title>Fresha vs &quot;Us&quot; &lt;Compare&gt;</title>"
        assert "Fees &amp; commission" in tags["description"]

    def test_backslashes_survive_replacement(self):
        route = RouteManifestEntry(path="/a", title=r"Back\1slash title", description="x" * 80)
        html = render_route(_SHELL, route, _BASE)
        assert r"<title>Back\1slash title</title>" in html


class TestHeadTags:
    def test_fallbacks_apply_to_empty_fields(self):
        route = RouteManifestEntry(path="/empty", title="", description="")
        tags = build_head_tags(route, _BASE, default_title="Site", default_description="Default")
        assert tags["title"] == "<title>Site</title>"
        assert tags["description"] == '<meta name="description" content="Default" />'

    def test_canonical_agrees_with_manifest(self):
        for route in (_ROI, _REFERRAL_LOGIN):
            html = render_route(_SHELL, route, _BASE)
            assert extract_head_meta(html)["canonical"] == canonical_for_path(
                route.path, route.canonical, _BASE
            )

    def test_missing_head_close_is_an_error(self):
        with pytest.raises(ValueError):
            apply_head_tags("<html><body></body></html>", build_head_tags(_ROI, _BASE))


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

class TestOutputFiles:
    def test_root_maps_to_index(self, tmp_path):
        assert output_file_for_route(tmp_path, "/") == tmp_path / "index.html"

    def test_nested_path(self, tmp_path):
        assert (
            output_file_for_route(tmp_path, "/features/sms-reminders/")
            == tmp_path / "features" / "sms-reminders" / "index.html"
        )


class TestPrerenderRoutes:
    def _write_shell(self, tmp_path):
        shell_path = tmp_path / "index.html"
        shell_path.write_text(_SHELL, encoding="utf-8")
        return shell_path

    def test_writes_one_file_per_route(self, tmp_path):
        shell_path = self._write_shell(tmp_path)
        documents = prerender_routes([_ROI, _REFERRAL_LOGIN], tmp_path, shell_path, _BASE)

        assert [d.path for d in documents] == ["/tools/roi-calculator", "/referral-login"]
        written = (tmp_path / "tools" / "roi-calculator" / "index.html").read_text(encoding="utf-8")
        assert "<title>Salon Commission Calculator UK</title>" in written
        assert (tmp_path / "referral-login" / "index.html").is_file()

    def test_root_route_overwrites_shell_without_affecting_others(self, tmp_path):
        shell_path = self._write_shell(tmp_path)
        home = RouteManifestEntry(path="/", title="Elite Booker Home Page", description="x" * 80)
        prerender_routes([home, _ROI], tmp_path, shell_path, _BASE)

        root_html = shell_path.read_text(encoding="utf-8")
        roi_html = (tmp_path / "tools" / "roi-calculator" / "index.html").read_text(encoding="utf-8")
        assert "<title>Elite Booker Home Page</title>" in root_html
        assert "Elite Booker Home Page" not in roi_html

    def test_duplicate_paths_produce_one_document(self, tmp_path):
        shell_path = self._write_shell(tmp_path)
        duplicate = _ROI.model_copy(update={"path": "/tools/roi-calculator/", "title": "Second title here"})
        documents = prerender_routes([_ROI, duplicate], tmp_path, shell_path, _BASE)
        assert len(documents) == 1
        assert "<title>Second title here</title>" in documents[0].html

    def test_missing_output_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            prerender_routes([_ROI], tmp_path / "dist", tmp_path / "dist" / "index.html", _BASE)

    def test_missing_shell(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ensure_prerender_inputs(tmp_path, tmp_path / "index.html")

    def test_shell_without_head_writes_nothing(self, tmp_path):
        shell_path = tmp_path / "index.html"
        shell_path.write_text("<html><body></body></html>", encoding="utf-8")
        with pytest.raises(ValueError):
            prerender_routes([_ROI], tmp_path, shell_path, _BASE)
        assert not (tmp_path / "tools").exists()
