"""Tests schémas — format fil camelCase, clés inconnues, page d'accueil, ancres."""
import pytest
from pydantic import ValidationError

from site_builder.core.schemas import Block, ComponentAction, Site, SitePage, SiteTheme, slugify


# ── SiteTheme ────────────────────────────────────────────────────────────────

def test_theme_defaults():
    t = SiteTheme()
    assert t.primary_color == "#3b82f6"
    assert t.direction == "ltr"
    assert t.border_radius == 8


def test_theme_accepts_camel_case():
    t = SiteTheme.model_validate({"primaryColor": "#ff0000", "borderRadius": 4, "direction": "rtl"})
    assert t.primary_color == "#ff0000"
    assert t.border_radius == 4
    assert t.direction == "rtl"


def test_theme_is_frozen():
    t = SiteTheme()
    with pytest.raises(ValidationError):
        t.primary_color = "#000000"


def test_theme_rejects_unknown_direction():
    with pytest.raises(ValidationError):
        SiteTheme(direction="diagonal")


# ── Block ────────────────────────────────────────────────────────────────────

def test_block_round_trip_keeps_unknown_keys():
    raw = {"id": "b1", "type": "button", "props": {"text": "Go"}, "order": 2, "editorMeta": {"locked": True}}
    b = Block.model_validate(raw)
    wire = b.to_wire()
    assert wire["editorMeta"] == {"locked": True}
    assert wire["props"] == {"text": "Go"}
    assert wire["order"] == 2


def test_block_generates_id():
    assert Block(type="spacer").id.startswith("blk-")
    assert Block(type="spacer").id != Block(type="spacer").id


def test_block_walk_includes_nested_children_in_order():
    parent = Block(id="s", type="section", children=[
        Block(id="c2", type="heading", order=2),
        Block(id="c1", type="heading", order=1, children=[Block(id="g", type="spacer")]),
    ])
    assert [b.id for b in parent.walk()] == ["s", "c1", "g", "c2"]


# ── ComponentAction ──────────────────────────────────────────────────────────

def test_action_camel_case_fields():
    a = ComponentAction.model_validate({"type": "page", "pageId": "about", "openInNewTab": True})
    assert a.page_id == "about"
    assert a.open_in_new_tab is True


def test_action_keeps_unknown_fields():
    a = ComponentAction.model_validate({"type": "modal", "modalId": "m1"})
    assert a.type == "modal"
    assert a.to_wire()["modalId"] == "m1"


# ── SitePage / Site ──────────────────────────────────────────────────────────

def test_page_blocks_sorted_by_order_stable():
    page = SitePage(blocks=[
        Block(id="a", type="spacer", order=1),
        Block(id="b", type="spacer", order=0),
        Block(id="c", type="spacer", order=1),
    ])
    assert [b.id for b in page.ordered_blocks()] == ["b", "a", "c"]


def test_page_find_block_nested():
    page = SitePage(blocks=[Block(id="s", type="section", children=[Block(id="inner", type="heading")])])
    assert page.find_block("inner").type == "heading"
    assert page.find_block("nope") is None


def test_page_anchors():
    page = SitePage(blocks=[
        Block(id="b1", type="section", props={"anchorId": "pricing"}, children=[Block(id="b2", type="faq")]),
    ])
    assert page.anchors() == {"b1", "pricing", "b2"}


def test_home_page_first_flagged_in_collection_order():
    site = Site(pages=[
        SitePage(id="late", order=2, is_home_page=True),
        SitePage(id="early", order=1, is_home_page=True),
        SitePage(id="plain", order=0),
    ])
    assert site.home_page().id == "early"


def test_home_page_falls_back_to_first_page():
    site = Site(pages=[SitePage(id="b", order=1), SitePage(id="a", order=0)])
    assert site.home_page().id == "a"


def test_home_page_empty_site():
    assert Site().home_page() is None


def test_routes():
    home = SitePage(id="p1", slug="home", is_home_page=True)
    about = SitePage(id="p2", slug="about")
    contact = SitePage(id="p3")
    site = Site(pages=[home, about, contact])
    assert site.route_for(home) == "/"
    assert site.route_for(about) == "/about/"
    assert site.route_for(contact) == "/p3/"


@pytest.mark.parametrize("value, expected", [
    ("About", "about"),
    ("Nos Cafés & Thés", "nos-cafes-thes"),
    ("../../etc/evil", "etc-evil"),
    ("a\\b/c", "a-b-c"),
    ("..", ""),
    ("", ""),
])
def test_slugify(value, expected):
    assert slugify(value) == expected


def test_route_normalises_slug():
    site = Site(pages=[
        SitePage(id="home", is_home_page=True),
        SitePage(id="p2", slug="../../etc/evil"),
        SitePage(id="p3", slug="/.."),
    ])
    assert site.route_for(site.pages[1]) == "/etc-evil/"
    assert site.route_for(site.pages[2]) == "/p3/"
