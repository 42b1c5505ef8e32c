"""Tests registry — couverture palette, placeholders, isolation des erreurs, thème partagé."""
import pytest

from site_builder.core.schemas import Block, SitePage, SiteTheme
from site_builder.palette import PALETTE, complete_props, create_block, palette_by_category, palette_types
from site_builder.renderer import (
    find_bindings, h, register, registered_types, render_block, render_blocks, render_page, to_html, unregister,
)

THEME = SiteTheme()


# ── Palette ──────────────────────────────────────────────────────────────────

def test_every_palette_type_has_a_renderer():
    assert set(palette_types()) == set(registered_types())


def test_palette_types_unique():
    types = [item.type for item in PALETTE]
    assert len(types) == len(set(types))


def test_palette_categories():
    grouped = palette_by_category()
    assert {"navigation", "hero", "layout", "content", "media", "business", "interactive",
            "ecommerce", "widgets"} == set(grouped)
    assert "button" in [item.type for item in grouped["interactive"]]


def test_complete_props_block_wins_and_none_is_absent():
    props = complete_props("button", {"text": "Buy", "link": None, "extra": 1})
    assert props["text"] == "Buy"
    assert props["link"] == "#"
    assert props["extra"] == 1
    assert props["variant"] == "primary"


def test_create_block_defaults_are_copies():
    a = create_block("faq")
    b = create_block("faq", order=3, title="Questions")
    a.props["items"].append({"question": "x", "answer": "y"})
    assert len(b.props["items"]) == 2
    assert b.order == 3
    assert b.props["title"] == "Questions"


# ── Rendu de tous les types ──────────────────────────────────────────────────

@pytest.mark.parametrize("mode", ["editing", "published"])
@pytest.mark.parametrize("block_type", [item.type for item in PALETTE])
def test_every_type_renders_with_defaults(block_type, mode):
    html = to_html(render_block(create_block(block_type), THEME, mode))
    assert "wb-block-error" not in html
    assert "wb-unknown-block" not in html


@pytest.mark.parametrize("block_type", [item.type for item in PALETTE])
def test_every_type_renders_with_empty_props(block_type):
    html = to_html(render_block(Block(type=block_type, props={}), THEME, "published"))
    assert "wb-block-error" not in html


# ── Placeholders ─────────────────────────────────────────────────────────────

def test_unknown_type_fallback():
    node = render_block(Block(id="b1", type="unknown-x"), THEME, "published")
    assert node.attrs["class"] == "wb-unknown-block"
    assert node.text() == "Unknown block type: unknown-x"


def test_unknown_type_does_not_break_siblings():
    nodes = render_blocks([
        Block(id="a", type="unknown-x", order=0),
        Block(id="b", type="heading", props={"text": "Still here"}, order=1),
    ], THEME)
    assert "Still here" in to_html(nodes[1])


def test_renderer_exception_becomes_error_node():
    @register("test-boom")
    def boom(props, theme, ctx):
        raise RuntimeError("boom")

    try:
        nodes = render_blocks([
            Block(id="x", type="test-boom", order=0),
            Block(id="y", type="heading", props={"text": "After"}, order=1),
        ], THEME)
    finally:
        unregister("test-boom")
    assert nodes[0].attrs["class"] == "wb-block-error"
    assert "After" in to_html(nodes[1])


# ── Thème, ordre, visibilité ─────────────────────────────────────────────────

def test_same_theme_instance_passed_to_every_block():
    seen = []

    @register("test-spy")
    def spy(props, theme, ctx):
        seen.append(theme)
        return h("div", ctx.children())

    theme = SiteTheme(primary_color="#123456")
    page = SitePage(blocks=[
        Block(type="test-spy", children=[Block(type="test-spy")]),
        Block(type="test-spy", order=1),
    ])
    try:
        render_page(page, theme, "published")
    finally:
        unregister("test-spy")
    assert len(seen) == 3
    assert all(t is theme for t in seen)


def test_blocks_rendered_in_order():
    nodes = render_blocks([
        Block(id="c", type="spacer", order=2),
        Block(id="a", type="spacer", order=0),
        Block(id="b", type="spacer", order=1),
    ], THEME)
    assert [n.attrs["id"] for n in nodes] == ["a", "b", "c"]


def test_nested_children_rendered_in_order():
    block = Block(id="s", type="section", children=[
        Block(type="heading", props={"text": "Second"}, order=1),
        Block(type="heading", props={"text": "First"}, order=0),
    ])
    html = to_html(render_block(block, THEME))
    assert html.index("First") < html.index("Second")


def test_canvas_without_binder_shares_one_binder():
    block = Block(id="s", type="section", children=[
        Block(id="h1", type="heading", props={"text": "One"}, order=0),
        Block(id="h2", type="heading", props={"text": "Two"}, order=1),
    ])
    bindings = find_bindings(render_block(block, THEME, "editing"))
    assert {b.block_id for b in bindings} >= {"h1", "h2"}
    assert len({id(b.binder) for b in bindings}) == 1

    siblings = render_blocks([Block(id="a", type="heading"), Block(id="b", type="heading")], THEME, "editing")
    assert len({id(b.binder) for node in siblings for b in find_bindings(node)}) == 1


def test_hidden_on_all_devices():
    block = Block(id="h", type="heading", props={"text": "Ghost"},
                  hidden={"desktop": True, "tablet": True, "mobile": True})
    assert to_html(render_block(block, THEME, "published")) == ""
    assert "Ghost" in to_html(render_block(block, THEME, "editing"))


def test_hidden_on_some_devices_adds_classes():
    block = Block(id="h", type="heading", props={"text": "Desk"}, hidden={"mobile": True})
    node = render_block(block, THEME, "published")
    assert "wb-hide-mobile" in node.attrs["class"]
    assert "wb-hide-desktop" not in node.attrs["class"]


def test_anchor_id_used_as_element_id():
    node = render_block(Block(id="s1", type="section", props={"anchorId": "pricing"}), THEME)
    assert node.attrs["id"] == "pricing"
    assert render_block(Block(id="s2", type="section"), THEME).attrs["id"] == "s2"


def test_editing_mode_marks_block_root():
    node = render_block(Block(id="b1", type="heading"), THEME, "editing")
    assert node.attrs["data-wb-block-id"] == "b1"
    assert node.attrs["data-wb-block-type"] == "heading"
    published = render_block(Block(id="b1", type="heading"), THEME, "published")
    assert "data-wb-block-id" not in published.attrs


def test_missing_props_completed_from_palette():
    html = to_html(render_block(Block(type="button", props={}), THEME))
    assert "Click Me" in html
