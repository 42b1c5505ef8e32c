"""Tests page & site — rendu bout en bout, propagation du thème, édition, publication."""
import pytest

from site_builder import SiteBuilder, render_site
from site_builder.core.schemas import Block, Site, SitePage, SiteTheme
from site_builder.core.theme import replace_theme
from site_builder.renderer import (
    find_binding, find_effects, page_path, publish_site, render_block, render_document, render_page, to_html,
)
from site_builder.renderer.html import HANDLER_SCRIPT


# ── Rendu bout en bout ───────────────────────────────────────────────────────

def test_button_and_unknown_block_end_to_end():
    page = SitePage.model_validate({
        "id": "home",
        "blocks": [
            {"id": "b1", "type": "button", "order": 0, "props": {
                "text": "Go",
                "action": {"type": "url", "url": "https://example.com", "openInNewTab": True},
            }},
            {"id": "b2", "type": "unknown-x", "order": 1, "props": {}},
        ],
    })
    root = render_page(page, SiteTheme(), "published")
    assert root.tag == "main"
    assert len(root.children) == 2

    (link,) = find_effects(root.children[0])
    assert link.effect.kind == "open"
    assert link.effect.new_context is True
    assert link.attrs["target"] == "_blank"
    assert link.attrs["rel"] == "noopener noreferrer"

    assert root.children[1].attrs["class"] == "wb-unknown-block"
    assert "Unknown block type: unknown-x" in to_html(root)


def test_page_root_attributes():
    page = SitePage(id="p1")
    published = render_page(page, SiteTheme(direction="rtl"), "published")
    assert published.attrs["dir"] == "rtl"
    assert published.attrs["data-page-id"] == "p1"
    assert "data-wb-mode" not in published.attrs
    assert render_page(page, SiteTheme(), "editing").attrs["data-wb-mode"] == "editing"


# ── Propagation du thème ─────────────────────────────────────────────────────

def test_primary_color_change_propagates_except_local_overrides():
    old = SiteTheme()
    new = replace_theme(old, primary_color="#10b981")
    banner = Block(id="cta", type="cta-banner")
    themed = Block(id="btn1", type="button")
    local = Block(id="btn2", type="button", props={"color": "#ff0000"})

    banner_old, banner_new = to_html(render_block(banner, old)), to_html(render_block(banner, new))
    assert "#3b82f6" in banner_old
    assert "#10b981" in banner_new and "#3b82f6" not in banner_new

    assert "#10b981" in to_html(render_block(themed, new))
    assert "#3b82f6" not in to_html(render_block(themed, new))

    assert to_html(render_block(local, old)) == to_html(render_block(local, new))


# ── Documents et publication ─────────────────────────────────────────────────

def test_render_document_inlines_stylesheet():
    page = SitePage(id="p1", title="About", blocks=[Block(type="heading", props={"text": "Hello"})])
    site = Site(name="Acme", theme=SiteTheme(direction="rtl"), pages=[page])
    doc = render_document(site, page)
    assert doc.startswith("<!DOCTYPE html>")
    assert 'dir="rtl"' in doc
    assert "<title>About | Acme</title>" in doc
    assert "<style>" in doc
    assert HANDLER_SCRIPT in doc


def test_render_document_editing_has_no_handler_script():
    page = SitePage(id="p1")
    doc = render_document(Site(pages=[page]), page, "editing")
    assert HANDLER_SCRIPT not in doc
    assert 'data-wb-mode="editing"' in doc


def test_page_paths():
    home = SitePage(id="p1", slug="home", is_home_page=True)
    about = SitePage(id="p2", slug="about")
    site = Site(pages=[home, about])
    assert page_path(site, home) == "index.html"
    assert page_path(site, about) == "about/index.html"


def test_publish_layout_and_navigation():
    builder = SiteBuilder(Site(name="Acme"))
    home = builder.add_page("Home", slug="home", is_home_page=True)
    about = builder.add_page("About", slug="about")
    builder.add_block(home.id, "button", text="About us", action={"type": "page", "pageId": about.id})

    files = builder.publish()
    assert set(files) == {"styles.css", "index.html", "about/index.html"}
    assert 'href="/about/"' in files["index.html"]
    assert '<link rel="stylesheet" href="/styles.css">' in files["index.html"]
    assert ":root {" in files["styles.css"]


def test_publish_skips_duplicate_paths():
    site = Site(pages=[
        SitePage(id="home", is_home_page=True, order=0),
        SitePage(id="b", slug="same", title="First", order=1),
        SitePage(id="c", slug="same", title="Second", order=2),
    ])
    files = publish_site(site)
    assert set(files) == {"styles.css", "index.html", "same/index.html"}
    assert "<title>First</title>" in files["same/index.html"]


def test_publish_paths_stay_inside_export_root():
    site = Site(pages=[
        SitePage(id="home", is_home_page=True, order=0, blocks=[
            Block(id="b", type="button", props={"action": {"type": "page", "pageId": "evil"}}),
        ]),
        SitePage(id="evil", slug="../../etc/evil", order=1),
    ])
    files = publish_site(site)
    assert set(files) == {"styles.css", "index.html", "etc-evil/index.html"}
    assert all(".." not in path and not path.startswith("/") for path in files)
    assert 'href="/etc-evil/"' in files["index.html"]


def test_render_site_shortcut():
    site = Site(pages=[SitePage(id="only")])
    assert set(render_site(site)) == {"styles.css", "index.html"}


# ── SiteBuilder ──────────────────────────────────────────────────────────────

def test_canvas_commit_updates_model():
    builder = SiteBuilder()
    page = builder.add_page("Home", is_home_page=True)
    block = builder.add_block(page.id, "heading", text="Old")
    root = builder.canvas(page.id)
    find_binding(root, block.id, "text").on_commit("New")
    assert builder.page(page.id).find_block(block.id).props["text"] == "New"
    assert "New" in builder.render(page.id)


def test_leave_page_discards_pending_edits():
    builder = SiteBuilder()
    page = builder.add_page("Home")
    block = builder.add_block(page.id, "heading", text="Keep")
    session = find_binding(builder.canvas(page.id), block.id, "text").focus()
    session.input("Lost")
    assert builder.leave_page() == 1
    assert builder.page(page.id).find_block(block.id).props["text"] == "Keep"


def test_set_theme_replaces_theme():
    builder = SiteBuilder()
    old = builder.site.theme
    new = builder.set_theme(primary_color="#10b981")
    assert builder.site.theme is new
    assert old.primary_color == "#3b82f6"


def test_set_theme_from_preset():
    builder = SiteBuilder()
    theme = builder.set_theme(preset="saas_dark", border_radius=4)
    assert theme.background_color == "#020617"
    assert theme.border_radius == 4
    with pytest.raises(KeyError):
        builder.set_theme(preset="missing")
    assert builder.site.theme is theme


def test_add_block_appends_in_order():
    builder = SiteBuilder()
    page = builder.add_page("Home")
    first = builder.add_block(page.id, "heading")
    second = builder.add_block(page.id, "paragraph")
    assert (first.order, second.order) == (0, 1)


def test_unknown_page_raises():
    with pytest.raises(KeyError):
        SiteBuilder().page("missing")


def test_builder_validate():
    builder = SiteBuilder()
    page = builder.add_page("Home")
    builder.add_block(page.id, "heading", text="")
    assert [i.severity for i in builder.validate(page.id)] == ["error"]
