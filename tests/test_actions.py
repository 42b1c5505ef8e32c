"""Tests actions — résolution pure, cibles manquantes, liens legacy, handlers custom."""
import pytest

from site_builder.actions import (
    INERT, ActionEffect, HandlerRegistry, NavigationContext, action_from_link, resolve, resolve_props,
)
from site_builder.core.schemas import Block, ComponentAction, Site, SitePage


@pytest.fixture
def nav():
    return NavigationContext(pages={"home": "/", "about": "/about/"}, anchors={"contact", "pricing"})


# ── resolve ──────────────────────────────────────────────────────────────────

def test_resolve_is_pure(nav):
    action = {"type": "url", "url": "https://example.com", "openInNewTab": True}
    first = resolve(action, nav)
    assert resolve(action, nav) == first
    assert action == {"type": "url", "url": "https://example.com", "openInNewTab": True}


def test_page_present_navigates(nav):
    effect = resolve({"type": "page", "pageId": "home"}, nav)
    assert effect.kind == "navigate"
    assert effect.target == "home"
    assert effect.href() == "/"


def test_page_missing_is_inert(nav):
    assert resolve({"type": "page", "pageId": "deleted"}, nav) == INERT
    assert resolve({"type": "page"}, nav).inert


def test_page_without_context_is_inert():
    assert resolve({"type": "page", "pageId": "home"}).inert


def test_url_new_tab(nav):
    effect = resolve({"type": "url", "url": "https://example.com", "openInNewTab": True}, nav)
    assert effect.kind == "open"
    assert effect.new_context is True
    assert effect.html_attrs() == {
        "href": "https://example.com",
        "target": "_blank",
        "rel": "noopener noreferrer",
    }


def test_url_same_tab(nav):
    effect = resolve({"type": "url", "url": "/blog/"}, nav)
    assert effect.kind == "open"
    assert "target" not in effect.html_attrs()


@pytest.mark.parametrize("url", ["javascript:alert(1)", "JavaScript:void(0)", "data:text/html,x", "", "   "])
def test_url_unsafe_or_empty_is_inert(nav, url):
    assert resolve({"type": "url", "url": url}, nav).inert


def test_section(nav):
    effect = resolve({"type": "section", "sectionId": "#contact"}, nav)
    assert effect.kind == "scroll"
    assert effect.href() == "#contact"
    assert resolve({"type": "section", "sectionId": "gone"}, nav).inert


def test_email_and_phone(nav):
    assert resolve({"type": "email", "email": "hello@example.com"}, nav).href() == "mailto:hello@example.com"
    assert resolve({"type": "phone", "phone": "+33 6 12 34 56 78"}, nav).href() == "tel:+33612345678"
    assert resolve({"type": "phone", "phone": "call us"}, nav).inert
    assert resolve({"type": "email"}, nav).inert


def test_download(nav):
    effect = resolve({"type": "download", "fileUrl": "https://cdn.example.com/menu.pdf"}, nav)
    assert effect.kind == "download"
    assert effect.html_attrs()["download"] is True


def test_custom_emits_invoke(nav):
    effect = resolve({"type": "custom", "customHandler": "openChat"}, nav)
    assert effect.kind == "invoke"
    assert effect.html_attrs()["data-wb-handler"] == "openChat"


def test_none_ignores_stale_fields(nav):
    assert resolve({"type": "none", "url": "https://old.example.com", "pageId": "about"}, nav).inert


def test_stale_fields_of_other_types_ignored(nav):
    effect = resolve({"type": "page", "pageId": "about", "url": "https://old.example.com"}, nav)
    assert effect == ActionEffect(kind="navigate", target="about", route="/about/")


@pytest.mark.parametrize("kind", ["modal", "submit", "teleport"])
def test_unknown_type_is_inert(nav, kind):
    assert resolve({"type": kind, "modalId": "m1"}, nav).inert


def test_invalid_descriptor_is_inert(nav):
    assert resolve({"type": "url", "url": "https://x.io", "openInNewTab": "not-a-bool"}, nav).inert
    assert resolve(None, nav).inert


def test_accepts_model_instance(nav):
    action = ComponentAction(type="section", section_id="pricing")
    assert resolve(action, nav).kind == "scroll"


def test_navigation_context_for_page():
    home = SitePage(id="p1", slug="home", is_home_page=True, blocks=[Block(id="b1", type="section")])
    about = SitePage(id="p2", slug="about")
    ctx = NavigationContext.for_page(Site(pages=[home, about]), home)
    assert ctx.pages == {"p1": "/", "p2": "/about/"}
    assert "b1" in ctx.anchors


# ── Liens legacy ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("link, expected", [
    ("#contact", ComponentAction(type="section", section_id="contact")),
    ("mailto:a@b.c", ComponentAction(type="email", email="a@b.c")),
    ("tel:0102", ComponentAction(type="phone", phone="0102")),
    ("/about", ComponentAction(type="url", url="/about")),
    ("#", ComponentAction(type="none")),
    ("", ComponentAction(type="none")),
    (None, ComponentAction(type="none")),
])
def test_action_from_link(link, expected):
    assert action_from_link(link) == expected


def test_resolve_props_explicit_action_wins(nav):
    props = {"link": "#pricing", "action": {"type": "section", "sectionId": "contact"}}
    assert resolve_props(props, nav).target == "contact"


def test_resolve_props_none_action_falls_back_to_link(nav):
    props = {"link": "#pricing", "action": {"type": "none"}}
    assert resolve_props(props, nav).target == "pricing"


def test_resolve_props_custom_keys(nav):
    props = {"ctaLink": "mailto:x@y.z"}
    effect = resolve_props(props, nav, action_key="ctaAction", link_key="ctaLink")
    assert effect.kind == "contact"


# ── HandlerRegistry ──────────────────────────────────────────────────────────

def test_dispatch_registered_handler():
    calls = []
    handlers = HandlerRegistry()
    handlers.register("openChat", lambda **kw: calls.append(kw))
    assert handlers.dispatch(ActionEffect(kind="invoke", target="openChat"), block_id="b1") is True
    assert calls == [{"block_id": "b1"}]


def test_dispatch_unregistered_is_noop():
    assert HandlerRegistry().dispatch(ActionEffect(kind="invoke", target="missing")) is False


def test_dispatch_ignores_other_effects():
    handlers = HandlerRegistry()
    handlers.register("x", lambda **kw: None)
    assert handlers.dispatch(ActionEffect(kind="open", target="x")) is False


def test_dispatch_failing_handler_returns_false():
    def boom(**kw):
        raise RuntimeError("boom")

    handlers = HandlerRegistry()
    handlers.register("boom", boom)
    assert handlers.dispatch(ActionEffect(kind="invoke", target="boom")) is False


def test_registry_names_and_unregister():
    handlers = HandlerRegistry()
    handlers.register("b", lambda **kw: None)
    handlers.register("a", lambda **kw: None)
    assert handlers.names() == ["a", "b"]
    handlers.unregister("a")
    assert "a" not in handlers
    assert "b" in handlers
