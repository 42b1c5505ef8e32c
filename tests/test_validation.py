"""Tests validation — règles par bloc, actions (cibles, champs ignorés), page complète."""
from site_builder.core.schemas import Block, Site, SitePage
from site_builder.validation import has_errors, validate_block, validate_page


def _site_with(*blocks):
    home = SitePage(id="home", slug="home", is_home_page=True, blocks=list(blocks))
    about = SitePage(id="about", slug="about")
    return Site(pages=[home, about]), home


def _messages(issues):
    return [i.message for i in issues]


# ── Règles par type ──────────────────────────────────────────────────────────

def test_default_heading_is_clean():
    assert validate_block(Block(type="heading")) == []


def test_empty_heading_is_error():
    issues = validate_block(Block(type="heading", props={"text": "  "}))
    assert has_errors(issues)
    assert issues[0].field == "text"


def test_heading_level_out_of_range():
    issues = validate_block(Block(type="heading", props={"level": 7}))
    assert [i.severity for i in issues] == ["warning"]


def test_button_without_target_warns():
    issues = validate_block(Block(type="button"))
    assert "Button does nothing when clicked" in _messages(issues)
    assert not has_errors(issues)


def test_button_with_legacy_link_is_clean():
    assert validate_block(Block(type="button", props={"link": "https://example.com"})) == []


def test_image_missing_alt():
    issues = validate_block(Block(type="image", props={"src": "https://cdn.example.com/a.png"}))
    assert [i.field for i in issues] == ["alt"]


def test_contact_form_webhook_scheme():
    issues = validate_block(Block(type="contact-form", props={"webhookUrl": "ftp://files.example.com"}))
    assert has_errors(issues)
    issues = validate_block(Block(type="contact-form"))
    assert [i.severity for i in issues] == ["warning"]
    assert validate_block(Block(type="contact-form", props={"emailTo": "team@example.com"})) == []


def test_custom_html_with_script_warns():
    issues = validate_block(Block(type="custom-html", props={"html": "<p>Hi</p><script>x()</script>"}))
    assert [i.field for i in issues] == ["html"]


def test_faq_incomplete_item():
    issues = validate_block(Block(type="faq", props={"items": [{"question": "Q", "answer": ""}]}))
    assert issues[0].field == "items[0]"


def test_unknown_block_type_warns():
    issues = validate_block(Block(type="unknown-x"))
    assert [i.severity for i in issues] == ["warning"]


# ── Actions ──────────────────────────────────────────────────────────────────

def test_action_to_missing_page_is_error():
    block = Block(id="b1", type="button", props={"action": {"type": "page", "pageId": "deleted"}})
    site, home = _site_with(block)
    issues = validate_page(home, site)
    assert has_errors(issues)
    assert issues[0].block_id == "b1"
    assert issues[0].field == "action"


def test_action_to_existing_page_is_clean():
    site, home = _site_with(Block(type="button", props={"action": {"type": "page", "pageId": "about"}}))
    assert validate_page(home, site) == []


def test_stale_fields_reported_as_info():
    block = Block(type="button", props={"action": {"type": "page", "pageId": "about", "url": "https://old.example.com"}})
    site, home = _site_with(block)
    issues = validate_page(home, site)
    assert [i.severity for i in issues] == ["info"]
    assert "url" in issues[0].message


def test_section_action_anchor():
    target = Block(id="pricing-block", type="pricing", order=1)
    ok = Block(type="button", props={"action": {"type": "section", "sectionId": "pricing-block"}})
    missing = Block(type="button", props={"action": {"type": "section", "sectionId": "nowhere"}})
    site, home = _site_with(ok, missing, target)
    issues = validate_page(home, site)
    assert [(i.block_id, i.severity) for i in issues] == [(missing.id, "warning")]


def test_unsafe_url_action_is_error():
    issues = validate_block(Block(type="button", props={"action": {"type": "url", "url": "javascript:alert(1)"}}))
    assert has_errors(issues)


def test_unsupported_action_type_warns():
    issues = validate_block(Block(type="button", props={"action": {"type": "modal", "modalId": "m1"}}))
    assert "not supported" in issues[0].message


def test_cta_action_checked():
    issues = validate_block(Block(type="hero", props={"ctaAction": {"type": "email"}}))
    assert [(i.field, i.severity) for i in issues] == [("ctaAction", "error")]


# ── Page ─────────────────────────────────────────────────────────────────────

def test_nested_children_validated():
    child = Block(id="inner", type="heading", props={"text": ""})
    page = SitePage(blocks=[Block(type="section", children=[child])])
    issues = validate_page(page)
    assert [i.block_id for i in issues] == ["inner"]


# ── Page ─────────────────────────────────────────────────────────────────────

def test_unsafe_slug_warns():
    issues = validate_page(SitePage(id="p", slug="../../etc/evil"))
    assert [(i.severity, i.field) for i in issues] == [("warning", "slug")]
    assert "etc-evil" in issues[0].message


def test_clean_slug_is_clean():
    assert validate_page(SitePage(id="p", slug="nos-cafes")) == []
