"""Tests édition en place — sessions, patchs, collections."""
import pytest

from site_builder.core.schemas import Block, Site, SitePage
from site_builder.editing import (
    EditSessionBinder, EditSessionError, PatchEvent, apply_patch, apply_patches, apply_site_patch,
)


# ── Champs simples ───────────────────────────────────────────────────────────

def test_commit_changed_value_emits_one_patch():
    binder = EditSessionBinder()
    binding = binder.field("b1", "text", "Go")
    session = binding.focus()
    session.input("Go!")
    session.input("Go now")
    assert binder.history == []
    patch = session.commit()
    assert patch == PatchEvent(block_id="b1", prop_key="text", new_value="Go now")
    assert binder.history == [patch]


def test_commit_unchanged_value_emits_nothing():
    binder = EditSessionBinder()
    assert binder.field("b1", "text", "Go").on_commit("Go") is None
    assert binder.history == []


def test_abandon_drops_pending_value():
    binder = EditSessionBinder()
    binding = binder.field("b1", "text", "Go")
    session = binding.focus()
    session.input("Changed")
    session.abandon()
    assert session.state == "idle"
    assert session.outcome == "abandoned"
    assert binder.history == []
    assert binding.value == "Go"
    assert binder.state_of("b1", "text") == "idle"


def test_session_returns_to_idle_after_commit():
    binder = EditSessionBinder()
    session = binder.field("b1", "text", "Go").focus()
    assert session.outcome is None
    session.commit("Gone")
    assert session.state == "idle"
    assert session.outcome == "committed"
    assert binder.state_of("b1", "text") == "idle"


def test_commit_twice_raises():
    binder = EditSessionBinder()
    session = binder.field("b1", "text", "Go").focus()
    session.commit("A")
    with pytest.raises(EditSessionError):
        session.commit("B")
    with pytest.raises(EditSessionError):
        session.input("C")


def test_focus_returns_active_session():
    binder = EditSessionBinder()
    binding = binder.field("b1", "text", "Go")
    assert binding.focus() is binding.focus()
    assert binder.state_of("b1", "text") == "focused"


def test_recommit_same_value_after_commit_is_noop():
    binder = EditSessionBinder()
    binding = binder.field("b1", "text", "Go")
    binding.on_commit("A")
    assert binding.on_commit("A") is None
    assert len(binder.history) == 1


def test_fields_are_independent():
    binder = EditSessionBinder()
    heading = binder.field("b1", "heading", "H").focus()
    sub = binder.field("b1", "subheading", "S").focus()
    heading.input("H2")
    sub.abandon()
    heading.commit()
    assert [p.prop_key for p in binder.history] == ["heading"]


def test_discard_all():
    binder = EditSessionBinder()
    binder.field("b1", "a", 1).focus()
    binder.field("b2", "b", 2).focus()
    assert binder.discard_all() == 2
    assert binder.active_sessions == []
    assert binder.history == []


def test_on_patch_callback_and_drain():
    received = []
    binder = EditSessionBinder(on_patch=received.append)
    binder.field("b1", "text", "x").on_commit("y")
    assert [p.new_value for p in received] == ["y"]
    assert len(binder.drain()) == 1
    assert binder.history == []


# ── Collections ──────────────────────────────────────────────────────────────

def _faq_binder():
    binder = EditSessionBinder()
    items = [{"question": "Q1", "answer": "A1"}, {"question": "Q2", "answer": "A2"}]
    return binder, binder.collection("faq1", "items", items), items


def test_row_field_commit_replaces_whole_list():
    binder, coll, items = _faq_binder()
    binding = coll.row_field(1, "question")
    assert binding.path == "items[1].question"
    patch = binding.on_commit("Q2 edited")
    assert patch.prop_key == "items"
    assert patch.new_value == [{"question": "Q1", "answer": "A1"}, {"question": "Q2 edited", "answer": "A2"}]
    assert items[1]["question"] == "Q2"


def test_row_without_field_path():
    binder = EditSessionBinder()
    coll = binder.collection("l1", "items", ["one", "two"])
    binding = coll.row_field(0, None)
    assert binding.path == "items[0]"
    assert binding.on_commit("uno").new_value == ["uno", "two"]


def test_add_remove_move_rows():
    binder, coll, _ = _faq_binder()
    coll.add_row({"question": "Q3", "answer": "A3"})
    assert [r["question"] for r in coll.rows] == ["Q1", "Q2", "Q3"]
    coll.move_row(2, 0)
    assert [r["question"] for r in coll.rows] == ["Q3", "Q1", "Q2"]
    coll.remove_row(1)
    assert [r["question"] for r in coll.rows] == ["Q3", "Q2"]
    assert len(binder.history) == 3
    assert binder.history[-1].new_value == coll.rows


def test_edit_row_unchanged_is_noop():
    binder, coll, _ = _faq_binder()
    assert coll.edit_row(0, "answer", "A1") is None
    assert coll.edit_row(0, "answer", "New").new_value[0]["answer"] == "New"
    assert len(binder.history) == 1


def test_row_index_out_of_range():
    _, coll, _ = _faq_binder()
    with pytest.raises(EditSessionError):
        coll.remove_row(5)


# ── Application des patchs ───────────────────────────────────────────────────

def test_apply_patch_nested_block():
    page = SitePage(blocks=[Block(id="s", type="section", children=[Block(id="h", type="heading")])])
    assert apply_patch(page, PatchEvent(block_id="h", prop_key="text", new_value="Hi"))
    assert page.find_block("h").props["text"] == "Hi"


def test_apply_patch_unknown_block():
    page = SitePage(blocks=[Block(id="b1", type="heading")])
    assert apply_patch(page, PatchEvent(block_id="zz", prop_key="text", new_value="x")) is False


def test_last_commit_wins():
    page = SitePage(blocks=[Block(id="b1", type="heading", props={"text": "0"})])
    binder = EditSessionBinder()
    binder.field("b1", "text", "0").on_commit("A")
    binder.field("b1", "text", "A").on_commit("B")
    assert apply_patches(page, binder.drain()) == 2
    assert page.find_block("b1").props["text"] == "B"


def test_apply_site_patch_finds_page():
    site = Site(pages=[SitePage(id="p1"), SitePage(id="p2", blocks=[Block(id="b9", type="heading")])])
    assert apply_site_patch(site, PatchEvent(block_id="b9", prop_key="level", new_value=3))
    assert site.page("p2").find_block("b9").props["level"] == 3
    assert apply_site_patch(site, PatchEvent(block_id="nope", prop_key="x")) is False
