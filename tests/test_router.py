"""Tests router FastAPI — rendu, validation, publication, actions, catalogue."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from site_builder.router import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


PAGE = {"id": "home", "blocks": [{"id": "b1", "type": "heading", "props": {"text": "Hello"}}]}


def test_render_fragment(client):
    r = client.post("/site-builder/render", json={"page": PAGE})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Hello" in r.text
    assert "<!DOCTYPE html>" not in r.text


def test_render_full_document(client):
    r = client.post("/site-builder/render", json={"page": PAGE, "fullDocument": True,
                                                  "theme": {"primaryColor": "#10b981"}})
    assert r.status_code == 200
    assert r.text.startswith("<!DOCTYPE html>")
    assert "--wb-color-primary: #10b981;" in r.text


def test_render_editing_mode(client):
    r = client.post("/site-builder/render", json={"page": PAGE, "mode": "editing"})
    assert 'contenteditable="true"' in r.text


def test_render_invalid_payload(client):
    r = client.post("/site-builder/render", json={"page": {"blocks": "nope"}})
    assert r.status_code == 422
    assert r.json()["valid"] is False


def test_validate_ok(client):
    r = client.post("/site-builder/validate", json={"page": PAGE})
    assert r.json() == {"valid": True, "issues": []}


def test_validate_reports_errors(client):
    page = {"blocks": [{"id": "h", "type": "heading", "props": {"text": ""}}]}
    body = client.post("/site-builder/validate", json={"page": page}).json()
    assert body["valid"] is False
    assert body["issues"][0]["block_id"] == "h"
    assert body["issues"][0]["severity"] == "error"


def test_validate_invalid_structure(client):
    body = client.post("/site-builder/validate", json={"page": {"blocks": [{"props": {}}]}}).json()
    assert body["valid"] is False
    assert "error" in body


def test_publish(client):
    site = {"name": "Acme", "pages": [{"id": "home", "isHomePage": True, "blocks": PAGE["blocks"]},
                                      {"id": "about", "slug": "about"}]}
    files = client.post("/site-builder/publish", json=site).json()["files"]
    assert set(files) == {"styles.css", "index.html", "about/index.html"}
    assert "Hello" in files["index.html"]


def test_resolve_action(client):
    r = client.post("/site-builder/resolve-action",
                    json={"action": {"type": "url", "url": "https://x.io", "openInNewTab": True}})
    body = r.json()
    assert body["kind"] == "open"
    assert body["attrs"]["target"] == "_blank"


def test_resolve_page_action_with_site(client):
    site = {"pages": [{"id": "home", "isHomePage": True}, {"id": "about", "slug": "about"}]}
    body = client.post("/site-builder/resolve-action",
                       json={"action": {"type": "page", "pageId": "about"}, "site": site, "pageId": "home"}).json()
    assert body["kind"] == "navigate"
    assert body["target"] == "about"
    assert body["attrs"]["href"] == "/about/"


def test_catalog(client):
    body = client.get("/site-builder/catalog").json()
    assert "button" in body["types"]
    assert "interactive" in body["categories"]


def test_catalog_lists_theme_presets(client):
    themes = client.get("/site-builder/catalog").json()["themes"]
    assert themes["saas"]["primaryColor"] == "#2563eb"
    assert "saas_dark" in themes
