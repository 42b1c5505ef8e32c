"""
Router FastAPI — endpoints site_builder.

POST /site-builder/render          → page (+ thème / site) → HTMLResponse
POST /site-builder/validate        → page (+ site) → {"valid": bool, "issues" | "error"}
POST /site-builder/publish         → site → {"files": {chemin: contenu}}
POST /site-builder/resolve-action  → action (+ site / page) → effet résolu
GET  /site-builder/catalog         → palette des blocs par catégorie
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from .actions.resolver import NavigationContext, resolve
from .core.schemas import Site, SitePage, SiteTheme, WireModel
from .core.theme import THEME_PRESETS
from .palette import palette_by_category
from .renderer.html import publish_site, render_document, render_page_html
from .renderer.registry import registered_types
from .validation import has_errors, validate_page

log = logging.getLogger(__name__)

router = APIRouter(prefix="/site-builder", tags=["site_builder"])


class RenderRequest(WireModel):
    page: SitePage
    theme: Optional[SiteTheme] = None
    site: Optional[Site] = None
    mode: str = "published"
    full_document: bool = False


class ValidateRequest(WireModel):
    page: SitePage
    site: Optional[Site] = None


class ResolveActionRequest(WireModel):
    action: Optional[Dict[str, Any]] = None
    site: Optional[Site] = None
    page_id: Optional[str] = None


def _error(e: ValidationError) -> JSONResponse:
    return JSONResponse({"valid": False, "error": str(e)}, status_code=422)


@router.post("/render", response_class=HTMLResponse, summary="Rend une page en HTML")
def render(payload: Dict[str, Any] = Body(...)):
    """Page publiée (ou canvas) ; `fullDocument` ajoute <html>/<head> et la feuille de style."""
    try:
        req = RenderRequest.model_validate(payload)
    except ValidationError as e:
        return _error(e)
    mode = "editing" if req.mode == "editing" else "published"
    site = req.site or Site(theme=req.theme or SiteTheme(), pages=[req.page])
    theme = req.theme or site.theme
    if req.full_document:
        return HTMLResponse(content=render_document(site, req.page, mode))
    return HTMLResponse(content=render_page_html(req.page, theme, mode, site=site))


@router.post("/validate", summary="Valide une page sans la rendre")
def validate(payload: Dict[str, Any] = Body(...)) -> dict:
    """Structure (schéma) puis contenu (règles par type de bloc, actions)."""
    try:
        req = ValidateRequest.model_validate(payload)
    except ValidationError as e:
        return {"valid": False, "error": str(e)}
    issues = validate_page(req.page, req.site)
    return {
        "valid": not has_errors(issues),
        "issues": [i.model_dump(exclude_none=True) for i in issues],
    }


@router.post("/publish", summary="Export statique d'un site")
def publish(payload: Dict[str, Any] = Body(...)):
    try:
        site = Site.model_validate(payload)
    except ValidationError as e:
        return _error(e)
    return {"files": publish_site(site)}


@router.post("/resolve-action", summary="Résout une action en effet concret")
def resolve_action(payload: Dict[str, Any] = Body(...)):
    try:
        req = ResolveActionRequest.model_validate(payload)
    except ValidationError as e:
        return _error(e)
    page = req.site.page(req.page_id) if req.site and req.page_id else None
    effect = resolve(req.action, NavigationContext.for_page(req.site, page))
    return {**effect.model_dump(), "attrs": effect.html_attrs()}


@router.get("/catalog", summary="Liste les blocs disponibles et leurs props par défaut")
def catalog() -> JSONResponse:
    """Catalogue de la palette groupé par catégorie, types enregistrés au dispatcher et presets de thème."""
    categories = {
        category: [item.model_dump() for item in items]
        for category, items in palette_by_category().items()
    }
    themes = {name: theme.model_dump(by_alias=True) for name, theme in THEME_PRESETS.items()}
    return JSONResponse({"categories": categories, "types": registered_types(), "themes": themes})
