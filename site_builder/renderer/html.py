"""
Renderer HTML — page complète, document publié, export statique d'un site.
Dispatch par bloc délégué au registry ; ce module assemble la page.
"""
import logging
from html import escape
from typing import Dict, Optional

from ..actions.resolver import NavigationContext
from ..core.schemas import Site, SitePage, SiteTheme
from ..core.theme import base_stylesheet
from ..editing.session import EditSessionBinder
from .context import RenderMode
from .nodes import Node, h, to_html
from .registry import render_blocks

log = logging.getLogger(__name__)

# Délègue les clics [data-wb-handler] au registre d'handlers de l'hôte (no-op si absent)
HANDLER_SCRIPT = (
    "<script>document.addEventListener('click',function(e){"
    "var el=e.target.closest('[data-wb-handler]');if(!el)return;e.preventDefault();"
    "var hs=window.siteBuilderHandlers||{};var fn=hs[el.getAttribute('data-wb-handler')];"
    "if(typeof fn==='function')fn(el);});</script>"
)


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_page(
    page: SitePage,
    theme: SiteTheme,
    mode: RenderMode = "published",
    *,
    site: Optional[Site] = None,
    binder: Optional[EditSessionBinder] = None,
) -> Node:
    """
    Rend les blocs d'une page dans l'ordre, avec un seul SiteTheme partagé.

    Args:
        page: page à rendre
        theme: thème du site (transmis tel quel à chaque bloc)
        mode: "editing" (canvas) ou "published"
        site: site parent, pour résoudre les actions `page`
        binder: binder d'édition ; créé si absent en mode editing

    Returns:
        Node racine <main class="wb-page">
    """
    if mode == "editing" and binder is None:
        binder = EditSessionBinder()
    navigation = NavigationContext.for_page(site, page)
    blocks = render_blocks(page.blocks, theme, mode, navigation=navigation, binder=binder)
    root = h("main", *blocks, class_="wb-page", dir=theme.direction, data_page_id=page.id)
    if mode == "editing":
        root.attrs["data-wb-mode"] = "editing"
    log.debug("Page %s rendue (%d blocs, mode=%s)", page.id, len(blocks), mode)
    return root


def render_page_html(
    page: SitePage,
    theme: SiteTheme,
    mode: RenderMode = "published",
    *,
    site: Optional[Site] = None,
    binder: Optional[EditSessionBinder] = None,
) -> str:
    """HTML du corps de page (sans <html>/<head>)."""
    return to_html(render_page(page, theme, mode, site=site, binder=binder))


def render_document(
    site: Site,
    page: SitePage,
    mode: RenderMode = "published",
    *,
    stylesheet_href: Optional[str] = None,
    lang: str = "en",
    binder: Optional[EditSessionBinder] = None,
) -> str:
    """
    Génère le HTML complet d'une page du site.
    Sans `stylesheet_href`, la feuille de style est inlinée.
    """
    theme = site.theme
    body = render_page_html(page, theme, mode, site=site, binder=binder)
    if stylesheet_href:
        styles = f'<link rel="stylesheet" href="{escape(stylesheet_href, quote=True)}">'
    else:
        styles = f"<style>{base_stylesheet(theme)}</style>"
    title = escape(" | ".join(t for t in (page.title, site.name) if t) or "Untitled", quote=False)

    return f"""<!DOCTYPE html>
<html lang="{escape(lang, quote=True)}" dir="{theme.direction}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  {styles}
</head>
<body>
{body}
{HANDLER_SCRIPT if mode == "published" else ""}
</body>
</html>"""


def page_path(site: Site, page: SitePage) -> str:
    """Chemin du fichier publié : index.html pour l'accueil, <slug>/index.html sinon."""
    route = site.route_for(page)
    return "index.html" if route == "/" else f"{route.strip('/')}/index.html"


def publish_site(site: Site, *, lang: str = "en") -> Dict[str, str]:
    """
    Export statique du site.

    Returns:
        {chemin relatif: contenu} : styles.css + un index.html par page
    """
    files: Dict[str, str] = {"styles.css": base_stylesheet(site.theme)}
    for page in site.ordered_pages():
        path = page_path(site, page)
        if path in files:
            log.warning("Chemin de publication en double %s (page %s) → ignorée", path, page.id)
            continue
        files[path] = render_document(site, page, "published", stylesheet_href="/styles.css", lang=lang)
    log.info("Site %s publié : %d pages", site.id, len(files) - 1)
    return files
