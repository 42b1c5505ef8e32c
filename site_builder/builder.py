"""
API publique du Site Builder.
"""
import logging
from typing import Dict, List, Optional

from .core.schemas import Block, Site, SitePage, SiteTheme
from .core.theme import replace_theme, theme_preset
from .editing.patches import apply_site_patch
from .editing.session import EditSessionBinder, PatchEvent
from .palette import create_block
from .renderer.html import publish_site, render_document, render_page as _render_page, render_page_html
from .renderer.nodes import Node
from .validation import ValidationIssue, validate_page

log = logging.getLogger(__name__)


class SiteBuilder:
    """
    Façade éditeur : un site, un binder d'édition branché sur le modèle.

    Usage:
        >>> builder = SiteBuilder(Site(name="Acme"))
        >>> page = builder.add_page("Home", is_home_page=True)
        >>> builder.add_block(page.id, "hero", heading="Bienvenue")
        >>> canvas = builder.canvas(page.id)          # Node éditable
        >>> files = builder.publish()                 # {chemin: html}
    """

    def __init__(self, site: Optional[Site] = None):
        """
        Args:
            site: site existant (un site vide est créé sinon)
        """
        self.site = site or Site()
        self.binder = EditSessionBinder(on_patch=self._apply)

    # ── Modèle ──────────────────────────────────────────────────────────────

    def _apply(self, patch: PatchEvent) -> None:
        apply_site_patch(self.site, patch)

    def page(self, page_id: str) -> SitePage:
        page = self.site.page(page_id)
        if page is None:
            raise KeyError(f"Page inconnue : {page_id}")
        return page

    def add_page(self, title: str, slug: str = "", is_home_page: bool = False) -> SitePage:
        page = SitePage(title=title, slug=slug, is_home_page=is_home_page, order=len(self.site.pages))
        self.site.pages.append(page)
        return page

    def add_block(self, page_id: str, block_type: str, **props) -> Block:
        """Ajoute en fin de page un bloc initialisé depuis la palette."""
        page = self.page(page_id)
        order = max((b.order for b in page.blocks), default=-1) + 1
        block = create_block(block_type, order=order, **props)
        page.blocks.append(block)
        return block

    def set_theme(self, preset: Optional[str] = None, **tokens) -> SiteTheme:
        """
        Remplace le thème complet ; les sessions d'édition ouvertes sont abandonnées.
        `preset` part d'un thème prédéfini (KeyError si inconnu), les tokens le surchargent.
        """
        self.binder.discard_all()
        base = theme_preset(preset) if preset else self.site.theme
        self.site.theme = replace_theme(base, **tokens)
        return self.site.theme

    # ── Rendu ───────────────────────────────────────────────────────────────

    def canvas(self, page_id: str) -> Node:
        """Rendu éditable d'une page (bindings reliés au modèle)."""
        return _render_page(self.page(page_id), self.site.theme, "editing", site=self.site, binder=self.binder)

    def leave_page(self) -> int:
        """Navigation hors du canvas : abandonne les éditions non commitées."""
        return self.binder.discard_all()

    def render(self, page_id: str) -> str:
        """HTML publié du corps d'une page."""
        return render_page_html(self.page(page_id), self.site.theme, "published", site=self.site)

    def document(self, page_id: str) -> str:
        return render_document(self.site, self.page(page_id))

    def validate(self, page_id: str) -> List[ValidationIssue]:
        return validate_page(self.page(page_id), self.site)

    def publish(self) -> Dict[str, str]:
        files = publish_site(self.site)
        log.info("Publication de %s : %s", self.site.name or self.site.id, ", ".join(sorted(files)))
        return files


# Fonction raccourcie pour usage direct
def render_site(site: Site) -> Dict[str, str]:
    """Export statique d'un site (fonction raccourcie)."""
    return SiteBuilder(site).publish()
