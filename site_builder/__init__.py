"""
Site Builder — moteur de rendu de blocs et de résolution d'actions.

Usage:
    >>> from site_builder import Site, SitePage, Block, render_page, to_html
    >>> page = SitePage(blocks=[Block(id="b1", type="button", props={"text": "Go", "link": "#contact"})])
    >>> html = to_html(render_page(page, Site().theme, "published"))
"""
__version__ = "0.3.0"

from . import blocks  # noqa: F401  (enregistre les renderers)
from .actions import ActionEffect, HandlerRegistry, NavigationContext, action_from_link, resolve
from .builder import SiteBuilder, render_site
from .config import Settings, configure_logging, get_settings
from .core import Block, ComponentAction, Site, SitePage, SiteTheme, cascade, replace_theme, sanitize_html
from .editing import EditSessionBinder, EditSessionError, PatchEvent, apply_patch, apply_patches
from .palette import PALETTE, complete_props, create_block, palette_by_category
from .renderer import publish_site, render_block, render_document, render_page, render_page_html, to_html
from .validation import ValidationIssue, validate_page

__all__ = [
    "__version__",
    "ActionEffect",
    "HandlerRegistry",
    "NavigationContext",
    "action_from_link",
    "resolve",
    "SiteBuilder",
    "render_site",
    "Settings",
    "configure_logging",
    "get_settings",
    "Block",
    "ComponentAction",
    "Site",
    "SitePage",
    "SiteTheme",
    "cascade",
    "replace_theme",
    "sanitize_html",
    "EditSessionBinder",
    "EditSessionError",
    "PatchEvent",
    "apply_patch",
    "apply_patches",
    "PALETTE",
    "complete_props",
    "create_block",
    "palette_by_category",
    "publish_site",
    "render_block",
    "render_document",
    "render_page",
    "render_page_html",
    "to_html",
    "ValidationIssue",
    "validate_page",
]
