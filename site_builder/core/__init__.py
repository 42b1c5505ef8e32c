"""Core module pour site_builder."""
from .schemas import (
    ACTION_TYPES,
    Block,
    ComponentAction,
    Site,
    SitePage,
    SiteTheme,
)
from .theme import THEME_PRESETS, cascade, replace_theme, theme_preset, theme_variables
from .sanitize import sanitize_html

__all__ = [
    "ACTION_TYPES",
    "Block",
    "ComponentAction",
    "Site",
    "SitePage",
    "SiteTheme",
    "THEME_PRESETS",
    "cascade",
    "replace_theme",
    "theme_preset",
    "theme_variables",
    "sanitize_html",
]
