"""
Palette — catalogue des types de blocs et de leurs props par défaut.

Sert à instancier de nouveaux blocs (create_block) et à compléter au rendu
les sacs de props incomplets (blocs créés avec un ancien schéma).
"""
import copy
from typing import Any, Dict, List, Mapping, Optional

from ..core.schemas import Block
from .base import PaletteItem
from .business import BUSINESS_PALETTE
from .commerce import ECOMMERCE_PALETTE, WIDGETS_PALETTE
from .content import CONTENT_PALETTE
from .interactive import INTERACTIVE_PALETTE
from .layout import HERO_PALETTE, LAYOUT_PALETTE
from .media import MEDIA_PALETTE
from .navigation import NAVIGATION_PALETTE

PALETTE: List[PaletteItem] = [
    *NAVIGATION_PALETTE,
    *HERO_PALETTE,
    *LAYOUT_PALETTE,
    *CONTENT_PALETTE,
    *MEDIA_PALETTE,
    *BUSINESS_PALETTE,
    *INTERACTIVE_PALETTE,
    *ECOMMERCE_PALETTE,
    *WIDGETS_PALETTE,
]

_BY_TYPE: Dict[str, PaletteItem] = {item.type: item for item in PALETTE}


def palette_item(block_type: str) -> Optional[PaletteItem]:
    return _BY_TYPE.get(block_type)


def palette_types() -> List[str]:
    return sorted(_BY_TYPE)


def default_props(block_type: str) -> Dict[str, Any]:
    """Copie profonde des props par défaut ({} pour un type inconnu)."""
    item = _BY_TYPE.get(block_type)
    return copy.deepcopy(item.default_props) if item else {}


def complete_props(block_type: str, props: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Props du bloc complétées par les valeurs par défaut du type.
    Les clés du bloc gagnent (clés inconnues comprises) ; une valeur None
    est considérée comme absente.
    """
    merged = default_props(block_type)
    for key, value in (props or {}).items():
        if value is None and key in merged:
            continue
        merged[key] = value
    return merged


def create_block(block_type: str, order: int = 0, **overrides: Any) -> Block:
    """Nouveau bloc initialisé depuis la palette (overrides appliqués aux props)."""
    props = default_props(block_type)
    props.update(overrides)
    return Block(type=block_type, props=props, order=order)


def palette_by_category() -> Dict[str, List[PaletteItem]]:
    grouped: Dict[str, List[PaletteItem]] = {}
    for item in PALETTE:
        grouped.setdefault(item.category, []).append(item)
    return grouped


__all__ = [
    "PALETTE",
    "PaletteItem",
    "palette_item",
    "palette_types",
    "default_props",
    "complete_props",
    "create_block",
    "palette_by_category",
]
