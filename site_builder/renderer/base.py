"""
Protocol BlockRenderer — signature commune des fonctions de rendu de blocs.
"""
from typing import TYPE_CHECKING, Any, Dict, Protocol, runtime_checkable

from ..core.schemas import SiteTheme

if TYPE_CHECKING:
    from .context import BlockContext
    from .nodes import Node


@runtime_checkable
class BlockRenderer(Protocol):
    def __call__(self, props: Dict[str, Any], theme: SiteTheme, ctx: "BlockContext") -> "Node": ...
