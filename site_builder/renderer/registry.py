"""
Registry & dispatcher des blocs — table type → fonction de rendu.

Ajouter un type de bloc = une insertion dans la table :

    @register("hero")
    def render_hero(props, theme, ctx): ...

render_block() complète les props depuis la palette, transmet le thème par
référence et ne lève jamais : type inconnu ou renderer en échec → placeholder
visible, les blocs voisins continuent d'être rendus.
"""
import logging
from typing import Callable, Dict, List, Optional

from ..actions.resolver import NavigationContext
from ..core.schemas import Block, SiteTheme
from ..editing.session import EditSessionBinder
from ..palette import complete_props
from .base import BlockRenderer
from .context import BlockContext, RenderMode
from .nodes import Node, fragment, h

log = logging.getLogger(__name__)

_RENDERERS: Dict[str, BlockRenderer] = {}

_DEVICES = ("desktop", "tablet", "mobile")


def register(*block_types: str) -> Callable[[BlockRenderer], BlockRenderer]:
    """Décorateur : enregistre un renderer pour un ou plusieurs types."""
    def decorator(fn: BlockRenderer) -> BlockRenderer:
        for block_type in block_types:
            _RENDERERS[block_type] = fn
        return fn
    return decorator


def unregister(block_type: str) -> None:
    _RENDERERS.pop(block_type, None)


def get_renderer(block_type: str) -> Optional[BlockRenderer]:
    return _RENDERERS.get(block_type)


def registered_types() -> List[str]:
    return sorted(_RENDERERS)


# ── Placeholders ────────────────────────────────────────────────────────────

def fallback_node(block: Block) -> Node:
    """Stub déterministe pour un type non enregistré."""
    return h(
        "div",
        f"Unknown block type: {block.type}",
        class_="wb-unknown-block",
        role="note",
        data_wb_block_id=block.id,
        data_wb_block_type=block.type,
    )


def error_node(block: Block) -> Node:
    return h(
        "div",
        f"Block could not be rendered: {block.type}",
        class_="wb-block-error",
        role="note",
        data_wb_block_id=block.id,
        data_wb_block_type=block.type,
    )


# ── Dispatch ────────────────────────────────────────────────────────────────

def _decorate(node: Node, block: Block, mode: RenderMode) -> Node:
    hidden = [f"wb-hide-{d}" for d in _DEVICES if block.hidden.get(d)]
    if not node.tag:
        if not hidden and mode != "editing":
            return node
        node = h("div", *node.children)
    if hidden:
        current = node.attrs.get("class") or ""
        node.attrs["class"] = " ".join(c for c in [current, *hidden] if c)
    anchor = block.props.get("anchorId")
    if "id" not in node.attrs:
        node.attrs["id"] = anchor if isinstance(anchor, str) and anchor else block.id
    if mode == "editing":
        node.attrs["data-wb-block-id"] = block.id
        node.attrs["data-wb-block-type"] = block.type
    return node


def render_block(
    block: Block,
    theme: SiteTheme,
    mode: RenderMode = "published",
    *,
    navigation: Optional[NavigationContext] = None,
    binder: Optional[EditSessionBinder] = None,
) -> Node:
    """
    Rend un bloc dans le mode demandé.

    Args:
        block: bloc (type éventuellement inconnu, props éventuellement partielles)
        theme: SiteTheme partagé par référence avec tous les blocs de la passe
        mode: "editing" (canvas) ou "published"
        navigation: pages/ancres pour la résolution des actions
        binder: binder d'édition (canvas uniquement)

    Returns:
        Node — jamais d'exception
    """
    renderer = _RENDERERS.get(block.type)
    if renderer is None:
        log.warning("Type de bloc non enregistré %r (bloc %s) → placeholder", block.type, block.id)
        return fallback_node(block)

    if block.hidden and all(block.hidden.get(d) for d in _DEVICES) and mode == "published":
        return fragment()

    if mode == "editing" and binder is None:
        # Un seul binder pour tout le sous-arbre
        log.debug("Rendu canvas de %s sans binder → binder local", block.id)
        binder = EditSessionBinder()

    def render_child(child: Block) -> Node:
        return render_block(child, theme, mode, navigation=navigation, binder=binder)

    ctx = BlockContext(block.id, mode, navigation=navigation, binder=binder, render_child=render_child,
                       child_blocks=block.children, block_type=block.type)
    props = complete_props(block.type, block.props)
    try:
        node = renderer(props, theme, ctx)
    except Exception:
        log.exception("Rendu du bloc %s (%s) en échec → placeholder", block.id, block.type)
        return error_node(block)
    return _decorate(node if node is not None else fragment(), block, mode)


def render_blocks(
    blocks: List[Block],
    theme: SiteTheme,
    mode: RenderMode = "published",
    *,
    navigation: Optional[NavigationContext] = None,
    binder: Optional[EditSessionBinder] = None,
) -> List[Node]:
    """Rend une séquence de blocs strictement dans l'ordre (`order`, puis position)."""
    if mode == "editing" and binder is None:
        binder = EditSessionBinder()
    return [
        render_block(b, theme, mode, navigation=navigation, binder=binder)
        for b in sorted(blocks, key=lambda b: b.order)
    ]
