"""
Contexte de rendu d'un bloc — troisième paramètre des renderers.

Porte le mode (editing | published), la session d'édition (canvas seulement)
et le contexte de navigation. Les renderers passent par lui pour produire
les régions éditables, le contenu riche sanitizé et les éléments cliquables,
ce qui garde la dualité canvas/publication hors du code des blocs.
"""
from typing import Any, Callable, List, Literal, Mapping, Optional, Sequence

from ..actions.resolver import ActionEffect, NavigationContext, resolve_props
from ..core.sanitize import sanitize_html
from ..editing.session import CollectionBinding, EditSessionBinder
from .nodes import Node, Raw, h

RenderMode = Literal["editing", "published"]


class BlockContext:
    def __init__(
        self,
        block_id: str,
        mode: RenderMode = "published",
        navigation: Optional[NavigationContext] = None,
        binder: Optional[EditSessionBinder] = None,
        render_child: Optional[Callable[[Any], Node]] = None,
        child_blocks: Sequence[Any] = (),
        block_type: str = "",
    ):
        self.block_id = block_id
        self.block_type = block_type
        self.mode = mode
        self.navigation = navigation or NavigationContext()
        self.binder = binder if mode == "editing" else None
        if mode == "editing" and self.binder is None:
            self.binder = EditSessionBinder()
        self._render_child = render_child
        self._child_blocks = list(child_blocks)
        self._collections = {}

    @property
    def editing(self) -> bool:
        return self.mode == "editing"

    # ── Régions éditables ────────────────────────────────────────────────────

    def _editable(self, node: Node, key: str, binding) -> Node:
        node.attrs["contenteditable"] = "true"
        node.attrs["data-wb-field"] = key
        node.binding = binding
        return node

    def text(self, tag: str, key: str, value: Any, **attrs) -> Node:
        """Texte simple props[key] ; éditable en place dans le canvas."""
        node = h(tag, "" if value is None else str(value), **attrs)
        if self.editing:
            self._editable(node, key, self.binder.field(self.block_id, key, value))
        return node

    def rich(self, tag: str, key: str, value: Any, **attrs) -> Node:
        """Contenu HTML libre props[key], toujours sanitizé avant rendu."""
        node = h(tag, Raw(html=sanitize_html("" if value is None else str(value))), **attrs)
        if self.editing:
            self._editable(node, key, self.binder.field(self.block_id, key, value))
        return node

    def rows(self, key: str, rows: Sequence[Any]) -> Optional[CollectionBinding]:
        """Binding de collection (une instance par prop et par rendu)."""
        if not self.editing:
            return None
        if key not in self._collections:
            self._collections[key] = self.binder.collection(self.block_id, key, rows)
        return self._collections[key]

    def row_text(self, tag: str, key: str, rows: Sequence[Any], index: int, field: Optional[str], **attrs) -> Node:
        """Texte d'une ligne de collection ; le commit remplace toute la collection."""
        row = rows[index]
        value = row if field is None else (row.get(field) if isinstance(row, Mapping) else None)
        node = h(tag, "" if value is None else str(value), **attrs)
        if self.editing:
            binding = self.rows(key, rows).row_field(index, field)
            self._editable(node, f"{key}[{index}]" + (f".{field}" if field else ""), binding)
        return node

    def row_rich(self, tag: str, key: str, rows: Sequence[Any], index: int, field: str, **attrs) -> Node:
        row = rows[index]
        value = row.get(field) if isinstance(row, Mapping) else None
        node = h(tag, Raw(html=sanitize_html("" if value is None else str(value))), **attrs)
        if self.editing:
            binding = self.rows(key, rows).row_field(index, field)
            self._editable(node, f"{key}[{index}].{field}", binding)
        return node

    def collection(self, tag: str, key: str, rows: Sequence[Any], *children, **attrs) -> Node:
        """Conteneur d'une collection ; porte le binding add/remove/move en canvas."""
        node = h(tag, *children, **attrs)
        if self.editing:
            node.attrs["data-wb-collection"] = key
            node.binding = self.rows(key, rows)
        return node

    # ── Éléments cliquables ──────────────────────────────────────────────────

    def effect(self, props: Mapping[str, Any], action_key: str = "action", link_key: str = "link") -> ActionEffect:
        return resolve_props(props, self.navigation, action_key=action_key, link_key=link_key)

    def link(
        self,
        props: Mapping[str, Any],
        *children,
        action_key: str = "action",
        link_key: str = "link",
        tag: str = "a",
        **attrs,
    ) -> Node:
        """
        Élément cliquable : l'effet résolu est attaché au nœud.
        Publication → href/target statiques ; canvas → pas de navigation,
        la cible est exposée en data-wb-href.
        """
        effect = self.effect(props, action_key=action_key, link_key=link_key)
        node = h(tag, *children, **attrs)
        node.effect = effect
        if self.editing:
            node.attrs["data-wb-effect"] = effect.kind
            if effect.href():
                node.attrs["data-wb-href"] = effect.href()
        elif tag == "a":
            node.attrs.update(effect.html_attrs())
        else:
            node.attrs.update({k: v for k, v in effect.html_attrs().items() if k != "href"})
            if effect.href():
                node.attrs["data-wb-href"] = effect.href()
        return node

    # ── Conteneurs ───────────────────────────────────────────────────────────

    def children(self, blocks: Optional[Sequence[Any]] = None) -> List[Node]:
        """Rend les blocs enfants (ceux du bloc courant par défaut), dans l'ordre."""
        if self._render_child is None:
            return []
        blocks = self._child_blocks if blocks is None else blocks
        return [self._render_child(child) for child in sorted(blocks, key=lambda b: b.order)]
