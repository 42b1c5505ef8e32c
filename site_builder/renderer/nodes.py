"""
Arbre de rendu — nœuds produits par les renderers de blocs, sérialisés en HTML.

Un nœud canvas peut porter un `binding` (champ éditable) ; un nœud cliquable
porte son `effect` résolu. Le texte est échappé à la sérialisation ; seul
`Raw` (contenu déjà sanitizé) passe tel quel.
"""
from html import escape
from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..actions.resolver import ActionEffect

VOID_TAGS = {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}


class Raw(BaseModel):
    """Fragment HTML déjà sûr (sanitizé ou généré par le moteur)."""
    html: str = ""


class Node(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    tag: str = ""                     # "" → fragment (enfants seuls)
    attrs: Dict[str, Any] = Field(default_factory=dict)
    children: List[Union["Node", Raw, str]] = Field(default_factory=list)
    binding: Optional[Any] = None     # FieldBinding / CollectionBinding (canvas)
    effect: Optional[ActionEffect] = None

    def walk(self) -> Iterator["Node"]:
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.walk()

    def text(self) -> str:
        """Texte brut concaténé (hors Raw)."""
        return "".join(c if isinstance(c, str) else c.text() for c in self.children if not isinstance(c, Raw))


Node.model_rebuild()


def _flatten(children) -> List[Union[Node, Raw, str]]:
    out: List[Union[Node, Raw, str]] = []
    for child in children:
        if child is None or child is False:
            continue
        if isinstance(child, (list, tuple)):
            out.extend(_flatten(child))
        elif isinstance(child, (Node, Raw, str)):
            out.append(child)
        else:
            out.append(str(child))
    return out


def _attr_name(name: str) -> str:
    if name in ("class_", "cls"):
        return "class"
    return name.rstrip("_").replace("_", "-")


def h(tag: str, *children, **attrs) -> Node:
    """
    Construit un nœud.
        h("a", "Go", href="/x", class_="btn", data_wb_field="text")
    """
    return Node(tag=tag, attrs={_attr_name(k): v for k, v in attrs.items()}, children=_flatten(children))


def fragment(*children) -> Node:
    return Node(tag="", children=_flatten(children))


def style(**props: Any) -> Dict[str, Any]:
    """Dict de style : font_family="X" → {"font-family": "X"} ; valeurs None ignorées."""
    return {k.replace("_", "-"): v for k, v in props.items() if v is not None and v != ""}


# ── Sérialisation ───────────────────────────────────────────────────────────

def _attr_value(name: str, value: Any) -> str:
    if name == "style" and isinstance(value, dict):
        value = "; ".join(f"{k}: {v}" for k, v in value.items() if v is not None and v != "")
    elif name == "class" and isinstance(value, (list, tuple)):
        value = " ".join(v for v in value if v)
    return escape(str(value), quote=True)


def _render_attrs(attrs: Dict[str, Any]) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if name in ("style", "class") and not value:
            continue
        parts.append(f' {name}="{_attr_value(name, value)}"')
    return "".join(parts)


def to_html(node: Union[Node, Raw, str, None]) -> str:
    """Sérialise un arbre en HTML."""
    if node is None:
        return ""
    if isinstance(node, str):
        return escape(node, quote=False)
    if isinstance(node, Raw):
        return node.html
    inner = "".join(to_html(child) for child in node.children)
    if not node.tag:
        return inner
    attrs = _render_attrs(node.attrs)
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


# ── Recherche ───────────────────────────────────────────────────────────────

def find_nodes(root: Node, **attrs: Any) -> List[Node]:
    """Nœuds dont les attributs correspondent (noms avec la convention de h())."""
    wanted = {_attr_name(k): v for k, v in attrs.items()}
    return [n for n in root.walk() if all(n.attrs.get(k) == v for k, v in wanted.items())]


def find_effects(root: Node) -> List[Node]:
    return [n for n in root.walk() if n.effect is not None]


def find_bindings(root: Node) -> List[Any]:
    return [n.binding for n in root.walk() if n.binding is not None]


def find_binding(root: Node, block_id: str, path: str) -> Optional[Any]:
    for binding in find_bindings(root):
        if binding.block_id == block_id and binding.path == path:
            return binding
    return None
