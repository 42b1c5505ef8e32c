"""Helpers partagés par les renderers de blocs."""
from typing import Any, Dict, List, Mapping, Optional

from ..core.schemas import SiteTheme
from ..core.theme import cascade, darken, radius
from ..renderer.context import BlockContext
from ..renderer.nodes import Node, h, style


def as_list(value: Any) -> List[Any]:
    """Collection tolérante : None / valeur isolée → liste."""
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def as_int(value: Any, default: int = 0, low: Optional[int] = None, high: Optional[int] = None) -> int:
    try:
        n = int(float(value))
    except (TypeError, ValueError):
        n = default
    if low is not None:
        n = max(low, n)
    if high is not None:
        n = min(high, n)
    return n


def row_get(row: Any, key: str, default: Any = "") -> Any:
    if isinstance(row, Mapping):
        value = row.get(key)
        return default if value is None else value
    return default


def section(theme: SiteTheme, props: Dict[str, Any], *children, class_: str = "", bg: Optional[str] = None,
            color: Optional[str] = None, padding: str = "64px 24px", max_width: int = 1200, **attrs) -> Node:
    """Enveloppe standard : <section> pleine largeur + conteneur centré."""
    return h(
        "section",
        h("div", *children, class_="wb-container", style=style(max_width=f"{max_width}px", margin="0 auto")),
        class_=f"wb-block {class_}".strip(),
        style=style(
            background_color=cascade(props, "bgColor", bg),
            color=color or theme.text_color,
            font_family=theme.body_font,
            padding=padding,
        ),
        **attrs,
    )


def title_block(ctx: BlockContext, theme: SiteTheme, props: Dict[str, Any],
                title_key: str = "title", subtitle_key: str = "subtitle") -> List[Node]:
    nodes = []
    if props.get(title_key):
        nodes.append(ctx.text(
            "h2", title_key, props[title_key], class_="wb-title",
            style=style(font_family=theme.heading_font, text_align="center", margin="0 0 12px"),
        ))
    if props.get(subtitle_key):
        nodes.append(ctx.text(
            "p", subtitle_key, props[subtitle_key], class_="wb-subtitle",
            style=style(text_align="center", opacity="0.8", margin="0 0 32px"),
        ))
    return nodes


def grid(columns: Any, *children, gap: int = 24, class_: str = "wb-grid") -> Node:
    cols = as_int(columns, 3, 1, 6)
    return h("div", *children, class_=class_, style=style(
        display="grid", grid_template_columns=f"repeat({cols}, minmax(0, 1fr))", gap=f"{gap}px",
    ))


def button_style(theme: SiteTheme, variant: str = "primary", color: str = "", text_color: str = "",
                 size: str = "md") -> Dict[str, Any]:
    """Style d'un bouton ; `color` local prime sur le primary du thème."""
    base = color or theme.primary_color
    padding = {"sm": "6px 14px", "lg": "14px 32px"}.get(size, "10px 22px")
    common = dict(
        display="inline-block", padding=padding, border_radius=radius(theme),
        font_family=theme.body_font, font_weight="600", text_decoration="none", cursor="pointer",
    )
    if variant == "outline":
        return style(**common, background_color="transparent", color=text_color or base, border=f"2px solid {base}")
    if variant == "ghost":
        return style(**common, background_color="transparent", color=text_color or base, border="none")
    if variant == "secondary":
        secondary = color or theme.secondary_color
        return style(**common, background_color=secondary, color=text_color or "#ffffff", border=f"2px solid {secondary}")
    return style(**common, background_color=base, color=text_color or "#ffffff", border=f"2px solid {darken(base, 10)}")


def cta(ctx: BlockContext, theme: SiteTheme, props: Dict[str, Any], text_key: str = "ctaText",
        link_key: str = "ctaLink", action_key: str = "ctaAction", variant: str = "primary",
        color: str = "") -> Optional[Node]:
    """Bouton d'appel à l'action porté par des props plates (ctaText/ctaLink/ctaAction)."""
    if not props.get(text_key):
        return None
    return ctx.link(
        props,
        ctx.text("span", text_key, props[text_key]),
        action_key=action_key,
        link_key=link_key,
        class_=f"wb-btn wb-btn-{variant}",
        style=button_style(theme, variant, color=color),
    )


def row_link(ctx: BlockContext, row: Any, *children, link_key: str = "href", **attrs) -> Node:
    """Lien d'une ligne de collection (action de ligne, sinon href legacy)."""
    return ctx.link(row if isinstance(row, Mapping) else {}, *children, link_key=link_key, **attrs)


def image(src: Any, alt: Any = "", **attrs) -> Optional[Node]:
    if not src:
        return None
    return h("img", src=str(src), alt=str(alt or ""), loading="lazy", **attrs)


def placeholder(label: str, theme: SiteTheme, height: int = 200) -> Node:
    return h("div", label, class_="wb-media-placeholder", style=style(
        display="flex", align_items="center", justify_content="center", min_height=f"{height}px",
        background_color="#f1f5f9", color=theme.secondary_color, border_radius=radius(theme),
    ))
