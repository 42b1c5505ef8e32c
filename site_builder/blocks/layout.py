"""Blocs de mise en page. Les conteneurs rendent leurs enfants via ctx.children()."""
from ..core.theme import cascade
from ..renderer.nodes import h, style
from ..renderer.registry import register
from ._common import as_int


@register("section")
def render_section(props, theme, ctx):
    pad = as_int(props.get("padding"), 64, 0)
    return h(
        "section",
        h("div", *ctx.children(), class_="wb-container",
          style=style(max_width=f"{as_int(props.get('maxWidth'), 1200, 320)}px", margin="0 auto")),
        class_="wb-section",
        style=style(background_color=cascade(props, "bgColor", None), padding=f"{pad}px 24px",
                    color=theme.text_color, font_family=theme.body_font),
    )


@register("columns")
def render_columns(props, theme, ctx):
    cols = as_int(props.get("columns"), 2, 1, 6)
    return h("div", *ctx.children(), class_="wb-columns", style=style(
        display="grid", grid_template_columns=f"repeat({cols}, minmax(0, 1fr))",
        gap=f"{as_int(props.get('gap'), 24, 0)}px", padding="0 24px",
    ))


@register("spacer")
def render_spacer(props, theme, ctx):
    return h("div", class_="wb-spacer", aria_hidden="true",
             style=style(height=f"{as_int(props.get('height'), 48, 0)}px"))


@register("divider")
def render_divider(props, theme, ctx):
    line = cascade(props, "color", theme.secondary_color)
    return h("div",
             h("hr", style=style(border="none", border_top=f"{as_int(props.get('thickness'), 1, 1)}px solid {line}", margin="0")),
             class_="wb-divider",
             style=style(background_color=cascade(props, "bgColor", None), padding="16px 24px"))


@register("sticky")
def render_sticky(props, theme, ctx):
    return h("div", *ctx.children(), class_="wb-sticky",
             style=style(position="sticky", top=f"{as_int(props.get('offset'), 0)}px", z_index="40"))
