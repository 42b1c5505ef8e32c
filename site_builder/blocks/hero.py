"""Blocs hero : bannière principale, carrousel, parallaxe."""
from ..core.theme import cascade
from ..renderer.nodes import h, style
from ..renderer.registry import register
from ._common import as_int, as_list, button_style, cta, row_get, row_link

_HEIGHTS = {"small": "320px", "medium": "480px", "large": "640px", "full": "100vh"}


def _background(image_url, fallback_color, overlay):
    if not image_url:
        return style(background_color=fallback_color)
    alpha = as_int(overlay, 50, 0, 100) / 100
    return style(
        background_image=f"linear-gradient(rgba(0,0,0,{alpha}), rgba(0,0,0,{alpha})), url('{image_url}')",
        background_size="cover", background_position="center",
    )


@register("hero")
def render_hero(props, theme, ctx):
    """
    Bannière principale : titre, sous-titre, jusqu'à deux boutons.
    Sans image de fond, la couleur primaire du thème sert de fond.
    """
    align = props.get("alignment") or "center"
    if props.get("variant") == "split":
        align = "left"
    fg = cascade(props, "textColor", "#ffffff")
    return h(
        "section",
        h("div",
          ctx.rich("h1", "heading", props.get("heading"), class_="wb-hero-heading",
                   style=style(font_family=theme.heading_font, font_size="3rem", margin="0 0 16px",
                               color=cascade(props, "headingColor", fg))),
          ctx.text("p", "subheading", props.get("subheading"), class_="wb-hero-subheading",
                   style=style(font_size="1.25rem", opacity="0.9", margin="0 0 32px"))
          if props.get("subheading") else None,
          h("div",
            cta(ctx, theme, props, color=theme.accent_color),
            cta(ctx, theme, props, "secondaryCtaText", "secondaryCtaLink", "secondaryCtaAction", variant="outline",
                color="#ffffff"),
            class_="wb-hero-actions",
            style=style(display="flex", gap="12px", justify_content="center" if align == "center" else "flex-start")),
          class_="wb-hero-content",
          style=style(max_width="960px", margin="0 auto", text_align=align)),
        class_=f"wb-hero wb-hero-{props.get('variant') or 'centered'}",
        style=style(
            **_background(props.get("backgroundImage"), cascade(props, "bgColor", theme.primary_color),
                          props.get("overlayOpacity")),
            min_height=_HEIGHTS.get(props.get("height"), "640px"),
            display="flex", align_items="center", padding="96px 24px",
            color=fg, font_family=theme.body_font,
        ),
    )


@register("carousel")
def render_carousel(props, theme, ctx):
    slides = as_list(props.get("slides"))
    height = _HEIGHTS.get(props.get("height"), "640px")
    rendered = []
    for i, slide in enumerate(slides):
        buttons = as_list(row_get(slide, "buttons", []))
        rendered.append(h(
            "div",
            ctx.row_text("h2", "slides", slides, i, "heading", style=style(font_family=theme.heading_font, font_size="2.5rem")),
            ctx.row_text("p", "slides", slides, i, "subheading"),
            h("div", *[
                row_link(ctx, b, row_get(b, "text"), link_key="link", class_="wb-btn", style=button_style(theme))
                for b in buttons
            ], style=style(display="flex", gap="12px", justify_content="center")),
            class_="wb-slide", data_slide=str(i), aria_hidden="false" if i == 0 else "true",
            style=style(**_background(row_get(slide, "backgroundImage"), theme.primary_color, 40),
                        display="flex" if i == 0 else "none", flex_direction="column", justify_content="center",
                        align_items="center", text_align="center", min_height=height, padding="48px 24px",
                        color="#ffffff"),
        ))
    controls = []
    if props.get("showArrows") and len(slides) > 1:
        controls += [
            h("button", "‹", type="button", class_="wb-carousel-prev", aria_label="Previous slide"),
            h("button", "›", type="button", class_="wb-carousel-next", aria_label="Next slide"),
        ]
    if props.get("showDots") and len(slides) > 1:
        controls.append(h("div", *[
            h("button", type="button", class_="wb-carousel-dot", aria_label=f"Slide {i + 1}") for i in range(len(slides))
        ], class_="wb-carousel-dots"))
    return h(
        "section",
        ctx.collection("div", "slides", slides, *rendered, class_="wb-slides"),
        *controls,
        class_="wb-carousel",
        data_interval=str(as_int(props.get("autoPlayInterval"), 5, 0)),
        style=style(position="relative", overflow="hidden", font_family=theme.body_font),
    )


@register("parallax")
def render_parallax(props, theme, ctx):
    return h(
        "section",
        ctx.text("h2", "heading", props.get("heading"), style=style(font_family=theme.heading_font, font_size="2.5rem")),
        ctx.text("p", "subheading", props.get("subheading")) if props.get("subheading") else None,
        class_="wb-parallax",
        style=style(**_background(props.get("imageUrl"), theme.secondary_color, props.get("overlayOpacity")),
                    background_attachment="fixed", min_height=f"{as_int(props.get('height'), 400, 100)}px",
                    display="flex", flex_direction="column", align_items="center", justify_content="center",
                    color="#ffffff", text_align="center", font_family=theme.body_font),
    )
