"""Blocs de navigation : barres, menus, pied de page, fil d'Ariane, pagination."""
from ..core.theme import cascade, lighten
from ..renderer.nodes import h, style
from ..renderer.registry import register
from ._common import as_int, as_list, cta, image, row_get, row_link


@register("navbar", "mega-menu")
def render_navbar(props, theme, ctx):
    links = as_list(props.get("links"))
    dark = props.get("variant") == "dark"
    bg = cascade(props, "bgColor", theme.text_color if dark else theme.background_color)
    fg = "#ffffff" if dark else theme.text_color

    items = []
    for i, link in enumerate(links):
        entry = [row_link(ctx, link, ctx.row_text("span", "links", links, i, "label"),
                          class_="wb-nav-link", style=style(color=fg, text_decoration="none"))]
        sub = as_list(row_get(link, "children", []))
        if sub:
            entry.append(h("ul", *[
                h("li", row_link(ctx, child, row_get(child, "label"), class_="wb-nav-sublink"),
                  h("small", row_get(child, "description")) if row_get(child, "description") else None)
                for child in sub
            ], class_="wb-nav-dropdown"))
        items.append(h("li", *entry))

    logo = image(props.get("logoUrl"), props.get("logo"), class_="wb-logo-img", style=style(height="32px"))
    return h(
        "header",
        h("div",
          logo or ctx.text("span", "logo", props.get("logo"), class_="wb-logo",
                           style=style(font_family=theme.heading_font, font_weight="700", font_size="1.25rem")),
          h("nav", ctx.collection("ul", "links", links, *items, class_="wb-nav-links",
                                  style=style(display="flex", gap="24px", list_style="none", margin="0", padding="0"))),
          cta(ctx, theme, props),
          class_="wb-navbar-inner",
          style=style(display="flex", align_items="center", justify_content="space-between",
                      max_width="1200px", margin="0 auto", padding="16px 24px")),
        class_="wb-navbar",
        style=style(position="sticky" if props.get("sticky") else None, top="0" if props.get("sticky") else None,
                    z_index="50", background_color=bg, color=fg, font_family=theme.body_font,
                    border_bottom=f"1px solid {lighten(theme.secondary_color, 60)}"),
    )


@register("footer")
def render_footer(props, theme, ctx):
    links = as_list(props.get("links"))
    socials = as_list(props.get("socialLinks"))
    return h(
        "footer",
        h("div",
          h("div",
            ctx.text("strong", "companyName", props.get("companyName"), style=style(font_family=theme.heading_font)),
            ctx.rich("div", "description", props.get("description"), style=style(opacity="0.8")) if props.get("description") else None),
          ctx.collection("ul", "links", links, *[
              h("li", row_link(ctx, link, ctx.row_text("span", "links", links, i, "label"),
                               style=style(color="inherit")))
              for i, link in enumerate(links)
          ], class_="wb-footer-links", style=style(list_style="none", display="flex", gap="16px", padding="0")),
          ctx.collection("ul", "socialLinks", socials, *[
              h("li", row_link(ctx, s, row_get(s, "platform"), link_key="url",
                               class_=f"wb-social wb-social-{row_get(s, 'platform')}", style=style(color="inherit")))
              for s in socials
          ], class_="wb-footer-social", style=style(list_style="none", display="flex", gap="12px", padding="0")),
          ctx.text("p", "copyright", props.get("copyright"), class_="wb-copyright", style=style(opacity="0.6", font_size="0.875rem")),
          style=style(max_width="1200px", margin="0 auto")),
        class_="wb-footer",
        style=style(background_color=cascade(props, "bgColor", theme.text_color), color="#ffffff",
                    font_family=theme.body_font, padding="48px 24px"),
    )


@register("breadcrumb")
def render_breadcrumb(props, theme, ctx):
    items = as_list(props.get("items"))
    sep = str(props.get("separator") or "/")
    parts = []
    for i, item in enumerate(items):
        if i:
            parts.append(h("li", sep, aria_hidden="true", class_="wb-breadcrumb-sep"))
        label = ctx.row_text("span", "items", items, i, "label")
        last = i == len(items) - 1
        if last or not row_get(item, "href"):
            parts.append(h("li", label, aria_current="page" if last else None))
        else:
            parts.append(h("li", row_link(ctx, item, label, style=style(color=theme.primary_color))))
    return h("nav",
             ctx.collection("ol", "items", items, *parts,
                            style=style(display="flex", gap="8px", list_style="none", padding="0", margin="0")),
             aria_label="Breadcrumb", class_="wb-breadcrumb",
             style=style(padding="12px 24px", font_family=theme.body_font, color=theme.secondary_color))


@register("pagination")
def render_pagination(props, theme, ctx):
    total = as_int(props.get("totalPages"), 1, 1, 100)
    current = as_int(props.get("currentPage"), 1, 1, total)
    pages = []
    for n in range(1, total + 1):
        active = n == current
        pages.append(h("li", h(
            "span", str(n),
            aria_current="page" if active else None,
            style=style(display="inline-block", min_width="36px", padding="6px 10px", text_align="center",
                        border_radius=f"{theme.border_radius}px",
                        background_color=theme.primary_color if active else None,
                        color="#ffffff" if active else theme.text_color),
        )))
    return h("nav", h("ul", *pages, style=style(display="flex", gap="6px", list_style="none", justify_content="center")),
             aria_label="Pagination", class_="wb-pagination", style=style(padding="24px", font_family=theme.body_font))


@register("language-switcher")
def render_language_switcher(props, theme, ctx):
    languages = as_list(props.get("languages"))
    current = props.get("currentLanguage")
    if props.get("variant") == "dropdown":
        return h("div", h("select", *[
            h("option", row_get(lang, "label"), value=row_get(lang, "code"), selected=row_get(lang, "code") == current)
            for lang in languages
        ], aria_label="Language"), class_="wb-language-switcher", style=style(padding="8px 24px"))
    return h("div", ctx.collection("ul", "languages", languages, *[
        h("li", ctx.row_text("span", "languages", languages, i, "label",
                             style=style(font_weight="700" if row_get(lang, "code") == current else None)))
        for i, lang in enumerate(languages)
    ], style=style(display="flex", gap="12px", list_style="none")), class_="wb-language-switcher")


@register("floating-header")
def render_floating_header(props, theme, ctx):
    return h("div",
             ctx.text("span", "text", props.get("text")),
             cta(ctx, theme, props, variant="outline", color="#ffffff"),
             class_="wb-floating-header",
             style=style(position="sticky", top="0", z_index="60", display="flex", gap="16px",
                         justify_content="center", align_items="center", padding="10px 24px",
                         background_color=cascade(props, "bgColor", theme.primary_color), color="#ffffff",
                         font_family=theme.body_font))


@register("announcement-bar", "banner")
def render_announcement_bar(props, theme, ctx):
    text = ctx.text("span", "text", props.get("text"))
    effect = ctx.effect(props)
    body = ctx.link(props, text, style=style(color="inherit")) if not effect.inert else text
    return h("div",
             body,
             h("button", "×", type="button", aria_label="Dismiss", class_="wb-dismiss",
               style=style(background="none", border="none", color="inherit", cursor="pointer"))
             if props.get("dismissible") else None,
             class_="wb-announcement", role="status",
             style=style(display="flex", justify_content="center", gap="12px", padding="8px 16px",
                         background_color=cascade(props, "bgColor", theme.accent_color), color="#ffffff",
                         font_family=theme.body_font, font_size="0.875rem"))


