"""Blocs de contenu : titres, texte, citations, listes, FAQ, onglets, tableaux."""
from ..core.theme import cascade, lighten, radius
from ..core.sanitize import sanitize_html
from ..renderer.nodes import Raw, h, style
from ..renderer.registry import register
from ._common import as_int, as_list, section, title_block

_CALLOUT_COLORS = {"warning": "#f59e0b", "error": "#ef4444", "success": "#10b981"}


@register("heading")
def render_heading(props, theme, ctx):
    level = as_int(props.get("level"), 2, 1, 6)
    return h("div", ctx.text(
        f"h{level}", "text", props.get("text"),
        style=style(font_family=theme.heading_font, color=cascade(props, "color", theme.text_color),
                    text_align=props.get("alignment") or "left", margin="0"),
    ), class_="wb-heading", style=style(padding="16px 24px"))


@register("paragraph")
def render_paragraph(props, theme, ctx):
    return h("div", ctx.rich(
        "div", "text", props.get("text"),
        style=style(text_align=props.get("alignment") or "left", line_height="1.7"),
    ), class_="wb-paragraph", style=style(padding="8px 24px", color=theme.text_color, font_family=theme.body_font))


@register("rich-text")
def render_rich_text(props, theme, ctx):
    return h("div", ctx.rich("div", "content", props.get("content"), class_="wb-prose"),
             class_="wb-rich-text",
             style=style(padding="16px 24px", color=theme.text_color, font_family=theme.body_font, line_height="1.7"))


@register("blockquote")
def render_blockquote(props, theme, ctx):
    cite = [ctx.text("span", "author", props.get("author"))] if props.get("author") else []
    if props.get("source"):
        cite += [", ", ctx.text("cite", "source", props.get("source"))]
    return h(
        "blockquote",
        ctx.text("p", "quote", props.get("quote"), style=style(font_size="1.25rem", font_style="italic")),
        h("footer", "— ", *cite) if cite else None,
        class_="wb-blockquote",
        style=style(margin="24px", padding="16px 24px", border_left=f"4px solid {theme.primary_color}",
                    color=theme.text_color, font_family=theme.body_font),
    )


@register("code-block")
def render_code_block(props, theme, ctx):
    lang = str(props.get("language") or "")
    return h("pre", ctx.text("code", "code", props.get("code"), class_=f"language-{lang}" if lang else None),
             class_="wb-code-block",
             style=style(margin="16px 24px", padding="16px", background_color="#0f172a", color="#e2e8f0",
                         border_radius=radius(theme), overflow_x="auto", font_family="monospace"))


@register("list")
def render_list(props, theme, ctx):
    items = as_list(props.get("items"))
    tag = "ol" if props.get("ordered") else "ul"
    return h("div", ctx.collection(tag, "items", items, *[
        ctx.row_text("li", "items", items, i, None) for i in range(len(items))
    ]), class_="wb-list", style=style(padding="8px 24px", color=theme.text_color, font_family=theme.body_font))


@register("callout")
def render_callout(props, theme, ctx):
    color = _CALLOUT_COLORS.get(props.get("variant"), theme.primary_color)
    return h(
        "aside",
        ctx.text("strong", "title", props.get("title")) if props.get("title") else None,
        ctx.rich("div", "text", props.get("text")),
        class_=f"wb-callout wb-callout-{props.get('variant') or 'info'}",
        role="note",
        style=style(margin="16px 24px", padding="16px 20px", border_left=f"4px solid {color}",
                    background_color=lighten(color, 80), border_radius=radius(theme), font_family=theme.body_font),
    )


@register("icon-text")
def render_icon_text(props, theme, ctx):
    return h(
        "div",
        h("span", str(props.get("icon") or ""), class_="wb-icon", data_icon=props.get("icon"),
          style=style(color=theme.primary_color, font_weight="700")),
        h("div",
          ctx.text("h3", "title", props.get("title"), style=style(font_family=theme.heading_font, margin="0 0 4px")),
          ctx.text("p", "text", props.get("text"), style=style(margin="0"))),
        class_="wb-icon-text",
        style=style(display="flex", gap="16px", padding="16px 24px", text_align=props.get("alignment") or "left",
                    font_family=theme.body_font, color=theme.text_color),
    )


@register("custom-html")
def render_custom_html(props, theme, ctx):
    # Pas d'édition en place : le HTML libre s'édite depuis le panneau de propriétés
    return h("div", Raw(html=sanitize_html(str(props.get("html") or ""))), class_="wb-custom-html")


@register("tabs")
def render_tabs(props, theme, ctx):
    tabs = as_list(props.get("tabs"))
    active = as_int(props.get("activeTab"), 0, 0, max(0, len(tabs) - 1))
    buttons = [
        h("button", ctx.row_text("span", "tabs", tabs, i, "label"),
          type="button", role="tab", aria_selected="true" if i == active else "false",
          style=style(border="none", background="none", padding="8px 16px", cursor="pointer",
                      border_bottom=f"2px solid {theme.primary_color}" if i == active else "2px solid transparent"))
        for i in range(len(tabs))
    ]
    panels = [
        ctx.row_rich("div", "tabs", tabs, i, "content", role="tabpanel", hidden=i != active,
                     class_="wb-tab-panel", style=style(padding="16px 0"))
        for i in range(len(tabs))
    ]
    return h("div",
             ctx.collection("div", "tabs", tabs, *buttons, role="tablist", class_="wb-tab-list",
                            style=style(display="flex", border_bottom="1px solid #e2e8f0")),
             *panels,
             class_="wb-tabs", style=style(padding="16px 24px", font_family=theme.body_font, color=theme.text_color))


@register("faq")
def render_faq(props, theme, ctx):
    items = as_list(props.get("items"))
    accordion = props.get("variant") != "list"
    entries = []
    for i in range(len(items)):
        question = ctx.row_text("summary" if accordion else "h3", "items", items, i, "question",
                                style=style(font_weight="600", cursor="pointer", padding="12px 0"))
        answer = ctx.row_rich("div", "items", items, i, "answer", style=style(padding="0 0 12px", opacity="0.85"))
        entries.append(h("details" if accordion else "div", question, answer,
                         class_="wb-faq-item", style=style(border_bottom="1px solid #e2e8f0")))
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.collection("div", "items", items, *entries, class_="wb-faq-items"),
                   class_="wb-faq", max_width=800)


@register("timeline")
def render_timeline(props, theme, ctx):
    items = as_list(props.get("items"))
    return section(theme, props, *title_block(ctx, theme, props), ctx.collection("ol", "items", items, *[
        h("li",
          ctx.row_text("time", "items", items, i, "date", style=style(color=theme.primary_color, font_weight="700")),
          ctx.row_text("h3", "items", items, i, "title", style=style(font_family=theme.heading_font, margin="4px 0")),
          ctx.row_rich("div", "items", items, i, "description", style=style(margin="0")),
          style=style(padding="0 0 24px 24px", border_left=f"2px solid {theme.primary_color}"))
        for i in range(len(items))
    ], class_="wb-timeline-items", style=style(list_style="none", padding="0")), class_="wb-timeline", max_width=800)


@register("comparison-table")
def render_comparison_table(props, theme, ctx):
    columns = as_list(props.get("columns"))
    rows = as_list(props.get("rows"))
    highlight = as_int(props.get("highlightColumn"), -1)

    def cell_style(j):
        return style(padding="12px", border_bottom="1px solid #e2e8f0",
                     background_color=lighten(theme.primary_color, 85) if j == highlight else None)

    return section(
        theme, props, *title_block(ctx, theme, props),
        h("table",
          h("thead", h("tr", *[h("th", str(c), style=cell_style(j)) for j, c in enumerate(columns)])),
          ctx.collection("tbody", "rows", rows, *[
              h("tr", *[h("td", str(v), style=cell_style(j)) for j, v in enumerate(as_list(row))])
              for row in rows
          ]),
          style=style(width="100%", border_collapse="collapse", text_align="left")),
        class_="wb-comparison-table",
    )


@register("marquee")
def render_marquee(props, theme, ctx):
    items = as_list(props.get("items"))
    duration = {"slow": "40s", "fast": "10s"}.get(props.get("speed"), "20s")
    return h("div", ctx.collection("div", "items", items, *[
        ctx.row_text("span", "items", items, i, None, style=style(padding="0 32px")) for i in range(len(items))
    ], class_="wb-marquee-track", style=style(display="inline-block", white_space="nowrap",
                                              animation=f"wb-marquee {duration} linear infinite")),
        class_="wb-marquee",
        style=style(overflow="hidden", padding="12px 0", background_color=cascade(props, "bgColor", theme.primary_color),
                    color="#ffffff", font_family=theme.body_font, font_weight="600"))

