"""Blocs métier : à propos, services, tarifs, témoignages, statistiques, blog…"""
from datetime import datetime

from ..core.theme import cascade, lighten, radius
from ..renderer.nodes import h, style
from ..renderer.registry import register
from ._common import (
    as_int, as_list, button_style, cta, grid, image, placeholder, row_get, row_link, section, title_block,
)


def _card(theme, *children, highlighted=False, **attrs):
    return h("div", *children, class_="wb-card", style=style(
        padding="24px", border_radius=radius(theme, 1.5), background_color=theme.background_color,
        border=f"2px solid {theme.primary_color}" if highlighted else "1px solid #e2e8f0",
        box_shadow="0 8px 24px rgba(0,0,0,0.08)" if highlighted else None,
    ), **attrs)


def _icon(name, theme):
    return h("span", str(name or ""), class_="wb-icon", data_icon=name or None, style=style(
        display="inline-flex", padding="10px", border_radius=radius(theme),
        background_color=lighten(theme.primary_color, 80), color=theme.primary_color, font_weight="700",
    ))


def _stars(value, maximum, color):
    value = max(0, min(value, maximum))
    return h("span", "★" * value + "☆" * (maximum - value), class_="wb-stars",
             aria_label=f"{value} out of {maximum}", style=style(color=color, letter_spacing="2px"))


@register("about")
def render_about(props, theme, ctx):
    media = image(props.get("imageUrl"), props.get("title"), style=style(width="100%", border_radius=radius(theme)))
    text = h("div", ctx.text("h2", "title", props.get("title"), style=style(font_family=theme.heading_font)),
             ctx.rich("div", "description", props.get("description"), style=style(line_height="1.7")))
    return section(theme, props, grid(2, text, media, gap=48) if media else text, class_="wb-about")


@register("features")
def render_features(props, theme, ctx):
    features = as_list(props.get("features"))
    cards = [
        _card(theme,
              _icon(row_get(f, "icon"), theme),
              ctx.row_text("h3", "features", features, i, "title", style=style(font_family=theme.heading_font)),
              ctx.row_text("p", "features", features, i, "description", style=style(opacity="0.8")))
        for i, f in enumerate(features)
    ]
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.collection("div", "features", features, grid(props.get("columns"), *cards)),
                   class_="wb-features")


@register("service-card")
def render_service_card(props, theme, ctx):
    services = as_list(props.get("services"))
    cards = []
    for i, s in enumerate(services):
        cards.append(_card(
            theme,
            _icon(row_get(s, "icon"), theme),
            ctx.row_text("h3", "services", services, i, "title", style=style(font_family=theme.heading_font)),
            ctx.row_text("p", "services", services, i, "description", style=style(opacity="0.8")),
            ctx.row_text("p", "services", services, i, "price", class_="wb-price",
                         style=style(font_weight="700", color=theme.primary_color))
            if props.get("showPricing") and row_get(s, "price") else None,
            row_link(ctx, s, ctx.row_text("span", "services", services, i, "linkText"), link_key="linkUrl",
                     class_="wb-card-link", style=style(color=theme.primary_color, font_weight="600"))
            if props.get("showLinks") and row_get(s, "linkText") else None,
        ))
    columns = 1 if props.get("variant") == "list" else props.get("columns")
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.collection("div", "services", services, grid(columns, *cards)),
                   class_="wb-service-card")


@register("pricing")
def render_pricing(props, theme, ctx):
    plans = as_list(props.get("plans"))
    cards = []
    for i, plan in enumerate(plans):
        highlighted = bool(row_get(plan, "highlighted", False))
        cards.append(_card(
            theme,
            ctx.row_text("h3", "plans", plans, i, "name", style=style(font_family=theme.heading_font)),
            h("p",
              ctx.row_text("span", "plans", plans, i, "price", style=style(font_size="2.5rem", font_weight="800")),
              ctx.row_text("span", "plans", plans, i, "period", style=style(opacity="0.7"))),
            h("ul", *[h("li", "✓ ", str(f)) for f in as_list(row_get(plan, "features", []))],
              style=style(list_style="none", padding="0", line_height="2")),
            row_link(ctx, plan, ctx.row_text("span", "plans", plans, i, "ctaText"), link_key="ctaLink",
                     class_="wb-btn", style=button_style(theme, "primary" if highlighted else "outline"))
            if row_get(plan, "ctaText") else None,
            highlighted=highlighted,
        ))
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.collection("div", "plans", plans, grid(max(1, len(plans)), *cards)),
                   class_="wb-pricing")


@register("testimonials")
def render_testimonials(props, theme, ctx):
    items = as_list(props.get("testimonials"))
    cards = [
        _card(theme,
              ctx.row_text("p", "testimonials", items, i, "text", style=style(font_style="italic")),
              h("div",
                image(row_get(t, "avatar"), row_get(t, "name"),
                      style=style(width="40px", height="40px", border_radius="50%")),
                h("div",
                  ctx.row_text("strong", "testimonials", items, i, "name"),
                  h("br"),
                  ctx.row_text("small", "testimonials", items, i, "role", style=style(opacity="0.7"))),
                style=style(display="flex", gap="12px", align_items="center")))
        for i, t in enumerate(items)
    ]
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.collection("div", "testimonials", items, grid(min(3, max(1, len(items))), *cards)),
                   class_="wb-testimonials")


@register("reviews")
def render_reviews(props, theme, ctx):
    reviews = as_list(props.get("reviews"))
    ratings = [as_int(row_get(r, "rating", 0), 0, 0, 5) for r in reviews]
    summary = None
    if props.get("showAverage") and ratings:
        avg = sum(ratings) / len(ratings)
        summary = h("p", _stars(round(avg), 5, theme.accent_color), f" {avg:.1f} / 5 ({len(ratings)})",
                    class_="wb-reviews-average", style=style(text_align="center"))
    cards = [
        _card(theme,
              _stars(ratings[i], 5, theme.accent_color),
              ctx.row_rich("div", "reviews", reviews, i, "text"),
              h("small", ctx.row_text("strong", "reviews", reviews, i, "author"), " · ", str(row_get(r, "date"))))
        for i, r in enumerate(reviews)
    ]
    return section(theme, props, *title_block(ctx, theme, props), summary,
                   ctx.collection("div", "reviews", reviews, grid(2, *cards)), class_="wb-reviews")


@register("stats", "animated-stats")
def render_stats(props, theme, ctx):
    stats = as_list(props.get("stats"))
    animated = ctx.block_type == "animated-stats"
    cells = [
        h("div",
          h("div",
            ctx.row_text("span", "stats", stats, i, "value", data_count=str(row_get(s, "value")) if animated else None),
            str(row_get(s, "suffix")) if row_get(s, "suffix") else None,
            style=style(font_size="2.5rem", font_weight="800", font_family=theme.heading_font)),
          ctx.row_text("div", "stats", stats, i, "label", style=style(opacity="0.85")),
          style=style(text_align="center"))
        for i, s in enumerate(stats)
    ]
    return section(theme, props,
                   ctx.collection("div", "stats", stats, grid(max(1, min(4, len(stats))), *cells)),
                   class_="wb-stats", bg=theme.primary_color, color="#ffffff", padding="48px 24px")


@register("cta-banner")
def render_cta_banner(props, theme, ctx):
    return h(
        "section",
        ctx.text("h2", "heading", props.get("heading"), style=style(font_family=theme.heading_font, font_size="2rem")),
        ctx.text("p", "subheading", props.get("subheading"), style=style(opacity="0.9")) if props.get("subheading") else None,
        h("div",
          cta(ctx, theme, props, variant="outline", color="#ffffff"),
          cta(ctx, theme, props, "secondaryCtaText", "secondaryCtaLink", "secondaryCtaAction", variant="ghost",
              color="#ffffff"),
          style=style(display="flex", gap="12px", justify_content="center")),
        class_="wb-block wb-cta-banner",
        style=style(background_color=cascade(props, "bgColor", theme.primary_color), color="#ffffff",
                    text_align="center", padding="64px 24px", font_family=theme.body_font),
    )


@register("logo-cloud")
def render_logo_cloud(props, theme, ctx):
    logos = as_list(props.get("logos"))
    return section(theme, props, *title_block(ctx, theme, props), ctx.collection("div", "logos", logos, *[
        image(row_get(logo, "imageUrl"), row_get(logo, "name"), style=style(height="40px", opacity="0.7"))
        or ctx.row_text("span", "logos", logos, i, "name", style=style(font_weight="700", opacity="0.6"))
        for i, logo in enumerate(logos)
    ], style=style(display="flex", flex_wrap="wrap", gap="48px", justify_content="center", align_items="center")),
        class_="wb-logo-cloud", padding="48px 24px")


@register("team-grid")
def render_team_grid(props, theme, ctx):
    members = as_list(props.get("members"))
    cards = [
        _card(theme,
              image(row_get(m, "imageUrl"), row_get(m, "name"),
                    style=style(width="100%", aspect_ratio="1", object_fit="cover", border_radius=radius(theme)))
              or placeholder(str(row_get(m, "name")), theme, 160),
              ctx.row_text("h3", "members", members, i, "name", style=style(font_family=theme.heading_font)),
              ctx.row_text("p", "members", members, i, "role", style=style(color=theme.primary_color)),
              ctx.row_text("p", "members", members, i, "bio") if row_get(m, "bio") else None)
        for i, m in enumerate(members)
    ]
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.collection("div", "members", members, grid(min(4, max(1, len(members))), *cards)),
                   class_="wb-team-grid")


@register("trust-badges")
def render_trust_badges(props, theme, ctx):
    badges = as_list(props.get("badges"))
    return section(theme, props, ctx.collection("div", "badges", badges, *[
        h("div", _icon(row_get(b, "icon"), theme), ctx.row_text("span", "badges", badges, i, "label"),
          style=style(display="flex", gap="8px", align_items="center"))
        for i, b in enumerate(badges)
    ], style=style(display="flex", flex_wrap="wrap", gap="32px", justify_content="center")),
        class_="wb-trust-badges", padding="32px 24px")


@register("countdown")
def render_countdown(props, theme, ctx):
    target = str(props.get("targetDate") or "")
    try:
        datetime.fromisoformat(target)
    except ValueError:
        target = ""
    units = [h("div", h("strong", "--", data_unit=u, style=style(font_size="2.5rem")), h("div", u.capitalize()),
               style=style(text_align="center", min_width="72px")) for u in ("days", "hours", "minutes", "seconds")]
    return section(theme, props, *title_block(ctx, theme, props),
                   h("div", *units, class_="wb-countdown-units", data_target=target or None,
                     data_expired=str(props.get("expiredText") or ""),
                     style=style(display="flex", gap="16px", justify_content="center", color=theme.primary_color)),
                   class_="wb-countdown")


@register("progress")
def render_progress(props, theme, ctx):
    items = as_list(props.get("items"))
    color = cascade(props, "color", theme.primary_color)
    bars = [
        h("div",
          h("div", ctx.row_text("span", "items", items, i, "label"), h("span", f"{as_int(row_get(it, 'value', 0), 0, 0, 100)}%"),
            style=style(display="flex", justify_content="space-between")),
          h("div", h("div", style=style(width=f"{as_int(row_get(it, 'value', 0), 0, 0, 100)}%", height="100%",
                                        background_color=color, border_radius=radius(theme))),
            role="progressbar", aria_valuenow=str(as_int(row_get(it, "value", 0), 0, 0, 100)),
            aria_valuemin="0", aria_valuemax="100",
            style=style(height="8px", background_color="#e2e8f0", border_radius=radius(theme))),
          style=style(margin_bottom="16px"))
        for i, it in enumerate(items)
    ]
    return section(theme, props, ctx.collection("div", "items", items, *bars), class_="wb-progress",
                   padding="32px 24px", max_width=800)


@register("rating")
def render_rating(props, theme, ctx):
    maximum = as_int(props.get("max"), 5, 1, 10)
    value = as_int(props.get("value"), maximum, 0, maximum)
    return h("div", _stars(value, maximum, cascade(props, "color", theme.accent_color)),
             ctx.text("span", "label", props.get("label")) if props.get("label") else None,
             class_="wb-rating", style=style(padding="8px 24px", font_size="1.5rem", font_family=theme.body_font))


@register("blog-grid")
def render_blog_grid(props, theme, ctx):
    posts = as_list(props.get("posts"))
    cards = [
        _card(theme,
              image(row_get(p, "imageUrl"), row_get(p, "title"), style=style(width="100%", border_radius=radius(theme))),
              h("small", str(row_get(p, "date")), style=style(opacity="0.6")),
              row_link(ctx, p, ctx.row_text("h3", "posts", posts, i, "title"), link_key="link",
                       style=style(color="inherit", text_decoration="none", font_family=theme.heading_font)),
              ctx.row_text("p", "posts", posts, i, "excerpt", style=style(opacity="0.8")))
        for i, p in enumerate(posts)
    ]
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.collection("div", "posts", posts, grid(props.get("columns"), *cards)), class_="wb-blog-grid")


@register("tags-cloud")
def render_tags_cloud(props, theme, ctx):
    tags = as_list(props.get("tags"))
    return section(theme, props, *title_block(ctx, theme, props), ctx.collection("div", "tags", tags, *[
        ctx.row_text("span", "tags", tags, i, None, class_="wb-tag", style=style(
            display="inline-block", padding="4px 12px", margin="4px", border_radius="999px",
            background_color=lighten(theme.primary_color, 80), color=theme.primary_color))
        for i in range(len(tags))
    ], style=style(text_align="center")), class_="wb-tags-cloud", padding="32px 24px")


@register("comments")
def render_comments(props, theme, ctx):
    comments = as_list(props.get("comments"))
    body = [
        h("div", h("strong", str(row_get(c, "author"))), h("p", str(row_get(c, "text"))),
          class_="wb-comment", style=style(border_bottom="1px solid #e2e8f0", padding="12px 0"))
        for c in comments
    ] or [ctx.text("p", "emptyText", props.get("emptyText"), style=style(opacity="0.6"))]
    return section(theme, props, *title_block(ctx, theme, props), *body, class_="wb-comments", max_width=800)
