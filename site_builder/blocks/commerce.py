"""Blocs e-commerce : cartes produits, fiche produit, encarts boutique."""
from ..core.theme import radius
from ..renderer.nodes import h, style
from ..renderer.registry import register
from ._common import as_list, button_style, grid, image, placeholder, row_get, row_link, section, title_block


@register("product-card")
def render_product_card(props, theme, ctx):
    products = as_list(props.get("products"))
    cards = []
    for i, p in enumerate(products):
        badge = row_get(p, "badge")
        cards.append(h(
            "div",
            h("div",
              image(row_get(p, "imageUrl"), row_get(p, "name"), style=style(width="100%", aspect_ratio="1", object_fit="cover"))
              or placeholder(str(row_get(p, "name")), theme, 200),
              ctx.row_text("span", "products", products, i, "badge", class_="wb-badge", style=style(
                  position="absolute", top="8px", left="8px", padding="2px 8px", border_radius="999px",
                  background_color=theme.accent_color, color="#ffffff", font_size="0.75rem")) if badge else None,
              style=style(position="relative")),
            ctx.row_text("h3", "products", products, i, "name", style=style(font_family=theme.heading_font, margin="12px 0 4px")),
            ctx.row_text("p", "products", products, i, "price", class_="wb-price",
                         style=style(font_weight="700", color=theme.primary_color, margin="0 0 12px")),
            row_link(ctx, p, str(props.get("buttonText") or ""), link_key="link", class_="wb-btn",
                     style=button_style(theme, size="sm")),
            class_="wb-product", style=style(padding="16px", border="1px solid #e2e8f0", border_radius=radius(theme, 1.5)),
        ))
    return section(theme, props, ctx.collection("div", "products", products, grid(props.get("columns"), *cards)),
                   class_="wb-product-card")


@register("product-detail")
def render_product_detail(props, theme, ctx):
    media = image(props.get("imageUrl"), props.get("name"), style=style(width="100%", border_radius=radius(theme))) \
        or placeholder("Product image", theme, 360)
    info = h("div",
             ctx.text("h1", "name", props.get("name"), style=style(font_family=theme.heading_font)),
             ctx.text("p", "price", props.get("price"),
                      style=style(font_size="1.5rem", font_weight="700", color=theme.primary_color)),
             ctx.rich("div", "description", props.get("description"), style=style(line_height="1.7")),
             ctx.link(props, ctx.text("span", "buttonText", props.get("buttonText")),
                      class_="wb-btn", style=button_style(theme, size="lg")))
    return section(theme, props, grid(2, media, info, gap=48), class_="wb-product-detail")


@register("product-carousel", "quick-view", "wishlist-grid", "cart", "product-filter", "checkout")
def render_store_widget(props, theme, ctx):
    return section(theme, props, *title_block(ctx, theme, props),
                   ctx.text("p", "message", props.get("message"), style=style(text_align="center", opacity="0.7")),
                   class_=f"wb-store-widget wb-{ctx.block_type}", data_store_widget=ctx.block_type or None,
                   padding="48px 24px")
