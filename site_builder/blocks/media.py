"""Blocs média : images, galeries, vidéo, audio, carte, avatar."""
import re
from urllib.parse import quote_plus, urlsplit

from ..core.theme import radius
from ..renderer.nodes import h, style
from ..renderer.registry import register
from ._common import as_int, as_list, cta, grid, image, placeholder, row_get, section

_YOUTUBE = re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/)|youtu\.be/)([\w-]{6,})")
_VIMEO = re.compile(r"vimeo\.com/(?:video/)?(\d+)")


def embed_url(url: str, autoplay: bool = False):
    """URL de lecteur embarqué (YouTube / Vimeo) ; None pour une source non reconnue."""
    url = (url or "").strip()
    if urlsplit(url).scheme not in ("http", "https"):
        return None
    suffix = "?autoplay=1&mute=1" if autoplay else ""
    m = _YOUTUBE.search(url)
    if m:
        return f"https://www.youtube.com/embed/{m.group(1)}{suffix}"
    m = _VIMEO.search(url)
    if m:
        return f"https://player.vimeo.com/video/{m.group(1)}{suffix}"
    return None


@register("image")
def render_image(props, theme, ctx):
    img = image(props.get("src"), props.get("alt"),
                style=style(width="100%", height="auto", border_radius=radius(theme), display="block"))
    body = img or placeholder("Image", theme)
    if img is not None and not ctx.effect(props).inert:
        body = ctx.link(props, img)
    return h("figure",
             body,
             ctx.text("figcaption", "caption", props.get("caption"),
                      style=style(font_size="0.875rem", opacity="0.7", margin_top="8px"))
             if props.get("caption") else None,
             class_="wb-image",
             style=style(margin="16px auto", padding="0 24px", width=str(props.get("width") or "100%"),
                         font_family=theme.body_font))


@register("image-text")
def render_image_text(props, theme, ctx):
    media = image(props.get("imageUrl"), props.get("title"),
                  style=style(width="100%", border_radius=radius(theme))) or placeholder("Image", theme, 280)
    text = h("div",
             ctx.text("h2", "title", props.get("title"), style=style(font_family=theme.heading_font)),
             ctx.rich("div", "text", props.get("text")),
             cta(ctx, theme, props))
    cells = [text, media] if props.get("imagePosition") == "right" else [media, text]
    return section(theme, props, grid(2, *cells, gap=48), class_="wb-image-text")


@register("image-gallery", "gallery-masonry", "lightbox-gallery")
def render_gallery(props, theme, ctx):
    images = as_list(props.get("images"))
    gap = as_int(props.get("gap"), 16, 0)
    cells = []
    for i, img in enumerate(images):
        src = row_get(img, "src")
        alt = row_get(img, "alt")
        node = image(src, alt, style=style(width="100%", border_radius=radius(theme), display="block")) \
            or placeholder(str(alt or f"Image {i + 1}"), theme, 160)
        cells.append(h("figure", node, class_="wb-gallery-item", data_full=src or None,
                       style=style(margin="0", break_inside="avoid", margin_bottom=f"{gap}px")))
    cols = as_int(props.get("columns"), 3, 1, 6)
    masonry = ctx.block_type == "gallery-masonry"
    container = ctx.collection(
        "div", "images", images, *cells, class_="wb-gallery-grid",
        data_lightbox="true" if ctx.block_type == "lightbox-gallery" else None,
        style=style(column_count=str(cols), column_gap=f"{gap}px") if masonry else style(
            display="grid", grid_template_columns=f"repeat({cols}, minmax(0, 1fr))", gap=f"{gap}px"),
    )
    return section(theme, props, container, class_="wb-gallery")


@register("video-embed")
def render_video_embed(props, theme, ctx):
    src = embed_url(props.get("url"), bool(props.get("autoplay")))
    ratio = str(props.get("aspectRatio") or "16/9")
    if src is None:
        body = placeholder("Video", theme, 320)
    else:
        body = h("iframe", src=src, title=str(props.get("title") or "Video"), loading="lazy",
                 allow="accelerometer; autoplay; encrypted-media; picture-in-picture", allowfullscreen=True,
                 style=style(width="100%", aspect_ratio=ratio, border="0", border_radius=radius(theme)))
    return h("div", body, class_="wb-video-embed", style=style(padding="16px 24px", max_width="960px", margin="0 auto"))


@register("background-video")
def render_background_video(props, theme, ctx):
    url = str(props.get("videoUrl") or "")
    video = None
    if urlsplit(url).scheme in ("http", "https"):
        video = h("video", h("source", src=url), autoplay=True, muted=True, loop=True, playsinline=True,
                  style=style(position="absolute", inset="0", width="100%", height="100%", object_fit="cover"))
    alpha = as_int(props.get("overlayOpacity"), 50, 0, 100) / 100
    return h(
        "section",
        video,
        h("div", style=style(position="absolute", inset="0", background_color=f"rgba(0,0,0,{alpha})")),
        h("div",
          ctx.text("h2", "heading", props.get("heading"), style=style(font_family=theme.heading_font, font_size="2.5rem")),
          ctx.text("p", "subheading", props.get("subheading")) if props.get("subheading") else None,
          style=style(position="relative", text_align="center")),
        class_="wb-background-video",
        style=style(position="relative", overflow="hidden", min_height=f"{as_int(props.get('height'), 500, 100)}px",
                    display="flex", align_items="center", justify_content="center", color="#ffffff",
                    background_color=theme.text_color, font_family=theme.body_font),
    )


@register("audio-player")
def render_audio_player(props, theme, ctx):
    src = str(props.get("src") or "")
    return h("div",
             ctx.text("p", "title", props.get("title"), style=style(font_weight="600")),
             h("audio", controls=True, src=src, style=style(width="100%")) if src else placeholder("Audio", theme, 60),
             class_="wb-audio-player",
             style=style(padding="16px 24px", font_family=theme.body_font, color=theme.text_color))


@register("before-after")
def render_before_after(props, theme, ctx):
    def side(img_key, label_key):
        return h("figure",
                 image(props.get(img_key), props.get(label_key), style=style(width="100%")) or placeholder(
                     str(props.get(label_key) or ""), theme),
                 ctx.text("figcaption", label_key, props.get(label_key), style=style(text_align="center")),
                 style=style(margin="0"))
    return section(theme, props, grid(2, side("beforeImage", "beforeLabel"), side("afterImage", "afterLabel"), gap=16),
                   class_="wb-before-after")


@register("map")
def render_map(props, theme, ctx):
    address = str(props.get("address") or "")
    href = f"https://www.google.com/maps/search/?api=1&query={quote_plus(address)}"
    return h(
        "div",
        ctx.text("p", "address", address, style=style(font_weight="600")),
        ctx.link({"link": href} if address else {}, "View on map", class_="wb-map-link",
                 style=style(color=theme.primary_color)),
        class_="wb-map", data_zoom=str(as_int(props.get("zoom"), 14, 1, 20)),
        style=style(min_height=f"{as_int(props.get('height'), 400, 100)}px", padding="24px",
                    background_color="#f1f5f9", border_radius=radius(theme), margin="16px 24px",
                    font_family=theme.body_font, color=theme.text_color),
    )


@register("avatar")
def render_avatar(props, theme, ctx):
    size = as_int(props.get("size"), 64, 16, 512)
    name = str(props.get("name") or "")
    initials = "".join(part[0] for part in name.split()[:2]).upper()
    img = image(props.get("src"), name, style=style(width=f"{size}px", height=f"{size}px", border_radius="50%",
                                                    object_fit="cover"))
    return h("div",
             img or h("span", initials, aria_label=name, style=style(
                 display="inline-flex", align_items="center", justify_content="center",
                 width=f"{size}px", height=f"{size}px", border_radius="50%",
                 background_color=theme.primary_color, color="#ffffff", font_weight="700")),
             ctx.text("span", "name", name) if name else None,
             class_="wb-avatar",
             style=style(display="flex", align_items="center", gap="12px", padding="8px 24px", font_family=theme.body_font))
