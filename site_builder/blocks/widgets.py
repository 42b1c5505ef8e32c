"""
Widgets flottants et intégrations tierces.

Les snippets de suivi (pixel, analytics) ne sont émis qu'en publication et
seulement pour un identifiant au format attendu ; dans le canvas ils sont
remplacés par un encart indiquant l'intégration.
"""
import json
import re
from urllib.parse import quote

from ..core.theme import cascade, radius
from ..renderer.nodes import Raw, fragment, h, style
from ..renderer.registry import register
from ._common import button_style

_PIXEL_ID = re.compile(r"^\d{5,20}$")
_GA_ID = re.compile(r"^(G|UA|AW)-[A-Z0-9-]{4,20}$")


def _floating(position, bottom="24px"):
    side = "left" if position == "left" else "right"
    return {"position": "fixed", "bottom": bottom, side: "24px", "z-index": "80"}


def _integration_note(label):
    return h("div", label, class_="wb-integration-note",
             style=style(padding="8px 24px", font_size="0.75rem", opacity="0.6", font_family="monospace"))


@register("whatsapp-button")
def render_whatsapp_button(props, theme, ctx):
    digits = re.sub(r"\D", "", str(props.get("phone") or ""))
    link = f"https://wa.me/{digits}?text={quote(str(props.get('message') or ''))}" if digits else ""
    return ctx.link({"link": link}, "WhatsApp", class_="wb-whatsapp", aria_label="Chat on WhatsApp",
                    style=style(**_floating(props.get("position")), background_color="#25d366", color="#ffffff",
                                padding="12px 18px", border_radius="999px", text_decoration="none",
                                font_weight="600", font_family=theme.body_font))


@register("floating-cta")
def render_floating_cta(props, theme, ctx):
    btn = button_style(theme, color=cascade(props, "color", theme.primary_color))
    btn.update(_floating("right", "88px"))
    return ctx.link(props, ctx.text("span", "text", props.get("text")), class_="wb-btn wb-floating-cta", style=btn)


@register("scroll-to-top")
def render_scroll_to_top(props, theme, ctx):
    return h("a", "↑", href="#", class_="wb-scroll-to-top", aria_label="Back to top",
             style=style(**_floating(props.get("position")), width="44px", height="44px", display="flex",
                         align_items="center", justify_content="center", border_radius="50%",
                         background_color=theme.primary_color, color="#ffffff", text_decoration="none"))


@register("facebook-pixel")
def render_facebook_pixel(props, theme, ctx):
    pixel_id = str(props.get("pixelId") or "").strip()
    if ctx.editing:
        return _integration_note(f"Facebook Pixel {pixel_id or '(not configured)'}")
    if not _PIXEL_ID.match(pixel_id):
        return fragment()
    return fragment(Raw(html=(
        "<script>!function(f,b,e,v,n,t,s){if(f.fbq)return;n=f.fbq=function(){n.callMethod?"
        "n.callMethod.apply(n,arguments):n.queue.push(arguments)};if(!f._fbq)f._fbq=n;n.push=n;"
        "n.loaded=!0;n.version='2.0';n.queue=[];t=b.createElement(e);t.async=!0;t.src=v;"
        "s=b.getElementsByTagName(e)[0];s.parentNode.insertBefore(t,s)}(window,document,'script',"
        "'https://connect.facebook.net/en_US/fbevents.js');"
        f"fbq('init',{json.dumps(pixel_id)});fbq('track','PageView');</script>"
    )))


@register("google-analytics")
def render_google_analytics(props, theme, ctx):
    tracking_id = str(props.get("trackingId") or "").strip()
    if ctx.editing:
        return _integration_note(f"Google Analytics {tracking_id or '(not configured)'}")
    if not _GA_ID.match(tracking_id):
        return fragment()
    return fragment(Raw(html=(
        f'<script async src="https://www.googletagmanager.com/gtag/js?id={tracking_id}"></script>'
        "<script>window.dataLayer=window.dataLayer||[];function gtag(){dataLayer.push(arguments);}"
        f"gtag('js',new Date());gtag('config',{json.dumps(tracking_id)});</script>"
    )))


@register("loading-screen")
def render_loading_screen(props, theme, ctx):
    if ctx.editing:
        return h("div", ctx.text("span", "text", props.get("text")), class_="wb-loading-screen-preview",
                 style=style(padding="16px 24px", text_align="center", opacity="0.7"))
    return h("div", h("span", str(props.get("text") or "")), class_="wb-loading-screen", aria_hidden="true",
             style=style(position="fixed", inset="0", display="flex", align_items="center", justify_content="center",
                         background_color=theme.background_color, color=theme.primary_color, z_index="200",
                         font_family=theme.body_font))


@register("user-profile")
def render_user_profile(props, theme, ctx):
    return h("div", ctx.text("p", "message", props.get("message")), class_="wb-user-profile",
             style=style(padding="24px", margin="16px 24px", border="1px dashed #cbd5e1", border_radius=radius(theme),
                         text_align="center", color=theme.secondary_color, font_family=theme.body_font))
