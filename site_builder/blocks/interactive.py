"""Blocs interactifs : boutons, liens sociaux, formulaires, popup, bannière cookies."""
from urllib.parse import urlsplit

from ..core.theme import cascade, radius
from ..renderer.nodes import h, style
from ..renderer.registry import register
from ._common import as_list, button_style, cta, row_get, row_link, section, title_block

_JUSTIFY = {"left": "flex-start", "right": "flex-end", "center": "center"}

_FIELD_TYPES = {"name": "text", "email": "email", "phone": "tel", "message": "textarea"}


def _form_action(url, ctx):
    """Cible de soumission : uniquement http(s), jamais dans le canvas."""
    url = str(url or "").strip()
    if ctx.editing or urlsplit(url).scheme not in ("http", "https"):
        return None
    return url


def _input(theme, label, kind="text", name=None, placeholder="", required=False, options=()):
    name = name or label.lower().replace(" ", "_")
    field_style = style(width="100%", padding="10px 12px", border="1px solid #cbd5e1",
                        border_radius=radius(theme), font_family=theme.body_font)
    if kind == "textarea":
        control = h("textarea", name=name, placeholder=placeholder or None, required=required, rows="4", style=field_style)
    elif kind == "select":
        control = h("select", *[h("option", str(o), value=str(o)) for o in options], name=name, style=field_style)
    elif kind == "checkbox":
        return h("label", h("input", type="checkbox", name=name, required=required), " ", label,
                 style=style(display="flex", gap="8px", align_items="center"))
    else:
        control = h("input", type=kind, name=name, placeholder=placeholder or None, required=required, style=field_style)
    return h("label", h("span", label + (" *" if required else ""), style=style(display="block", margin_bottom="4px")),
             control, style=style(display="block", margin_bottom="16px"))


def _submit(theme, ctx, key, props):
    return h("button", ctx.text("span", key, props.get(key)), type="submit", class_="wb-btn",
             style=button_style(theme))


@register("button")
def render_button(props, theme, ctx):
    """Bouton : couleur locale `color` sinon primary du thème ; cible via action ou lien legacy."""
    btn_style = button_style(
        theme,
        variant=props.get("variant") or "primary",
        color=cascade(props, "color", theme.primary_color),
        text_color=cascade(props, "textColor", ""),
        size=props.get("size") or "md",
    )
    if props.get("fullWidth"):
        btn_style.update(display="block", width="100%", text_align="center")
    return h("div",
             ctx.link(props, ctx.text("span", "text", props.get("text")), class_="wb-btn", style=btn_style),
             class_="wb-button", style=style(padding="8px 24px"))


@register("button-group")
def render_button_group(props, theme, ctx):
    buttons = as_list(props.get("buttons"))
    return h("div", ctx.collection("div", "buttons", buttons, *[
        row_link(ctx, b, ctx.row_text("span", "buttons", buttons, i, "text"), link_key="link",
                 class_="wb-btn", style=button_style(theme, row_get(b, "variant", "primary") or "primary",
                                                     color=row_get(b, "color", "")))
        for i, b in enumerate(buttons)
    ], style=style(display="flex", gap="12px", flex_wrap="wrap",
                   justify_content=_JUSTIFY.get(props.get("alignment"), "center"))),
        class_="wb-button-group", style=style(padding="8px 24px"))


@register("social-links")
def render_social_links(props, theme, ctx):
    links = as_list(props.get("links"))
    return h("div", ctx.collection("ul", "links", links, *[
        h("li", row_link(ctx, link, ctx.row_text("span", "links", links, i, "platform"), link_key="url",
                         class_=f"wb-social wb-social-{row_get(link, 'platform')}",
                         aria_label=str(row_get(link, "platform")),
                         style=style(color=theme.primary_color, text_decoration="none", font_weight="600")))
        for i, link in enumerate(links)
    ], style=style(display="flex", gap="16px", list_style="none", padding="0",
                   justify_content=_JUSTIFY.get(props.get("alignment"), "center"))),
        class_="wb-social-links", style=style(padding="16px 24px", font_family=theme.body_font))


@register("contact-form")
def render_contact_form(props, theme, ctx):
    fields = [str(f) for f in as_list(props.get("fields"))]
    inputs = [
        _input(theme, f.capitalize(), _FIELD_TYPES.get(f, "text"), name=f, required=f in ("name", "email", "message"))
        for f in fields
    ]
    email_to = str(props.get("emailTo") or "").strip()
    return section(
        theme, props, *title_block(ctx, theme, props),
        h("form", *inputs, _submit(theme, ctx, "submitText", props),
          method="post", action=_form_action(props.get("webhookUrl"), ctx),
          data_email_to=email_to or None, class_="wb-form"),
        class_="wb-contact-form", max_width=640,
    )


@register("newsletter")
def render_newsletter(props, theme, ctx):
    return section(
        theme, props, *title_block(ctx, theme, props),
        h("form",
          h("input", type="email", name="email", required=True, placeholder=str(props.get("placeholder") or ""),
            aria_label="Email", style=style(flex="1", padding="10px 12px", border="1px solid #cbd5e1",
                                            border_radius=radius(theme))),
          _submit(theme, ctx, "buttonText", props),
          method="post", class_="wb-form", style=style(display="flex", gap="8px")),
        class_="wb-newsletter", max_width=560,
    )


@register("form")
def render_form(props, theme, ctx):
    fields = as_list(props.get("fields"))
    inputs = [
        _input(theme, str(row_get(f, "label", f"Field {i + 1}")), str(row_get(f, "type", "text")),
               placeholder=str(row_get(f, "placeholder")), required=bool(row_get(f, "required", False)),
               options=as_list(row_get(f, "options", [])))
        for i, f in enumerate(fields)
    ]
    return section(
        theme, props, *title_block(ctx, theme, props),
        h("form", ctx.collection("div", "fields", fields, *inputs), _submit(theme, ctx, "submitText", props),
          method="post", action=_form_action(props.get("webhookUrl"), ctx), class_="wb-form"),
        class_="wb-custom-form", max_width=640,
    )


@register("login-form", "signup-form")
def render_auth_form(props, theme, ctx):
    signup = ctx.block_type == "signup-form"
    inputs = [_input(theme, "Name", required=True)] if signup else []
    inputs += [_input(theme, "Email", "email", required=True), _input(theme, "Password", "password", required=True)]
    if props.get("showRemember"):
        inputs.append(_input(theme, "Remember me", "checkbox", name="remember"))
    return section(
        theme, props, *title_block(ctx, theme, props),
        h("form", *inputs, _submit(theme, ctx, "submitText", props), method="post", class_="wb-form"),
        class_=f"wb-{ctx.block_type or 'login-form'}", max_width=420,
    )


@register("search-bar")
def render_search_bar(props, theme, ctx):
    return h("form",
             h("input", type="search", name="q", placeholder=str(props.get("placeholder") or ""), aria_label="Search",
               style=style(flex="1", padding="10px 12px", border="1px solid #cbd5e1", border_radius=radius(theme))),
             _submit(theme, ctx, "buttonText", props),
             role="search", method="get", class_="wb-search-bar",
             style=style(display="flex", gap="8px", padding="16px 24px", max_width="640px", margin="0 auto"))


@register("popup")
def render_popup(props, theme, ctx):
    # Dans le canvas la popup est affichée en place pour rester éditable
    body = h("div",
             ctx.text("h3", "title", props.get("title"), style=style(font_family=theme.heading_font)),
             ctx.text("p", "text", props.get("text")),
             cta(ctx, theme, props),
             style=style(background_color=theme.background_color, color=theme.text_color, padding="32px",
                         border_radius=radius(theme, 2), max_width="420px", margin="0 auto"))
    if ctx.editing:
        return h("div", body, class_="wb-popup wb-popup-preview", style=style(padding="16px 24px"))
    return h("div", body, class_="wb-popup", role="dialog", aria_modal="true", hidden=True,
             data_trigger=str(props.get("trigger") or "delay"), data_delay=str(props.get("delay") or 0),
             style=style(position="fixed", inset="0", background_color="rgba(0,0,0,0.5)", z_index="100",
                         align_items="center", justify_content="center"))


@register("cookie-consent")
def render_cookie_consent(props, theme, ctx):
    policy = row_link(ctx, {"link": props.get("policyLink")}, "Learn more", link_key="link",
                      style=style(color="inherit")) if props.get("policyLink") else None
    return h("div",
             ctx.text("span", "text", props.get("text")),
             policy,
             h("button", ctx.text("span", "declineText", props.get("declineText")), type="button",
               class_="wb-cookie-decline", style=button_style(theme, "ghost", color="#ffffff")),
             h("button", ctx.text("span", "acceptText", props.get("acceptText")), type="button",
               class_="wb-cookie-accept", style=button_style(theme)),
             class_="wb-cookie-consent", role="region", aria_label="Cookie consent",
             style=style(position="fixed" if not ctx.editing else None, bottom="0", left="0", right="0",
                         display="flex", gap="12px", align_items="center", justify_content="center",
                         padding="12px 24px", background_color=theme.text_color, color="#ffffff",
                         font_family=theme.body_font, z_index="90"))
