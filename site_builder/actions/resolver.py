"""
Action resolver — ComponentAction + contexte de navigation → effet concret.

Fonction pure : même action + même contexte → même effet. Aucune cible
manquante ne lève d'exception, l'effet se dégrade en `inert`.
Le resolver ne connaît pas les handlers custom de l'hôte : il n'émet que
l'intention (`invoke` + nom du handler).
"""
import logging
import re
from typing import Any, Dict, FrozenSet, Literal, Mapping, Optional, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.schemas import ComponentAction, Site, SitePage

log = logging.getLogger(__name__)

EffectKind = Literal["inert", "navigate", "open", "scroll", "contact", "download", "invoke"]

_UNSAFE_SCHEMES = {"javascript", "data", "vbscript"}


class ActionEffect(BaseModel):
    """Effet résolu d'une action (ce qui se passe à l'interaction)."""
    model_config = ConfigDict(frozen=True)

    kind: EffectKind = "inert"
    target: str = ""
    new_context: bool = False   # contexte de navigation auxiliaire (nouvel onglet)
    route: Optional[str] = None  # navigate : URL de la page cible (target = id de page)

    @property
    def inert(self) -> bool:
        return self.kind == "inert"

    def href(self) -> Optional[str]:
        if self.kind == "navigate":
            return self.route or self.target
        if self.kind in ("open", "contact", "download"):
            return self.target
        if self.kind == "scroll":
            return f"#{self.target}"
        if self.kind == "invoke":
            return "#"
        return None

    def html_attrs(self) -> Dict[str, Any]:
        """Attributs statiques d'un <a> publié pour cet effet."""
        if self.inert:
            return {}
        attrs: Dict[str, Any] = {"href": self.href()}
        if self.new_context:
            attrs["target"] = "_blank"
            attrs["rel"] = "noopener noreferrer"
        if self.kind == "download":
            attrs["download"] = True
        if self.kind == "invoke":
            attrs["data-wb-handler"] = self.target
        return attrs


INERT = ActionEffect()


class NavigationContext(BaseModel):
    """Pages connues (id → route) et ancres de la page courante."""
    model_config = ConfigDict(frozen=True)

    pages: Dict[str, str] = Field(default_factory=dict)
    anchors: FrozenSet[str] = frozenset()

    @classmethod
    def for_page(cls, site: Optional[Site], page: Optional[SitePage] = None) -> "NavigationContext":
        pages = {p.id: site.route_for(p) for p in site.ordered_pages()} if site else {}
        if page is not None and site is None:
            pages[page.id] = "/"
        anchors = frozenset(page.anchors()) if page is not None else frozenset()
        return cls(pages=pages, anchors=anchors)


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _is_safe_url(url: str) -> bool:
    scheme = urlsplit(url).scheme.lower()
    return scheme not in _UNSAFE_SCHEMES


def resolve(
    action: Union[ComponentAction, Mapping[str, Any], None],
    context: Optional[NavigationContext] = None,
) -> ActionEffect:
    """
    Résout une action en effet concret.

    Args:
        action: ComponentAction ou dict au format fil (camelCase)
        context: pages et ancres connues (vide si absent)

    Returns:
        ActionEffect — `inert` si la cible est absente ou invalide
    """
    if action is None:
        return INERT
    if not isinstance(action, ComponentAction):
        try:
            action = ComponentAction.model_validate(dict(action))
        except ValidationError as e:
            log.warning("Descripteur d'action invalide → inert : %s", e)
            return INERT
    context = context or NavigationContext()
    kind = action.type

    if kind == "none":
        return INERT

    if kind == "page":
        page_id = _text(action.page_id)
        route = context.pages.get(page_id)
        if route is None:
            log.debug("Action page : page %r inconnue → inert", page_id)
            return INERT
        return ActionEffect(kind="navigate", target=page_id, route=route)

    if kind == "url":
        url = _text(action.url)
        if not url or not _is_safe_url(url):
            if url:
                log.warning("Action url : schéma refusé %r → inert", url)
            return INERT
        return ActionEffect(kind="open", target=url, new_context=bool(action.open_in_new_tab))

    if kind == "section":
        section_id = _text(action.section_id).lstrip("#")
        if section_id not in context.anchors:
            log.debug("Action section : ancre %r absente → inert", section_id)
            return INERT
        return ActionEffect(kind="scroll", target=section_id)

    if kind == "email":
        email = _text(action.email)
        if not email:
            return INERT
        return ActionEffect(kind="contact", target=f"mailto:{email}")

    if kind == "phone":
        digits = re.sub(r"[^\d+]", "", _text(action.phone))
        if not re.search(r"\d", digits):
            return INERT
        return ActionEffect(kind="contact", target=f"tel:{digits}")

    if kind == "download":
        file_url = _text(action.file_url)
        if not file_url or not _is_safe_url(file_url):
            return INERT
        return ActionEffect(kind="download", target=file_url, new_context=bool(action.open_in_new_tab))

    if kind == "custom":
        handler = _text(action.custom_handler)
        if not handler:
            return INERT
        return ActionEffect(kind="invoke", target=handler)

    log.info("Type d'action non géré %r → inert", kind)
    return INERT


def action_from_link(link: Optional[str]) -> ComponentAction:
    """
    Convertit un lien legacy (`link`/`ctaLink` des props) en ComponentAction.
    "#x" → section, "mailto:" → email, "tel:" → phone, autre → url.
    """
    link = _text(link)
    if not link or link == "#":
        return ComponentAction(type="none")
    if link.startswith("#"):
        return ComponentAction(type="section", section_id=link[1:])
    lowered = link.lower()
    if lowered.startswith("mailto:"):
        return ComponentAction(type="email", email=link[len("mailto:"):])
    if lowered.startswith("tel:"):
        return ComponentAction(type="phone", phone=link[len("tel:"):])
    return ComponentAction(type="url", url=link)


def resolve_props(
    props: Mapping[str, Any],
    context: Optional[NavigationContext] = None,
    action_key: str = "action",
    link_key: str = "link",
) -> ActionEffect:
    """
    Effet d'un élément cliquable porté par des props : l'action explicite
    prime, le lien legacy sert de repli.
    """
    action = props.get(action_key)
    if isinstance(action, ComponentAction) and action.type != "none":
        return resolve(action, context)
    if isinstance(action, Mapping) and action.get("type", "none") != "none":
        return resolve(action, context)
    return resolve(action_from_link(props.get(link_key)), context)
