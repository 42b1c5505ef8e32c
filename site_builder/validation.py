"""
Auto-validation des composants — problèmes de contenu signalés à l'éditeur.

Ne bloque jamais le rendu : le dispatcher sait rendre un bloc incomplet.
Les règles servent au panneau « checklist » avant publication.
"""
import logging
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ValidationError

from .actions.resolver import NavigationContext
from .core.sanitize import sanitize_html
from .core.schemas import ACTION_TYPES, Block, ComponentAction, Site, SitePage, slugify
from .palette import complete_props
from .renderer.registry import get_renderer

log = logging.getLogger(__name__)

Severity = Literal["error", "warning", "info"]

# Champs pertinents pour chaque type d'action ; les autres sont ignorés au rendu
ACTION_FIELDS: Dict[str, tuple] = {
    "none": (),
    "page": ("page_id",),
    "url": ("url", "open_in_new_tab"),
    "section": ("section_id",),
    "email": ("email",),
    "phone": ("phone",),
    "download": ("file_url", "open_in_new_tab"),
    "custom": ("custom_handler",),
}

_ACTION_KEYS = ("action", "ctaAction", "secondaryCtaAction")


class ValidationIssue(BaseModel):
    severity: Severity
    message: str
    block_id: Optional[str] = None
    field: Optional[str] = None
    suggestion: Optional[str] = None


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip()) or value == [] or value == {}


def _is_http(url: Any) -> bool:
    return isinstance(url, str) and urlsplit(url.strip()).scheme in ("http", "https")


# ── Règles par type ─────────────────────────────────────────────────────────

_RULES: Dict[str, Callable[[Block, Dict[str, Any]], List[ValidationIssue]]] = {}


def rule(block_type: str):
    def decorator(fn):
        _RULES[block_type] = fn
        return fn
    return decorator


def _issue(block, severity, message, field=None, suggestion=None) -> ValidationIssue:
    return ValidationIssue(severity=severity, message=message, block_id=block.id, field=field, suggestion=suggestion)


@rule("hero")
def _check_hero(block, props):
    issues = []
    if _blank(props.get("heading")):
        issues.append(_issue(block, "warning", "Hero has no heading", "heading", "Add a short headline"))
    if props.get("ctaText") and _blank(props.get("ctaLink")) and _blank(props.get("ctaAction")):
        issues.append(_issue(block, "warning", "Hero button has no target", "ctaLink"))
    return issues


@rule("navbar")
def _check_navbar(block, props):
    issues = []
    if _blank(props.get("logo")) and _blank(props.get("logoUrl")):
        issues.append(_issue(block, "info", "Navbar has no logo", "logo"))
    if _blank(props.get("links")):
        issues.append(_issue(block, "warning", "Navbar has no links", "links", "Link to your main pages"))
    return issues


@rule("footer")
def _check_footer(block, props):
    if _blank(props.get("companyName")):
        return [_issue(block, "info", "Footer has no company name", "companyName")]
    return []


@rule("heading")
def _check_heading(block, props):
    issues = []
    if _blank(props.get("text")):
        issues.append(_issue(block, "error", "Heading is empty", "text"))
    try:
        level = int(props.get("level", 2))
    except (TypeError, ValueError):
        level = 0
    if not 1 <= level <= 6:
        issues.append(_issue(block, "warning", f"Heading level {props.get('level')!r} is out of range", "level",
                             "Use a level between 1 and 6"))
    return issues


@rule("button")
def _check_button(block, props):
    issues = []
    if _blank(props.get("text")):
        issues.append(_issue(block, "error", "Button has no text", "text"))
    action = props.get("action")
    has_action = isinstance(action, Mapping) and action.get("type", "none") != "none"
    if not has_action and (_blank(props.get("link")) or props.get("link") == "#"):
        issues.append(_issue(block, "warning", "Button does nothing when clicked", "action",
                             "Choose a page, URL or section"))
    return issues


@rule("image")
def _check_image(block, props):
    issues = []
    if _blank(props.get("src")):
        issues.append(_issue(block, "warning", "Image has no source", "src"))
    if _blank(props.get("alt")):
        issues.append(_issue(block, "warning", "Image has no alternative text", "alt",
                             "Describe the image for screen readers"))
    return issues


@rule("faq")
def _check_faq(block, props):
    items = props.get("items") or []
    if not items:
        return [_issue(block, "warning", "FAQ has no questions", "items")]
    issues = []
    for i, item in enumerate(items):
        if not isinstance(item, Mapping) or _blank(item.get("question")) or _blank(item.get("answer")):
            issues.append(_issue(block, "warning", f"FAQ item {i + 1} is incomplete", f"items[{i}]"))
    return issues


@rule("pricing")
def _check_pricing(block, props):
    plans = props.get("plans") or []
    if not plans:
        return [_issue(block, "warning", "Pricing table has no plans", "plans")]
    issues = []
    for i, plan in enumerate(plans):
        if not isinstance(plan, Mapping) or _blank(plan.get("name")) or _blank(plan.get("price")):
            issues.append(_issue(block, "warning", f"Plan {i + 1} needs a name and a price", f"plans[{i}]"))
    return issues


@rule("contact-form")
def _check_contact_form(block, props):
    webhook = props.get("webhookUrl")
    if not _blank(webhook) and not _is_http(webhook):
        return [_issue(block, "error", "Webhook URL must use http or https", "webhookUrl")]
    if _blank(webhook) and _blank(props.get("emailTo")):
        return [_issue(block, "warning", "Form submissions are not delivered anywhere", "webhookUrl",
                       "Set a webhook URL or a destination email")]
    return []


@rule("custom-html")
def _check_custom_html(block, props):
    markup = str(props.get("html") or "")
    if markup and sanitize_html(markup) != markup:
        return [_issue(block, "warning", "Some HTML will be removed when published", "html",
                       "Scripts, styles, frames and event handlers are not allowed")]
    return []


# ── Actions ─────────────────────────────────────────────────────────────────

def validate_action(block: Block, key: str, raw: Any, navigation: NavigationContext) -> List[ValidationIssue]:
    """Vérifie un descripteur d'action : type connu, cible existante, champs obsolètes."""
    try:
        action = raw if isinstance(raw, ComponentAction) else ComponentAction.model_validate(dict(raw))
    except (TypeError, ValueError, ValidationError) as e:
        return [_issue(block, "error", f"Invalid action: {e}", key)]

    if action.type not in ACTION_TYPES:
        return [_issue(block, "warning", f"Action type {action.type!r} is not supported and does nothing", key)]

    issues = []
    relevant = ACTION_FIELDS[action.type]
    stale = [
        name for fields in ACTION_FIELDS.values() for name in fields
        if name not in relevant and not _blank(getattr(action, name)) and getattr(action, name) is not False
    ]
    if stale:
        issues.append(_issue(block, "info", f"Ignored fields for a {action.type!r} action: {', '.join(sorted(set(stale)))}",
                             key, "Clear them to keep the block tidy"))

    if action.type == "page":
        if _blank(action.page_id):
            issues.append(_issue(block, "error", "Page action has no target page", key))
        elif navigation.pages and action.page_id not in navigation.pages:
            issues.append(_issue(block, "error", f"Target page {action.page_id!r} does not exist", key))
    elif action.type == "section":
        section_id = (action.section_id or "").lstrip("#")
        if not section_id:
            issues.append(_issue(block, "error", "Section action has no target", key))
        elif section_id not in navigation.anchors:
            issues.append(_issue(block, "warning", f"Section {section_id!r} is not on this page", key))
    elif action.type in ("url", "download"):
        url = action.url if action.type == "url" else action.file_url
        if _blank(url):
            issues.append(_issue(block, "error", f"{action.type.capitalize()} action has no URL", key))
        elif urlsplit(url.strip()).scheme.lower() in ("javascript", "data", "vbscript"):
            issues.append(_issue(block, "error", "URL scheme is not allowed", key))
    else:
        target = {"email": action.email, "phone": action.phone, "custom": action.custom_handler}.get(action.type)
        if action.type != "none" and _blank(target):
            issues.append(_issue(block, "error", f"{action.type.capitalize()} action has no target", key))
    return issues


# ── Points d'entrée ─────────────────────────────────────────────────────────

def validate_block(block: Block, navigation: Optional[NavigationContext] = None) -> List[ValidationIssue]:
    navigation = navigation or NavigationContext()
    if get_renderer(block.type) is None:
        return [_issue(block, "warning", f"Unknown block type {block.type!r} is shown as a placeholder", None)]
    props = complete_props(block.type, block.props)
    issues = list(_RULES[block.type](block, props)) if block.type in _RULES else []
    for key in _ACTION_KEYS:
        raw = block.props.get(key)
        if isinstance(raw, (Mapping, ComponentAction)):
            issues.extend(validate_action(block, key, raw, navigation))
    return issues


def validate_page(page: SitePage, site: Optional[Site] = None) -> List[ValidationIssue]:
    """
    Valide tous les blocs d'une page (enfants compris).

    Args:
        page: page à valider
        site: site parent (résolution des actions `page`)

    Returns:
        Liste de ValidationIssue, dans l'ordre des blocs
    """
    navigation = NavigationContext.for_page(site, page)
    issues: List[ValidationIssue] = []
    if page.slug and slugify(page.slug) != page.slug:
        issues.append(ValidationIssue(
            severity="warning",
            message=f"Slug « {page.slug} » normalisé en « {page.path_segment()} » à la publication",
            field="slug",
            suggestion="Lettres minuscules, chiffres et tirets uniquement",
        ))
    for block in page.walk_blocks():
        issues.extend(validate_block(block, navigation))
    log.debug("Page %s : %d problème(s) détecté(s)", page.id, len(issues))
    return issues


def has_errors(issues: List[ValidationIssue]) -> bool:
    return any(i.severity == "error" for i in issues)
