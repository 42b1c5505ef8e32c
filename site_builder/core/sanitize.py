"""
Sanitization du contenu riche (rich-text, custom-html, titres HTML…).

Allow-list stricte via bleach : les balises/attributs hors liste sont retirés,
le reste du contenu est conservé. Les éléments exécutables ou embarqués
(script, style, iframe…) sont supprimés avec leur contenu.
Idempotent : sanitize_html(sanitize_html(x)) == sanitize_html(x).
"""
import logging
import re

import bleach

from ..config import get_settings

log = logging.getLogger(__name__)

ALLOWED_TAGS = [
    "p", "br", "hr", "h1", "h2", "h3", "h4", "h5", "h6",
    "strong", "em", "b", "i", "u", "s", "strike", "sub", "sup", "small", "mark",
    "a", "img", "ul", "ol", "li", "code", "pre", "blockquote",
    "table", "thead", "tbody", "tfoot", "tr", "th", "td",
    "div", "span", "figure", "figcaption",
]

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "rel", "target"],
    "img": ["src", "alt", "title", "width", "height"],
    "code": ["class"],
    "pre": ["class"],
    "th": ["colspan", "rowspan"],
    "td": ["colspan", "rowspan"],
    "div": ["class"],
    "span": ["class"],
}

# Éléments retirés avec leur contenu (bleach ne retire que les balises)
_DROPPED_ELEMENTS = re.compile(
    r"<(script|style|iframe|object|embed|template|noscript)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)


def _clean(text: str) -> str:
    previous = None
    # Répété jusqu'au point fixe : une suppression peut recoller un élément interdit
    while previous != text:
        previous = text
        text = _DROPPED_ELEMENTS.sub("", text)

    return bleach.clean(
        text,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=get_settings().allowed_protocols,
        strip=True,
        strip_comments=True,
    )


def sanitize_html(markup: str) -> str:
    """
    Nettoie un fragment HTML libre avant rendu (canvas comme publication).

    La limite de longueur porte sur la sortie : l'échappement allonge le
    texte (`<` → `&lt;`), on raccourcit donc l'entrée jusqu'à ce que le
    résultat nettoyé tienne. Une sortie déjà dans la limite n'est jamais
    retronquée au passage suivant.
    """
    if not markup:
        return ""
    limit = get_settings().rich_text_max_length
    text = str(markup)
    out = _clean(text)
    if len(out) <= limit:
        return out

    log.warning("Contenu riche tronqué (%d > %d caractères)", len(out), limit)
    n = min(len(text), limit)
    out = _clean(text[:n])
    while len(out) > limit and n > 0:
        n = min(n - 1, n * limit // len(out))
        out = _clean(text[:n])
    return out
