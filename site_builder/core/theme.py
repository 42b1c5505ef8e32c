"""
Theme cascade — lecture seule des tokens SiteTheme.

Règle : une prop locale explicite (ex: `bgColor`) prend le pas sur le token
du thème pour cet attribut uniquement ; sinon le token sert de fallback.
Aucun bloc ne lit un token ailleurs que dans le SiteTheme reçu en paramètre.
"""
from typing import Any, Dict, Tuple

from .schemas import SiteTheme


def cascade(props: Dict[str, Any], key: str, fallback: Any) -> Any:
    """Valeur locale `props[key]` si renseignée, sinon `fallback` (token du thème)."""
    value = props.get(key)
    if value is None or value == "":
        return fallback
    return value


def replace_theme(theme: SiteTheme, **tokens: Any) -> SiteTheme:
    """Remplacement complet du thème (nouvelle valeur validée, l'ancienne reste intacte)."""
    data = theme.model_dump()
    data.update(tokens)
    return SiteTheme.model_validate(data)


# ── Presets ─────────────────────────────────────────────────────────────────
# Chaque preset clair a sa variante `<nom>_dark` (mêmes polices, fonds inversés)

_AUTO = SiteTheme(
    primary_color="#dc2626", secondary_color="#1e293b", accent_color="#f59e0b",
    text_color="#0f172a", background_color="#ffffff",
    heading_font="Space Grotesk, sans-serif", body_font="Inter, sans-serif", border_radius=8,
)
_RESTAURANT = SiteTheme(
    primary_color="#b45309", secondary_color="#44403c", accent_color="#dc2626",
    text_color="#1c1917", background_color="#fffbf5",
    heading_font="Playfair Display, serif", body_font="Lato, sans-serif", border_radius=6,
)
_MEDICAL = SiteTheme(
    primary_color="#0891b2", secondary_color="#475569", accent_color="#10b981",
    text_color="#1e293b", background_color="#ffffff",
    heading_font="DM Sans, sans-serif", body_font="Inter, sans-serif", border_radius=12,
)
_SAAS = SiteTheme(
    primary_color="#2563eb", secondary_color="#475569", accent_color="#06b6d4",
    text_color="#0f172a", background_color="#ffffff", border_radius=12,
)

THEME_PRESETS: Dict[str, SiteTheme] = {
    "default": SiteTheme(),
    "default_dark": replace_theme(SiteTheme(), background_color="#0f172a", text_color="#f1f5f9"),
    "auto": _AUTO,
    "auto_dark": replace_theme(_AUTO, background_color="#0f0f0f", text_color="#f1f5f9",
                               secondary_color="#334155"),
    "restaurant": _RESTAURANT,
    "restaurant_dark": replace_theme(_RESTAURANT, background_color="#1c1917", text_color="#faf5f0",
                                     secondary_color="#78716c", primary_color="#d97706"),
    "medical": _MEDICAL,
    "medical_dark": replace_theme(_MEDICAL, background_color="#0f1729", text_color="#e2e8f0",
                                  primary_color="#22d3ee"),
    "saas": _SAAS,
    "saas_dark": replace_theme(_SAAS, background_color="#020617", text_color="#f1f5f9",
                               primary_color="#3b82f6", accent_color="#22d3ee"),
}


def theme_preset(name: str) -> SiteTheme:
    """Thème prédéfini par nom (`saas`, `saas_dark`…). KeyError si inconnu."""
    try:
        return THEME_PRESETS[name]
    except KeyError:
        raise KeyError(f"Preset de thème inconnu : {name}") from None


def radius(theme: SiteTheme, scale: float = 1.0) -> str:
    return f"{round(theme.border_radius * scale)}px"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convertit #RRGGBB (ou #RGB) en (R, G, B)."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def lighten(hex_color: str, percent: int = 20) -> str:
    """Éclaircit une couleur de X% (les valeurs non hexadécimales sont renvoyées telles quelles)."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return hex_color
    factor = 1 + (percent / 100)
    return f"#{min(255, int(r * factor)):02x}{min(255, int(g * factor)):02x}{min(255, int(b * factor)):02x}"


def darken(hex_color: str, percent: int = 20) -> str:
    """Assombrit une couleur de X%."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        return hex_color
    factor = 1 - (percent / 100)
    return f"#{max(0, int(r * factor)):02x}{max(0, int(g * factor)):02x}{max(0, int(b * factor)):02x}"


def theme_variables(theme: SiteTheme) -> str:
    """
    Génère le bloc :root {} des variables CSS du site.

    Returns:
        CSS avec --wb-* (couleurs + variantes light/dark, polices, radius)
    """
    return f"""
:root {{
  --wb-color-primary: {theme.primary_color};
  --wb-color-primary-light: {lighten(theme.primary_color, 15)};
  --wb-color-primary-dark: {darken(theme.primary_color, 15)};
  --wb-color-secondary: {theme.secondary_color};
  --wb-color-secondary-light: {lighten(theme.secondary_color, 15)};
  --wb-color-secondary-dark: {darken(theme.secondary_color, 15)};
  --wb-color-accent: {theme.accent_color};
  --wb-color-text: {theme.text_color};
  --wb-color-bg: {theme.background_color};
  --wb-font-heading: {theme.heading_font};
  --wb-font-body: {theme.body_font};
  --wb-radius: {theme.border_radius}px;
}}
""".strip()


def base_stylesheet(theme: SiteTheme) -> str:
    """Feuille de style commune du site publié (variables + quelques classes utilitaires)."""
    return theme_variables(theme) + """

*, *::before, *::after { box-sizing: border-box; }
body { margin: 0; font-family: var(--wb-font-body); color: var(--wb-color-text); background: var(--wb-color-bg); }
h1, h2, h3, h4 { font-family: var(--wb-font-heading); }
.container { max-width: 1200px; margin: 0 auto; }
.wb-unknown-block, .wb-block-error { padding: 16px; margin: 8px; border: 2px dashed #f59e0b; color: #92400e; background: #fffbeb; font: 14px monospace; }
@media (min-width: 1024px) { .wb-hide-desktop { display: none !important; } }
@media (min-width: 768px) and (max-width: 1023px) { .wb-hide-tablet { display: none !important; } }
@media (max-width: 767px) { .wb-hide-mobile { display: none !important; } }
"""
