"""Tests theme cascade — priorité locale, remplacement, variables CSS, presets."""
import pytest
from pydantic import ValidationError

from site_builder.core.schemas import SiteTheme
from site_builder.core.theme import (
    THEME_PRESETS, base_stylesheet, cascade, darken, hex_to_rgb, lighten, radius, replace_theme, theme_preset,
    theme_variables,
)


def test_cascade_local_prop_wins():
    assert cascade({"bgColor": "#111111"}, "bgColor", "#ffffff") == "#111111"


def test_cascade_empty_or_missing_falls_back():
    assert cascade({"bgColor": ""}, "bgColor", "#ffffff") == "#ffffff"
    assert cascade({"bgColor": None}, "bgColor", "#ffffff") == "#ffffff"
    assert cascade({}, "bgColor", "#ffffff") == "#ffffff"


def test_replace_theme_returns_new_value():
    old = SiteTheme()
    new = replace_theme(old, primary_color="#10b981")
    assert new.primary_color == "#10b981"
    assert old.primary_color == "#3b82f6"
    assert new.body_font == old.body_font


def test_radius_scale():
    assert radius(SiteTheme(border_radius=8)) == "8px"
    assert radius(SiteTheme(border_radius=8), 1.5) == "12px"


def test_hex_to_rgb_short_form():
    assert hex_to_rgb("#fff") == (255, 255, 255)
    assert hex_to_rgb("#3b82f6") == (59, 130, 246)


def test_lighten_darken():
    assert darken("#ffffff", 20) == "#cccccc"
    assert lighten("#808080", 50) == "#c0c0c0"
    assert lighten("#ffffff", 50) == "#ffffff"


def test_non_hex_color_unchanged():
    assert lighten("rebeccapurple") == "rebeccapurple"
    assert darken("rgb(0,0,0)") == "rgb(0,0,0)"


def test_theme_variables():
    css = theme_variables(SiteTheme(primary_color="#ff0000"))
    assert css.startswith(":root {")
    assert "--wb-color-primary: #ff0000;" in css
    assert "--wb-color-primary-dark:" in css
    assert "--wb-radius: 8px;" in css


def test_base_stylesheet_has_visibility_classes():
    css = base_stylesheet(SiteTheme())
    assert ".wb-hide-mobile" in css
    assert ".wb-unknown-block" in css


# ── Presets ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("name", sorted(THEME_PRESETS))
def test_presets_are_frozen_themes(name):
    theme = theme_preset(name)
    assert isinstance(theme, SiteTheme)
    assert SiteTheme.model_validate(theme.model_dump()) == theme
    with pytest.raises(ValidationError):
        theme.primary_color = "#000000"


def test_every_preset_has_dark_variant():
    light = [n for n in THEME_PRESETS if not n.endswith("_dark")]
    for name in light:
        dark = THEME_PRESETS[f"{name}_dark"]
        assert dark.heading_font == THEME_PRESETS[name].heading_font
        assert dark.background_color != THEME_PRESETS[name].background_color


def test_unknown_preset_raises():
    with pytest.raises(KeyError):
        theme_preset("missing")
