from __future__ import annotations

import re

import pytest

from haricot_theme.schemas.tokens import COLOR_KEYS
from haricot_theme.services.color_math import hex_to_hsl, hex_to_rgb, readable_text_color
from haricot_theme.services.palette_suggestions import generate_palette_suggestions, palette_from_accent

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


@pytest.mark.parametrize("seed", ["#2F6B3A", "#000", "ff0000", "not a color", "#FFFFFF", "#7CC4FA"])
@pytest.mark.parametrize("mode", ["light", "dark"])
def test_always_four_distinct_variants(seed, mode):
    suggestions = generate_palette_suggestions(seed, mode)
    assert [s.id for s in suggestions] == ["analogous", "complementary", "triadic", "monochrome"]
    for suggestion in suggestions:
        colors = suggestion.colors.model_dump()
        assert set(colors) == set(COLOR_KEYS)
        assert all(HEX_RE.match(value) for value in colors.values())


def test_variant_metadata():
    suggestions = {s.id: s for s in generate_palette_suggestions("#2F6B3A", "light")}
    assert suggestions["complementary"].name == "Complementary"
    assert suggestions["analogous"].description == "Close hues with gentle transitions and cohesive surfaces."


def test_variant_accent_hues_follow_the_wheel():
    seed_hue = hex_to_hsl("#D03030").h
    accents = {s.id: hex_to_hsl(s.colors.accent).h for s in generate_palette_suggestions("#D03030", "light")}

    def hue_distance(a, b):
        diff = abs(a - b) % 360
        return min(diff, 360 - diff)

    assert hue_distance(accents["analogous"], (seed_hue + 24) % 360) <= 2
    assert hue_distance(accents["complementary"], (seed_hue + 180) % 360) <= 2
    assert hue_distance(accents["triadic"], (seed_hue + 120) % 360) <= 2
    assert hue_distance(accents["monochrome"], seed_hue) <= 2


def test_light_and_dark_surfaces():
    light = palette_from_accent("#2F6B3A", "light")
    dark = palette_from_accent("#2F6B3A", "dark")
    assert hex_to_hsl(light.background).l == pytest.approx(97, abs=1)
    assert hex_to_hsl(dark.background).l == pytest.approx(8, abs=1)
    assert hex_to_hsl(light.surface).l > hex_to_hsl(light.background).l
    assert hex_to_hsl(dark.surface).l > hex_to_hsl(dark.background).l


def test_neutrals_carry_the_accent_hue():
    palette = palette_from_accent("#FF0000", "dark")
    red, green, blue = hex_to_rgb(palette.background)
    assert red > green
    assert green == blue


def test_status_colors_use_fixed_hues():
    light = palette_from_accent("#7CC4FA", "light")
    dark = palette_from_accent("#FF00FF", "dark")
    for palette in (light, dark):
        assert hex_to_hsl(palette.success).h == pytest.approx(145, abs=2)
        assert hex_to_hsl(palette.danger).h == pytest.approx(4, abs=2)
        assert hex_to_hsl(palette.info).h == pytest.approx(210, abs=2)
    assert light.success != dark.success


def test_dependent_roles_are_not_corrected_at_generation():
    palette = palette_from_accent("#2F6B3A", "light")
    assert palette.accent == "#2F6B3A"
    assert palette.primary == palette.accent
    assert palette.logoPrimaryColor == palette.accent
    assert palette.accentOnPrimary == readable_text_color("#2F6B3A")
    assert palette.onPrimary == palette.accentOnPrimary
    assert palette.textPrimary == readable_text_color(palette.background)
    assert palette.logoFill == palette.textPrimary
    assert palette.imageBackgroundColor == palette.surface


def test_generation_is_deterministic():
    first = generate_palette_suggestions("#123ABC", "dark")
    second = generate_palette_suggestions("#123abc", "dark")
    assert first == second


def test_light_palette_for_pure_red():
    palette = palette_from_accent("#FF0000", "light")
    assert palette.model_dump() == {
        "background": "#F9F6F6",
        "surface": "#FDFCFC",
        "overlay": "#F6EEEE",
        "surfaceVariant": "#F0E5E5",
        "surfaceSubdued": "#ECDFDF",
        "surfaceMuted": "#E4D7D7",
        "primary": "#FF0000",
        "onPrimary": "#111111",
        "muted": "#E0D7D7",
        "textPrimary": "#111111",
        "textSecondary": "#664747",
        "textMuted": "#987171",
        "border": "#D7C1C1",
        "accent": "#FF0000",
        "accentOnPrimary": "#111111",
        "success": "#279B57",
        "danger": "#D52C20",
        "info": "#257AD0",
        "logoFill": "#111111",
        "logoPrimaryColor": "#FF0000",
        "logoSecondaryColor": "#DF8549",
        "logoTertiaryColor": "#E60F82",
        "imageBackgroundColor": "#FDFCFC",
    }


def test_monochrome_accent_for_pure_red_seed():
    suggestions = {s.id: s for s in generate_palette_suggestions("#FF0000", "light")}
    assert suggestions["monochrome"].colors.accent == "#E31C1C"
