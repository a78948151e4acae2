from __future__ import annotations

import logging
from dataclasses import dataclass

from haricot_theme.schemas.palettes import PaletteMode, PaletteSuggestion
from haricot_theme.schemas.tokens import ThemeColors
from haricot_theme.services.color_math import (
    HSL,
    clamp,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hex,
    readable_text_color,
    shift_hue,
)

logger = logging.getLogger(__name__)

# Fixed hues for status colors; only saturation and lightness follow the mode.
SUCCESS_HUE = 145
DANGER_HUE = 4
INFO_HUE = 210


@dataclass(frozen=True)
class _Variant:
    id: str
    name: str
    description: str
    hue_shift: float
    saturation_offset: float
    saturation_range: tuple[float, float]
    lightness_offset: float
    lightness_range: tuple[float, float]

    def accent_from(self, seed: HSL) -> str:
        return hsl_to_hex(
            (
                shift_hue(seed.h, self.hue_shift),
                clamp(seed.s + self.saturation_offset, *self.saturation_range),
                clamp(seed.l + self.lightness_offset, *self.lightness_range),
            )
        )


VARIANTS: tuple[_Variant, ...] = (
    _Variant(
        id="analogous",
        name="Analogous",
        description="Close hues with gentle transitions and cohesive surfaces.",
        hue_shift=24,
        saturation_offset=8,
        saturation_range=(35, 88),
        lightness_offset=0,
        lightness_range=(28, 66),
    ),
    _Variant(
        id="complementary",
        name="Complementary",
        description="Balanced contrast using a color opposite on the wheel.",
        hue_shift=180,
        saturation_offset=10,
        saturation_range=(36, 90),
        lightness_offset=2,
        lightness_range=(30, 68),
    ),
    _Variant(
        id="triadic",
        name="Triadic",
        description="Vibrant palette with bolder interplay across interface accents.",
        hue_shift=120,
        saturation_offset=6,
        saturation_range=(34, 88),
        lightness_offset=4,
        lightness_range=(30, 70),
    ),
    _Variant(
        id="monochrome",
        name="Monochrome",
        description="Single-hue identity with restrained visual hierarchy.",
        hue_shift=0,
        saturation_offset=0,
        saturation_range=(28, 78),
        lightness_offset=0,
        lightness_range=(30, 64),
    ),
)


def _tint(accent: HSL, factor: float, low: float, high: float, lightness: float) -> str:
    """A neutral in the accent's hue: saturation scaled down from the accent and clamped."""
    return hsl_to_hex((accent.h, clamp(accent.s * factor, low, high), lightness))


def palette_from_accent(accent_hex: str, mode: PaletteMode) -> ThemeColors:
    """
    Expand one accent color into a full palette.

    Surfaces, text and borders carry a faint tint of the accent hue instead of pure
    gray. Text on the accent and on the background uses :func:`readable_text_color`
    directly; no contrast correction is applied here.
    """
    light = mode == "light"
    accent = normalize_hex(accent_hex)
    hsl = hex_to_hsl(accent)

    background = _tint(hsl, 0.18 if light else 0.24, 5 if light else 8, 22 if light else 28, 97 if light else 8)
    surface = _tint(hsl, 0.28 if light else 0.34, 6 if light else 10, 28 if light else 34, 99 if light else 12)
    overlay = _tint(hsl, 0.32 if light else 0.36, 8 if light else 12, 32 if light else 36, 95 if light else 16)
    text_primary = readable_text_color(background)
    accent_on_primary = readable_text_color(accent)

    return ThemeColors(
        background=background,
        surface=surface,
        overlay=overlay,
        surfaceVariant=_tint(hsl, 0.28, 6, 26, 92 if light else 18),
        surfaceSubdued=_tint(hsl, 0.25, 6, 24, 90 if light else 14),
        surfaceMuted=_tint(hsl, 0.23, 6, 20, 87 if light else 21),
        primary=accent,
        onPrimary=accent_on_primary,
        muted=_tint(hsl, 0.12, 4, 14, 86 if light else 24),
        textPrimary=text_primary,
        textSecondary=_tint(hsl, 0.2, 8, 18, 34 if light else 74),
        textMuted=_tint(hsl, 0.16, 6, 16, 52 if light else 58),
        border=_tint(hsl, 0.28, 8, 22, 80 if light else 30),
        accent=accent,
        accentOnPrimary=accent_on_primary,
        success=hsl_to_hex((SUCCESS_HUE, 60 if light else 55, 38 if light else 48)),
        danger=hsl_to_hex((DANGER_HUE, 74 if light else 68, 48 if light else 58)),
        info=hsl_to_hex((INFO_HUE, 70 if light else 64, 48 if light else 58)),
        logoFill=text_primary,
        logoPrimaryColor=accent,
        logoSecondaryColor=hsl_to_hex(
            (
                shift_hue(hsl.h, 24),
                clamp(hsl.s * 0.7, 35, 78),
                clamp(hsl.l + (8 if light else 14), 35, 74),
            )
        ),
        logoTertiaryColor=hsl_to_hex(
            (
                shift_hue(hsl.h, -32),
                clamp(hsl.s * 0.9, 42, 88),
                clamp(hsl.l + (-2 if light else 10), 28, 72),
            )
        ),
        imageBackgroundColor=surface,
    )


def generate_palette_suggestions(seed_hex: str, mode: PaletteMode) -> list[PaletteSuggestion]:
    seed = hex_to_hsl(normalize_hex(seed_hex))
    suggestions = [
        PaletteSuggestion(
            id=variant.id,
            name=variant.name,
            description=variant.description,
            colors=palette_from_accent(variant.accent_from(seed), mode),
        )
        for variant in VARIANTS
    ]
    logger.debug("palette_suggestions.generated", extra={"seed": normalize_hex(seed_hex), "mode": mode})
    return suggestions
