from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ValidationError

from haricot_theme.config import settings
from haricot_theme.schemas.palettes import PaletteSuggestion
from haricot_theme.schemas.tokens import (
    COLOR_KEYS,
    FontFamilies,
    RadiiTokens,
    SpacingTokens,
    TabBarTokens,
    ThemeTokens,
    TypographyTokens,
)
from haricot_theme.services.accessibility import contrast_diagnostics, enforce_accessible_palette
from haricot_theme.services.color_math import normalize_hex
from haricot_theme.services.component_tokens import deep_merge, normalize_tab_bar, recolor_tab_bar, sync_components
from haricot_theme.services.token_aliases import set_aliased

logger = logging.getLogger(__name__)

FontTone = Literal["serif", "sans", "display", "mono"]


class ThemeBuilderError(ValueError):
    pass


@dataclass(frozen=True)
class FontOption:
    id: str
    label: str
    stack: str
    tone: FontTone


@dataclass(frozen=True)
class FontPreset:
    id: str
    label: str
    description: str
    display: str
    body: str


FONT_LIBRARY: tuple[FontOption, ...] = (
    FontOption("peignot", "Peignot", '"Peignot", Georgia, serif', "display"),
    FontOption("east-market", "East Market", '"East Market NF", Georgia, serif', "display"),
    FontOption("gloock", "Gloock", '"Gloock-Regular", Georgia, serif', "serif"),
    FontOption("sprat-regular", "Sprat Regular", '"Sprat-Regular", "Trebuchet MS", sans-serif', "display"),
    FontOption("sprat-bold", "Sprat Bold", '"Sprat-Bold", "Trebuchet MS", sans-serif', "display"),
    FontOption("source-sans", "Source Sans Pro", '"Source Sans Pro", Arial, sans-serif', "sans"),
    FontOption(
        "source-sans-semibold",
        "Source Sans SemiBold",
        '"Source Sans Pro SemiBold", Arial, sans-serif',
        "sans",
    ),
    FontOption("saira-regular", "Saira Regular", '"Saira-Regular", Arial, sans-serif', "sans"),
    FontOption("saira-semibold", "Saira SemiBold", '"Saira-SemiBold", Arial, sans-serif', "sans"),
    FontOption("amiamie-regular", "Amiamie Regular", '"Amiamie-Regular", Arial, sans-serif', "sans"),
    FontOption("amiamie-black", "Amiamie Black", '"Amiamie-Black", Arial, sans-serif', "sans"),
    FontOption("ft88-regular", "FT88 Regular", '"FT88-Regular", "Courier New", monospace', "mono"),
    FontOption("ft88-bold", "FT88 Bold", '"FT88-Bold", "Courier New", monospace', "mono"),
    FontOption("cutive-mono", "Cutive Mono", '"CutiveMono-Regular", "Courier New", monospace', "mono"),
    FontOption("national-park", "National Park", '"NationalPark-VariableVF", Arial, sans-serif', "sans"),
    FontOption("open-dyslexic", "OpenDyslexic", '"OpenDyslexic-Regular", Arial, sans-serif', "sans"),
)

FONT_PRESETS: tuple[FontPreset, ...] = (
    FontPreset(
        id="heritage",
        label="Heritage Editorial",
        description="Confident display with neutral body copy",
        display='"Peignot", Georgia, serif',
        body='"Source Sans Pro", Arial, sans-serif',
    ),
    FontPreset(
        id="modern-sans",
        label="Modern Sans",
        description="Balanced sans stack for product interfaces",
        display='"Saira-SemiBold", Arial, sans-serif',
        body='"Saira-Regular", Arial, sans-serif',
    ),
    FontPreset(
        id="print-club",
        label="Print Club",
        description="Retro poster headlines with legible forms",
        display='"Sprat-Bold", "Trebuchet MS", sans-serif',
        body='"Amiamie-Regular", Arial, sans-serif',
    ),
    FontPreset(
        id="mono-lab",
        label="Mono Lab",
        description="Technical monochrome style",
        display='"FT88-Bold", "Courier New", monospace',
        body='"FT88-Regular", "Courier New", monospace',
    ),
)

TAB_ICON_OPTIONS: tuple[str, ...] = (
    "home",
    "grid",
    "shopping-cart",
    "list",
    "book-open",
    "compass",
    "heart",
    "star",
    "clock",
    "layers",
    "sun",
    "moon",
    "feather",
    "sparkles",
)


def start_draft(base_tokens: ThemeTokens) -> ThemeTokens:
    return sync_components(base_tokens)


def update_draft_color(
    tokens: ThemeTokens,
    key: str,
    value: Any,
    enforce: bool | None = None,
) -> ThemeTokens:
    """Set one color role. Typed input is normalized, never rejected."""
    if key not in COLOR_KEYS:
        raise ThemeBuilderError(f"Unknown color token: {key}.")
    if enforce is None:
        enforce = settings.THEME_BUILDER_ENFORCE_CONTRAST
    colors = tokens.colors.model_copy(update={key: normalize_hex(value)})
    if enforce:
        colors = enforce_accessible_palette(colors)
    return tokens.model_copy(update={"colors": colors})


def _update_aliased(tokens: ThemeTokens, group: str, model: type[BaseModel], key: str, value: Any) -> ThemeTokens:
    current = getattr(tokens, group).model_dump()
    try:
        updated = model.model_validate(set_aliased(group, current, key, value))
    except KeyError as exc:
        raise ThemeBuilderError(f"Unknown {group} token: {key}.") from exc
    except ValidationError as exc:
        raise ThemeBuilderError(f"Invalid {group} value for {key}: {value!r}.") from exc
    return sync_components(tokens.model_copy(update={group: updated}))


def update_draft_spacing(tokens: ThemeTokens, key: str, value: float) -> ThemeTokens:
    return _update_aliased(tokens, "spacing", SpacingTokens, key, value)


def update_draft_radius(tokens: ThemeTokens, key: str, value: float) -> ThemeTokens:
    return _update_aliased(tokens, "radii", RadiiTokens, key, value)


def update_draft_typography(tokens: ThemeTokens, key: str, value: float) -> ThemeTokens:
    return _update_aliased(tokens, "typography", TypographyTokens, key, value)


def update_draft_font_family(tokens: ThemeTokens, role: str, stack: str) -> ThemeTokens:
    if role not in FontFamilies.model_fields:
        raise ThemeBuilderError(f"Unknown font role: {role}.")
    font_families = tokens.fontFamilies.model_copy(update={role: stack})
    return tokens.model_copy(update={"fontFamilies": font_families})


def get_font_preset(preset_id: str) -> FontPreset:
    for preset in FONT_PRESETS:
        if preset.id == preset_id:
            return preset
    raise ThemeBuilderError(f"Unknown font preset: {preset_id}.")


def apply_font_preset(tokens: ThemeTokens, preset_id: str) -> ThemeTokens:
    preset = get_font_preset(preset_id)
    font_families = FontFamilies(
        display=preset.display,
        regular=preset.body,
        light=preset.body,
        lightItalic=preset.body,
        medium=preset.body,
        semiBold=preset.body,
        bold=preset.display,
    )
    return tokens.model_copy(update={"fontFamilies": font_families})


def search_fonts(query: str | None) -> list[FontOption]:
    needle = (query or "").strip().lower()
    if not needle:
        return list(FONT_LIBRARY)
    return [font for font in FONT_LIBRARY if needle in f"{font.label} {font.tone}".lower()]


def update_draft_tab_bar(tokens: ThemeTokens, patch: Mapping[str, Any]) -> ThemeTokens:
    """Apply a partial tab bar edit; icon names must come from :data:`TAB_ICON_OPTIONS`."""
    icon_names = (patch.get("icon") or {}).get("names") or {}
    unknown = sorted(name for name in icon_names.values() if name not in TAB_ICON_OPTIONS)
    if unknown:
        raise ThemeBuilderError(f"Unknown tab icon names: {', '.join(unknown)}.")
    try:
        tab_bar = TabBarTokens.model_validate(deep_merge(tokens.components.tabBar.model_dump(), patch))
    except ValidationError as exc:
        raise ThemeBuilderError(f"Invalid tab bar edit: {exc}") from exc
    components = tokens.components.model_copy(update={"tabBar": normalize_tab_bar(tab_bar)})
    return tokens.model_copy(update={"components": components})


def apply_palette_suggestion(tokens: ThemeTokens, suggestion: PaletteSuggestion) -> ThemeTokens:
    """Adopt a generated palette: contrast is corrected first, then the tab bar is repainted."""
    merged = tokens.colors.model_copy(update=suggestion.colors.model_dump())
    colors = enforce_accessible_palette(merged)
    components = tokens.components.model_copy(
        update={"tabBar": recolor_tab_bar(tokens.components.tabBar, colors)}
    )
    logger.debug("theme_builder.palette_applied", extra={"suggestion": suggestion.id})
    return tokens.model_copy(update={"colors": colors, "components": components})
