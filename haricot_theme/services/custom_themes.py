from __future__ import annotations

import logging
import random
from typing import Any

from haricot_theme.config import settings
from haricot_theme.schemas.custom_themes import (
    CreateCustomThemePayload,
    CustomThemeRecord,
    ThemeBuilderDraft,
)
from haricot_theme.schemas.tokens import (
    FontFamilies,
    PaddingTokens,
    RadiiTokens,
    SpacingTokens,
    ThemeColors,
    ThemeDefinition,
    ThemeTokens,
    TypographyTokens,
)
from haricot_theme.services.component_tokens import normalize_tab_bar, with_components
from haricot_theme.services.theme_registry import DEFAULT_THEME_NAME, get_theme_definition
from haricot_theme.services.token_aliases import merge_aliased

logger = logging.getLogger(__name__)

# Color roles a record may omit. An omitted role follows the first of its
# sources the record does provide, else keeps the fallback theme's value.
DERIVED_COLOR_SOURCES: dict[str, tuple[str, ...]] = {
    "logoFill": ("textPrimary",),
    "imageBackgroundColor": ("surface", "background"),
    "primary": ("accent",),
    "onPrimary": ("accentOnPrimary", "textPrimary"),
    "muted": ("overlay", "surface"),
    "surfaceVariant": ("surface",),
    "surfaceSubdued": ("overlay", "surface"),
    "surfaceMuted": ("overlay", "surface"),
    "logoPrimaryColor": ("accent",),
    "logoSecondaryColor": ("surfaceVariant",),
    "logoTertiaryColor": ("danger",),
}


def _merge_colors(fallback: ThemeColors, overrides: dict[str, str] | None) -> ThemeColors:
    overrides = overrides or {}
    merged: dict[str, Any] = {**fallback.model_dump(), **overrides}
    for key, sources in DERIVED_COLOR_SOURCES.items():
        if key in overrides:
            continue
        source = next((name for name in sources if name in overrides), None)
        if source is not None:
            merged[key] = overrides[source]
    return ThemeColors.model_validate(merged)


def normalize_custom_theme_to_tokens(
    record: CustomThemeRecord,
    fallback_theme_name: str = DEFAULT_THEME_NAME,
) -> ThemeTokens:
    """
    Complete token set for a custom theme, layered over a built-in fallback.

    Each group in ``record`` overrides the fallback key by key; spacing, radii and
    typography accept either naming scheme. Secondary color roles the record leaves
    out are derived per :data:`DERIVED_COLOR_SOURCES`. Components are always recomputed from
    the merged primitives (with the fallback's layout and component sizes). The tab
    bar comes from the record when it has one, else from the fallback. The record
    is not modified.
    """
    fallback = get_theme_definition(fallback_theme_name).tokens

    colors = _merge_colors(fallback.colors, record.colors)
    spacing = SpacingTokens.model_validate(merge_aliased("spacing", fallback.spacing.model_dump(), record.spacing))
    radii = RadiiTokens.model_validate(merge_aliased("radii", fallback.radii.model_dump(), record.radii))
    typography = TypographyTokens.model_validate(
        merge_aliased("typography", fallback.typography.model_dump(), record.typography)
    )
    padding = PaddingTokens.model_validate({**fallback.padding.model_dump(), **(record.padding or {})})
    font_families = FontFamilies.model_validate({**fallback.fontFamilies.model_dump(), **(record.fontFamilies or {})})

    components = with_components(
        spacing=spacing,
        padding=padding,
        radii=radii,
        typography=typography,
        layout=fallback.layout,
        component_sizes=fallback.componentSizes,
        tab_bar=normalize_tab_bar(record.tabBar or fallback.components.tabBar),
    )
    logger.debug(
        "custom_themes.normalized",
        extra={"share_code": record.shareCode, "fallback_theme": fallback_theme_name},
    )
    return fallback.model_copy(
        update={
            "colors": colors,
            "spacing": spacing,
            "padding": padding,
            "radii": radii,
            "typography": typography,
            "fontFamilies": font_families,
            "components": components,
        }
    )


def build_theme_definition_from_custom_theme(
    record: CustomThemeRecord,
    fallback_theme_name: str = DEFAULT_THEME_NAME,
) -> ThemeDefinition:
    """Wrap a custom theme as a definition. The logo always comes from the fallback theme."""
    fallback = get_theme_definition(fallback_theme_name)
    return fallback.model_copy(
        update={
            "label": record.name,
            "description": f"Custom theme: {record.name}",
            "tokens": normalize_custom_theme_to_tokens(record, fallback_theme_name),
        }
    )


def placeholder_theme_name(rng: random.Random | None = None) -> str:
    suffix = (rng or random).randint(1, 999)
    return f"{settings.THEME_CUSTOM_NAME_PREFIX} {suffix}"


def build_create_custom_theme_payload(
    draft: ThemeBuilderDraft,
    base_tokens: ThemeTokens,
    rng: random.Random | None = None,
) -> CreateCustomThemePayload:
    tokens = draft.tokens or base_tokens
    name = draft.name.strip() or placeholder_theme_name(rng)
    colors = tokens.colors
    spacing = tokens.spacing
    radii = tokens.radii
    typography = tokens.typography

    return CreateCustomThemePayload(
        name=name,
        colors={
            "background": colors.background,
            "surface": colors.surface,
            "overlay": colors.overlay,
            "textPrimary": colors.textPrimary,
            "textSecondary": colors.textSecondary,
            "textMuted": colors.textMuted,
            "border": colors.border,
            "accent": colors.accent,
            "accentOnPrimary": colors.accentOnPrimary,
            "success": colors.success,
            "danger": colors.danger,
            "info": colors.info,
            "logoFill": colors.logoFill or colors.textPrimary,
        },
        spacing={
            "xxs": spacing.xxs,
            "xs": spacing.xs,
            "sm": spacing.sm,
            "md": spacing.md,
            "lg": spacing.lg,
            "xl": spacing.xl,
            "xxl": spacing.xxl,
        },
        padding=tokens.padding.model_dump(),
        radii={"sm": radii.sm, "md": radii.md, "lg": radii.lg},
        typography={
            "title": typography.title,
            "heading": typography.heading,
            "subheading": typography.subheading,
            "body": typography.body,
            "small": typography.small,
            "tiny": typography.tiny,
        },
        fontFamilies=tokens.fontFamilies.model_dump(),
        isPublic=draft.isPublic,
        tabBar=normalize_tab_bar(tokens.components.tabBar),
    )
