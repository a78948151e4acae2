from __future__ import annotations

from typing import Any, Mapping

from haricot_theme.schemas.tokens import (
    ComponentSizes,
    ComponentTokens,
    DerivedComponentTokens,
    LayoutTokens,
    PaddingTokens,
    RadiiTokens,
    SpacingTokens,
    TabBarTokens,
    ThemeColors,
    ThemeTokens,
    TypographyTokens,
)

CARD_IMAGE_HEIGHT = 120
RAIL_SCROLL_PADDING = 0


def derive_components(
    spacing: SpacingTokens,
    padding: PaddingTokens,
    radii: RadiiTokens,
    typography: TypographyTokens,
    layout: LayoutTokens,
    component_sizes: ComponentSizes,
) -> DerivedComponentTokens:
    """
    Component tokens as a pure function of the primitive groups.

    The tab bar is not derivable here (it needs colors) and is attached by
    :func:`with_components`.
    """
    return DerivedComponentTokens(
        card={
            "padding": padding.card,
            "borderRadius": radii.radiusCard,
            "gap": spacing.spacingCompact,
            "margin": spacing.spacingCompact,
            "imageHeight": CARD_IMAGE_HEIGHT,
        },
        button={
            "primary": {
                "paddingHorizontal": spacing.spacingRoomy,
                "paddingVertical": spacing.spacingStandard,
                "borderRadius": radii.radiusControl,
                "fontSize": typography.typeBody,
            },
            "secondary": {
                "paddingHorizontal": spacing.spacingComfortable,
                "paddingVertical": spacing.spacingStandard,
                "borderRadius": radii.radiusControl,
                "fontSize": typography.typeBody,
            },
            "pill": {
                "paddingHorizontal": spacing.spacingCompact,
                "paddingVertical": spacing.spacingTight,
                "borderRadius": radii.radiusControl,
            },
            "text": {
                "paddingHorizontal": spacing.spacingComfortable,
                "paddingVertical": spacing.spacingCompact,
            },
        },
        list={
            "itemPadding": {"horizontal": spacing.spacingComfortable, "vertical": spacing.spacingComfortable},
            "itemGap": spacing.spacingComfortable,
            "borderRadius": radii.radiusCard,
            "headerPadding": {"horizontal": spacing.spacingComfortable, "vertical": spacing.spacingStandard},
        },
        header={
            "page": {
                "paddingTop": layout.headerTopPadding,
                "paddingHorizontal": spacing.spacingRoomy,
                "paddingBottom": spacing.spacingStandard,
                "gap": spacing.spacingCompact,
            },
            "section": {
                "marginBottom": spacing.spacingStandard,
                "gap": spacing.spacingTight,
            },
        },
        input={
            "paddingHorizontal": spacing.spacingComfortable,
            "paddingVertical": spacing.spacingCompact,
            "borderRadius": radii.radiusControl,
            "fontSize": typography.typeBody,
            "labelGap": spacing.spacingTight,
        },
        textArea={
            "minHeight": component_sizes.textAreaMinHeight,
            "padding": spacing.spacingRoomy,
            "borderRadius": radii.radiusCard,
        },
        rail={
            "headerGap": spacing.spacingTight,
            "headerMarginBottom": spacing.spacingStandard,
            "cardGap": spacing.spacingTight,
            "scrollPadding": RAIL_SCROLL_PADDING,
        },
    )


def with_components(
    *,
    spacing: SpacingTokens,
    padding: PaddingTokens,
    radii: RadiiTokens,
    typography: TypographyTokens,
    layout: LayoutTokens,
    component_sizes: ComponentSizes,
    tab_bar: TabBarTokens,
) -> ComponentTokens:
    derived = derive_components(spacing, padding, radii, typography, layout, component_sizes)
    return ComponentTokens(**dict(derived), tabBar=tab_bar)


def sync_components(tokens: ThemeTokens) -> ThemeTokens:
    """Recompute derived component tokens from the current primitives, keeping the tab bar."""
    components = with_components(
        spacing=tokens.spacing,
        padding=tokens.padding,
        radii=tokens.radii,
        typography=tokens.typography,
        layout=tokens.layout,
        component_sizes=tokens.componentSizes,
        tab_bar=tokens.components.tabBar,
    )
    return tokens.model_copy(update={"components": components})


DEFAULT_TAB_ICON_NAMES: dict[str, str] = {
    "home": "home",
    "kitchen": "shopping-cart",
    "lists": "list",
}


def _tab_bar_color_roles(colors: ThemeColors) -> dict[str, Any]:
    return {
        "containerBackground": colors.background,
        "slotBackground": colors.background,
        "list": {"backgroundColor": colors.surface, "borderColor": colors.border},
        "trigger": {
            "inactiveBackgroundColor": colors.surface,
            "activeBackgroundColor": colors.accent,
        },
        "label": {"color": colors.textSecondary, "activeColor": colors.accentOnPrimary},
        "icon": {"inactiveColor": colors.textSecondary, "activeColor": colors.accentOnPrimary},
    }


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any] | None) -> dict[str, Any]:
    merged: dict[str, Any] = {key: (dict(value) if isinstance(value, Mapping) else value) for key, value in base.items()}
    for key, value in (patch or {}).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def build_tab_bar(template: Mapping[str, Any], colors: ThemeColors) -> TabBarTokens:
    """Tab bar from geometry in ``template`` with color roles taken from the palette.

    Colors given explicitly in ``template`` win over the palette roles.
    """
    roles = _tab_bar_color_roles(colors)
    if not isinstance(template.get("icon"), Mapping):
        roles.pop("icon")
    return normalize_tab_bar(TabBarTokens.model_validate(deep_merge(roles, template)))


def normalize_tab_bar(tab_bar: TabBarTokens) -> TabBarTokens:
    if tab_bar.icon is None:
        return tab_bar
    names = {**tab_bar.icon.names}
    for slot, default in DEFAULT_TAB_ICON_NAMES.items():
        if not names.get(slot):
            names[slot] = default
    icon = tab_bar.icon.model_copy(update={"names": names})
    return tab_bar.model_copy(update={"icon": icon})


def recolor_tab_bar(tab_bar: TabBarTokens, colors: ThemeColors) -> TabBarTokens:
    """Repaint a tab bar for a new palette; inactive trigger fills are left as authored."""
    roles = _tab_bar_color_roles(colors)
    roles["trigger"].pop("inactiveBackgroundColor")
    if tab_bar.icon is None:
        roles.pop("icon")
    return TabBarTokens.model_validate(deep_merge(tab_bar.model_dump(), roles))
