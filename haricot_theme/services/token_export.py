from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel

from haricot_theme.schemas.tokens import ThemeDefinition, ThemeTokens

TokenValue = str | int | float | bool

# (title, ThemeTokens attribute) in display order.
INVENTORY_GROUPS: tuple[tuple[str, str], ...] = (
    ("Colors", "colors"),
    ("Spacing", "spacing"),
    ("Padding", "padding"),
    ("Radii", "radii"),
    ("Typography", "typography"),
    ("Font Families", "fontFamilies"),
    ("Layout", "layout"),
    ("Shadows", "shadows"),
    ("Border Widths", "borderWidths"),
    ("Line Heights", "lineHeights"),
    ("Letter Spacing", "letterSpacing"),
    ("Opacity", "opacity"),
    ("Icon Sizes", "iconSizes"),
    ("Widths", "widths"),
    ("Component Sizes", "componentSizes"),
    ("Components", "components"),
)

_CSS_COLORS: tuple[tuple[str, str], ...] = (
    ("--color-background", "background"),
    ("--color-surface", "surface"),
    ("--color-overlay", "overlay"),
    ("--color-text-primary", "textPrimary"),
    ("--color-text-secondary", "textSecondary"),
    ("--color-text-muted", "textMuted"),
    ("--color-border", "border"),
    ("--color-accent", "accent"),
    ("--color-success", "success"),
    ("--color-danger", "danger"),
    ("--color-info", "info"),
)
_CSS_SPACING = ("xs", "sm", "md", "lg", "xl")
_CSS_FONTS = ("display", "regular", "bold")
_CSS_FONT_SIZES = ("body", "heading", "subheading")
_CSS_RADII = ("sm", "md", "lg")
_CSS_PADDING = ("screen", "section", "card")


def flatten_tokens(values: Mapping[str, Any] | BaseModel, prefix: str = "") -> list[tuple[str, TokenValue]]:
    """Dotted ``(key, value)`` pairs for a token group, depth first, skipping unset values."""
    if isinstance(values, BaseModel):
        values = values.model_dump()
    entries: list[tuple[str, TokenValue]] = []
    for key, value in values.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            entries.append((dotted, ", ".join(str(item) for item in value)))
        elif isinstance(value, Mapping):
            entries.extend(flatten_tokens(value, dotted))
        elif isinstance(value, (str, int, float, bool)):
            entries.append((dotted, value))
        else:
            entries.append((dotted, str(value)))
    return entries


def token_inventory(definition: ThemeDefinition) -> list[tuple[str, list[tuple[str, TokenValue]]]]:
    tokens = definition.tokens
    groups = [(title, flatten_tokens(getattr(tokens, attribute))) for title, attribute in INVENTORY_GROUPS]
    groups.append(("Assets", [("logo", definition.assets.logo)]))
    return groups


def _px(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}px"


def css_variables(tokens: ThemeTokens) -> dict[str, str]:
    variables = {name: getattr(tokens.colors, key) for name, key in _CSS_COLORS}
    variables.update({f"--spacing-{key}": _px(getattr(tokens.spacing, key)) for key in _CSS_SPACING})
    variables.update({f"--font-{key}": getattr(tokens.fontFamilies, key) for key in _CSS_FONTS})
    variables.update({f"--font-size-{key}": _px(getattr(tokens.typography, key)) for key in _CSS_FONT_SIZES})
    variables.update({f"--radius-{key}": _px(getattr(tokens.radii, key)) for key in _CSS_RADII})
    variables.update({f"--padding-{key}": _px(getattr(tokens.padding, key)) for key in _CSS_PADDING})
    return variables
