from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Mapping, get_args

from pydantic import ValidationError

from haricot_theme.config import settings
from haricot_theme.schemas.tokens import (
    ComponentSizes,
    LayoutTokens,
    PaddingTokens,
    RadiiTokens,
    SpacingTokens,
    ThemeColors,
    ThemeDefinition,
    ThemeTokens,
    TypographyTokens,
)
from haricot_theme.services.component_tokens import build_tab_bar, deep_merge, with_components
from haricot_theme.services.token_aliases import ALIAS_GROUPS, merge_aliased

logger = logging.getLogger(__name__)

ThemeName = Literal[
    "classic",
    "midnight",
    "garden",
    "citrus",
    "highContrastLight",
    "highContrastDark",
]
THEME_NAMES: tuple[str, ...] = get_args(ThemeName)
DEFAULT_THEME_NAME: ThemeName = "classic"
HIGH_CONTRAST_THEME_NAMES: dict[str, ThemeName] = {
    "light": "highContrastLight",
    "dark": "highContrastDark",
}

_PLAIN_GROUPS = (
    "padding",
    "fontFamilies",
    "layout",
    "shadows",
    "borderWidths",
    "lineHeights",
    "letterSpacing",
    "opacity",
    "iconSizes",
    "widths",
    "componentSizes",
)
_REQUIRED_BASE_KEYS = (*ALIAS_GROUPS, *_PLAIN_GROUPS, "tabBar")


class ThemeRegistryError(RuntimeError):
    pass


@dataclass(frozen=True)
class ThemeOption:
    name: str
    label: str
    description: str


def _read_json_object(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ThemeRegistryError(f"Missing theme template at {path}.")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ThemeRegistryError(f"Theme template {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ThemeRegistryError(f"Theme template {path} must decode to a JSON object.")
    return data


@lru_cache(maxsize=1)
def load_base_tokens_template() -> dict[str, Any]:
    path = settings.templates_dir / "base_tokens.json"
    data = _read_json_object(path)
    missing = [key for key in _REQUIRED_BASE_KEYS if not isinstance(data.get(key), dict)]
    if missing:
        raise ThemeRegistryError(f"Base token template {path} is missing token groups: {', '.join(missing)}.")
    return data


def build_theme_tokens(base: Mapping[str, Any], authored: Mapping[str, Any]) -> ThemeTokens:
    """
    Complete token set from the shared base plus one theme's authored values.

    Authors may write spacing, radii and typography under either naming scheme; the
    groups are reconciled here so every definition carries both.
    """
    groups: dict[str, Any] = {"colors": ThemeColors.model_validate(authored.get("colors") or {})}
    for group in ALIAS_GROUPS:
        groups[group] = merge_aliased(group, base[group], authored.get(group))
    for group in _PLAIN_GROUPS:
        groups[group] = deep_merge(base[group], authored.get(group))

    spacing = SpacingTokens.model_validate(groups["spacing"])
    padding = PaddingTokens.model_validate(groups["padding"])
    radii = RadiiTokens.model_validate(groups["radii"])
    typography = TypographyTokens.model_validate(groups["typography"])
    layout = LayoutTokens.model_validate(groups["layout"])
    component_sizes = ComponentSizes.model_validate(groups["componentSizes"])
    tab_bar = build_tab_bar(deep_merge(base["tabBar"], authored.get("tabBar")), groups["colors"])

    groups.update(
        spacing=spacing,
        padding=padding,
        radii=radii,
        typography=typography,
        layout=layout,
        componentSizes=component_sizes,
        components=with_components(
            spacing=spacing,
            padding=padding,
            radii=radii,
            typography=typography,
            layout=layout,
            component_sizes=component_sizes,
            tab_bar=tab_bar,
        ),
    )
    return ThemeTokens.model_validate(groups)


def _load_theme_file(path: Path, base: Mapping[str, Any]) -> tuple[str, ThemeDefinition]:
    data = _read_json_object(path)
    name = data.get("name")
    if name not in THEME_NAMES:
        raise ThemeRegistryError(f"Theme template {path} declares unknown theme name {name!r}.")
    label = data.get("label")
    if not isinstance(label, str) or not label.strip():
        raise ThemeRegistryError(f"Theme template {path} missing required label.")
    authored = data.get("tokens")
    if not isinstance(authored, dict):
        raise ThemeRegistryError(f"Theme template {path} missing required tokens object.")
    assets = data.get("assets") if isinstance(data.get("assets"), dict) else {}

    try:
        definition = ThemeDefinition(
            label=label.strip(),
            description=str(data.get("description") or ""),
            tokens=build_theme_tokens(base, authored),
            assets={"logo": assets.get("logo") or settings.THEME_DEFAULT_LOGO_ASSET},
        )
    except ValidationError as exc:
        raise ThemeRegistryError(f"Theme template {path} produced an invalid token set: {exc}") from exc
    return name, definition


@lru_cache(maxsize=1)
def _registry() -> dict[str, ThemeDefinition]:
    base = load_base_tokens_template()
    directory = settings.templates_dir / "themes"
    loaded: dict[str, ThemeDefinition] = {}
    for path in sorted(directory.glob("*.json")):
        name, definition = _load_theme_file(path, base)
        if name in loaded:
            raise ThemeRegistryError(f"Theme {name!r} is defined more than once (second copy at {path}).")
        loaded[name] = definition

    missing = [name for name in THEME_NAMES if name not in loaded]
    if missing:
        raise ThemeRegistryError(f"Built-in theme templates missing for: {', '.join(missing)}.")

    logger.info("theme_registry.loaded", extra={"themes": list(THEME_NAMES), "directory": str(directory)})
    return {name: loaded[name] for name in THEME_NAMES}


def is_theme_name(value: Any) -> bool:
    return isinstance(value, str) and value in THEME_NAMES


def is_high_contrast_theme(name: str) -> bool:
    return name in HIGH_CONTRAST_THEME_NAMES.values()


def get_theme_definition(name: str) -> ThemeDefinition:
    """Look up a built-in theme. Callers validate with :func:`is_theme_name` first."""
    if not is_theme_name(name):
        raise ValueError(f"Unknown theme name {name!r}; check is_theme_name() before lookup.")
    return _registry()[name]


def theme_definitions() -> dict[str, ThemeDefinition]:
    return dict(_registry())


def theme_options() -> list[ThemeOption]:
    return [
        ThemeOption(name=name, label=definition.label, description=definition.description)
        for name, definition in _registry().items()
    ]


def reset_theme_registry() -> None:
    """Drop cached templates so the next lookup re-reads them."""
    load_base_tokens_template.cache_clear()
    _registry.cache_clear()
