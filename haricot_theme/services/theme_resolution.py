from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Mapping, Union

from haricot_theme.schemas.custom_themes import CustomThemeRecord
from haricot_theme.schemas.preferences import (
    AccessibilityPreferences,
    HighContrastMode,
    normalize_high_contrast_mode,
    normalize_share_code,
)
from haricot_theme.schemas.tokens import ThemeAssets, ThemeDefinition, ThemeTokens
from haricot_theme.services.custom_themes import build_theme_definition_from_custom_theme
from haricot_theme.services.theme_registry import (
    DEFAULT_THEME_NAME,
    HIGH_CONTRAST_THEME_NAMES,
    get_theme_definition,
    is_theme_name,
)

logger = logging.getLogger(__name__)

CUSTOM_THEME_NAME = "custom"


@dataclass(frozen=True)
class BuiltInSelection:
    name: str


@dataclass(frozen=True)
class CustomSelection:
    record: CustomThemeRecord


@dataclass(frozen=True)
class HighContrastSelection:
    mode: HighContrastMode

    @property
    def name(self) -> str:
        return HIGH_CONTRAST_THEME_NAMES[self.mode.value]


ThemeSelection = Union[BuiltInSelection, CustomSelection, HighContrastSelection]


@dataclass(frozen=True)
class ResolvedTheme:
    theme_name: str
    definition: ThemeDefinition
    selection: ThemeSelection
    custom_theme: CustomThemeRecord | None = None

    @property
    def tokens(self) -> ThemeTokens:
        return self.definition.tokens

    @property
    def assets(self) -> ThemeAssets:
        return self.definition.assets


def select_theme(
    theme_name: str | None = None,
    custom_share_code: str | None = None,
    custom_theme: CustomThemeRecord | None = None,
    high_contrast_mode: Any = HighContrastMode.off,
) -> ThemeSelection:
    """
    Pick what to render. High contrast beats a custom theme, which beats the named built-in.

    A custom record only counts when it belongs to the active share code; a record left
    over from an earlier code is ignored.
    """
    mode = normalize_high_contrast_mode(high_contrast_mode)
    if mode is not HighContrastMode.off:
        return HighContrastSelection(mode=mode)

    share_code = normalize_share_code(custom_share_code)
    if custom_theme is not None:
        if share_code is not None and custom_theme.shareCode == share_code:
            return CustomSelection(record=custom_theme)
        logger.warning(
            "theme_resolution.stale_custom_theme",
            extra={"record_share_code": custom_theme.shareCode, "active_share_code": share_code},
        )

    if theme_name is None:
        return BuiltInSelection(name=DEFAULT_THEME_NAME)
    if not is_theme_name(theme_name):
        logger.warning("theme_resolution.unknown_theme_name", extra={"theme_name": theme_name})
        return BuiltInSelection(name=DEFAULT_THEME_NAME)
    return BuiltInSelection(name=theme_name)


def resolve_selection(selection: ThemeSelection) -> ResolvedTheme:
    if isinstance(selection, CustomSelection):
        return ResolvedTheme(
            theme_name=CUSTOM_THEME_NAME,
            definition=build_theme_definition_from_custom_theme(selection.record),
            selection=selection,
            custom_theme=selection.record,
        )
    return ResolvedTheme(
        theme_name=selection.name,
        definition=get_theme_definition(selection.name),
        selection=selection,
    )


def resolve_theme(
    theme_name: str | None = None,
    custom_share_code: str | None = None,
    custom_theme: CustomThemeRecord | None = None,
    high_contrast_mode: Any = HighContrastMode.off,
) -> ResolvedTheme:
    return resolve_selection(select_theme(theme_name, custom_share_code, custom_theme, high_contrast_mode))


_UNSET: Any = object()


@dataclass(frozen=True)
class _Inputs:
    theme_name: str | None
    custom_share_code: str | None
    custom_theme: CustomThemeRecord | None
    high_contrast_mode: HighContrastMode


class ThemeResolver:
    """
    Holds the three theme inputs for one consumer and hands out the resolved theme.

    Starts on the default built-in theme until preferences arrive. The last resolved
    theme is reused while the selection it came from is unchanged, so consumers can
    compare by identity. If inputs change while a resolution is running, that result is
    still returned to its caller but is not kept; the newest inputs always win.
    """

    def __init__(
        self,
        theme_name: str | None = None,
        custom_share_code: str | None = None,
        custom_theme: CustomThemeRecord | Mapping[str, Any] | None = None,
        accessibility: AccessibilityPreferences | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._inputs = _Inputs(
            theme_name=theme_name,
            custom_share_code=normalize_share_code(custom_share_code),
            custom_theme=_as_record(custom_theme),
            high_contrast_mode=(accessibility or AccessibilityPreferences()).highContrastMode,
        )
        self._revision = 0
        self._resolved: ResolvedTheme | None = None
        self._resolved_revision = -1

    @property
    def revision(self) -> int:
        return self._revision

    def update(
        self,
        *,
        theme_name: str | None = _UNSET,
        custom_share_code: str | None = _UNSET,
        custom_theme: CustomThemeRecord | Mapping[str, Any] | None = _UNSET,
        accessibility: AccessibilityPreferences | None = _UNSET,
        high_contrast_mode: Any = _UNSET,
    ) -> None:
        with self._lock:
            current = self._inputs
            changes: dict[str, Any] = {}
            if theme_name is not _UNSET:
                changes["theme_name"] = theme_name
            if custom_share_code is not _UNSET:
                changes["custom_share_code"] = normalize_share_code(custom_share_code)
            if custom_theme is not _UNSET:
                changes["custom_theme"] = _as_record(custom_theme)
            if accessibility is not _UNSET:
                changes["high_contrast_mode"] = (accessibility or AccessibilityPreferences()).highContrastMode
            if high_contrast_mode is not _UNSET:
                changes["high_contrast_mode"] = normalize_high_contrast_mode(high_contrast_mode)

            updated = replace(current, **changes)
            if updated == current:
                return
            self._inputs = updated
            self._revision += 1

    def resolve(self) -> ResolvedTheme:
        with self._lock:
            inputs = self._inputs
            revision = self._revision
            previous = self._resolved
            if previous is not None and self._resolved_revision == revision:
                return previous

        selection = select_theme(
            inputs.theme_name,
            inputs.custom_share_code,
            inputs.custom_theme,
            inputs.high_contrast_mode,
        )
        if previous is not None and previous.selection == selection:
            resolved = previous
        else:
            resolved = resolve_selection(selection)
            logger.debug(
                "theme_resolution.resolved",
                extra={"theme_name": resolved.theme_name, "revision": revision},
            )

        with self._lock:
            if self._revision == revision:
                self._resolved = resolved
                self._resolved_revision = revision
        return resolved


def _as_record(value: CustomThemeRecord | Mapping[str, Any] | None) -> CustomThemeRecord | None:
    if value is None or isinstance(value, CustomThemeRecord):
        return value
    return CustomThemeRecord.model_validate(value)
