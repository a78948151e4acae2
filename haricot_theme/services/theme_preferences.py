from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping

from haricot_theme.schemas.custom_themes import CustomThemeRecord
from haricot_theme.schemas.preferences import (
    HighContrastMode,
    ThemeProfile,
    normalize_high_contrast_mode,
    normalize_share_code,
)
from haricot_theme.services.theme_registry import (
    DEFAULT_THEME_NAME,
    HIGH_CONTRAST_THEME_NAMES,
    is_high_contrast_theme,
    is_theme_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemePreferenceState:
    themeName: str = DEFAULT_THEME_NAME
    customShareCode: str | None = None
    highContrastMode: HighContrastMode = HighContrastMode.off


@dataclass(frozen=True)
class ThemeSelectionOutcome:
    """
    Result of a selection attempt.

    ``profile_update`` is the exact patch for the profile store, or ``None`` when
    nothing should be persisted (a switch waiting on confirmation).
    """

    state: ThemePreferenceState
    profile_update: dict[str, Any] | None = None
    requires_confirmation: bool = False
    pending_theme_name: str | None = None


class CustomThemeLookupStatus(str, Enum):
    not_requested = "not_requested"
    loading = "loading"
    found = "found"
    not_found = "not_found"


@dataclass(frozen=True)
class CustomThemeLookup:
    share_code: str | None
    status: CustomThemeLookupStatus
    record: CustomThemeRecord | None = None


def lookup_from_query_result(
    share_code: Any,
    result: CustomThemeRecord | Mapping[str, Any] | None,
    *,
    loading: bool = False,
) -> CustomThemeLookup:
    """Classify what the theme store returned for a share code query."""
    code = normalize_share_code(share_code)
    if code is None:
        return CustomThemeLookup(share_code=None, status=CustomThemeLookupStatus.not_requested)
    if loading:
        return CustomThemeLookup(share_code=code, status=CustomThemeLookupStatus.loading)
    if result is None:
        return CustomThemeLookup(share_code=code, status=CustomThemeLookupStatus.not_found)
    record = result if isinstance(result, CustomThemeRecord) else CustomThemeRecord.model_validate(result)
    return CustomThemeLookup(share_code=code, status=CustomThemeLookupStatus.found, record=record)


def _profile_update(theme_name: str | None, share_code: str | None, mode: HighContrastMode) -> dict[str, Any]:
    return {
        "preferredTheme": theme_name,
        "customThemeShareCode": share_code,
        "highContrastMode": mode.value,
    }


def state_from_profile(profile: ThemeProfile | Mapping[str, Any] | None) -> ThemePreferenceState:
    if profile is None:
        return ThemePreferenceState()
    if not isinstance(profile, ThemeProfile):
        profile = ThemeProfile.model_validate(profile)
    theme_name = profile.preferredTheme
    if theme_name is not None and not is_theme_name(theme_name):
        logger.warning("preferences.unknown_theme_name", extra={"theme_name": theme_name})
        theme_name = None
    return ThemePreferenceState(
        themeName=theme_name or DEFAULT_THEME_NAME,
        customShareCode=profile.customThemeShareCode,
        highContrastMode=profile.highContrastMode,
    )


def active_theme_name(state: ThemePreferenceState) -> str:
    if state.highContrastMode is HighContrastMode.off:
        return state.themeName
    return HIGH_CONTRAST_THEME_NAMES[state.highContrastMode.value]


def select_builtin_theme(state: ThemePreferenceState, name: str) -> ThemeSelectionOutcome:
    """
    Choose a built-in theme.

    Picking a high-contrast theme switches the matching mode on. Picking any other
    theme while high contrast is on is held back until :func:`confirm_builtin_theme`.
    """
    if not is_theme_name(name):
        raise ValueError(f"Unknown theme name {name!r}.")

    if is_high_contrast_theme(name):
        mode = HighContrastMode.light if name == HIGH_CONTRAST_THEME_NAMES["light"] else HighContrastMode.dark
        next_state = ThemePreferenceState(themeName=name, customShareCode=None, highContrastMode=mode)
        return ThemeSelectionOutcome(state=next_state, profile_update=_profile_update(name, None, mode))

    if state.highContrastMode is not HighContrastMode.off:
        return ThemeSelectionOutcome(state=state, requires_confirmation=True, pending_theme_name=name)

    return confirm_builtin_theme(state, name)


def confirm_builtin_theme(state: ThemePreferenceState, name: str) -> ThemeSelectionOutcome:
    if not is_theme_name(name):
        raise ValueError(f"Unknown theme name {name!r}.")
    next_state = ThemePreferenceState(themeName=name, customShareCode=None, highContrastMode=HighContrastMode.off)
    return ThemeSelectionOutcome(
        state=next_state,
        profile_update=_profile_update(name, None, HighContrastMode.off),
    )


def apply_custom_share_code(state: ThemePreferenceState, share_code: Any) -> ThemeSelectionOutcome:
    code = normalize_share_code(share_code)
    if code is None:
        raise ValueError("A theme share code is required.")
    next_state = replace(state, customShareCode=code, highContrastMode=HighContrastMode.off)
    return ThemeSelectionOutcome(
        state=next_state,
        profile_update=_profile_update(None, code, HighContrastMode.off),
    )


def apply_share_code_lookup(state: ThemePreferenceState, lookup: CustomThemeLookup) -> ThemeSelectionOutcome | None:
    """Activate a looked-up custom theme once it is found; otherwise there is nothing to apply."""
    if lookup.status is not CustomThemeLookupStatus.found or lookup.record is None:
        return None
    return apply_custom_share_code(state, lookup.record.shareCode)


def set_high_contrast_mode(state: ThemePreferenceState, value: Any) -> ThemeSelectionOutcome:
    mode = normalize_high_contrast_mode(value)
    next_state = replace(state, highContrastMode=mode)
    return ThemeSelectionOutcome(
        state=next_state,
        profile_update={"highContrastMode": mode.value},
    )
