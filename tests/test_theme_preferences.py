from __future__ import annotations

import logging

import pytest

from haricot_theme.schemas.custom_themes import CustomThemeRecord
from haricot_theme.schemas.preferences import (
    AccessibilityPreferences,
    HighContrastMode,
    ThemeProfile,
    normalize_high_contrast_mode,
    normalize_share_code,
)
from haricot_theme.services.theme_preferences import (
    CustomThemeLookupStatus,
    ThemePreferenceState,
    active_theme_name,
    apply_custom_share_code,
    apply_share_code_lookup,
    confirm_builtin_theme,
    lookup_from_query_result,
    select_builtin_theme,
    set_high_contrast_mode,
    state_from_profile,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (True, HighContrastMode.dark),
        (False, HighContrastMode.off),
        (None, HighContrastMode.off),
        ("light", HighContrastMode.light),
        (" DARK ", HighContrastMode.dark),
        ("", HighContrastMode.off),
        (HighContrastMode.light, HighContrastMode.light),
    ],
)
def test_high_contrast_normalization(raw, expected):
    assert normalize_high_contrast_mode(raw) is expected


def test_unrecognized_high_contrast_value_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert normalize_high_contrast_mode("sepia") is HighContrastMode.off
        assert normalize_high_contrast_mode(3) is HighContrastMode.off
    assert any(record.message == "preferences.unrecognized_high_contrast" for record in caplog.records)


def test_share_code_normalization():
    assert normalize_share_code("  ab12cd ") == "AB12CD"
    assert normalize_share_code("   ") is None
    assert normalize_share_code(None) is None


def test_accessibility_preferences_accept_legacy_boolean():
    assert AccessibilityPreferences(highContrastMode=True).highContrastMode is HighContrastMode.dark
    assert AccessibilityPreferences().highContrastMode is HighContrastMode.off


def test_state_from_profile():
    state = state_from_profile(
        {"preferredTheme": "midnight", "customThemeShareCode": " abc ", "highContrastMode": False, "email": "a@b.c"}
    )
    assert state == ThemePreferenceState(themeName="midnight", customShareCode="ABC", highContrastMode=HighContrastMode.off)

    legacy = state_from_profile(ThemeProfile(preferredTheme="sepia", highContrastMode=True))
    assert legacy.themeName == "classic"
    assert legacy.highContrastMode is HighContrastMode.dark

    assert state_from_profile(None) == ThemePreferenceState()
    assert state_from_profile({"preferredTheme": ""}).themeName == "classic"


def test_active_theme_name():
    assert active_theme_name(ThemePreferenceState(themeName="garden")) == "garden"
    state = ThemePreferenceState(themeName="garden", highContrastMode=HighContrastMode.light)
    assert active_theme_name(state) == "highContrastLight"


def test_selecting_high_contrast_theme_sets_mode():
    start = ThemePreferenceState(themeName="garden", customShareCode="ABC")
    outcome = select_builtin_theme(start, "highContrastDark")
    assert outcome.state == ThemePreferenceState(
        themeName="highContrastDark", customShareCode=None, highContrastMode=HighContrastMode.dark
    )
    assert outcome.profile_update == {
        "preferredTheme": "highContrastDark",
        "customThemeShareCode": None,
        "highContrastMode": "dark",
    }
    assert not outcome.requires_confirmation


def test_leaving_high_contrast_requires_confirmation():
    start = ThemePreferenceState(themeName="highContrastLight", highContrastMode=HighContrastMode.light)
    outcome = select_builtin_theme(start, "citrus")
    assert outcome.requires_confirmation
    assert outcome.pending_theme_name == "citrus"
    assert outcome.state is start
    assert outcome.profile_update is None

    confirmed = confirm_builtin_theme(outcome.state, outcome.pending_theme_name)
    assert confirmed.state.themeName == "citrus"
    assert confirmed.state.highContrastMode is HighContrastMode.off
    assert confirmed.profile_update == {"preferredTheme": "citrus", "customThemeShareCode": None, "highContrastMode": "off"}


def test_plain_selection_clears_custom_theme():
    outcome = select_builtin_theme(ThemePreferenceState(customShareCode="ABC"), "midnight")
    assert outcome.state == ThemePreferenceState(themeName="midnight")
    assert outcome.profile_update["customThemeShareCode"] is None


def test_unknown_builtin_selection():
    with pytest.raises(ValueError):
        select_builtin_theme(ThemePreferenceState(), "sepia")


def test_custom_share_code_application():
    start = ThemePreferenceState(themeName="garden", highContrastMode=HighContrastMode.dark)
    outcome = apply_custom_share_code(start, " xyz789 ")
    assert outcome.state == ThemePreferenceState(themeName="garden", customShareCode="XYZ789")
    assert outcome.profile_update == {"preferredTheme": None, "customThemeShareCode": "XYZ789", "highContrastMode": "off"}
    with pytest.raises(ValueError, match="share code"):
        apply_custom_share_code(start, "   ")


def test_set_high_contrast_mode():
    outcome = set_high_contrast_mode(ThemePreferenceState(themeName="garden"), True)
    assert outcome.state.highContrastMode is HighContrastMode.dark
    assert outcome.state.themeName == "garden"
    assert outcome.profile_update == {"highContrastMode": "dark"}


def test_lookup_states():
    assert lookup_from_query_result(None, None).status is CustomThemeLookupStatus.not_requested
    assert lookup_from_query_result("abc", None, loading=True).status is CustomThemeLookupStatus.loading
    missing = lookup_from_query_result("abc", None)
    assert missing.status is CustomThemeLookupStatus.not_found
    assert missing.share_code == "ABC"

    found = lookup_from_query_result("abc", {"name": "Found", "shareCode": "abc", "_creationTime": 5})
    assert found.status is CustomThemeLookupStatus.found
    assert isinstance(found.record, CustomThemeRecord)
    assert found.record.shareCode == "ABC"


def test_lookup_drives_share_code_application():
    state = ThemePreferenceState(highContrastMode=HighContrastMode.light)
    assert apply_share_code_lookup(state, lookup_from_query_result("abc", None)) is None
    assert apply_share_code_lookup(state, lookup_from_query_result("abc", None, loading=True)) is None

    found = lookup_from_query_result("abc", {"name": "Found", "shareCode": "ABC"})
    outcome = apply_share_code_lookup(state, found)
    assert outcome.state.customShareCode == "ABC"
    assert outcome.state.highContrastMode is HighContrastMode.off
