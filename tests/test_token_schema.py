from __future__ import annotations

import pytest
from pydantic import ValidationError

from haricot_theme.schemas.tokens import COLOR_KEYS, SpacingTokens, ThemeColors, ThemeTokens, WidthTokens


def test_theme_colors_normalize_hex_input(classic_tokens):
    values = classic_tokens.colors.model_dump()
    values.update(background="fff", accent="#zzzzzz")
    colors = ThemeColors.model_validate(values)
    assert colors.background == "#FFFFFF"
    assert colors.accent == "#000000"


def test_theme_colors_require_every_role(classic_tokens):
    values = classic_tokens.colors.model_dump()
    values.pop("logoTertiaryColor")
    with pytest.raises(ValidationError):
        ThemeColors.model_validate(values)


def test_color_keys_match_model():
    assert len(COLOR_KEYS) == 23
    assert "imageBackgroundColor" in COLOR_KEYS


def test_spacing_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        SpacingTokens.model_validate({"xs": 8, "jumbo": 60})


def test_tokens_are_immutable(classic_tokens):
    with pytest.raises(ValidationError):
        classic_tokens.colors.background = "#000000"


def test_full_dump_round_trips_through_validation(classic_tokens):
    rebuilt = ThemeTokens.model_validate(classic_tokens.model_dump())
    assert rebuilt.model_dump() == classic_tokens.model_dump()


def test_width_default():
    assert WidthTokens().full == "100%"
