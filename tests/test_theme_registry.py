from __future__ import annotations

import json

import pytest

from haricot_theme.config import settings
from haricot_theme.services.theme_registry import (
    DEFAULT_THEME_NAME,
    THEME_NAMES,
    ThemeRegistryError,
    get_theme_definition,
    is_high_contrast_theme,
    is_theme_name,
    load_base_tokens_template,
    reset_theme_registry,
    theme_definitions,
    theme_options,
)


@pytest.fixture()
def templates_dir(tmp_path, monkeypatch):
    real = settings.templates_dir
    (tmp_path / "themes").mkdir()
    (tmp_path / "base_tokens.json").write_text((real / "base_tokens.json").read_text(encoding="utf-8"))
    for path in (real / "themes").glob("*.json"):
        (tmp_path / "themes" / path.name).write_text(path.read_text(encoding="utf-8"))
    monkeypatch.setattr(settings, "THEME_TEMPLATES_DIR", str(tmp_path))
    reset_theme_registry()
    yield tmp_path
    monkeypatch.undo()
    reset_theme_registry()


def test_catalogue_is_complete_and_ordered():
    assert [option.name for option in theme_options()] == list(THEME_NAMES)
    assert list(theme_definitions()) == list(THEME_NAMES)
    assert DEFAULT_THEME_NAME == "classic"
    assert all(option.label for option in theme_options())


def test_is_theme_name():
    assert is_theme_name("midnight")
    assert not is_theme_name("custom")
    assert not is_theme_name(None)
    assert not is_theme_name("Midnight")


def test_unknown_name_is_a_caller_error():
    with pytest.raises(ValueError, match="is_theme_name"):
        get_theme_definition("sepia")


def test_high_contrast_names():
    assert is_high_contrast_theme("highContrastLight")
    assert is_high_contrast_theme("highContrastDark")
    assert not is_high_contrast_theme("midnight")


def test_definitions_are_cached():
    assert get_theme_definition("garden") is get_theme_definition("garden")


def test_legacy_authored_radii_are_dual_aliased():
    radii = get_theme_definition("midnight").tokens.radii
    assert radii.md == radii.radiusCard == 16
    assert radii.lg == radii.radiusSurface == 32
    assert radii.sm == radii.radiusControl == 8


def test_semantic_authored_spacing_is_dual_aliased():
    spacing = get_theme_definition("garden").tokens.spacing
    assert spacing.md == spacing.spacingComfortable == 18
    assert spacing.lg == 24
    assert spacing.sm == spacing.spacingStandard == 12
    assert spacing.none == 0


def test_semantic_authored_typography_is_dual_aliased():
    typography = get_theme_definition("citrus").tokens.typography
    assert typography.title == typography.typeTitle == 34
    assert typography.display == 44
    assert typography.body == typography.typeBody == 16


def test_tab_bar_overrides_and_palette_roles():
    garden = get_theme_definition("garden").tokens
    assert garden.components.tabBar.trigger.shape == "square"
    assert garden.components.tabBar.trigger.squareSize == 48
    assert garden.components.tabBar.containerBackground == garden.colors.background

    high_contrast = get_theme_definition("highContrastDark").tokens
    assert high_contrast.components.tabBar.label.uppercase is True
    assert high_contrast.components.tabBar.list.borderWidth == 2
    assert high_contrast.borderWidths.thin == 2


def test_assets():
    assert get_theme_definition("midnight").assets.logo == "/assets/images/logo-light.svg"
    assert get_theme_definition("classic").assets.logo == settings.THEME_DEFAULT_LOGO_ASSET


def test_missing_logo_uses_default_asset(templates_dir):
    path = templates_dir / "themes" / "garden.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data.pop("assets")
    path.write_text(json.dumps(data), encoding="utf-8")
    assert get_theme_definition("garden").assets.logo == settings.THEME_DEFAULT_LOGO_ASSET


def test_missing_theme_file_fails_loudly(templates_dir):
    (templates_dir / "themes" / "citrus.json").unlink()
    with pytest.raises(ThemeRegistryError, match="citrus"):
        theme_definitions()


def test_incomplete_base_template_fails_loudly(templates_dir):
    path = templates_dir / "base_tokens.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data.pop("radii")
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ThemeRegistryError, match="radii"):
        load_base_tokens_template()


def test_incomplete_theme_colors_fail_loudly(templates_dir):
    path = templates_dir / "themes" / "classic.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data["tokens"]["colors"].pop("accent")
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ThemeRegistryError, match="classic.json"):
        theme_definitions()


def test_unknown_theme_file_name_fails_loudly(templates_dir):
    path = templates_dir / "themes" / "extra.json"
    data = json.loads((templates_dir / "themes" / "classic.json").read_text(encoding="utf-8"))
    data["name"] = "sepia"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ThemeRegistryError, match="sepia"):
        theme_definitions()
