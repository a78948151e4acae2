from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from haricot_theme.config import Settings


def test_defaults_point_at_packaged_templates(monkeypatch):
    monkeypatch.delenv("THEME_TEMPLATES_DIR", raising=False)
    config = Settings(_env_file=None)
    assert config.templates_dir.name == "templates"
    assert (config.templates_dir / "base_tokens.json").is_file()


def test_blank_templates_dir_falls_back(monkeypatch, tmp_path):
    monkeypatch.setenv("THEME_TEMPLATES_DIR", "  ")
    assert Settings(_env_file=None).THEME_TEMPLATES_DIR is None

    monkeypatch.setenv("THEME_TEMPLATES_DIR", str(tmp_path))
    assert Settings(_env_file=None).templates_dir == Path(tmp_path)


def test_custom_name_prefix_is_trimmed_and_required():
    assert Settings(_env_file=None, THEME_CUSTOM_NAME_PREFIX="  Mine ").THEME_CUSTOM_NAME_PREFIX == "Mine"
    with pytest.raises(ValidationError):
        Settings(_env_file=None, THEME_CUSTOM_NAME_PREFIX="   ")
