import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("THEME_CUSTOM_NAME_PREFIX", "Custom Theme")
os.environ.setdefault("THEME_BUILDER_ENFORCE_CONTRAST", "true")

from haricot_theme.services.theme_registry import get_theme_definition  # noqa: E402


@pytest.fixture()
def classic_tokens():
    return get_theme_definition("classic").tokens


@pytest.fixture()
def midnight_tokens():
    return get_theme_definition("midnight").tokens
