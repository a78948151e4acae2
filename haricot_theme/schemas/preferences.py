from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class HighContrastMode(str, Enum):
    off = "off"
    light = "light"
    dark = "dark"


def normalize_high_contrast_mode(value: Any) -> HighContrastMode:
    """
    Single conversion point for the stored high-contrast preference.

    Older profiles persisted a boolean; ``True`` meant the dark variant.
    """
    if isinstance(value, HighContrastMode):
        return value
    if value is None or value is False:
        return HighContrastMode.off
    if value is True:
        return HighContrastMode.dark
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if not cleaned:
            return HighContrastMode.off
        try:
            return HighContrastMode(cleaned)
        except ValueError:
            pass
    logger.warning("preferences.unrecognized_high_contrast", extra={"value": repr(value)})
    return HighContrastMode.off


def normalize_share_code(value: Any) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip().upper()
    return cleaned or None


class AccessibilityPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    highContrastMode: HighContrastMode = HighContrastMode.off

    @field_validator("highContrastMode", mode="before")
    @classmethod
    def normalize_mode(cls, value: Any) -> HighContrastMode:
        return normalize_high_contrast_mode(value)


class ThemeProfile(BaseModel):
    """User-profile fields as they arrive from the profile store. Other profile keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    preferredTheme: str | None = None
    customThemeShareCode: str | None = None
    highContrastMode: HighContrastMode = HighContrastMode.off

    @field_validator("preferredTheme", mode="before")
    @classmethod
    def blank_theme(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("customThemeShareCode", mode="before")
    @classmethod
    def normalize_code(cls, value: Any) -> str | None:
        return normalize_share_code(value)

    @field_validator("highContrastMode", mode="before")
    @classmethod
    def normalize_mode(cls, value: Any) -> HighContrastMode:
        return normalize_high_contrast_mode(value)
