from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from haricot_theme.schemas.preferences import normalize_share_code
from haricot_theme.schemas.tokens import (
    COLOR_KEYS,
    FontFamilies,
    HexColor,
    Number,
    PaddingTokens,
    TabBarTokens,
    ThemeTokens,
)
from haricot_theme.services.token_aliases import known_keys


def _known_only(values: Any, allowed: frozenset[str] | tuple[str, ...]) -> Any:
    if not isinstance(values, dict):
        return values
    return {key: value for key, value in values.items() if key in allowed}


class CustomThemeRecord(BaseModel):
    """
    A user-authored theme as stored externally. Every token group is a partial override.

    Unknown token keys are dropped rather than rejected; records outlive schema revisions.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    shareCode: str
    isPublic: bool = False
    creationTime: float | None = Field(default=None, alias="_creationTime")
    colors: dict[str, HexColor] | None = None
    spacing: dict[str, Number] | None = None
    padding: dict[str, Number] | None = None
    radii: dict[str, Number] | None = None
    typography: dict[str, Number] | None = None
    fontFamilies: dict[str, str] | None = None
    tabBar: TabBarTokens | None = None

    @field_validator("shareCode", mode="before")
    @classmethod
    def normalize_code(cls, value: Any) -> str:
        code = normalize_share_code(value)
        if code is None:
            raise ValueError("shareCode must not be blank")
        return code

    @field_validator("colors", mode="before")
    @classmethod
    def known_colors(cls, value: Any) -> Any:
        return _known_only(value, COLOR_KEYS)

    @field_validator("spacing", "radii", "typography", mode="before")
    @classmethod
    def known_aliased_keys(cls, value: Any, info: ValidationInfo) -> Any:
        return _known_only(value, known_keys(info.field_name))

    @field_validator("padding", mode="before")
    @classmethod
    def known_padding(cls, value: Any) -> Any:
        return _known_only(value, tuple(PaddingTokens.model_fields))

    @field_validator("fontFamilies", mode="before")
    @classmethod
    def known_font_roles(cls, value: Any) -> Any:
        return _known_only(value, tuple(FontFamilies.model_fields))


class ThemeBuilderDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    isPublic: bool = False
    tokens: ThemeTokens | None = None


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PayloadColors(_Payload):
    background: HexColor
    surface: HexColor
    overlay: HexColor
    textPrimary: HexColor
    textSecondary: HexColor
    textMuted: HexColor
    border: HexColor
    accent: HexColor
    accentOnPrimary: HexColor
    success: HexColor
    danger: HexColor
    info: HexColor
    logoFill: HexColor


class PayloadSpacing(_Payload):
    xxs: Number
    xs: Number
    sm: Number
    md: Number
    lg: Number
    xl: Number
    xxl: Number


class PayloadPadding(_Payload):
    screen: Number
    section: Number
    card: Number
    compact: Number


class PayloadRadii(_Payload):
    sm: Number
    md: Number
    lg: Number


class PayloadTypography(_Payload):
    title: Number
    heading: Number
    subheading: Number
    body: Number
    small: Number
    tiny: Number


class PayloadFontFamilies(_Payload):
    display: str
    regular: str
    light: str
    lightItalic: str
    medium: str
    semiBold: str
    bold: str


class CreateCustomThemePayload(_Payload):
    """Exactly the fields the theme store accepts on create; it assigns the share code."""

    name: str = Field(min_length=1)
    colors: PayloadColors
    spacing: PayloadSpacing
    padding: PayloadPadding
    radii: PayloadRadii
    typography: PayloadTypography
    fontFamilies: PayloadFontFamilies
    isPublic: bool
    tabBar: TabBarTokens
