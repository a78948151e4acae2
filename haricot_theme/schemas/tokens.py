from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, computed_field, model_validator

from haricot_theme.services.color_math import normalize_hex
from haricot_theme.services.token_aliases import fold_aliases

HexColor = Annotated[str, BeforeValidator(normalize_hex)]
Number = int | float
ShadowName = Literal["card", "floating"]
FULL_WIDTH = "100%"


class _Tokens(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class _AliasedTokens(_Tokens):
    """Stores semantic names only; legacy names are read-only computed views."""

    alias_group: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def fold_legacy_names(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return fold_aliases(cls.alias_group, data)
        return data


class ThemeColors(_Tokens):
    background: HexColor
    surface: HexColor
    overlay: HexColor
    surfaceVariant: HexColor
    surfaceSubdued: HexColor
    surfaceMuted: HexColor
    primary: HexColor
    onPrimary: HexColor
    muted: HexColor
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
    logoPrimaryColor: HexColor
    logoSecondaryColor: HexColor
    logoTertiaryColor: HexColor
    imageBackgroundColor: HexColor


class SpacingTokens(_AliasedTokens):
    alias_group: ClassVar[str] = "spacing"

    spacingMicro: Number
    spacingTight: Number
    spacingCompact: Number
    spacingStandard: Number
    spacingComfortable: Number
    spacingRoomy: Number
    spacingSpacious: Number
    spacingHero: Number

    @computed_field
    @property
    def none(self) -> int:
        return 0

    @computed_field
    @property
    def xxxs(self) -> Number:
        return self.spacingMicro

    @computed_field
    @property
    def xxs(self) -> Number:
        return self.spacingTight

    @computed_field
    @property
    def xs(self) -> Number:
        return self.spacingCompact

    @computed_field
    @property
    def sm(self) -> Number:
        return self.spacingStandard

    @computed_field
    @property
    def md(self) -> Number:
        return self.spacingComfortable

    @computed_field
    @property
    def lg(self) -> Number:
        return self.spacingRoomy

    @computed_field
    @property
    def xl(self) -> Number:
        return self.spacingSpacious

    @computed_field
    @property
    def xxl(self) -> Number:
        return self.spacingHero


class RadiiTokens(_AliasedTokens):
    alias_group: ClassVar[str] = "radii"

    radiusControl: Number
    radiusCard: Number
    radiusSurface: Number
    radiusPill: Number

    @computed_field
    @property
    def sm(self) -> Number:
        return self.radiusControl

    @computed_field
    @property
    def md(self) -> Number:
        return self.radiusCard

    @computed_field
    @property
    def lg(self) -> Number:
        return self.radiusSurface

    @computed_field
    @property
    def round(self) -> Number:
        return self.radiusPill


class TypographyTokens(_AliasedTokens):
    alias_group: ClassVar[str] = "typography"

    typeDisplay: Number
    typeTitle: Number
    typeHeading: Number
    typeSubheading: Number
    typeBody: Number
    typeBodySmall: Number
    typeCaption: Number
    typeMicro: Number

    @computed_field
    @property
    def display(self) -> Number:
        return self.typeDisplay

    @computed_field
    @property
    def title(self) -> Number:
        return self.typeTitle

    @computed_field
    @property
    def heading(self) -> Number:
        return self.typeHeading

    @computed_field
    @property
    def subheading(self) -> Number:
        return self.typeSubheading

    @computed_field
    @property
    def body(self) -> Number:
        return self.typeBody

    @computed_field
    @property
    def extraSmall(self) -> Number:
        return self.typeBodySmall

    @computed_field
    @property
    def small(self) -> Number:
        return self.typeCaption

    @computed_field
    @property
    def tiny(self) -> Number:
        return self.typeMicro


class PaddingTokens(_Tokens):
    screen: Number
    section: Number
    card: Number
    compact: Number


class FontFamilies(_Tokens):
    display: str
    regular: str
    light: str
    lightItalic: str
    medium: str
    semiBold: str
    bold: str


class LayoutTokens(_Tokens):
    headerTopPadding: Number
    maxFormWidth: Number
    fabSize: Number
    fabOffsetBottom: Number
    fabOffsetLeft: Number


class ShadowOffset(_Tokens):
    width: Number
    height: Number


class ShadowStyle(_Tokens):
    shadowColor: HexColor
    shadowOffset: ShadowOffset
    shadowOpacity: float
    shadowRadius: Number
    elevation: Number


class ShadowTokens(_Tokens):
    card: ShadowStyle
    floating: ShadowStyle


class BorderWidths(_Tokens):
    hairline: Number
    thin: Number
    regular: Number
    thick: Number


class LineHeights(_Tokens):
    tight: float
    snug: float
    normal: float
    relaxed: float


class LetterSpacing(_Tokens):
    tight: float
    normal: float


class OpacityTokens(_Tokens):
    disabled: float


class IconSizes(_Tokens):
    sm: Number
    md: Number
    lg: Number


class WidthTokens(_Tokens):
    full: Literal["100%"] = FULL_WIDTH


class ComponentSizes(_Tokens):
    textAreaMinHeight: Number


class TabBarList(_Tokens):
    paddingHorizontal: Number
    paddingVertical: Number
    marginHorizontal: Number
    marginBottom: Number
    borderRadius: Number
    backgroundColor: HexColor
    borderWidth: Number
    borderColor: HexColor
    shadow: Optional[ShadowName] = None


class TabBarTrigger(_Tokens):
    paddingHorizontal: Number
    paddingVertical: Number
    borderRadius: Number
    minHeight: Number
    squareSize: Optional[Number] = None
    shape: Literal["pill", "square"]
    inactiveBackgroundColor: HexColor
    activeBackgroundColor: HexColor


class TabBarLabel(_Tokens):
    show: bool
    color: HexColor
    activeColor: HexColor
    uppercase: bool
    letterSpacing: Number
    marginLeftWithIcon: Number


class TabBarIcon(_Tokens):
    show: bool
    family: str
    size: Number
    inactiveColor: HexColor
    activeColor: HexColor
    names: dict[str, str] = Field(default_factory=dict)


class TabBarTokens(_Tokens):
    containerBackground: HexColor
    slotBackground: HexColor
    list: TabBarList
    trigger: TabBarTrigger
    label: TabBarLabel
    icon: Optional[TabBarIcon] = None


class CardTokens(_Tokens):
    padding: Number
    borderRadius: Number
    gap: Number
    margin: Number
    imageHeight: Number


class ButtonVariant(_Tokens):
    paddingHorizontal: Number
    paddingVertical: Number
    borderRadius: Number
    fontSize: Number


class PillButton(_Tokens):
    paddingHorizontal: Number
    paddingVertical: Number
    borderRadius: Number


class TextButton(_Tokens):
    paddingHorizontal: Number
    paddingVertical: Number


class ButtonTokens(_Tokens):
    primary: ButtonVariant
    secondary: ButtonVariant
    pill: PillButton
    text: TextButton


class EdgePadding(_Tokens):
    horizontal: Number
    vertical: Number


class ListTokens(_Tokens):
    itemPadding: EdgePadding
    itemGap: Number
    borderRadius: Number
    headerPadding: EdgePadding


class PageHeader(_Tokens):
    paddingTop: Number
    paddingHorizontal: Number
    paddingBottom: Number
    gap: Number


class SectionHeader(_Tokens):
    marginBottom: Number
    gap: Number


class HeaderTokens(_Tokens):
    page: PageHeader
    section: SectionHeader


class InputTokens(_Tokens):
    paddingHorizontal: Number
    paddingVertical: Number
    borderRadius: Number
    fontSize: Number
    labelGap: Number


class TextAreaTokens(_Tokens):
    minHeight: Number
    padding: Number
    borderRadius: Number


class RailTokens(_Tokens):
    headerGap: Number
    headerMarginBottom: Number
    cardGap: Number
    scrollPadding: Number


class DerivedComponentTokens(_Tokens):
    """Component tokens computable from primitives alone (everything but the tab bar)."""

    card: CardTokens
    button: ButtonTokens
    list: ListTokens
    header: HeaderTokens
    input: InputTokens
    textArea: TextAreaTokens
    rail: RailTokens


class ComponentTokens(DerivedComponentTokens):
    tabBar: TabBarTokens


class ThemeTokens(_Tokens):
    colors: ThemeColors
    spacing: SpacingTokens
    padding: PaddingTokens
    radii: RadiiTokens
    typography: TypographyTokens
    fontFamilies: FontFamilies
    layout: LayoutTokens
    shadows: ShadowTokens
    borderWidths: BorderWidths
    lineHeights: LineHeights
    letterSpacing: LetterSpacing
    opacity: OpacityTokens
    iconSizes: IconSizes
    widths: WidthTokens = Field(default_factory=WidthTokens)
    componentSizes: ComponentSizes
    components: ComponentTokens


class ThemeAssets(_Tokens):
    logo: str = Field(min_length=1)


class ThemeDefinition(_Tokens):
    label: str
    description: str
    tokens: ThemeTokens
    assets: ThemeAssets


COLOR_KEYS: tuple[str, ...] = tuple(ThemeColors.model_fields)


__all__ = [
    "COLOR_KEYS",
    "FULL_WIDTH",
    "BorderWidths",
    "ButtonTokens",
    "ButtonVariant",
    "CardTokens",
    "ComponentSizes",
    "ComponentTokens",
    "DerivedComponentTokens",
    "EdgePadding",
    "FontFamilies",
    "HeaderTokens",
    "HexColor",
    "IconSizes",
    "InputTokens",
    "LayoutTokens",
    "LetterSpacing",
    "LineHeights",
    "ListTokens",
    "Number",
    "OpacityTokens",
    "PaddingTokens",
    "PageHeader",
    "PillButton",
    "RadiiTokens",
    "RailTokens",
    "SectionHeader",
    "ShadowName",
    "ShadowOffset",
    "ShadowStyle",
    "ShadowTokens",
    "SpacingTokens",
    "TabBarIcon",
    "TabBarLabel",
    "TabBarList",
    "TabBarTokens",
    "TabBarTrigger",
    "TextAreaTokens",
    "TextButton",
    "ThemeAssets",
    "ThemeColors",
    "ThemeDefinition",
    "ThemeTokens",
    "TypographyTokens",
    "WidthTokens",
]
