from haricot_theme.schemas.tokens import (
    COLOR_KEYS,
    ComponentTokens,
    DerivedComponentTokens,
    RadiiTokens,
    SpacingTokens,
    TabBarTokens,
    ThemeAssets,
    ThemeColors,
    ThemeDefinition,
    ThemeTokens,
    TypographyTokens,
)
from haricot_theme.schemas.custom_themes import (
    CreateCustomThemePayload,
    CustomThemeRecord,
    ThemeBuilderDraft,
)
from haricot_theme.schemas.palettes import PaletteMode, PaletteSuggestion
from haricot_theme.schemas.preferences import (
    AccessibilityPreferences,
    HighContrastMode,
    ThemeProfile,
    normalize_high_contrast_mode,
    normalize_share_code,
)
