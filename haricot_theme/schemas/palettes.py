from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from haricot_theme.schemas.tokens import ThemeColors

PaletteMode = Literal["light", "dark"]
PaletteVariant = Literal["analogous", "complementary", "triadic", "monochrome"]


class PaletteSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: PaletteVariant
    name: str = Field(min_length=1)
    description: str
    colors: ThemeColors
