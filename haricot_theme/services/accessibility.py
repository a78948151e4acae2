from __future__ import annotations

import logging
from dataclasses import dataclass

from haricot_theme.schemas.tokens import ThemeColors
from haricot_theme.services.color_math import contrast_ratio, readable_text_color

logger = logging.getLogger(__name__)

# WCAG AA: body text, then borders and large elements.
NORMAL_TEXT_CONTRAST = 4.5
LARGE_ELEMENT_CONTRAST = 3.0


@dataclass(frozen=True)
class ContrastCheck:
    check_id: str
    label: str
    foreground: str
    background: str
    contrast_ratio: float
    threshold: float

    @property
    def passes(self) -> bool:
        return self.contrast_ratio >= self.threshold


def enforce_accessible_palette(colors: ThemeColors) -> ThemeColors:
    """
    Replace roles that miss their contrast target with readable alternatives.

    Checks run in a fixed order and each replacement reads the already corrected
    values, so a failing primary text color also repairs the colors derived from it.
    Returns ``colors`` itself when nothing needed fixing.
    """
    values = colors.model_dump()
    background = values["background"]

    if contrast_ratio(values["textPrimary"], background) < NORMAL_TEXT_CONTRAST:
        values["textPrimary"] = readable_text_color(background)
    if contrast_ratio(values["textSecondary"], background) < NORMAL_TEXT_CONTRAST:
        values["textSecondary"] = values["textPrimary"]
    if contrast_ratio(values["textMuted"], background) < LARGE_ELEMENT_CONTRAST:
        values["textMuted"] = values["textSecondary"]
    if contrast_ratio(values["accentOnPrimary"], values["accent"]) < NORMAL_TEXT_CONTRAST:
        values["accentOnPrimary"] = readable_text_color(values["accent"])
    if contrast_ratio(values["border"], background) < LARGE_ELEMENT_CONTRAST:
        values["border"] = values["textMuted"]
    if contrast_ratio(values["logoFill"], background) < LARGE_ELEMENT_CONTRAST:
        values["logoFill"] = values["textPrimary"]

    changes = {key: value for key, value in values.items() if getattr(colors, key) != value}
    if not changes:
        return colors
    logger.debug("accessibility.palette_adjusted", extra={"adjusted": sorted(changes)})
    return colors.model_copy(update=changes)


def contrast_diagnostics(colors: ThemeColors) -> list[ContrastCheck]:
    checks: list[tuple[str, str, str, str, float]] = [
        ("textPrimary", "Primary text on background", "textPrimary", "background", NORMAL_TEXT_CONTRAST),
        ("textSecondary", "Secondary text on background", "textSecondary", "background", NORMAL_TEXT_CONTRAST),
        ("accentText", "Accent text contrast", "accentOnPrimary", "accent", NORMAL_TEXT_CONTRAST),
        ("border", "Border on background", "border", "background", LARGE_ELEMENT_CONTRAST),
    ]
    results: list[ContrastCheck] = []
    for check_id, label, fg_key, bg_key, threshold in checks:
        foreground = getattr(colors, fg_key)
        background = getattr(colors, bg_key)
        results.append(
            ContrastCheck(
                check_id=check_id,
                label=label,
                foreground=foreground,
                background=background,
                contrast_ratio=contrast_ratio(foreground, background),
                threshold=threshold,
            )
        )
    return results
