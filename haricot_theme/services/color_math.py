from __future__ import annotations

import math
import re
from typing import Any, NamedTuple


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: float
    s: float
    l: float


WHITE = "#FFFFFF"
NEAR_BLACK = "#111111"
FALLBACK_HEX = "#000000"

_HEX_SHORT_RE = re.compile(r"[0-9a-fA-F]{3}")
_HEX_LONG_RE = re.compile(r"[0-9a-fA-F]{6}")


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def normalize_hex(value: Any) -> str:
    """
    Canonical ``#RRGGBB`` form of a 3- or 6-digit hex color, with or without ``#``.

    Anything else normalizes to ``#000000``; partially typed input must still render.
    """
    if not isinstance(value, str):
        return FALLBACK_HEX
    cleaned = value.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    if _HEX_SHORT_RE.fullmatch(cleaned):
        return "#" + "".join(ch * 2 for ch in cleaned).upper()
    if _HEX_LONG_RE.fullmatch(cleaned):
        return f"#{cleaned.upper()}"
    return FALLBACK_HEX


def hex_to_rgb(value: str) -> RGB:
    body = normalize_hex(value)[1:]
    return RGB(int(body[0:2], 16), int(body[2:4], 16), int(body[4:6], 16))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike the builtin ``round``."""
    return math.floor(value + 0.5)


def rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    r, g, b = (int(clamp(round_half_up(channel), 0, 255)) for channel in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(rgb: tuple[float, float, float]) -> HSL:
    r, g, b = (channel / 255.0 for channel in rgb)
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2

    hue = 0.0
    if delta != 0:
        # fmod keeps the dividend's sign; negative hues are wrapped after rounding
        if high == r:
            hue = math.fmod((g - b) / delta, 6)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
    degrees = round_half_up(hue * 60)
    if degrees < 0:
        degrees += 360

    saturation = 0.0 if delta == 0 else delta / (1 - abs(2 * lightness - 1))
    return HSL(h=degrees, s=saturation * 100.0, l=lightness * 100.0)


def hsl_to_rgb(hsl: tuple[float, float, float]) -> RGB:
    h, s, l = hsl
    h = h % 360
    s = clamp(s, 0, 100) / 100
    l = clamp(l, 0, 100) / 100
    chroma = (1 - abs(2 * l - 1)) * s
    second = chroma * (1 - abs((h / 60) % 2 - 1))
    offset = l - chroma / 2

    if h < 60:
        r, g, b = chroma, second, 0.0
    elif h < 120:
        r, g, b = second, chroma, 0.0
    elif h < 180:
        r, g, b = 0.0, chroma, second
    elif h < 240:
        r, g, b = 0.0, second, chroma
    elif h < 300:
        r, g, b = second, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, second
    return RGB(*(round_half_up((channel + offset) * 255) for channel in (r, g, b)))


def hsl_to_hex(hsl: tuple[float, float, float]) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def hex_to_hsl(value: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(value))


def shift_hue(hue: float, amount: float) -> float:
    return (hue + amount) % 360


def relative_luminance(value: str) -> float:
    def to_linear(channel: int) -> float:
        v = channel / 255.0
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(value)
    return 0.2126 * to_linear(r) + 0.7152 * to_linear(g) + 0.0722 * to_linear(b)


def contrast_ratio(foreground: str, background: str) -> float:
    lf = relative_luminance(foreground)
    lb = relative_luminance(background)
    lighter, darker = (lf, lb) if lf >= lb else (lb, lf)
    return (lighter + 0.05) / (darker + 0.05)


def readable_text_color(background: str) -> str:
    white = contrast_ratio(WHITE, background)
    dark = contrast_ratio(NEAR_BLACK, background)
    return WHITE if white >= dark else NEAR_BLACK
