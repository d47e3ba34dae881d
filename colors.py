# colors.py

import string
from typing import NamedTuple


class RGB(NamedTuple):
    r: float
    g: float
    b: float


class HSL(NamedTuple):
    h: float
    s: float
    l: float


def clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB channels in [0, 1] to HSL. Hue is a fraction of the circle."""
    max_c, min_c = max(r, g, b), min(r, g, b)
    h = s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        denom = 2 - max_c - min_c if l > 0.5 else max_c + min_c
        s = d / denom if denom else 0.0
        if max_c == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(h, s, l)


def hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL back to RGB. Every channel is clamped to [0, 1]."""
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_rgb(p, q, h + 1 / 3)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1 / 3)

    return RGB(clamp(r), clamp(g), clamp(b))


# Figma paint colors: {"r": .., "g": .., "b": .., "a": ..}

def rgb_from_paint_color(color: dict) -> RGB:
    return RGB(color["r"], color["g"], color["b"])


def rgb_from_hex(hex_color: str) -> RGB:
    """Parse "#rgb" or "#rrggbb" into an RGB with channels in [0, 1]."""
    digits = hex_color.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return RGB(r / 255, g / 255, b / 255)


def rgb_to_hex(color: RGB) -> str:
    return "#" + "".join(f"{round(clamp(c) * 255):02x}" for c in color)
