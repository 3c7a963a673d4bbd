"""
Hex colour helpers for the diorama palette.

Colours travel through the engine as "#rrggbb" strings (the keyframe table,
scene palettes, resolved theme) and are only decoded to RGB tuples at the
moment pygame needs them.
"""
from __future__ import annotations
from typing import Tuple

RGB = Tuple[int, int, int]


def hex_to_rgb(color: str) -> RGB:
    """'#87ceeb' → (135, 206, 235)."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected a #rrggbb colour, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(rgb: RGB) -> str:
    """(135, 206, 235) → '#87ceeb'. Channels are clamped to 0-255."""
    r, g, b = (max(0, min(255, int(c))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def lerp_color(color1: str, color2: str, factor: float) -> str:
    """
    Linearly interpolate between two hex colours, channel by channel.

    Args:
        color1: Start colour (factor = 0)
        color2: End colour (factor = 1)
        factor: Interpolation factor, normally 0-1

    Returns:
        Interpolated colour as '#rrggbb'

    Factors outside [0, 1] extrapolate along the same line instead of
    raising; the result is clamped when it is encoded back to hex.
    """
    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)

    r = round(r1 + factor * (r2 - r1))
    g = round(g1 + factor * (g2 - g1))
    b = round(b1 + factor * (b2 - b1))
    return rgb_to_hex((r, g, b))


def shade(color: str, amount: int) -> str:
    """Brighten (amount > 0) or darken (amount < 0) every channel."""
    r, g, b = hex_to_rgb(color)
    return rgb_to_hex((r + amount, g + amount, b + amount))
