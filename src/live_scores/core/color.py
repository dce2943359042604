from __future__ import annotations

import string
from dataclasses import dataclass

# Minimum contrast ratio for a provider-supplied secondary color to be kept.
MIN_SECONDARY_CONTRAST = 3.5

_HEX_DIGITS = frozenset(string.hexdigits)


class ColorParseError(ValueError):
    """Raised when a string is not a 6 hex digit RGB color."""


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> Color:
        v = value.strip()
        if len(v) != 6 or any(c not in _HEX_DIGITS for c in v):
            raise ColorParseError(f"Expected 6 hex digits, got {value!r}")
        return cls(int(v[0:2], 16), int(v[2:4], 16), int(v[4:6], 16))

    @property
    def hex(self) -> str:
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def luminance(color: Color) -> float:
    """Relative luminance of an sRGB color (0.0 for black, 1.0 for white)."""

    return (
        0.2126 * _linearize(color.r)
        + 0.7152 * _linearize(color.g)
        + 0.0722 * _linearize(color.b)
    )


def contrast(a: Color, b: Color) -> float:
    lum_a = luminance(a)
    lum_b = luminance(b)
    return (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)


def resolve_secondary(primary_hex: str, candidate_hex: str) -> Color:
    """Return a secondary color that stays legible against `primary_hex`.

    The candidate is kept when its contrast ratio against the primary exceeds
    MIN_SECONDARY_CONTRAST; otherwise white or black is returned, whichever
    contrasts more.
    """

    primary = Color.from_hex(primary_hex)
    candidate = Color.from_hex(candidate_hex)

    if contrast(primary, candidate) > MIN_SECONDARY_CONTRAST:
        return candidate
    if contrast(primary, WHITE) > contrast(primary, BLACK):
        return WHITE
    return BLACK
