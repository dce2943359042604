from __future__ import annotations

import pytest

from live_scores.core.color import (
    BLACK,
    WHITE,
    Color,
    ColorParseError,
    contrast,
    luminance,
    resolve_secondary,
)


def test_color_hex_round_trip_is_lowercase() -> None:
    color = Color.from_hex("C8102E")
    assert color == Color(200, 16, 46)
    assert color.hex == "c8102e"


@pytest.mark.parametrize(
    "value", ["abc", "1234567", "zzzzzz", "", "-1ffff", "+fffff", "ab c d", "0x1f2f"]
)
def test_color_rejects_malformed_hex(value: str) -> None:
    with pytest.raises(ColorParseError):
        Color.from_hex(value)


def test_luminance_and_contrast_extremes() -> None:
    assert luminance(BLACK) == 0.0
    assert luminance(WHITE) == pytest.approx(1.0)
    assert contrast(WHITE, BLACK) == pytest.approx(21.0)
    assert contrast(BLACK, WHITE) == pytest.approx(21.0)


def test_resolve_secondary_keeps_a_legible_candidate() -> None:
    assert resolve_secondary("000000", "ffcc00") == Color(255, 204, 0)


def test_resolve_secondary_falls_back_to_white_or_black() -> None:
    assert resolve_secondary("de3129", "666666") == WHITE
    assert resolve_secondary("ffffff", "ffffff") == BLACK
    assert resolve_secondary("000000", "000000") == WHITE


def test_resolve_secondary_parses_both_inputs() -> None:
    with pytest.raises(ColorParseError):
        resolve_secondary("00000g", "ffffff")
    with pytest.raises(ColorParseError):
        resolve_secondary("000000", "fff")
