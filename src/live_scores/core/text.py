from __future__ import annotations

_MAX_DISPLAY_NAME_LEN = 11

_DIRECTION_PREFIXES = {
    "North": "N",
    "South": "S",
    "West": "W",
    "East": "E",
    "Central": "C",
}


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""

    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def abbreviate_team_name(raw: str) -> str:
    """Shorten long team names for display ("North Carolina State" -> "N Carolina St").

    Names of 11 characters or fewer are returned unchanged.
    """

    if len(raw) <= _MAX_DISPLAY_NAME_LEN:
        return raw

    words = raw.split(" ")
    if words[-1] == "State":
        words[-1] = "St"
    words[0] = _DIRECTION_PREFIXES.get(words[0], words[0])
    return " ".join(words)
