"""Deterministic branch colors for light and dark themes."""

from typing import NamedTuple


class ColorPair(NamedTuple):
    light: str
    dark: str

    def for_mode(self, dark_mode: bool) -> str:
        return self.dark if dark_mode else self.light


# Well-known branches, keyed by lowercased name
BRANCH_COLORS: dict[str, ColorPair] = {
    "main": ColorPair("#2563eb", "#3b82f6"),  # Blue
    "master": ColorPair("#2563eb", "#3b82f6"),  # Blue
    "develop": ColorPair("#9333ea", "#a855f7"),  # Purple
    "development": ColorPair("#9333ea", "#a855f7"),  # Purple
}

# Fallback palette for every other branch
FEATURE_COLORS: list[ColorPair] = [
    ColorPair("#16a34a", "#10b981"),  # Green
    ColorPair("#ea580c", "#f97316"),  # Orange
    ColorPair("#ec4899", "#ec4899"),  # Pink
    ColorPair("#eab308", "#eab308"),  # Yellow
    ColorPair("#06b6d4", "#06b6d4"),  # Cyan
    ColorPair("#8b5cf6", "#8b5cf6"),  # Violet
]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def branch_name_hash(name: str) -> int:
    """Hash a branch name the way browsers evaluate ``c + ((h << 5) - h)``.

    Iterates UTF-16 code units, lone surrogates included. Only the shift
    wraps to 32 bits, so the running value can leave the int32 range between
    steps, exactly like the JavaScript number it mirrors.
    """
    data = name.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = code_unit + (_to_int32(_to_int32(h) << 5) - h)
    return h


def branch_color(name: str, dark_mode: bool = False) -> str:
    """Get the display color for a branch.

    Well-known names match case-insensitively; everything else is hashed
    from the name as given, case-sensitive.
    """
    known = BRANCH_COLORS.get(name.lower())
    if known is not None:
        return known.for_mode(dark_mode)

    index = abs(branch_name_hash(name)) % len(FEATURE_COLORS)
    return FEATURE_COLORS[index].for_mode(dark_mode)
