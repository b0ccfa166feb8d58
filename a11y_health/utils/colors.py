"""Color parsing and WCAG contrast ratio helpers."""

import re
from typing import Tuple

RGB_PATTERN = re.compile(
    r'^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([\d.]+)\s*)?\)$',
    re.IGNORECASE
)

WHITE = "#ffffff"


def parse_rgba(color: str) -> Tuple[int, int, int, float]:
    """
    Parse a CSS color into an (r, g, b, alpha) tuple.

    Accepts #rgb, #rrggbb, rgb(...) and rgba(...). Hex colors are opaque.

    Raises:
        ValueError: If the color cannot be parsed
    """
    value = color.strip()

    match = RGB_PATTERN.match(value)
    if match:
        r, g, b = (int(match.group(i)) for i in (1, 2, 3))
        if max(r, g, b) > 255:
            raise ValueError(f"Invalid color values: {color}")
        try:
            alpha = float(match.group(4)) if match.group(4) is not None else 1.0
        except ValueError as e:
            raise ValueError(f"Invalid color values: {color}") from e
        return r, g, b, min(max(alpha, 0.0), 1.0)

    if value.startswith('#'):
        hex_value = value[1:]
        if len(hex_value) == 3:
            hex_value = ''.join(c * 2 for c in hex_value)
        if len(hex_value) == 6:
            try:
                return (
                    int(hex_value[0:2], 16),
                    int(hex_value[2:4], 16),
                    int(hex_value[4:6], 16),
                    1.0,
                )
            except ValueError:
                pass

    raise ValueError(f"Invalid color values: {color}")


def parse_color(color: str) -> Tuple[int, int, int]:
    """Parse a CSS color into an (r, g, b) tuple, ignoring alpha."""
    r, g, b, _ = parse_rgba(color)
    return r, g, b


def is_transparent(color: str) -> bool:
    """True for fully transparent backgrounds."""
    value = color.strip().lower().replace(' ', '')
    if value == 'transparent':
        return True
    match = RGB_PATTERN.match(color.strip())
    return bool(match and match.group(4) is not None and float(match.group(4)) == 0)


def flatten(color: str, backdrop: str = WHITE) -> str:
    """
    Composite a possibly translucent color over an opaque backdrop.

    Returns the resulting opaque color as #rrggbb.
    """
    r, g, b, alpha = parse_rgba(color)
    if alpha >= 1:
        return to_hex(color)

    base = parse_color(backdrop)
    blended = [round(alpha * channel + (1 - alpha) * under) for channel, under in zip((r, g, b), base)]
    return "#{:02x}{:02x}{:02x}".format(*blended)


def to_hex(color: str) -> str:
    """Normalize a CSS color to #rrggbb."""
    r, g, b = parse_color(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def relative_luminance(color: str) -> float:
    """WCAG relative luminance of a color."""
    channels = []
    for channel in parse_color(color):
        c = channel / 255
        channels.append(c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4)

    red, green, blue = channels
    return 0.2126 * red + 0.7152 * green + 0.0722 * blue


def get_contrast_ratio(color1: str, color2: str) -> float:
    """Contrast ratio between two opaque colors, from 1.0 to 21.0."""
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
