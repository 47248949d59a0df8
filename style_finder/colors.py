"""
Color normalization: canonical hex conversion and nearest color names.

Names come from the CSS3 color keyword table shipped with ``webcolors``.
"""

import colorsys
import math
import re
from typing import Dict, List, Optional, Tuple

import webcolors

SENTINEL_HEX = "#000000"
UNKNOWN_NAME = "Unknown"

RGB = Tuple[int, int, int]

_HEX_RE = re.compile(r"^#([0-9a-f]{3,8})$")
_RGB_RE = re.compile(r"^rgba?\(([^()]*)\)$")
_HSL_RE = re.compile(r"^hsla?\(([^()]*)\)$")
_CHANNEL_SPLIT_RE = re.compile(r"[\s,/]+")


def _load_named_colors() -> List[Tuple[str, RGB]]:
    named = []
    for name in webcolors.names("css3"):
        named.append((name, hex_to_rgb(webcolors.name_to_hex(name))))
    return named


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError(f"non-finite color channel: {value}")
    return value


def _parse_channel(token: str, scale: float = 255.0) -> float:
    if token.endswith("%"):
        return _finite(float(token[:-1]) * scale / 100.0)
    return _finite(float(token))


def _clamp(value: float) -> int:
    return max(0, min(255, int(round(value))))


def parse_color(value: str) -> Optional[Tuple[int, int, int, float]]:
    """Parse ``#hex`` and ``rgb()/rgba()`` values into (r, g, b, alpha)."""
    if not value:
        return None
    value = value.strip().lower()
    rgba_match = _RGB_RE.match(value)
    if rgba_match:
        parts = [p for p in _CHANNEL_SPLIT_RE.split(rgba_match.group(1).strip()) if p]
        if len(parts) < 3:
            return None
        try:
            r, g, b = (_clamp(_parse_channel(p)) for p in parts[:3])
            a = _parse_channel(parts[3], scale=1.0) if len(parts) > 3 else 1.0
        except ValueError:
            return None
        return r, g, b, a
    hex_match = _HEX_RE.match(value)
    if hex_match:
        h = hex_match.group(1)
        if len(h) in {3, 4}:
            r = int(h[0] * 2, 16)
            g = int(h[1] * 2, 16)
            b = int(h[2] * 2, 16)
            a = int(h[3] * 2, 16) / 255.0 if len(h) == 4 else 1.0
            return r, g, b, a
        if len(h) in {6, 8}:
            r = int(h[0:2], 16)
            g = int(h[2:4], 16)
            b = int(h[4:6], 16)
            a = int(h[6:8], 16) / 255.0 if len(h) == 8 else 1.0
            return r, g, b, a
    return None


def parse_hsl(value: str) -> Optional[RGB]:
    match = _HSL_RE.match((value or "").strip().lower())
    if not match:
        return None
    parts = [p for p in _CHANNEL_SPLIT_RE.split(match.group(1).strip()) if p]
    if len(parts) < 3:
        return None
    try:
        hue = parts[0]
        for unit in ("deg", "turn"):
            if hue.endswith(unit):
                hue = hue[: -len(unit)]
        h = _finite(float(hue) * (360.0 if parts[0].endswith("turn") else 1.0))
        s = _finite(float(parts[1].rstrip("%")) / 100.0)
        l = _finite(float(parts[2].rstrip("%")) / 100.0)
    except ValueError:
        return None
    s = max(0.0, min(1.0, s))
    l = max(0.0, min(1.0, l))
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s)
    return _clamp(r * 255), _clamp(g * 255), _clamp(b * 255)


def rgb_to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def hex_to_rgb(hex_value: str) -> RGB:
    parsed = parse_color(hex_value)
    if not parsed or not hex_value.strip().startswith("#"):
        return 0, 0, 0
    return parsed[0], parsed[1], parsed[2]


def to_hex(value: str) -> str:
    """Canonical ``#rrggbb`` for hex and rgb()/rgba() input, else the sentinel."""
    parsed = parse_color(value)
    if not parsed:
        return SENTINEL_HEX
    return rgb_to_hex(parsed[:3])


def color_to_hex(value: str) -> str:
    """Like :func:`to_hex` but also resolves CSS color keywords and hsl()."""
    if not value:
        return SENTINEL_HEX
    value = value.strip().lower()
    if value.startswith(("#", "rgb")):
        return to_hex(value)
    if value.startswith("hsl"):
        rgb = parse_hsl(value)
        return rgb_to_hex(rgb) if rgb else SENTINEL_HEX
    try:
        return webcolors.name_to_hex(value)
    except ValueError:
        return SENTINEL_HEX


def hex_to_rgb_string(hex_value: str) -> str:
    r, g, b = hex_to_rgb(hex_value)
    return f"rgb({r}, {g}, {b})"


def brightness(hex_value: str) -> float:
    r, g, b = hex_to_rgb(hex_value)
    return 0.299 * r + 0.587 * g + 0.114 * b


class ColorNamer:
    """Nearest-name lookup over an ordered {name: rgb} dictionary."""

    def __init__(self, named_colors: Optional[List[Tuple[str, RGB]]] = None):
        self.named_colors = named_colors if named_colors is not None else _load_named_colors()
        self._exact: Dict[RGB, str] = {}
        for name, rgb in self.named_colors:
            self._exact.setdefault(rgb, name)

    def nearest(self, value: str) -> str:
        if not value or not value.strip().startswith(("#", "rgb")):
            return UNKNOWN_NAME
        parsed = parse_color(value)
        if not parsed:
            return UNKNOWN_NAME
        rgb = parsed[:3]
        exact = self._exact.get(rgb)
        if exact:
            return exact

        best_name = UNKNOWN_NAME
        best_distance = math.inf
        for name, ref in self.named_colors:
            distance = math.sqrt(
                (rgb[0] - ref[0]) ** 2 + (rgb[1] - ref[1]) ** 2 + (rgb[2] - ref[2]) ** 2
            )
            # strict comparison keeps the first name on ties
            if distance < best_distance:
                best_name = name
                best_distance = distance
        return best_name


_default_namer: Optional[ColorNamer] = None


def nearest_name(value: str) -> str:
    global _default_namer
    if _default_namer is None:
        _default_namer = ColorNamer()
    return _default_namer.nearest(value)
