"""
Document color palette: every distinct color used by a color-bearing
property, ordered from dark to light.
"""

import logging
from typing import List, Set

from .colors import brightness, hex_to_rgb_string, nearest_name, parse_color, rgb_to_hex
from .errors import PropertyReadError
from .models import ColorRecord
from .snapshot import StyleSnapshot

logger = logging.getLogger(__name__)

COLOR_PROPS = [
    "color",
    "background-color",
    "border-color",
    "border-top-color",
    "border-right-color",
    "border-bottom-color",
    "border-left-color",
    "outline-color",
    "text-decoration-color",
]

NON_COLORS = {
    "transparent",
    "none",
    "inherit",
    "initial",
    "currentcolor",
    "rgba(0,0,0,0)",
}


def is_color_value(value: str) -> bool:
    if not value:
        return False
    compact = "".join(value.lower().split())
    return compact not in NON_COLORS


def extract_colors(snapshot: StyleSnapshot) -> List[ColorRecord]:
    colors: List[ColorRecord] = []
    seen_values: Set[str] = set()
    seen_hex: Set[str] = set()

    for element in snapshot.elements:
        for prop in COLOR_PROPS:
            try:
                value = element.computed(prop)
            except PropertyReadError as exc:
                logger.debug("Skipping color property: %s", exc)
                continue
            if not is_color_value(value) or value in seen_values:
                continue
            seen_values.add(value)

            parsed = parse_color(value)
            if parsed is None:
                logger.debug("Skipping unparseable %s value: %r", prop, value)
                continue
            hex_value = rgb_to_hex(parsed[:3])
            if hex_value in seen_hex:
                continue
            seen_hex.add(hex_value)
            colors.append(ColorRecord(
                name=nearest_name(value),
                hex=hex_value,
                rgb=hex_to_rgb_string(hex_value),
            ))

    return sorted(colors, key=lambda c: brightness(c.hex))
