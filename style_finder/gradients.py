"""
Gradient detection and parsing.

A gradient value is reduced to its type and its first and last color stops,
both resolved to canonical hex. Values that do not carry at least two
usable stops are not gradients for our purposes.
"""

import logging
import re
from typing import List, Optional, Set, Tuple

from .colors import color_to_hex, nearest_name
from .errors import PropertyReadError
from .models import GradientInfo, GradientRecord
from .snapshot import StyleSnapshot
from .tokenizer import split_top_level

logger = logging.getLogger(__name__)

GRADIENT_PROPS = [
    "background-image",
    "background",
    "border-image",
    "border-image-source",
    "color",
    "-webkit-text-fill-color",
    "-webkit-text-stroke-color",
    "box-shadow",
    "text-shadow",
    "fill",
    "stroke",
    "list-style-image",
    "content",
    "mask",
    "mask-image",
    "-webkit-mask",
    "-webkit-mask-image",
    "filter",
    "--background",
    "--color",
    "--gradient",
]

# Checked in order: the repeating variants contain the plain names.
GRADIENT_TYPES = [
    ("repeating-linear-gradient", "repeating-linear"),
    ("repeating-radial-gradient", "repeating-radial"),
    ("repeating-conic-gradient", "repeating-conic"),
    ("linear-gradient", "linear"),
    ("radial-gradient", "radial"),
    ("conic-gradient", "conic"),
]

RESERVED_KEYWORDS = {
    "to", "at", "from", "deg", "rad", "grad", "turn",
    "repeat", "repeating", "linear", "radial", "conic",
    # radial/conic shape, extent and position words
    "circle", "ellipse", "closest", "farthest", "side", "corner",
    "center", "top", "bottom", "left", "right", "in",
    # length units left over from sizes such as "200px"
    "px", "em", "rem", "vw", "vh", "vmin", "vmax",
}

_ANGLE_RE = re.compile(r"^[-+]?(\d+(\.\d+)?|\.\d+)(deg|grad|rad|turn)\b")
_STOP_COLOR_RE = re.compile(r"(#[0-9a-f]{3,8}|rgba?\([^)]+\)|hsla?\([^)]+\)|[a-z]+)", re.IGNORECASE)
_HEX_STOP_RE = re.compile(r"^#([0-9a-f]{3}){1,2}$", re.IGNORECASE)


def gradient_type(value: str) -> str:
    for marker, name in GRADIENT_TYPES:
        if marker in value:
            return name
    return "other"


def is_orientation(segment: str) -> bool:
    segment = segment.strip().lower()
    return segment.startswith("to ") or bool(_ANGLE_RE.match(segment))


def is_valid_stop_color(color: str) -> bool:
    lower = color.lower()
    if lower.startswith("#"):
        return bool(_HEX_STOP_RE.match(lower))
    if lower.startswith(("rgb", "hsl")):
        return "(" in lower and lower.endswith(")")
    if lower.isalpha():
        return lower not in RESERVED_KEYWORDS
    return False


def stop_color(segment: str) -> Optional[str]:
    match = _STOP_COLOR_RE.search(segment)
    if not match:
        return None
    color = match.group(1)
    return color if is_valid_stop_color(color) else None


def color_stops(value: str) -> List[str]:
    open_idx = value.find("(")
    close_idx = value.rfind(")")
    if open_idx == -1 or close_idx <= open_idx:
        return []
    segments = split_top_level(value[open_idx + 1:close_idx])
    if segments and is_orientation(segments[0]):
        segments = segments[1:]
    stops = []
    for segment in segments:
        color = stop_color(segment)
        if color:
            stops.append(color)
    return stops


def parse_gradient(value: str) -> Optional[GradientInfo]:
    """Parse a single gradient function, e.g. ``linear-gradient(45deg, red, blue)``."""
    if not value or "gradient" not in value:
        return None
    stops = color_stops(value)
    if len(stops) < 2:
        return None
    return GradientInfo(
        type=gradient_type(value),
        start=color_to_hex(stops[0]),
        end=color_to_hex(stops[-1]),
        full=value.strip(),
    )


def find_gradients(value: str) -> List[GradientInfo]:
    """Parse every gradient in a comma separated property value."""
    found = []
    for segment in split_top_level(value):
        if "gradient" not in segment:
            continue
        info = parse_gradient(segment)
        if info:
            found.append(info)
    return found


def extract_gradients(snapshot: StyleSnapshot) -> List[GradientRecord]:
    records: List[GradientRecord] = []
    seen: Set[Tuple[str, str]] = set()
    for element in snapshot.elements:
        props = list(dict.fromkeys(GRADIENT_PROPS + element.custom_properties()))
        for prop in props:
            try:
                value = element.computed(prop)
            except PropertyReadError as exc:
                logger.debug("Skipping gradient property: %s", exc)
                continue
            if "gradient" not in value:
                continue
            for info in find_gradients(value):
                key = (info.start, info.end)
                if key in seen:
                    continue
                seen.add(key)
                records.append(GradientRecord(
                    name=f"{nearest_name(info.start)} to {nearest_name(info.end)}",
                    start=info.start,
                    end=info.end,
                ))
    return records
