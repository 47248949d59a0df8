"""
Typography grouping and stylesheet statistics.

Text elements are collapsed into groups that share a tag and the five
grouping properties below. The remaining typography properties and the
class name are carried from the first element of each group.
"""

import logging
import math
import re
from typing import Dict, List, NamedTuple, Tuple

from .errors import PropertyReadError
from .models import CSSMeta, TypographyGroup
from .snapshot import SnapshotElement, StyleSnapshot, StylesheetStats

logger = logging.getLogger(__name__)

TYPOGRAPHY_PROPS = [
    "font-family",
    "font-size",
    "font-weight",
    "line-height",
    "letter-spacing",
    "text-transform",
    "font-style",
    "text-decoration",
]

GROUPING_PROPS = [
    "font-family",
    "font-size",
    "font-weight",
    "line-height",
    "letter-spacing",
]

RELEVANT_TAGS = {
    "p", "span", "h1", "h2", "h3", "h4", "h5", "h6",
    "a", "button", "label", "li", "th", "td", "caption",
    "blockquote", "figcaption", "cite", "q", "strong", "em",
    "small", "pre", "code", "div",
}

_LEADING_FLOAT_RE = re.compile(r"^\s*([-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?)")


class TypographyKey(NamedTuple):
    tag: str
    font_family: str
    font_size: str
    font_weight: str
    line_height: str
    letter_spacing: str


def primary_font_family(value: str) -> str:
    first = value.split(",")[0].strip()
    if len(first) >= 2 and first[0] == first[-1] and first[0] in {'"', "'"}:
        first = first[1:-1]
    return first


def parse_font_size(value: str) -> float:
    match = _LEADING_FLOAT_RE.match(value or "")
    if not match:
        return math.nan
    return float(match.group(1))


def read_typography(element: SnapshotElement) -> Dict[str, str]:
    styles: Dict[str, str] = {}
    for prop in TYPOGRAPHY_PROPS:
        try:
            value = element.computed(prop)
        except PropertyReadError as exc:
            logger.debug("Skipping typography property: %s", exc)
            value = ""
        if prop == "font-family":
            value = primary_font_family(value)
        styles[prop] = value
    return styles


def size_sort_key(group: TypographyGroup) -> Tuple[int, float]:
    size = parse_font_size(group.font_size)
    if math.isnan(size):
        return 1, 0.0
    return 0, -size


def collect_css_meta(stats: StylesheetStats) -> CSSMeta:
    return CSSMeta(
        external_css_count=stats.external_count,
        inline_css_count=sum(c for c in stats.style_rule_counts if c is not None),
        typography_rules_count=sum(c for c in stats.sheet_rule_counts if c is not None),
    )


def extract_typography(snapshot: StyleSnapshot) -> Tuple[List[TypographyGroup], CSSMeta]:
    groups: Dict[TypographyKey, TypographyGroup] = {}
    meta = collect_css_meta(snapshot.stylesheets)

    for element in snapshot.elements:
        tag = element.tag
        if tag not in RELEVANT_TAGS:
            continue

        styles = read_typography(element)
        key = TypographyKey(tag, *(styles[p] for p in GROUPING_PROPS))
        group = groups.get(key)
        if group:
            group.count += 1
            meta.duplicates_removed += 1
        else:
            groups[key] = TypographyGroup(
                tag=tag,
                class_name=element.class_name,
                font_family=styles["font-family"],
                font_size=styles["font-size"],
                font_weight=styles["font-weight"],
                line_height=styles["line-height"],
                letter_spacing=styles["letter-spacing"],
                text_transform=styles["text-transform"],
                font_style=styles["font-style"],
                text_decoration=styles["text-decoration"],
            )
        meta.tag_counts[tag] = meta.tag_counts.get(tag, 0) + 1

    typography = sorted(groups.values(), key=size_sort_key)
    return typography, meta
