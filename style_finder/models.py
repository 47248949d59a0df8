"""
Output records produced by the extractors.

Every record serializes with ``to_dict`` using the key names of the
Style Finder JSON response (camelCase meta keys, CSS property names for
typography fields).
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ColorRecord:
    name: str
    hex: str
    rgb: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "hex": self.hex, "rgb": self.rgb}


@dataclass(frozen=True)
class GradientInfo:
    type: str
    start: str
    end: str
    full: str


@dataclass(frozen=True)
class GradientRecord:
    name: str
    start: str
    end: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "start": self.start, "end": self.end}


@dataclass
class TypographyGroup:
    tag: str
    class_name: str
    font_family: str
    font_size: str
    font_weight: str
    line_height: str
    letter_spacing: str
    text_transform: str
    font_style: str
    text_decoration: str
    count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "className": self.class_name,
            "font-family": self.font_family,
            "font-size": self.font_size,
            "font-weight": self.font_weight,
            "line-height": self.line_height,
            "letter-spacing": self.letter_spacing,
            "text-transform": self.text_transform,
            "font-style": self.font_style,
            "text-decoration": self.text_decoration,
            "count": self.count,
        }


@dataclass
class CSSMeta:
    external_css_count: int = 0
    inline_css_count: int = 0
    typography_rules_count: int = 0
    duplicates_removed: int = 0
    tag_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def total_tags_found(self) -> int:
        return len(self.tag_counts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "externalCSSCount": self.external_css_count,
            "inlineCSSCount": self.inline_css_count,
            "typographyRulesCount": self.typography_rules_count,
            "duplicatesRemoved": self.duplicates_removed,
            "tagCounts": dict(self.tag_counts),
            "totalTagsFound": self.total_tags_found,
        }


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ExtractionResult:
    url: str
    status: str = "success"
    title: str = ""
    typography: List[TypographyGroup] = field(default_factory=list)
    meta: CSSMeta = field(default_factory=CSSMeta)
    colors: List[ColorRecord] = field(default_factory=list)
    gradients: List[GradientRecord] = field(default_factory=list)
    message: Optional[str] = None
    timestamp: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def failure(cls, url: str, message: str) -> "ExtractionResult":
        return cls(url=url, status="error", message=message, timestamp=now_iso())

    def to_dict(self) -> Dict[str, Any]:
        if not self.ok:
            return {
                "status": self.status,
                "url": self.url,
                "message": self.message,
                "timestamp": self.timestamp,
            }
        return {
            "status": self.status,
            "url": self.url,
            "title": self.title,
            "typography": [g.to_dict() for g in self.typography],
            "meta": self.meta.to_dict(),
            "colors": [c.to_dict() for c in self.colors],
            "gradients": [g.to_dict() for g in self.gradients],
        }
