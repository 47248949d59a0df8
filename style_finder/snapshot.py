"""
Read-only snapshot of a rendered document.

The snapshot is produced in the page by ``SNAPSHOT_SCRIPT`` (one
``page.evaluate`` round trip) and rebuilt on the Python side with
``StyleSnapshot.from_dict``. Extractors only ever see this object, so they
can be exercised against hand-written snapshots without a browser.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import PropertyReadError

SNAPSHOT_SCRIPT = """(props) => {
    const readClassName = (el) => {
        if (typeof el.className === 'string') return el.className.trim();
        if (el.className && typeof el.className.baseVal === 'string') return el.className.baseVal.trim();
        return '';
    };

    const ruleCount = (sheet) => {
        try {
            return sheet && sheet.cssRules ? sheet.cssRules.length : null;
        } catch (e) {
            return null;
        }
    };

    const elements = Array.from(document.querySelectorAll('*')).map(el => {
        const styles = {};
        let computed = null;
        try {
            computed = window.getComputedStyle(el);
        } catch (e) {
            return {tag: el.tagName.toLowerCase(), className: readClassName(el), styles};
        }
        props.forEach(p => {
            try {
                styles[p] = computed.getPropertyValue(p).trim();
            } catch (e) {
                styles[p] = null;
            }
        });
        for (let i = 0; i < computed.length; i++) {
            const name = computed[i];
            if (!name.startsWith('--')) continue;
            try {
                const value = computed.getPropertyValue(name).trim();
                if (value.includes('gradient')) styles[name] = value;
            } catch (e) {
                styles[name] = null;
            }
        }
        return {tag: el.tagName.toLowerCase(), className: readClassName(el), styles};
    });

    const titleTag = document.querySelector('title');
    const ogTitle = document.querySelector('meta[property="og:title"]');
    const h1Tag = document.querySelector('h1');

    return {
        elements,
        stylesheets: {
            externalCount: document.querySelectorAll('link[rel="stylesheet"]').length,
            styleRuleCounts: Array.from(document.querySelectorAll('style')).map(el => ruleCount(el.sheet)),
            sheetRuleCounts: Array.from(document.styleSheets).map(ruleCount),
        },
        titles: {
            title: titleTag ? titleTag.textContent : null,
            ogTitle: ogTitle ? ogTitle.getAttribute('content') : null,
            h1: h1Tag ? h1Tag.textContent : null,
        },
    };
}"""


@dataclass(frozen=True)
class SnapshotElement:
    tag: str
    class_name: str = ""
    styles: Mapping[str, Optional[str]] = field(default_factory=dict)

    @property
    def classes(self) -> List[str]:
        return self.class_name.split()

    def computed(self, prop: str) -> str:
        """Computed value of ``prop``; empty when the property was not captured.

        Raises PropertyReadError when the browser failed to read it.
        """
        if prop not in self.styles:
            return ""
        value = self.styles[prop]
        if value is None:
            raise PropertyReadError(prop, self.tag)
        return value.strip()

    def custom_properties(self) -> List[str]:
        return [name for name in self.styles if name.startswith("--")]


@dataclass(frozen=True)
class StylesheetStats:
    external_count: int = 0
    style_rule_counts: Tuple[Optional[int], ...] = ()
    sheet_rule_counts: Tuple[Optional[int], ...] = ()


@dataclass(frozen=True)
class TitleSources:
    title: Optional[str] = None
    og_title: Optional[str] = None
    h1: Optional[str] = None


@dataclass(frozen=True)
class StyleSnapshot:
    elements: Tuple[SnapshotElement, ...] = ()
    stylesheets: StylesheetStats = field(default_factory=StylesheetStats)
    titles: TitleSources = field(default_factory=TitleSources)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StyleSnapshot":
        elements = []
        for raw in data.get("elements") or []:
            if not isinstance(raw, dict):
                continue
            elements.append(SnapshotElement(
                tag=str(raw.get("tag") or "").lower(),
                class_name=str(raw.get("className") or "").strip(),
                styles=dict(raw.get("styles") or {}),
            ))

        sheets = data.get("stylesheets") or {}
        titles = data.get("titles") or {}
        return cls(
            elements=tuple(elements),
            stylesheets=StylesheetStats(
                external_count=int(sheets.get("externalCount") or 0),
                style_rule_counts=tuple(sheets.get("styleRuleCounts") or ()),
                sheet_rule_counts=tuple(sheets.get("sheetRuleCounts") or ()),
            ),
            titles=TitleSources(
                title=titles.get("title"),
                og_title=titles.get("ogTitle"),
                h1=titles.get("h1"),
            ),
        )
