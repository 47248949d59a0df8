import pytest

from style_finder.snapshot import SnapshotElement, StylesheetStats, StyleSnapshot, TitleSources

BODY_TEXT = {
    "font-family": '"Inter", Arial, sans-serif',
    "font-size": "16px",
    "font-weight": "400",
    "line-height": "24px",
    "letter-spacing": "normal",
    "text-transform": "none",
    "font-style": "normal",
    "text-decoration": "none solid rgb(0, 0, 0)",
}


@pytest.fixture
def text_styles():
    def _styles(**overrides):
        styles = dict(BODY_TEXT)
        for key, value in overrides.items():
            styles[key.replace("_", "-")] = value
        return styles
    return _styles


@pytest.fixture
def make_snapshot():
    def _snapshot(elements, stylesheets=None, titles=None):
        return StyleSnapshot(
            elements=tuple(elements),
            stylesheets=stylesheets or StylesheetStats(),
            titles=titles or TitleSources(),
        )
    return _snapshot


@pytest.fixture
def el():
    def _element(tag, styles=None, class_name=""):
        return SnapshotElement(tag=tag, class_name=class_name, styles=dict(styles or {}))
    return _element
