"""Tests for page title resolution."""

from style_finder.snapshot import TitleSources
from style_finder.title import UNKNOWN_TITLE, extract_title


class TestExtractTitle:
    def test_title_tag_wins(self, make_snapshot):
        titles = TitleSources(title="  Home | Acme  ", og_title="Acme", h1="Welcome")
        assert extract_title(make_snapshot([], titles=titles)) == "Home | Acme"

    def test_falls_back_to_og_title(self, make_snapshot):
        titles = TitleSources(title="   ", og_title="Acme Open Graph", h1="Welcome")
        assert extract_title(make_snapshot([], titles=titles)) == "Acme Open Graph"

    def test_falls_back_to_h1(self, make_snapshot):
        titles = TitleSources(h1="\n  Welcome  \n")
        assert extract_title(make_snapshot([], titles=titles)) == "Welcome"

    def test_unknown_title(self, make_snapshot):
        assert extract_title(make_snapshot([])) == UNKNOWN_TITLE == "Unknown Title"
