"""Tests for top-level comma splitting."""

from style_finder.tokenizer import split_top_level


class TestSplitTopLevel:
    def test_rgba_then_hex(self):
        assert split_top_level("rgba(1,2,3,0.5), #fff") == ["rgba(1,2,3,0.5)", "#fff"]

    def test_multiple_gradients(self):
        value = "linear-gradient(red, blue), radial-gradient(circle, rgb(0, 0, 0), white)"
        assert split_top_level(value) == [
            "linear-gradient(red, blue)",
            "radial-gradient(circle, rgb(0, 0, 0), white)",
        ]

    def test_nested_functions(self):
        assert split_top_level("a(b(c, d), e), f") == ["a(b(c, d), e)", "f"]

    def test_empty_input(self):
        assert split_top_level("") == []

    def test_empty_segments_dropped(self):
        assert split_top_level("a, , b,") == ["a", "b"]

    def test_unclosed_paren_keeps_remainder(self):
        assert split_top_level("rgba(1, 2, 3") == ["rgba(1, 2, 3"]

    def test_stray_close_paren_does_not_go_negative(self):
        assert split_top_level("a), b") == ["a)", "b"]

    def test_custom_separator(self):
        assert split_top_level("a / b(c / d)", separator="/") == ["a", "b(c / d)"]
