"""Tests for hex normalization and color naming."""

import re

import pytest
import webcolors

from style_finder.colors import (
    ColorNamer,
    SENTINEL_HEX,
    UNKNOWN_NAME,
    brightness,
    color_to_hex,
    hex_to_rgb_string,
    nearest_name,
    parse_color,
    to_hex,
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class TestToHex:
    @pytest.mark.parametrize("value, expected", [
        ("#fff", "#ffffff"),
        ("#ABC", "#aabbcc"),
        ("#1a2B3c", "#1a2b3c"),
        ("rgb(255, 0, 0)", "#ff0000"),
        ("rgba(0, 128, 255, 0.5)", "#0080ff"),
        ("rgb(12 34 56 / 50%)", "#0c2238"),
        ("  rgb(1,2,3)  ", "#010203"),
        ("#11223344", "#112233"),
    ])
    def test_supported_forms(self, value, expected):
        assert to_hex(value) == expected

    def test_short_hex_matches_long_hex(self):
        assert to_hex("#abc") == to_hex("#aabbcc")

    @pytest.mark.parametrize("value", [
        "", "red", "hsl(0, 100%, 50%)", "currentcolor", "transparent", "#12", "rgb(1, 2)", "rgb(a, b, c)",
    ])
    def test_unsupported_forms_give_sentinel(self, value):
        assert to_hex(value) == SENTINEL_HEX

    @pytest.mark.parametrize("value", [
        "#abc", "#ABCDEF", "rgb(300, -5, 12.6)", "rgba(1,2,3,0)", "garbage", "rgb(10%, 50%, 100%)",
    ])
    def test_output_is_always_lowercase_six_digit_hex(self, value):
        assert HEX_RE.match(to_hex(value))

    def test_channels_are_clamped(self):
        assert to_hex("rgb(300, -5, 12.6)") == "#ff000d"

    def test_parse_color_keeps_alpha(self):
        assert parse_color("rgba(10, 20, 30, 0.25)") == (10, 20, 30, 0.25)

    @pytest.mark.parametrize("value", [
        "rgb(1e999, 0, 0)", "rgb(0, infinity, 0)", "rgb(0, 0, nan)", "rgba(0, 0, 0, inf)", "rgb(1e999%, 0, 0)",
    ])
    def test_non_finite_channels_give_sentinel(self, value):
        assert parse_color(value) is None
        assert to_hex(value) == SENTINEL_HEX
        assert nearest_name(value) == UNKNOWN_NAME


class TestColorToHex:
    def test_named_color(self):
        assert color_to_hex("Red") == "#ff0000"

    def test_hsl(self):
        assert color_to_hex("hsl(0, 100%, 50%)") == "#ff0000"
        assert color_to_hex("hsl(120deg 100% 25%)") == "#008000"

    def test_unknown_word(self):
        assert color_to_hex("notacolor") == SENTINEL_HEX

    @pytest.mark.parametrize("value", ["hsl(1e999, 100%, 50%)", "hsl(0, inf%, 50%)", "hsl(0, 100%, nan%)"])
    def test_non_finite_hsl_gives_sentinel(self, value):
        assert color_to_hex(value) == SENTINEL_HEX

    def test_hsl_percentages_are_clamped(self):
        assert color_to_hex("hsl(0, 500%, 50%)") == "#ff0000"
        assert color_to_hex("hsl(0, 100%, 1e300%)") == "#ffffff"

    def test_hex_and_rgb_defer_to_to_hex(self):
        assert color_to_hex("#0f0") == "#00ff00"
        assert color_to_hex("rgba(0, 0, 255, 0.3)") == "#0000ff"


class TestNearestName:
    def test_exact_match(self):
        assert nearest_name("#ff0000") == "red"
        assert nearest_name("rgb(255, 255, 255)") == "white"

    def test_nearest_match(self):
        assert nearest_name("#fe0101") == "red"
        assert nearest_name("#010101") == "black"

    @pytest.mark.parametrize("value", ["", "red", "hsl(0, 0%, 0%)", "#zzz", "rgb()"])
    def test_failure_is_unknown(self, value):
        assert nearest_name(value) == UNKNOWN_NAME

    def test_ties_go_to_first_name(self):
        namer = ColorNamer([("first", (0, 0, 0)), ("second", (2, 2, 2))])
        assert namer.nearest("#010101") == "first"

    def test_exact_match_prefers_first_duplicate(self):
        namer = ColorNamer([("aqua", (0, 255, 255)), ("cyan", (0, 255, 255))])
        assert namer.nearest("#00ffff") == "aqua"

    def test_default_dictionary_is_the_css3_table(self):
        names = [name for name, _ in ColorNamer().named_colors]
        assert names == list(webcolors.names("css3"))
        assert len(names) > 140


class TestHelpers:
    def test_rgb_string(self):
        assert hex_to_rgb_string("#0080ff") == "rgb(0, 128, 255)"

    def test_brightness_orders_black_before_white(self):
        assert brightness("#000000") == 0
        assert brightness("#ffffff") == pytest.approx(255)
        assert brightness("#ff0000") == pytest.approx(0.299 * 255)
