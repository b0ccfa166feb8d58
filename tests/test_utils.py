"""Tests for color and URL helpers."""

import pytest

from a11y_health.utils.colors import flatten, get_contrast_ratio, is_transparent, parse_color, parse_rgba, to_hex
from a11y_health.utils.urls import is_valid_url, normalize_url


class TestColors:
    """Tests for color parsing and contrast."""

    def test_parses_hex_and_rgb(self):
        assert parse_color("#fff") == (255, 255, 255)
        assert parse_color("#1e3a8a") == (30, 58, 138)
        assert parse_color("rgb(10, 20, 30)") == (10, 20, 30)
        assert parse_color("rgba(10, 20, 30, 0.5)") == (10, 20, 30)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_color("hsl(0, 0%, 0%)")
        with pytest.raises(ValueError):
            parse_color("rgb(300, 0, 0)")
        with pytest.raises(ValueError):
            parse_color("#zzzzzz")

    def test_black_on_white_is_21(self):
        assert get_contrast_ratio("#000", "#fff") == pytest.approx(21, abs=0.01)

    def test_same_color_is_1(self):
        assert get_contrast_ratio("rgb(120, 120, 120)", "#787878") == pytest.approx(1)

    def test_ratio_is_symmetric(self):
        assert get_contrast_ratio("#777", "#fff") == pytest.approx(get_contrast_ratio("#fff", "#777"))

    def test_grey_on_white_is_below_aa(self):
        """#777 on white is just under 4.5:1."""
        assert 4.4 < get_contrast_ratio("#777777", "#ffffff") < 4.5

    def test_transparency(self):
        assert is_transparent("transparent")
        assert is_transparent("rgba(0, 0, 0, 0)")
        assert not is_transparent("rgba(0, 0, 0, 0.5)")
        assert not is_transparent("rgb(0, 0, 0)")

    def test_to_hex(self):
        assert to_hex("rgb(255, 0, 16)") == "#ff0010"

    def test_parse_rgba_keeps_alpha(self):
        assert parse_rgba("rgba(10, 20, 30, 0.25)") == (10, 20, 30, 0.25)
        assert parse_rgba("rgb(10, 20, 30)") == (10, 20, 30, 1.0)
        assert parse_rgba("#fff") == (255, 255, 255, 1.0)

    def test_flatten_blends_over_white(self):
        """Half-transparent black over white is mid grey."""
        assert flatten("rgba(0, 0, 0, 0.5)") == "#808080"

    def test_flatten_over_backdrop(self):
        assert flatten("rgba(255, 0, 0, 0.25)", "#000000") == "#400000"

    def test_flatten_opaque_is_unchanged(self):
        assert flatten("#123456") == "#123456"
        assert flatten("rgba(1, 2, 3, 1)") == "#010203"


class TestUrls:
    """Tests for URL validation."""

    def test_valid_urls(self):
        assert is_valid_url("https://example.com")
        assert is_valid_url("http://localhost:8080/path?q=1")

    def test_invalid_urls(self):
        assert not is_valid_url("example.com")
        assert not is_valid_url("ftp://example.com")
        assert not is_valid_url("https://")
        assert not is_valid_url("")

    def test_normalize_adds_https(self):
        assert normalize_url("example.com") == "https://example.com"
        assert normalize_url("http://example.com") == "http://example.com"
