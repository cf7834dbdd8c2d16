"""Unit tests for URL well-formedness."""

import pytest

from backend.utils.validation import is_valid_url


class TestIsValidUrl:

    @pytest.mark.parametrize("value", [
        "https://example.com",
        "http://example.com/path?q=1#frag",
        "ftp://files.example.com/a.txt",
        "mailto:info@example.com",
        "tel:+15551234",
    ])
    def test_valid(self, value):
        assert is_valid_url(value) is True

    @pytest.mark.parametrize("value", [
        "not a url",
        "",
        "/relative/path",
        "example.com",
        "https://",
        "http://[::1",
        None,
        42,
    ])
    def test_invalid(self, value):
        assert is_valid_url(value) is False
