"""Unit tests for type name resolution."""

import pytest

from backend.analyzer.type_resolver import resolve_type


class TestResolveType:

    @pytest.mark.parametrize("declared, expected", [
        ("Product", "Product"),
        ("https://schema.org/Product", "Product"),
        ("http://schema.org/LocalBusiness", "LocalBusiness"),
        ("https://schema.org/Event https://schema.org/Thing", "Event"),
        ("http://example.com/vocab/Widget", "Widget"),
    ])
    def test_canonical_names(self, declared, expected):
        assert resolve_type(declared) == expected

    def test_never_keeps_vocabulary_prefix(self):
        assert "schema.org" not in resolve_type("https://schema.org/FAQPage")

    def test_falls_back_to_input_when_nothing_after_separator(self):
        assert resolve_type("http://example.com/types/") == "http://example.com/types/"

    @pytest.mark.parametrize("declared", [
        "https://schema.org/",
        "http://schema.org/ http://schema.org/Thing",
    ])
    def test_bare_vocabulary_resolves_to_root_type(self, declared):
        assert resolve_type(declared) == "Thing"
