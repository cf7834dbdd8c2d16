"""Unit tests for RDFa extraction."""

from backend.extractors.rdfa_extractor import RDFaExtractor
from backend.models.candidate import SourceFormat
from backend.utils.html import make_soup


class TestRdfaExtraction:

    def test_nested_typeof(self, event_page):
        candidates = RDFaExtractor.extract_rdfa(make_soup(event_page))

        assert [c.declared_type for c in candidates] == ["Event", "Place", "PostalAddress"]
        assert all(c.source_format is SourceFormat.RDFA for c in candidates)

        event = candidates[0].properties
        assert event["name"] == "Jazz Night"
        assert event["startDate"] == "2025-05-01T20:00"
        assert event["location"]["@type"] == "Place"
        assert event["location"]["name"] == "Blue Room"
        assert event["location"]["address"]["addressLocality"] == "Austin"
        assert "streetAddress" not in event

    def test_og_meta_outside_scope_ignored(self):
        soup = make_soup(
            '<html><head><meta property="og:title" content="Page"></head>'
            '<body><div typeof="schema:Person"><span property="name">Jane</span></div></body></html>'
        )

        candidates = RDFaExtractor.extract_rdfa(soup)

        assert len(candidates) == 1
        assert candidates[0].properties == {"name": "Jane"}

    def test_repeated_property_promoted(self):
        soup = make_soup(
            '<html><body><div typeof="Recipe">'
            '<span property="recipeIngredient">flour</span>'
            '<span property="recipeIngredient">sugar</span>'
            "</div></body></html>"
        )

        assert RDFaExtractor.extract_rdfa(soup)[0].properties == {
            "recipeIngredient": ["flour", "sugar"]
        }
