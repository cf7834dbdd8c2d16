"""Unit tests for the merge engine."""

from backend.analyzer.entity_merger import (
    UNIVERSAL_FIELDS,
    merge_candidate,
    merge_candidates,
)
from backend.models.candidate import Candidate, SourceFormat


def _candidate(declared_type, source=SourceFormat.JSON_LD, **properties):
    return Candidate(
        declared_type=declared_type,
        source_format=source,
        properties=properties,
    )


class TestMergeCandidate:

    def test_creates_bag_under_canonical_type(self):
        record = merge_candidate({}, _candidate("https://schema.org/Product", name="Widget"))

        assert record == {"Product": {"name": "Widget"}}

    def test_single_occurrence_stays_scalar(self):
        record = merge_candidates([
            _candidate("Product", color="red"),
            _candidate("Product", size="L"),
        ])

        assert record["Product"] == {"color": "red", "size": "L"}

    def test_repeated_field_promoted_in_encounter_order(self):
        record = merge_candidates([
            _candidate("Product", color="red"),
            _candidate("Product", color="blue"),
            _candidate("Product", color="green"),
        ])

        assert record["Product"]["color"] == ["red", "blue", "green"]

    def test_sequence_incoming_is_concatenated(self):
        record = merge_candidates([
            _candidate("Organization", sameAs=["a", "b"]),
            _candidate("Organization", sameAs=["c"]),
            _candidate("Organization", sameAs="d"),
        ])

        assert record["Organization"]["sameAs"] == ["a", "b", "c", "d"]

    def test_universal_fields_first_write_wins(self):
        record = merge_candidates([
            _candidate("Organization", name="Acme"),
            _candidate("Organization", name="Acme Corp", telephone="555-0100"),
        ])

        assert record["Organization"]["name"] == "Acme"
        assert record["Organization"]["telephone"] == "555-0100"

    def test_every_universal_field_is_single_valued(self):
        first = {field: f"first {field}" for field in UNIVERSAL_FIELDS}
        second = {field: f"second {field}" for field in UNIVERSAL_FIELDS}

        record = merge_candidates([
            _candidate("Thing", **first),
            _candidate("Thing", **second),
        ])

        assert record["Thing"] == first

    def test_types_are_kept_apart(self):
        record = merge_candidates([
            _candidate("Product", name="Widget"),
            _candidate("https://schema.org/Organization", source=SourceFormat.MICRODATA, name="Acme"),
        ])

        assert record == {
            "Product": {"name": "Widget"},
            "Organization": {"name": "Acme"},
        }

    def test_candidate_lists_not_mutated(self):
        candidate = _candidate("Organization", sameAs=["a"])

        merge_candidates([candidate, _candidate("Organization", sameAs="b")])

        assert candidate.properties["sameAs"] == ["a"]


class TestMergeOrder:

    def test_order_changes_sequence_order_only(self):
        a = _candidate("Product", color="red", sku="1")
        b = _candidate("Product", color="blue", weight="2kg")
        c = _candidate("Product", material="steel")

        forward = merge_candidates([a, b, c])["Product"]
        backward = merge_candidates([c, b, a])["Product"]

        assert set(forward) == set(backward)
        for key in forward:
            assert isinstance(forward[key], list) == isinstance(backward[key], list)
        assert forward["color"] == ["red", "blue"]
        assert backward["color"] == ["blue", "red"]

    def test_empty_value_counts_as_present(self):
        forward = merge_candidates([
            _candidate("Product", color=""),
            _candidate("Product", color="red"),
        ])["Product"]
        backward = merge_candidates([
            _candidate("Product", color="red"),
            _candidate("Product", color=""),
        ])["Product"]

        assert forward["color"] == ["", "red"]
        assert backward["color"] == ["red", ""]
