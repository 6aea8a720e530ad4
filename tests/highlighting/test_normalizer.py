"""Tests für den Drift-Item-Normalizer."""

from app.models.pydantic import CandidateMatch, DriftItem
from app.services.highlighting.normalizer import normalize_drift_items


def _item(snippet, severity="High", **kwargs):
    return DriftItem(translation_snippet=snippet, severity=severity, **kwargs)


class TestNormalizeDriftItems:
    """Tests für die Umwandlung DriftItem -> CandidateMatch."""

    def test_first_occurrence_is_used(self):
        """Mehrfach vorkommende Snippets: nur das erste Vorkommen zählt."""
        text = "abc abc abc"
        matches = normalize_drift_items(text, [_item("abc")])
        assert matches == [CandidateMatch(start=0, end=3, severity="High")]

    def test_empty_or_missing_snippet_is_skipped(self):
        items = [
            _item(""),
            _item(None),
            DriftItem(severity="Low", description="no snippet at all"),
        ]
        assert normalize_drift_items("Hello world", items) == []

    def test_unmatched_snippet_is_skipped(self):
        assert normalize_drift_items("Hello world", [_item("xyz", "Medium")]) == []

    def test_search_is_case_sensitive(self):
        """Keine Normalisierung: 'hello' findet 'Hello' nicht."""
        assert normalize_drift_items("Hello world", [_item("hello")]) == []

    def test_whitespace_is_not_normalized(self):
        assert normalize_drift_items("Hello  world", [_item("Hello world")]) == []

    def test_keeps_input_order(self):
        """Ausgabe bleibt in Eingabereihenfolge, noch nicht nach Position sortiert."""
        text = "red green blue"
        matches = normalize_drift_items(text, [_item("blue", "Low"), _item("red", "High")])
        assert [m.start for m in matches] == [10, 0]
        assert [m.severity for m in matches] == ["Low", "High"]

    def test_duplicate_snippets_resolve_to_same_span(self):
        text = "one two one"
        matches = normalize_drift_items(text, [_item("one", "High"), _item("one", "Low")])
        assert [(m.start, m.end) for m in matches] == [(0, 3), (0, 3)]

    def test_raw_dicts_are_accepted(self):
        """Rohe LLM-Dicts werden defensiv validiert."""
        raw = [
            {"translation_snippet": "world", "severity": "medium", "category": "Tone"},
            {"translation_snippet": 42, "severity": "High"},
            "not a dict",
            None,
        ]
        matches = normalize_drift_items("Hello world", raw)
        assert matches == [CandidateMatch(start=6, end=11, severity="Medium")]

    def test_unknown_severity_keeps_match_without_severity(self):
        matches = normalize_drift_items("Hello world", [{"translation_snippet": "Hello", "severity": "Critical"}])
        assert matches == [CandidateMatch(start=0, end=5, severity=None)]

    def test_none_and_empty_list(self):
        assert normalize_drift_items("Hello", None) == []
        assert normalize_drift_items("Hello", []) == []

    def test_end_is_start_plus_length(self):
        text = "Der Vertrag wurde gekündigt."
        (match,) = normalize_drift_items(text, [_item("gekündigt")])
        assert text[match.start:match.end] == "gekündigt"
        assert match.end - match.start == len("gekündigt")
