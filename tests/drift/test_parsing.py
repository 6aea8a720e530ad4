"""Tests für das Parsing der LLM-Antwort."""

import pytest

from app.models.pydantic import DriftAnalysis
from app.services.drift.parsing import DriftParseError, parse_drift_json


def test_plain_json():
    data = parse_drift_json('{"source_language": "English", "drift_items": []}')
    assert data == {"source_language": "English", "drift_items": []}


def test_json_in_markdown_fence():
    raw = 'Here you go:\n```json\n{"drift_items": [{"severity": "Low"}]}\n```\nBye'
    assert parse_drift_json(raw) == {"drift_items": [{"severity": "Low"}]}


def test_json_with_prose_around():
    raw = 'Sure! {"translation_language": "German"} Hope this helps.'
    assert parse_drift_json(raw) == {"translation_language": "German"}


@pytest.mark.parametrize("raw", ["", "   ", "no json here", "{not: valid}", "[1, 2, 3]"])
def test_invalid_output_raises(raw):
    with pytest.raises(DriftParseError):
        parse_drift_json(raw)


def test_parse_error_is_value_error_and_keeps_raw_text():
    with pytest.raises(ValueError) as exc_info:
        parse_drift_json("nope")
    assert exc_info.value.raw_text == "nope"


class TestDriftAnalysisFromRaw:
    """Defensive Validierung des geparsten JSON."""

    def test_missing_fields_give_defaults(self):
        analysis = DriftAnalysis.from_raw({})
        assert analysis.source_language == ""
        assert analysis.translation_language == ""
        assert analysis.drift_items == []

    def test_non_list_drift_items(self):
        assert DriftAnalysis.from_raw({"drift_items": "none"}).drift_items == []

    def test_non_mapping_input(self):
        assert DriftAnalysis.from_raw(None).drift_items == []
        assert DriftAnalysis.from_raw(["x"]).drift_items == []

    def test_skips_non_dict_items_and_coerces_fields(self):
        analysis = DriftAnalysis.from_raw(
            {
                "source_language": 1,
                "translation_language": "Spanish",
                "drift_items": [
                    "junk",
                    {
                        "category": "terminology",
                        "severity": "HIGH",
                        "description": "wrong term",
                        "source_snippet": "contract",
                        "translation_snippet": "contrato",
                        "extra": "ignored",
                    },
                    {"category": "Vibes", "severity": 3, "translation_snippet": ["x"]},
                ],
            }
        )

        assert analysis.source_language == ""
        assert analysis.translation_language == "Spanish"
        assert len(analysis.drift_items) == 2

        first, second = analysis.drift_items
        assert first.category == "Terminology"
        assert first.severity == "High"
        assert first.translation_snippet == "contrato"
        assert second.category is None
        assert second.severity is None
        assert second.translation_snippet is None
