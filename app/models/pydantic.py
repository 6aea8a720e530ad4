"""
Datenmodelle für Drift-Analyse und Highlighting.

Die Ausgabe des LLM ist untrusted Freitext. DriftItem behandelt daher jedes
Feld als optional und normalisiert unbekannte Werte zu None, statt den
Request scheitern zu lassen. Welche Items tatsächlich markiert werden,
entscheidet der Normalizer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Category = Literal["Meaning", "Tone", "Terminology", "Grammar", "Style"]
Severity = Literal["High", "Medium", "Low"]

CATEGORIES: tuple[str, ...] = ("Meaning", "Tone", "Terminology", "Grammar", "Style")
SEVERITIES: tuple[str, ...] = ("High", "Medium", "Low")


def _canonical(value: Any, allowed: tuple[str, ...]) -> Optional[str]:
    # "high", " HIGH " -> "High"; alles andere -> None
    if not isinstance(value, str):
        return None
    lookup = {a.lower(): a for a in allowed}
    return lookup.get(value.strip().lower())


class DriftItem(BaseModel):
    """
    Eine vom LLM gemeldete Abweichung zwischen Quelltext und Übersetzung.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    category: Optional[Category] = None
    severity: Optional[Severity] = None
    description: Optional[str] = None
    source_snippet: Optional[str] = None
    translation_snippet: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, v: Any) -> Optional[str]:
        return _canonical(v, CATEGORIES)

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, v: Any) -> Optional[str]:
        return _canonical(v, SEVERITIES)

    @field_validator("description", "source_snippet", "translation_snippet", mode="before")
    @classmethod
    def _only_strings(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None


class DriftAnalysis(BaseModel):
    """
    Validiertes Ergebnis des Analyse-Providers.
    """

    source_language: str = ""
    translation_language: str = ""
    drift_items: List[DriftItem] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, data: Any) -> "DriftAnalysis":
        """Baut eine DriftAnalysis aus beliebigem (geparstem) JSON, ohne zu werfen."""
        if not isinstance(data, Mapping):
            return cls()

        raw_items = data.get("drift_items")
        if not isinstance(raw_items, list):
            raw_items = []

        source_language = data.get("source_language")
        translation_language = data.get("translation_language")

        return cls(
            source_language=source_language if isinstance(source_language, str) else "",
            translation_language=(
                translation_language if isinstance(translation_language, str) else ""
            ),
            drift_items=[
                DriftItem.model_validate(item) for item in raw_items if isinstance(item, Mapping)
            ],
        )


@dataclass(frozen=True)
class CandidateMatch:
    """Fundstelle eines translation_snippet: halboffener Bereich [start, end)."""

    start: int
    end: int
    severity: Optional[Severity] = None


class Segment(BaseModel):
    """
    Zusammenhängender Ausschnitt der Übersetzung, optional mit Severity markiert.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    severity: Optional[Severity] = None


class HighlightedTranslation(BaseModel):
    source_language: str = ""
    translation_language: str = ""
    segments: List[Segment] = Field(default_factory=list)


class AnalyseRequest(BaseModel):
    """
    Request-Body für den /analyse-drift-Endpoint.
    Beide Felder optional, damit die Route selbst mit 400 antworten kann.
    """

    source: Optional[str] = None
    translation: Optional[str] = None


class AnalysisInput(BaseModel):
    source: str
    translation: str


class AnalysisMeta(BaseModel):
    id: int
    created_at: Optional[datetime] = None


class AnalyseResponse(BaseModel):
    """
    Response-Body für den /analyse-drift-Endpoint.
    `output` ist das (geparste) LLM-JSON unverändert, `highlight` die Segmente.
    """

    input: AnalysisInput
    output: Dict[str, Any]
    meta: AnalysisMeta
    highlight: HighlightedTranslation


class StoredAnalysis(BaseModel):
    id: int
    created_at: Optional[datetime] = None
    source_lang: Optional[str] = None
    translation_lang: Optional[str] = None
    source_text: str
    translation_text: str
    analysis_json: Optional[Dict[str, Any]] = None
    highlight: HighlightedTranslation


class LatestAnalysesResponse(BaseModel):
    analyses: List[StoredAnalysis] = Field(default_factory=list)
