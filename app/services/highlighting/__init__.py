"""
Highlighting der Übersetzung anhand gemeldeter Drift-Items.

Reine, synchrone Transformation (Text + Items) -> Segmente. Wird bei jeder
Änderung komplett neu berechnet, es gibt keinen inkrementellen Modus.
"""

from typing import Any, Iterable, List, Mapping

from app.models.pydantic import DriftAnalysis, DriftItem, HighlightedTranslation, Segment
from app.services.highlighting.normalizer import normalize_drift_items
from app.services.highlighting.segmenter import build_segments


def highlight_translation(
    translation_text: str,
    drift_items: Iterable[DriftItem | Mapping[str, Any]] | None,
) -> List[Segment]:
    return build_segments(translation_text, normalize_drift_items(translation_text, drift_items))


def build_highlighted_translation(
    translation_text: str,
    analysis: DriftAnalysis,
) -> HighlightedTranslation:
    """Segmente plus durchgereichte Sprachangaben für die Anzeige."""
    return HighlightedTranslation(
        source_language=analysis.source_language,
        translation_language=analysis.translation_language,
        segments=highlight_translation(translation_text, analysis.drift_items),
    )


__all__ = [
    "build_highlighted_translation",
    "build_segments",
    "highlight_translation",
    "normalize_drift_items",
]
