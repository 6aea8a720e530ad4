"""
Drift-Item-Normalizer.

Wandelt die drift_items des LLM in CandidateMatches um. Items ohne
translation_snippet oder mit einem Snippet, das in der Übersetzung nicht
vorkommt, werden stillschweigend verworfen. Gesucht wird exakt
(case-sensitive, keine Whitespace-Normalisierung), und es zählt immer nur
das erste Vorkommen.
"""

import logging
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from app.models.pydantic import CandidateMatch, DriftItem

logger = logging.getLogger(__name__)


def _as_drift_item(item: Any) -> DriftItem | None:
    if isinstance(item, DriftItem):
        return item
    if isinstance(item, Mapping):
        try:
            return DriftItem.model_validate(item)
        except ValidationError:
            return None
    return None


def normalize_drift_items(
    translation_text: str,
    drift_items: Iterable[DriftItem | Mapping[str, Any]] | None,
) -> List[CandidateMatch]:
    """
    Liefert die Fundstellen in Eingabereihenfolge (noch nicht nach Position sortiert).
    """
    matches: List[CandidateMatch] = []

    for index, raw in enumerate(drift_items or []):
        item = _as_drift_item(raw)
        if item is None:
            logger.debug("Skipping malformed drift item #%d: %r", index, raw)
            continue

        snippet = item.translation_snippet
        if not snippet:
            logger.debug("Skipping drift item #%d without translation_snippet", index)
            continue

        start = translation_text.find(snippet)
        if start == -1:
            logger.debug("Snippet of drift item #%d not found in translation: %r", index, snippet)
            continue

        matches.append(
            CandidateMatch(start=start, end=start + len(snippet), severity=item.severity)
        )

    return matches
