"""
Span-Resolver & Segmenter.

Zerlegt die Übersetzung anhand der CandidateMatches in eine lückenlose,
überlappungsfreie Folge von Segmenten. Bei Überlappung gewinnt der Match mit
dem frühesten Start (bei Gleichstand der zuerst gemeldete); alle Matches, die
in einen bereits vergebenen Bereich hineinragen, werden komplett verworfen.
Es wird weder gemerged noch gekürzt.
"""

from typing import Iterable, List

from app.models.pydantic import CandidateMatch, Segment


def build_segments(translation_text: str, matches: Iterable[CandidateMatch]) -> List[Segment]:
    """
    Invariante: "".join(s.text for s in segments) == translation_text.

    Leerer Text ergibt eine leere Liste.
    """
    if not translation_text:
        return []

    # sorted() ist stabil -> gleiche Starts behalten die Normalizer-Reihenfolge
    ordered = sorted(matches, key=lambda m: m.start)
    if not ordered:
        return [Segment(text=translation_text)]

    segments: List[Segment] = []
    cursor = 0

    for match in ordered:
        if match.start < cursor:
            continue

        if match.start > cursor:
            segments.append(Segment(text=translation_text[cursor:match.start]))

        segments.append(
            Segment(text=translation_text[match.start:match.end], severity=match.severity)
        )
        cursor = match.end

    # Resttext nach dem letzten Match
    if cursor < len(translation_text):
        segments.append(Segment(text=translation_text[cursor:]))

    return segments
