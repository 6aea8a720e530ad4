"""
Parsing der LLM-Antwort der Drift-Analyse.

Das LLM soll reines JSON liefern, packt es aber gern in Markdown-Codefences
oder schreibt Prosa drumherum. Wir schneiden das äußerste JSON-Objekt heraus.
"""

import json
from typing import Any


class DriftParseError(ValueError):
    """LLM-Antwort enthält kein parsbares JSON-Objekt."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


def _strip_code_fences(text: str) -> str:
    stripped = text.strip()

    if "```json" in stripped:
        json_start = stripped.find("```json") + 7
        json_end = stripped.find("```", json_start)
        stripped = stripped[json_start:json_end if json_end != -1 else None].strip()
    elif "```" in stripped:
        json_start = stripped.find("```") + 3
        json_end = stripped.find("```", json_start)
        stripped = stripped[json_start:json_end if json_end != -1 else None].strip()

    return stripped


def parse_drift_json(raw_text: str) -> dict[str, Any]:
    """
    Extrahiert das JSON-Objekt aus dem LLM-Output.

    Raises:
        DriftParseError: wenn kein JSON-Objekt dekodiert werden kann
    """
    if not raw_text or not raw_text.strip():
        raise DriftParseError("Empty LLM response", raw_text or "")

    text = _strip_code_fences(raw_text)

    start = text.find("{")
    end = text.rfind("}") + 1
    if start == -1 or end <= start:
        raise DriftParseError("No JSON object in LLM response", raw_text)

    try:
        data = json.loads(text[start:end])
    except json.JSONDecodeError as e:
        raise DriftParseError(f"Invalid JSON in LLM response: {e}", raw_text) from e

    return data
