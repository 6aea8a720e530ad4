"""
Prompt für die Drift-Analyse zwischen Quelltext und Übersetzung.
"""


def build_drift_prompt(source_text: str, translation_text: str, max_items: int = 5) -> str:
    """
    Baut den Prompt, der das LLM zu einem reinen JSON-Objekt zwingt.

    Args:
        source_text: Originaltext
        translation_text: Übersetzung
        max_items: Maximale Anzahl gemeldeter drift_items

    Returns:
        Prompt-String
    """
    return f"""
You are an expert translation reviewer.

Using the SOURCE text, analyse the drift in the TRANSLATION.
Drift is any discrepancy in meaning, tone, terminology, grammar or style.

Return ONLY a valid JSON object, no extra text, filled in from this template:

{{
  "source_language": "",
  "translation_language": "",
  "drift_items": []
}}

where "drift_items" is an array of at most {max_items} objects, the most important
ones, ordered by severity (High first), each with the structure:

{{
  "category": "Meaning" | "Tone" | "Terminology" | "Grammar" | "Style",
  "severity": "High" | "Medium" | "Low",
  "description": "short explanation of the drift",
  "source_snippet": "exact excerpt from the SOURCE",
  "translation_snippet": "exact excerpt from the TRANSLATION"
}}

Rules:
- "translation_snippet" must be copied verbatim from the TRANSLATION.
- If there is no drift, use an empty list for "drift_items".
- Do not add any text outside the JSON. No comments, no markdown, no prose.

SOURCE:
{source_text}

TRANSLATION:
{translation_text}
""".strip()
