"""Rendering-Funktionen für Drift-Items und die markierte Übersetzung."""

from html import escape
from typing import Any

import streamlit as st

SEVERITY_COLORS = {
    "High": "#fa4e4ebe",
    "Medium": "#f1931fc4",
    "Low": "#f7f300b4",
}


def color_for_severity(severity: str | None) -> str:
    """Hintergrundfarbe je Severity, unbekannt -> transparent."""
    return SEVERITY_COLORS.get(severity or "", "transparent")


def segments_to_html(segments: list[dict[str, Any]]) -> str:
    """
    Baut aus den Segmenten der API einen HTML-Absatz.

    Jeder Text wird escaped, markierte Segmente bekommen die Severity-Farbe.
    Zeilenumbrüche bleiben über white-space: pre-wrap erhalten.
    """
    parts = ['<p style="white-space: pre-wrap;">']
    for seg in segments:
        text = escape(seg.get("text", ""))
        severity = seg.get("severity")
        if severity:
            parts.append(
                f'<span style="background-color: {color_for_severity(severity)};" '
                f'title="{escape(severity)}">{text}</span>'
            )
        else:
            parts.append(f"<span>{text}</span>")
    parts.append("</p>")
    return "".join(parts)


def render_highlighted_translation(highlight: dict[str, Any] | None, translation: str) -> None:
    """Rendert die Übersetzung mit farbigen Markierungen."""
    segments = (highlight or {}).get("segments") or []
    if not segments:
        st.text(translation)
        return

    source_lang = (highlight or {}).get("source_language")
    translation_lang = (highlight or {}).get("translation_language")
    if source_lang or translation_lang:
        st.caption(f"{source_lang or '?'} → {translation_lang or '?'}")

    st.markdown(segments_to_html(segments), unsafe_allow_html=True)

    # Legende
    st.caption("Legende: 🔴 High | 🟠 Medium | 🟡 Low")


def render_drift_items(drift_items: list[dict[str, Any]]) -> None:
    """Rendert die Drift-Items als Tabelle."""
    if not drift_items:
        st.success("No drift detected.")
        return

    import pandas as pd

    table_data = []
    for item in drift_items:
        if not isinstance(item, dict):
            continue
        table_data.append(
            {
                "Severity": item.get("severity", ""),
                "Category": item.get("category", ""),
                "Description": item.get("description", ""),
                "Source": item.get("source_snippet", ""),
                "Translation": item.get("translation_snippet", ""),
            }
        )
    st.dataframe(pd.DataFrame(table_data), use_container_width=True)


def render_recent_analyses(analyses: list[dict[str, Any]]) -> None:
    """Rendert die letzten gespeicherten Analysen als Expander."""
    if not analyses:
        st.info("No saved analyses yet.")
        return

    for a in analyses:
        langs = f"{a.get('source_lang') or '?'} → {a.get('translation_lang') or '?'}"
        with st.expander(f"#{a.get('id')} · {langs} · {a.get('created_at') or ''}"):
            st.markdown("**Source**")
            st.text(a.get("source_text", ""))
            st.markdown("**Translation**")
            render_highlighted_translation(a.get("highlight"), a.get("translation_text", ""))
            items = (a.get("analysis_json") or {}).get("drift_items") or []
            render_drift_items(items)
