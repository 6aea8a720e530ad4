"""Streamlit Dashboard für drift-api."""

from pathlib import Path
import sys

import streamlit as st

# Add ui directory to path
UI_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(UI_DIR))

import api_client
import render

RECENT_LIMIT = 5


# Page config
st.set_page_config(
    page_title="Translation Drift",
    page_icon="🌐",
    layout="wide",
)

# Sidebar
with st.sidebar:
    st.title("🌐 Translation Drift")

    st.subheader("API Status")
    api_health = api_client.health_check()
    if api_health.get("available"):
        st.success(f"✅ API: {api_client.API_BASE_URL}")
    else:
        st.error(f"❌ API: {api_client.API_BASE_URL}")
        st.caption(f"Fehler: {api_health.get('message', 'Unknown')}")

    st.divider()
    show_debug = st.checkbox("Show debug", value=False, key="show_debug")


st.header("Drift Analysis")
st.caption("Quelltext + Übersetzung an die API schicken und Abweichungen markieren")

if "last_result" not in st.session_state:
    st.session_state["last_result"] = None

col_source, col_translation = st.columns(2)
with col_source:
    source = st.text_area("Source text", height=220, key="source_text")
with col_translation:
    translation = st.text_area("Translation", height=220, key="translation_text")

if st.button("🔍 Analyse drift", type="primary"):
    if not source.strip() or not translation.strip():
        st.warning("Both source and translation are required.")
    else:
        with st.spinner("Analysiere..."):
            response = api_client.analyse_drift(source, translation)
        if response["success"]:
            st.session_state["last_result"] = response["data"]
        else:
            st.session_state["last_result"] = None
            st.error(f"❌ Error calling AI: {response['error']}")

result = st.session_state.get("last_result")
if result:
    st.subheader("Drift items")
    render.render_drift_items(result.get("output", {}).get("drift_items") or [])

    st.subheader("Translation mit Highlights")
    render.render_highlighted_translation(
        result.get("highlight"), result.get("input", {}).get("translation", "")
    )

    if show_debug:
        st.json(result)

st.divider()
st.subheader("Recent analyses")
recent = api_client.get_latest_analyses(limit=RECENT_LIMIT)
if not recent["success"]:
    st.warning(f"⚠️ Could not load recent analyses: {recent['error']}")
render.render_recent_analyses(recent["analyses"])
