#!/usr/bin/env python3
"""Demo-Request gegen /analyse-drift mit Ausgabe der markierten Übersetzung"""

import json
import sys

import requests

BASE_URL = "http://localhost:8000"

payload = {
    "source": "The cat sat on the mat and looked very pleased with itself.",
    "translation": "Der Hund saß auf der Matte und sah sehr wütend aus.",
}

print("=" * 70)
print("INPUT:")
print("=" * 70)
print(json.dumps(payload, indent=2, ensure_ascii=False))
print()

try:
    response = requests.post(f"{BASE_URL}/analyse-drift", json=payload, timeout=120)
    response.raise_for_status()
    result = response.json()
except requests.exceptions.ConnectionError:
    print(f"❌ Server nicht erreichbar unter {BASE_URL}")
    print("   Bitte starten Sie den Server mit:")
    print("   uvicorn app.server:app --host 0.0.0.0 --port 8000 --reload")
    sys.exit(1)
except Exception as e:
    print(f"❌ Fehler: {e}")
    sys.exit(1)

highlight = result.get("highlight", {})

print("=" * 70)
print(
    f"OUTPUT: DRIFT ITEMS ({highlight.get('source_language') or '?'} → "
    f"{highlight.get('translation_language') or '?'})"
)
print("=" * 70)
items = result.get("output", {}).get("drift_items", [])
if items:
    for i, item in enumerate(items, 1):
        print(f"  Item {i}: [{item.get('severity', 'N/A')}] {item.get('category', 'N/A')}")
        print(f"    Source:      {item.get('source_snippet', '')}")
        print(f"    Translation: {item.get('translation_snippet', '')}")
        print(f"    {item.get('description', '')}")
        print()
else:
    print("  Keine Drift gefunden")
print()

print("=" * 70)
print("OUTPUT: MARKIERTE ÜBERSETZUNG")
print("=" * 70)
marked = "".join(
    f"[[{seg['text']}|{seg['severity']}]]" if seg.get("severity") else seg["text"]
    for seg in highlight.get("segments", [])
)
print(f"  {marked}")
print()
print(f"  Gespeichert als id={result.get('meta', {}).get('id')}")

print("=" * 70)
print("✅ Demo abgeschlossen")
print("=" * 70)
