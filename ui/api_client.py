"""API Client für das drift-api Backend."""

import os
from typing import Any

import requests

API_BASE_URL = os.getenv("DRIFT_API_BASE_URL", "http://localhost:8000")
TIMEOUT = 120  # LLM-Analyse kann dauern


def health_check() -> dict[str, Any]:
    """Prüft ob API erreichbar ist."""
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=5)
        if response.status_code == 200:
            return {"status": "ok", "available": True}
        return {"status": "error", "available": False, "message": f"Status {response.status_code}"}
    except requests.exceptions.RequestException as e:
        return {"status": "error", "available": False, "message": str(e)}


def _error_detail(response: requests.Response) -> str:
    try:
        return response.json().get("detail") or response.text
    except ValueError:
        return response.text


def analyse_drift(source: str, translation: str) -> dict[str, Any]:
    """
    Sendet Quelltext + Übersetzung an /analyse-drift.

    Returns:
        dict mit Response-Daten oder Error-Info
    """
    url = f"{API_BASE_URL}/analyse-drift"
    payload = {"source": source, "translation": translation}

    try:
        response = requests.post(url, json=payload, timeout=TIMEOUT)
        response.raise_for_status()
        return {"success": True, "data": response.json()}
    except requests.exceptions.HTTPError:
        return {
            "success": False,
            "error": f"HTTP {response.status_code}: {_error_detail(response)}",
            "status_code": response.status_code,
        }
    except requests.exceptions.RequestException as e:
        return {"success": False, "error": str(e)}


def get_latest_analyses(limit: int = 5) -> dict[str, Any]:
    """Holt die letzten gespeicherten Analysen."""
    try:
        response = requests.get(
            f"{API_BASE_URL}/analyses/latest", params={"limit": limit}, timeout=10
        )
        response.raise_for_status()
        return {"success": True, "analyses": response.json().get("analyses", [])}
    except requests.exceptions.HTTPError:
        return {
            "success": False,
            "error": f"HTTP {response.status_code}: {_error_detail(response)}",
            "analyses": [],
        }
    except requests.exceptions.RequestException as e:
        return {"success": False, "error": str(e), "analyses": []}
