import json
import logging
from datetime import datetime
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


DRIFT_ANALYSES_DDL = """
CREATE TABLE IF NOT EXISTS drift_analyses (
    id SERIAL PRIMARY KEY,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
    source_text TEXT NOT NULL,
    translation_text TEXT NOT NULL,
    source_lang TEXT,
    translation_lang TEXT,
    analysis_json JSONB NOT NULL,
    model_name TEXT
)
"""


def ensure_schema(engine: Engine) -> None:
    """Legt die Tabelle drift_analyses an, falls sie noch fehlt."""
    with engine.begin() as conn:
        conn.execute(text(DRIFT_ANALYSES_DDL))


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def store_drift_analysis(
    db: Session,
    source_text: str,
    translation_text: str,
    analysis_json: dict[str, Any],
    model_name: str | None,
) -> tuple[int, datetime]:
    """
    Speichert eine abgeschlossene Analyse und gibt (id, created_at) zurück.

    analysis_json ist das geparste LLM-JSON, unverändert. Die Sprachangaben
    werden zusätzlich in eigene Spalten kopiert.
    """
    try:
        row = db.execute(
            text(
                """
                INSERT INTO drift_analyses (
                    source_text,
                    translation_text,
                    source_lang,
                    translation_lang,
                    analysis_json,
                    model_name
                )
                VALUES (
                    :source_text,
                    :translation_text,
                    :source_lang,
                    :translation_lang,
                    CAST(:analysis_json AS jsonb),
                    :model_name
                )
                RETURNING id, created_at
                """
            ),
            {
                "source_text": source_text,
                "translation_text": translation_text,
                "source_lang": _as_str(analysis_json.get("source_language")),
                "translation_lang": _as_str(analysis_json.get("translation_language")),
                "analysis_json": json.dumps(analysis_json, ensure_ascii=False),
                "model_name": model_name,
            },
        ).one()
        db.commit()

    except Exception:
        db.rollback()
        logger.exception("Fehler beim Speichern der Drift-Analyse in der Datenbank")
        raise

    logger.debug("Stored drift analysis id=%s", row[0])
    return row[0], row[1]


def get_latest_analyses(db: Session, limit: int = 5) -> list[dict[str, Any]]:
    """Holt die neuesten Analysen, neueste zuerst."""
    rows = db.execute(
        text(
            """
            SELECT id, created_at, source_lang, translation_lang,
                   source_text, translation_text, analysis_json
            FROM drift_analyses
            ORDER BY created_at DESC
            LIMIT :limit
            """
        ),
        {"limit": limit},
    ).fetchall()

    analyses = []
    for row in rows:
        analysis_json = row[6]
        # psycopg liefert jsonb als dict, andere Treiber ggf. als String
        if isinstance(analysis_json, str):
            try:
                analysis_json = json.loads(analysis_json)
            except json.JSONDecodeError:
                logger.warning("Stored analysis_json of id=%s is not valid JSON", row[0])
                analysis_json = None

        analyses.append(
            {
                "id": row[0],
                "created_at": row[1],
                "source_lang": row[2],
                "translation_lang": row[3],
                "source_text": row[4],
                "translation_text": row[5],
                "analysis_json": analysis_json if isinstance(analysis_json, dict) else None,
            }
        )
    return analyses
