import logging
import os

from sqlalchemy.orm import Session

from app.core.config import Settings
from app.db.postgres.persistence import get_latest_analyses, store_drift_analysis
from app.models.pydantic import (
    AnalyseResponse,
    AnalysisInput,
    AnalysisMeta,
    DriftAnalysis,
    LatestAnalysesResponse,
    StoredAnalysis,
)
from app.services.drift.drift_analyzer import DriftPipeline
from app.services.highlighting import build_highlighted_translation

logger = logging.getLogger(__name__)

# Wenn TEST_MODE=1 in der Umgebung gesetzt ist,
# werden keine echten DB-Zugriffe ausgeführt.
TEST_MODE = os.getenv("TEST_MODE") == "1"


class DriftService:
    def __init__(self, config: Settings) -> None:
        self.config = config
        self.pipeline = DriftPipeline(config)

    def analyse(self, source: str, translation: str, db: Session) -> AnalyseResponse:
        # 1. LLM-Analyse (immer)
        analysis, raw_json = self.pipeline.run(source, translation)

        # 2. Ergebnis speichern (nur, wenn nicht im Test-Modus)
        if not TEST_MODE:
            analysis_id, created_at = store_drift_analysis(
                db=db,
                source_text=source,
                translation_text=translation,
                analysis_json=raw_json,
                model_name=self.pipeline.model_name,
            )
        else:
            # Fake-ID im Testmode, damit der Rückgabetyp gleich bleibt
            analysis_id, created_at = -1, None

        # 3. Highlighting für die Anzeige
        return AnalyseResponse(
            input=AnalysisInput(source=source, translation=translation),
            output=raw_json,
            meta=AnalysisMeta(id=analysis_id, created_at=created_at),
            highlight=build_highlighted_translation(translation, analysis),
        )

    def latest(self, db: Session, limit: int | None = None) -> LatestAnalysesResponse:
        rows = get_latest_analyses(db, limit=limit or self.config.latest_limit)

        analyses = []
        for row in rows:
            # Highlight wird aus Übersetzung + gespeichertem JSON neu berechnet
            analysis = DriftAnalysis.from_raw(row["analysis_json"])
            analyses.append(
                StoredAnalysis(
                    **row,
                    highlight=build_highlighted_translation(row["translation_text"], analysis),
                )
            )
        return LatestAnalysesResponse(analyses=analyses)
