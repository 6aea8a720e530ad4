import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.postgres.session import get_db
from app.models.pydantic import AnalyseRequest, AnalyseResponse, LatestAnalysesResponse
from app.services.drift.parsing import DriftParseError
from app.services.drift_service import DriftService

logger = logging.getLogger(__name__)

router = APIRouter()
drift_service = DriftService(settings)


# einfacher Health-Check
@router.get("/health")
async def health():
    return {"status": "ok"}


# nimmt Quelltext + Übersetzung entgegen und startet die Drift-Analyse
@router.post("/analyse-drift", response_model=AnalyseResponse)
def analyse_drift(req: AnalyseRequest, db: Session = Depends(get_db)):
    if not req.source or not req.translation:
        raise HTTPException(status_code=400, detail="Both source and translation are required.")

    try:
        return drift_service.analyse(req.source, req.translation, db)
    except DriftParseError as e:
        logger.error("Failed to parse JSON from LLM: %s", e)
        raise HTTPException(status_code=500, detail="Failed to parse JSON")
    except Exception:
        logger.exception("Drift analysis failed")
        raise HTTPException(status_code=500, detail="Something went wrong")


# die letzten gespeicherten Analysen, neueste zuerst
@router.get("/analyses/latest", response_model=LatestAnalysesResponse)
def latest_analyses(
    limit: int = Query(default=settings.latest_limit, ge=1, le=100),
    db: Session = Depends(get_db),
):
    try:
        return drift_service.latest(db, limit=limit)
    except Exception:
        logger.exception("Loading latest analyses failed")
        raise HTTPException(status_code=500, detail="Could not load recent analyses")


# prüft, ob die DB erreichbar ist
@router.get("/db-check")
def db_check(db: Session = Depends(get_db)):
    result = db.execute(text("SELECT 1")).scalar()
    return {"db_ok": bool(result)}
