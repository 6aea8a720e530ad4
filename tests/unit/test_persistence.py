"""
Unit Tests für die Postgres-Persistenz mit gemockter Session.
Es wird keine echte Datenbank benötigt.
"""

import json
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from app.db.postgres.persistence import get_latest_analyses, store_drift_analysis


def test_store_drift_analysis_inserts_and_commits():
    created = datetime(2024, 1, 1)
    db = MagicMock()
    db.execute.return_value.one.return_value = (42, created)

    analysis_json = {"source_language": "English", "translation_language": 5, "drift_items": []}
    result = store_drift_analysis(
        db=db,
        source_text="src",
        translation_text="tgt",
        analysis_json=analysis_json,
        model_name="gpt-4o-mini",
    )

    assert result == (42, created)
    db.commit.assert_called_once()

    params = db.execute.call_args[0][1]
    assert params["source_lang"] == "English"
    assert params["translation_lang"] is None
    assert json.loads(params["analysis_json"]) == analysis_json
    assert params["model_name"] == "gpt-4o-mini"


def test_store_drift_analysis_rolls_back_on_error():
    db = MagicMock()
    db.execute.side_effect = RuntimeError("insert failed")

    with pytest.raises(RuntimeError):
        store_drift_analysis(db, "src", "tgt", {}, None)

    db.rollback.assert_called_once()
    db.commit.assert_not_called()


def test_get_latest_analyses_maps_rows():
    db = MagicMock()
    db.execute.return_value.fetchall.return_value = [
        (2, None, "English", "German", "s2", "t2", {"drift_items": []}),
        (1, None, None, None, "s1", "t1", '{"drift_items": [{"severity": "Low"}]}'),
        (0, None, None, None, "s0", "t0", "not json"),
    ]

    rows = get_latest_analyses(db, limit=3)

    assert db.execute.call_args[0][1] == {"limit": 3}
    assert [r["id"] for r in rows] == [2, 1, 0]
    assert rows[0]["analysis_json"] == {"drift_items": []}
    assert rows[1]["analysis_json"] == {"drift_items": [{"severity": "Low"}]}
    assert rows[2]["analysis_json"] is None
