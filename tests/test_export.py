"""Tests for CSV and JSON export."""

import csv
import json
from pathlib import Path

from prop_score.export import export_csv, export_json
from prop_score.scoring import ScoringEngine


def test_export_json(tmp_path: Path, mock_properties, rental_context) -> None:
    ranked = ScoringEngine(context=rental_context).rank(mock_properties)
    path = tmp_path / "out" / "scored.json"
    export_json(ranked, path)
    data = json.loads(path.read_text())
    assert data["count"] == len(mock_properties)
    assert data["results"][0]["score"] == ranked[0].score
    assert data["results"][0]["metrics"]["expenses"]["total"] == ranked[0].metrics.annual_expenses


def test_export_csv(tmp_path: Path, mock_properties, rental_context) -> None:
    ranked = ScoringEngine(context=rental_context).rank(mock_properties)
    path = tmp_path / "scored.csv"
    export_csv(ranked, path)
    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["id"] for r in rows] == [s.property.id for s in ranked]
    assert rows[0]["rank"] == "1"
    assert int(rows[0]["score"]) == ranked[0].score
