"""Export scored properties to CSV and JSON."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path

from .models import ScoredProperty

CSV_FIELDS = [
    "rank",
    "id",
    "address",
    "city",
    "state",
    "zip_code",
    "list_price",
    "beds",
    "baths",
    "score",
    "estimated_rent",
    "annual_expenses",
    "annual_noi",
    "cap_rate",
    "cash_on_cash",
    "annual_cash_flow",
    "principal_paydown",
    "projected_value_year_n",
    "external_url",
]


def export_csv(results: list[ScoredProperty], path: Path | str) -> None:
    """Export ranked properties to CSV, one row each, in the given order."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for i, r in enumerate(results, 1):
            p, m = r.property, r.metrics
            writer.writerow({
                "rank": i,
                "id": p.id,
                "address": p.address,
                "city": p.city,
                "state": p.state,
                "zip_code": p.zip_code,
                "list_price": p.list_price,
                "beds": p.beds,
                "baths": p.baths,
                "score": r.score,
                "estimated_rent": m.estimated_rent,
                "annual_expenses": m.annual_expenses,
                "annual_noi": m.annual_noi,
                "cap_rate": m.cap_rate,
                "cash_on_cash": m.cash_on_cash,
                "annual_cash_flow": m.annual_cash_flow,
                "principal_paydown": m.principal_paydown,
                "projected_value_year_n": m.projected_value_year_n,
                "external_url": p.external_url or "",
            })


def export_json(results: list[ScoredProperty], path: Path | str) -> None:
    """Export full scoring details to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "run_at": datetime.now(timezone.utc).isoformat(),
        "count": len(results),
        "results": [r.to_dict() for r in results],
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
