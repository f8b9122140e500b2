from __future__ import annotations
from dataclasses import dataclass
from typing import Any

def amount_close(pred: float | None, gt: Any, tol: float = 0.01) -> bool:
    if pred is None:
        return False
    try:
        return abs(float(pred) - float(gt)) <= tol
    except (TypeError, ValueError):
        return False

@dataclass
class EvalRow:
    field: str
    ok: bool
    predicted: float | None
    expected: float | None

def evaluate_one(pred_fields: dict[str, float | None], gt_fields: dict[str, Any], tol: float = 0.01) -> list[EvalRow]:
    """One row per labelled field; unlabelled fields are skipped."""
    rows: list[EvalRow] = []
    for field, gt in gt_fields.items():
        if gt is None or gt == "":
            continue
        pred = pred_fields.get(field)
        try:
            expected = float(gt)
        except (TypeError, ValueError):
            expected = None
        rows.append(EvalRow(field, amount_close(pred, gt, tol), pred, expected))
    return rows

def summarize(rows: list[EvalRow]) -> dict[str, dict[str, float]]:
    out: dict[str, dict[str, float]] = {}
    for r in rows:
        s = out.setdefault(r.field, {"rows": 0, "ok": 0, "missing": 0})
        s["rows"] += 1
        s["ok"] += int(r.ok)
        s["missing"] += int(r.predicted is None)
    for s in out.values():
        s["acc"] = s["ok"] / s["rows"] if s["rows"] else 0.0
    return out
