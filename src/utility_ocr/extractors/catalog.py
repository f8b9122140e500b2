from __future__ import annotations

import json
import math
from typing import Any

from .base import FieldSpec, PatternSpec, Plausibility
from ..errors import InvalidFieldSpec

# Amount-due anchors (Hebrew first, English variants the recognizer also produces)
TOTAL_ANCHORS = [
    'סה"כ לתשלום', 'סה"כ חשבון', "יתרה לתשלום", "סכום לתשלום", "לתשלום",
    "total due", "amount due", "total",
]
CURRENCY_MARKERS = ["₪", 'ש"ח']

ELECTRICITY_UNITS = ['קוט"ש', "kwh", "קילוואט"]
WATER_UNITS = ['מ"ק', "מטר מעוקב", "m³", "m3"]
CONSUMPTION_ANCHORS = ['סה"כ צריכה', "צריכה", "consumption"]

# amounts printed next to the shekel sign always carry agorot
MONEY_2DP = r"\d+[.,]\d{2}"

MONETARY_TOTAL = FieldSpec(
    name="total_bill",
    patterns=(
        PatternSpec("total_keyword", before=tuple(TOTAL_ANCHORS), gap=12),
        PatternSpec("currency_then_keyword", before=("₪",), after=('סה"כ', "לתשלום", "total"), gap=4),
        PatternSpec("amount_then_currency", number=MONEY_2DP, after=tuple(CURRENCY_MARKERS), gap=2),
        PatternSpec("currency_then_amount", number=MONEY_2DP, before=("₪",), gap=2),
    ),
    plausibility=Plausibility(0, 50000, include_low=False),
    selection="max",
    fallback=PatternSpec("money_scan", number=r"\d{2,6}[.,]\d{2}"),
    fallback_plausibility=Plausibility(10, 50000, include_low=False),
)

ELECTRICITY_CONSUMPTION = FieldSpec(
    name="consumption_electricity",
    patterns=(
        PatternSpec("consumption_keyword", before=tuple(CONSUMPTION_ANCHORS)),
        PatternSpec("unit_then_amount", before=tuple(ELECTRICITY_UNITS), gap=3),
        PatternSpec("amount_then_unit", after=tuple(ELECTRICITY_UNITS), gap=2),
    ),
    plausibility=Plausibility(0, 100000, include_low=False),
    selection="first",
)

WATER_CONSUMPTION = FieldSpec(
    name="consumption_water",
    patterns=(
        PatternSpec("consumption_keyword", before=tuple(CONSUMPTION_ANCHORS)),
        PatternSpec("unit_then_amount", before=tuple(WATER_UNITS), gap=3),
        PatternSpec("amount_then_unit", after=tuple(WATER_UNITS), gap=2),
    ),
    plausibility=Plausibility(0, 10000, include_low=False),
    selection="first",
)

BARE_METER_READING = FieldSpec(
    name="meter_reading",
    patterns=(
        PatternSpec("digit_run", number=r"\d{3,8}(?:\.\d{1,3})?"),
    ),
    plausibility=Plausibility(0, math.inf, include_low=False),
    selection="longest",
    fallback=PatternSpec("short_digit_run", number=r"\d{2,}"),
    fallback_plausibility=Plausibility(0, math.inf),
)

BUILTIN_SPECS: dict[str, FieldSpec] = {
    s.name: s for s in (MONETARY_TOTAL, ELECTRICITY_CONSUMPTION, WATER_CONSUMPTION, BARE_METER_READING)
}

_CONSUMPTION_BY_BILL = {
    "electricity": ELECTRICITY_CONSUMPTION,
    "water": WATER_CONSUMPTION,
}


def get_spec(name: str, catalog: dict[str, FieldSpec] | None = None) -> FieldSpec:
    specs = catalog if catalog is not None else BUILTIN_SPECS
    try:
        return specs[name]
    except KeyError:
        raise KeyError(f"unknown field spec {name!r}; known: {sorted(specs)}") from None


def consumption_spec(bill_type: str, catalog: dict[str, FieldSpec] | None = None) -> FieldSpec:
    if bill_type not in _CONSUMPTION_BY_BILL:
        raise ValueError(f"unknown bill type {bill_type!r}; expected one of {sorted(_CONSUMPTION_BY_BILL)}")
    if catalog is not None and f"consumption_{bill_type}" in catalog:
        return catalog[f"consumption_{bill_type}"]
    return _CONSUMPTION_BY_BILL[bill_type]


def parse_catalog(data: Any) -> dict[str, FieldSpec]:
    if not isinstance(data, dict):
        raise InvalidFieldSpec("catalog must be a JSON object keyed by field name")
    return {name: FieldSpec.from_dict(name, d) for name, d in data.items()}


def load_catalog(path: str) -> dict[str, FieldSpec]:
    """
    Built-in specs overridden/extended by the specs in a JSON file, e.g.

        {"total_bill": {"patterns": [{"name": "due", "before": ["amount due"]}],
                        "plausibility": {"low": 0, "high": 20000, "include_low": false},
                        "selection": "max"}}
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    merged = dict(BUILTIN_SPECS)
    merged.update(parse_catalog(data))
    return merged
