from __future__ import annotations

from .base import ExtractionResult, FieldSpec
from .catalog import consumption_spec
from .engine import extract
from ..normalizer import normalize

def extract_consumption(text: str | None, bill_type: str, spec: FieldSpec | None = None) -> ExtractionResult:
    # kWh for electricity, cubic metres for water
    if spec is None:
        spec = consumption_spec(bill_type)
    return extract(normalize(text, "free"), spec)
