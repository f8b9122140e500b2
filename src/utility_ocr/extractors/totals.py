from __future__ import annotations

from .base import ExtractionResult, FieldSpec
from .catalog import MONETARY_TOTAL
from .engine import extract
from ..normalizer import normalize

def extract_total(text: str | None, spec: FieldSpec = MONETARY_TOTAL) -> ExtractionResult:
    """Amount due on a bill photo: keyword/currency anchored, largest plausible figure wins."""
    return extract(normalize(text, "free"), spec)
