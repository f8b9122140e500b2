from __future__ import annotations

from typing import Mapping

from .base import ExtractionResult, FieldSpec
from .catalog import BARE_METER_READING
from .engine import extract
from ..normalizer import GLYPH_DIGIT_MAP, normalize

def extract_meter_reading(
    text: str | None,
    spec: FieldSpec = BARE_METER_READING,
    glyph_map: Mapping[str, str] = GLYPH_DIGIT_MAP,
) -> ExtractionResult:
    """
    Reading from a photo of the meter display itself.

    The text is assumed to hold digits only, so letter/digit look-alikes are
    corrected before scanning. Longer digit runs are preferred; a reading cut
    into fragments by OCR is rarer than stray short numbers.
    """
    return extract(normalize(text, "bare_number", glyph_map), spec)
