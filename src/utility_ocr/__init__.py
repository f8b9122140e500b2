from .errors import InvalidFieldSpec, InvalidInput
from .normalizer import GLYPH_DIGIT_MAP, normalize
from .extractors import (
    ExtractionResult,
    FieldSpec,
    PatternSpec,
    Plausibility,
    ReceiptData,
    extract,
    extract_consumption,
    extract_meter_reading,
    extract_receipt_data,
    extract_total,
)

__all__ = [
    "InvalidFieldSpec",
    "InvalidInput",
    "GLYPH_DIGIT_MAP",
    "normalize",
    "ExtractionResult",
    "FieldSpec",
    "PatternSpec",
    "Plausibility",
    "ReceiptData",
    "extract",
    "extract_consumption",
    "extract_meter_reading",
    "extract_receipt_data",
    "extract_total",
]
