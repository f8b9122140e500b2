from .base import ExtractionResult, FieldSpec, PatternSpec, Plausibility
from .engine import extract
from .catalog import (
    BUILTIN_SPECS,
    MONETARY_TOTAL,
    ELECTRICITY_CONSUMPTION,
    WATER_CONSUMPTION,
    BARE_METER_READING,
    consumption_spec,
    get_spec,
    load_catalog,
)
from .totals import extract_total
from .consumption import extract_consumption
from .meter_reading import extract_meter_reading
from .receipt import ReceiptData, extract_receipt_data

__all__ = [
    "ExtractionResult",
    "FieldSpec",
    "PatternSpec",
    "Plausibility",
    "extract",
    "BUILTIN_SPECS",
    "MONETARY_TOTAL",
    "ELECTRICITY_CONSUMPTION",
    "WATER_CONSUMPTION",
    "BARE_METER_READING",
    "consumption_spec",
    "get_spec",
    "load_catalog",
    "extract_total",
    "extract_consumption",
    "extract_meter_reading",
    "ReceiptData",
    "extract_receipt_data",
]
