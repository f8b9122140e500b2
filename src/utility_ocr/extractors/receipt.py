from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import ExtractionResult, FieldSpec
from .catalog import MONETARY_TOTAL, consumption_spec
from .engine import extract
from ..normalizer import normalize


@dataclass
class ReceiptData:
    bill_type: str
    found: bool
    total_bill: float | None
    consumption: float | None
    raw_text: str
    total: ExtractionResult
    usage: ExtractionResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "bill_type": self.bill_type,
            "found": self.found,
            "total_bill": self.total_bill,
            "consumption": self.consumption,
            "raw_text": self.raw_text,
            "total": self.total.to_dict(),
            "consumption_result": self.usage.to_dict(),
        }


def extract_receipt_data(
    text: str | None,
    bill_type: str,
    catalog: dict[str, FieldSpec] | None = None,
) -> ReceiptData:
    """Total amount and consumption from one bill; either may be missing."""
    total_spec = catalog.get("total_bill", MONETARY_TOTAL) if catalog else MONETARY_TOTAL
    usage_spec = consumption_spec(bill_type, catalog)

    # both fields read the same normalized text; the two extractions are independent
    cleaned = normalize(text, "free")
    total = extract(cleaned, total_spec)
    usage = extract(cleaned, usage_spec)

    return ReceiptData(
        bill_type=bill_type,
        found=total.found or usage.found,
        total_bill=total.value,
        consumption=usage.value,
        raw_text=text or "",
        total=total,
        usage=usage,
    )
