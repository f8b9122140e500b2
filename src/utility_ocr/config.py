from __future__ import annotations
from dataclasses import dataclass
import os

BILL_TYPES = ["electricity", "water"]

# meter: photo of the meter display; receipt: photo of the printed bill
MODES = ["meter", "receipt"]

TARGET_FIELDS = {
    "meter": ["meter_reading"],
    "receipt": ["total_bill", "consumption"],
}

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".webp"}
TEXT_EXTENSIONS = {".txt"}

@dataclass(frozen=True)
class Settings:
    input_path: str
    mode: str
    bill_type: str
    output_path: str
    debug_dir: str
    limit: int
    labels_path: str | None = None
    catalog_path: str | None = None

    # OCR / preprocess
    ocr_lang_meter: str = "eng"
    ocr_lang_receipt: str = "heb+eng"
    max_width: int = 1600
    min_width: int = 640
    do_threshold: bool = False

    # amounts within this distance of the label count as correct
    eval_tolerance: float = 0.01

def _optional(name: str) -> str | None:
    v = os.getenv(name, "").strip()
    return v or None

def load_settings() -> Settings:
    input_path = os.getenv("INPUT_PATH", "").strip()
    if not input_path:
        raise ValueError("INPUT_PATH env var is required (image/.txt file or a directory of them).")

    mode = os.getenv("MODE", "receipt").strip().lower()
    if mode not in MODES:
        raise ValueError(f"MODE must be one of {MODES}, got {mode!r}")

    bill_type = os.getenv("BILL_TYPE", "electricity").strip().lower()
    if bill_type not in BILL_TYPES:
        raise ValueError(f"BILL_TYPE must be one of {BILL_TYPES}, got {bill_type!r}")

    return Settings(
        input_path=input_path,
        mode=mode,
        bill_type=bill_type,
        output_path=os.getenv("OUTPUT_PATH", "outputs/predictions.jsonl").strip(),
        debug_dir=os.getenv("DEBUG_DIR", "outputs/debug").strip(),
        limit=int(os.getenv("LIMIT", "100")),
        labels_path=_optional("LABELS_PATH"),
        catalog_path=_optional("CATALOG_PATH"),
        ocr_lang_meter=os.getenv("OCR_LANG_METER", "eng").strip(),
        ocr_lang_receipt=os.getenv("OCR_LANG_RECEIPT", "heb+eng").strip(),
        max_width=int(os.getenv("MAX_WIDTH", "1600")),
        min_width=int(os.getenv("MIN_WIDTH", "640")),
        do_threshold=os.getenv("DO_THRESHOLD", "0").strip() == "1",
    )
