from __future__ import annotations

import logging
import os
from typing import Any

import pytesseract
from PIL import Image

from .config import IMAGE_EXTENSIONS, TEXT_EXTENSIONS, Settings, TARGET_FIELDS, load_settings
from .evaluate import EvalRow, evaluate_one, summarize
from .extractors import FieldSpec, extract_meter_reading, extract_receipt_data, get_spec, load_catalog
from .ocr import recognize_meter, recognize_receipt
from .utils import ensure_dir, read_jsonl, write_jsonl

log = logging.getLogger(__name__)


def _list_inputs(path: str, limit: int) -> list[str]:
    if os.path.isfile(path):
        return [path]
    exts = IMAGE_EXTENSIONS | TEXT_EXTENSIONS
    files = sorted(
        os.path.join(path, name)
        for name in os.listdir(path)
        if os.path.splitext(name)[1].lower() in exts
    )
    return files[:limit]


def _load_labels(path: str) -> dict[str, dict[str, Any]]:
    # one JSON object per line: {"id": "<file stem>", "total_bill": 412.9, "consumption": 530}
    return {str(row["id"]): row for row in read_jsonl(path) if "id" in row}


def _read_text(path: str, settings: Settings) -> tuple[str, float | None]:
    """Already-transcribed .txt files skip OCR (used to recalibrate thresholds)."""
    if os.path.splitext(path)[1].lower() in TEXT_EXTENSIONS:
        with open(path, "r", encoding="utf-8") as f:
            return f.read(), None
    with Image.open(path) as img:
        if settings.mode == "meter":
            ocr = recognize_meter(img, settings)
        else:
            ocr = recognize_receipt(img, settings)
    return ocr.full_text, ocr.avg_conf


def process_text(text: str, settings: Settings, catalog: dict[str, FieldSpec] | None = None) -> dict[str, Any]:
    if settings.mode == "meter":
        res = extract_meter_reading(text, spec=get_spec("meter_reading", catalog))
        return {
            "fields": {"meter_reading": res.value},
            "results": {"meter_reading": res.to_dict()},
        }

    data = extract_receipt_data(text, settings.bill_type, catalog)
    return {
        "fields": {"total_bill": data.total_bill, "consumption": data.consumption},
        "results": {"total_bill": data.total.to_dict(), "consumption": data.usage.to_dict()},
    }


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    settings = load_settings()
    ensure_dir(settings.debug_dir)
    ensure_dir(os.path.dirname(settings.output_path) or ".")

    catalog = load_catalog(settings.catalog_path) if settings.catalog_path else None
    labels = _load_labels(settings.labels_path) if settings.labels_path else {}

    inputs = _list_inputs(settings.input_path, settings.limit)
    log.info("mode=%s bill_type=%s inputs=%d", settings.mode, settings.bill_type, len(inputs))

    outputs: list[dict[str, Any]] = []
    eval_rows_all: list[dict[str, Any]] = []
    eval_objs: list[EvalRow] = []

    for path in inputs:
        item_id = os.path.splitext(os.path.basename(path))[0]
        try:
            text, avg_conf = _read_text(path, settings)
        except (OSError, pytesseract.TesseractError) as e:
            # one unreadable photo should not sink the batch
            log.warning("skipping %s: %s", path, e)
            continue

        if avg_conf is not None:
            with open(os.path.join(settings.debug_dir, f"{item_id}_ocr.txt"), "w", encoding="utf-8") as f:
                f.write(text)

        extracted = process_text(text, settings, catalog)
        fields = extracted["fields"]
        missing = [f for f in TARGET_FIELDS[settings.mode] if fields.get(f) is None]
        if missing:
            log.info("%s: not found: %s", item_id, ", ".join(missing))

        outputs.append({
            "id": item_id,
            "source": path,
            "mode": settings.mode,
            "bill_type": settings.bill_type if settings.mode == "receipt" else None,
            "avg_ocr_conf": round(avg_conf, 4) if avg_conf is not None else None,
            **extracted,
        })

        gt = labels.get(item_id)
        if gt:
            gt_fields = {k: gt.get(k) for k in TARGET_FIELDS[settings.mode] if k in gt}
            for r in evaluate_one(fields, gt_fields, settings.eval_tolerance):
                eval_objs.append(r)
                eval_rows_all.append({
                    "id": item_id,
                    "field": r.field,
                    "ok": r.ok,
                    "predicted": r.predicted,
                    "expected": r.expected,
                })

    write_jsonl(settings.output_path, outputs)
    log.info("wrote %d rows to %s", len(outputs), settings.output_path)

    if eval_rows_all:
        eval_path = os.path.join(os.path.dirname(settings.output_path) or ".", "eval_rows.jsonl")
        write_jsonl(eval_path, eval_rows_all)
        for field, s in summarize(eval_objs).items():
            log.info("[EVAL] %s rows=%d ok=%d missing=%d acc=%.3f", field, s["rows"], s["ok"], s["missing"], s["acc"])


if __name__ == "__main__":
    main()
