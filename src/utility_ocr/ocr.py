from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import pytesseract
from pytesseract import Output
from PIL import Image
from .config import Settings
from .preprocess import preprocess_for_ocr

@dataclass
class OCRToken:
    text: str
    conf: float  # 0..1
    bbox: tuple[int, int, int, int]  # x, y, w, h
    line: tuple[int, int, int]  # block, paragraph, line

@dataclass
class OCRResult:
    full_text: str
    tokens: list[OCRToken]
    avg_conf: float

# single uniform block of text; meter displays are one line
RECEIPT_CONFIG = "--psm 6"
METER_CONFIG = "--psm 7"

def run_tesseract(img: Image.Image, lang: str = "eng", config: str = "") -> OCRResult:
    data: dict[str, Any] = pytesseract.image_to_data(img, lang=lang, config=config, output_type=Output.DICT)

    tokens: list[OCRToken] = []
    for i in range(len(data.get("text", []))):
        txt = (data["text"][i] or "").strip()
        if not txt:
            continue
        # conf comes back as str/float; -1 marks layout rows, not words
        try:
            c = float(data["conf"][i])
        except (TypeError, ValueError):
            continue
        if c < 0:
            continue
        tokens.append(OCRToken(
            text=txt,
            conf=max(0.0, min(1.0, c / 100.0)),
            bbox=(int(data["left"][i]), int(data["top"][i]), int(data["width"][i]), int(data["height"][i])),
            line=(int(data["block_num"][i]), int(data["par_num"][i]), int(data["line_num"][i])),
        ))

    # keep line breaks; keyword and amount usually share a line on a bill
    lines: list[str] = []
    current: tuple[int, int, int] | None = None
    for t in tokens:
        if t.line != current:
            lines.append(t.text)
            current = t.line
        else:
            lines[-1] += " " + t.text

    avg_conf = sum(t.conf for t in tokens) / len(tokens) if tokens else 0.0
    return OCRResult(full_text="\n".join(lines), tokens=tokens, avg_conf=avg_conf)

def recognize_meter(img: Image.Image, settings: Settings) -> OCRResult:
    pre = preprocess_for_ocr(img, settings.max_width, settings.min_width, settings.do_threshold)
    return run_tesseract(pre, lang=settings.ocr_lang_meter, config=METER_CONFIG)

def recognize_receipt(img: Image.Image, settings: Settings) -> OCRResult:
    pre = preprocess_for_ocr(img, settings.max_width, settings.min_width, settings.do_threshold)
    return run_tesseract(pre, lang=settings.ocr_lang_receipt, config=RECEIPT_CONFIG)
