from __future__ import annotations
import re

# digits after a lone separator that still read as a fraction ("12.5", "7,25", "1234.567")
MAX_FRACTION_DIGITS = 3

_SEP_RE = re.compile(r"[.,]")

def parse_number(s: str) -> float | None:
    """
    Parse an OCR'd numeric token.

    - no separator            -> integer value ("01234" -> 1234.0)
    - one '.' or ',' + 1..3 digits -> decimal separator ("45,50" -> 45.5)
    - anything else           -> separators are digit grouping and dropped
    """
    s = re.sub(r"\s+", "", s or "")
    if not s:
        return None
    seps = _SEP_RE.findall(s)
    if len(seps) == 1:
        head, tail = _SEP_RE.split(s)
        if head and tail and len(tail) <= MAX_FRACTION_DIGITS:
            s = f"{head}.{tail}"
        else:
            s = head + tail
    elif seps:
        s = _SEP_RE.sub("", s)
    if not re.fullmatch(r"\d+(?:\.\d+)?", s):
        return None
    return float(s)
