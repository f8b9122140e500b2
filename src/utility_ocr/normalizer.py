from __future__ import annotations

import re
from types import MappingProxyType
from typing import Literal, Mapping

from .errors import InvalidInput
from .utils import normalize_whitespace

NormalizeMode = Literal["bare_number", "free"]

# Letters Tesseract commonly returns in place of digits on meter displays.
GLYPH_DIGIT_MAP: Mapping[str, str] = MappingProxyType({
    "o": "0", "O": "0",
    "l": "1", "I": "1", "|": "1",
    "s": "5", "S": "5",
    "b": "8", "B": "8",
})

# Hebrew geresh/gershayim and typographic quotes, as they show up in "סה"כ", "קוט"ש", "מ"ק".
QUOTE_MAP: Mapping[str, str] = MappingProxyType({
    "׳": "'", "’": "'", "‘": "'", "´": "'", "`": "'",
    "״": '"', "“": '"', "”": '"', "„": '"',
})

# "1,234.50" -> "1234.50"
_DIGIT_COMMA_RE = re.compile(r"(?<=\d),(?=\d)")


def normalize(
    raw: str | None,
    mode: NormalizeMode = "free",
    glyph_map: Mapping[str, str] = GLYPH_DIGIT_MAP,
) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise InvalidInput(f"OCR text must be str, got {type(raw).__name__}")

    if mode == "bare_number":
        # lossy on purpose: the text is known to hold a single reading
        text = raw.translate(str.maketrans(dict(glyph_map)))
        return normalize_whitespace(text)

    if mode != "free":
        raise ValueError(f"unknown normalize mode: {mode!r}")

    text = raw.translate(str.maketrans(dict(QUOTE_MAP)))
    text = _DIGIT_COMMA_RE.sub("", text)
    return normalize_whitespace(text)
