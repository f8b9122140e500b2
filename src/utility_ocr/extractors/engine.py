from __future__ import annotations

import logging
from dataclasses import dataclass

from .base import ExtractionResult, FieldSpec, PatternSpec, Plausibility, Selection
from ..errors import InvalidInput
from ..utils import digit_count
from ..validate import parse_number

log = logging.getLogger(__name__)


@dataclass
class Candidate:
    value: float
    raw: str
    start: int
    digits: int
    pattern: str


def scan(text: str, pattern: PatternSpec) -> list[Candidate]:
    """All non-overlapping matches of one pattern, in document order."""
    out: list[Candidate] = []
    for m in pattern.regex.finditer(text):
        raw = m.group("num")
        val = parse_number(raw)
        if val is None:
            continue
        out.append(Candidate(val, raw, m.start("num"), digit_count(raw), pattern.name))
    return out


def select(cands: list[Candidate], rule: Selection) -> Candidate:
    # ties always go to the earlier position in the text
    if rule == "max":
        return max(cands, key=lambda c: (c.value, -c.start))
    if rule == "longest":
        return max(cands, key=lambda c: (c.digits, -c.start))
    return min(cands, key=lambda c: c.start)


def _ordered(cands: list[Candidate]) -> list[float]:
    # document order first, then a stable sort puts longer digit strings ahead
    by_pos = sorted(cands, key=lambda c: c.start)
    return [c.value for c in sorted(by_pos, key=lambda c: c.digits, reverse=True)]


def _plausible(cands: list[Candidate], rng: Plausibility) -> list[Candidate]:
    return [c for c in cands if rng.contains(c.value)]


def extract(text: str | None, spec: FieldSpec) -> ExtractionResult:
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise InvalidInput(f"normalized text must be str, got {type(text).__name__}")

    name = spec.name
    if not text.strip():
        return ExtractionResult(name, False, None, [], text, [f"{name}_empty_text"])

    seen: list[Candidate] = []
    accepted: list[Candidate] = []
    reasons: list[str] = []

    # 1) cascade
    for p in spec.patterns:
        cands = scan(text, p)
        ok = _plausible(cands, spec.plausibility)
        log.debug("%s: pattern %s -> %d match(es), %d plausible", name, p.name, len(cands), len(ok))
        seen.extend(cands)
        if ok:
            accepted.extend(ok)
            reasons.append(f"{name}_{'anchor' if p.anchored else 'pattern'}_match:{p.name}")
            if spec.cascade == "first_success":
                break

    # 2) last resort: generic scan
    if not accepted and spec.fallback is not None:
        cands = scan(text, spec.fallback)
        ok = _plausible(cands, spec.fallback_plausibility or spec.plausibility)
        log.debug("%s: fallback %s -> %d match(es), %d plausible", name, spec.fallback.name, len(cands), len(ok))
        seen.extend(cands)
        if ok:
            accepted = ok
            reasons.append(f"{name}_fallback_scan:{spec.fallback.name}")

    if not accepted:
        reasons.append(f"{name}_all_implausible" if seen else f"{name}_not_found")
        return ExtractionResult(name, False, None, _ordered(seen), text, reasons)

    best = select(accepted, spec.selection)
    if len(accepted) > 1:
        reasons.append(f"multiple_{name}_candidates")
    return ExtractionResult(name, True, best.value, _ordered(seen), text, reasons, best.pattern)
