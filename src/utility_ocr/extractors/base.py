from __future__ import annotations

import math
import re
from dataclasses import dataclass, asdict
from functools import cached_property
from typing import Any, Literal

from ..errors import InvalidFieldSpec

Selection = Literal["first", "max", "longest"]
Cascade = Literal["first_success", "exhaustive"]
Status = Literal["found", "no_candidates", "all_implausible"]

SELECTIONS = ("first", "max", "longest")
CASCADES = ("first_success", "exhaustive")

# integer with an optional fraction; "1234", "45.00", "12,5"
NUMBER = r"\d+(?:[.,]\d+)?"
DEFAULT_GAP = 10
# what may sit between a keyword and its number: "Total: 12", "סה"כ - ₪ 12"
SEPARATORS = r"\s:.\-=₪"
# a number never starts inside a digit run or right after "15." / "15,"
NUMBER_START = r"(?<!\d)(?<!\d[.,])"


def _keyword_re(kw: str) -> str:
    # OCR drops spaces and swaps/loses the quote in abbreviations like סה"כ
    out = []
    for ch in kw.strip():
        if ch == " ":
            out.append(" ?")
        elif ch in "\"'":
            out.append("[\"']?")
        else:
            out.append(re.escape(ch))
    return "".join(out)


def _alternation(keywords: tuple[str, ...]) -> str:
    ordered = sorted(keywords, key=len, reverse=True)
    return "(?:" + "|".join(_keyword_re(k) for k in ordered) + ")"


def _keywords(name: str, side: str, value: Any) -> tuple[str, ...]:
    # a bare string would be split into one-letter keywords
    if isinstance(value, str):
        raise InvalidFieldSpec(f"pattern {name!r}: {side!r} must be a list of keywords, got a string")
    try:
        kws = tuple(value)
    except TypeError:
        raise InvalidFieldSpec(f"pattern {name!r}: {side!r} must be a list of keywords") from None
    for k in kws:
        if not isinstance(k, str) or not k.strip():
            raise InvalidFieldSpec(f"pattern {name!r}: bad {side!r} keyword {k!r}")
    return kws


@dataclass(frozen=True)
class PatternSpec:
    """
    One candidate pattern in a field's cascade.

    Keyword-free when both `before` and `after` are empty. Otherwise the
    number must sit within `gap` separator characters of a keyword; words
    in between ("total due by 15.03") break the anchor.
    """
    name: str
    number: str = NUMBER
    before: tuple[str, ...] = ()
    after: tuple[str, ...] = ()
    gap: int = DEFAULT_GAP
    separators: str = SEPARATORS

    def __post_init__(self) -> None:
        object.__setattr__(self, "before", _keywords(self.name, "before", self.before))
        object.__setattr__(self, "after", _keywords(self.name, "after", self.after))
        if self.gap < 0:
            raise InvalidFieldSpec(f"pattern {self.name!r}: gap must be >= 0")
        self.regex  # compile now so a bad pattern fails at construction

    @property
    def anchored(self) -> bool:
        return bool(self.before or self.after)

    @cached_property
    def regex(self) -> re.Pattern[str]:
        # one start position per digit run keeps every scan linear
        gap = f"[{self.separators}]{{0,{self.gap}}}"
        parts = []
        if self.before:
            parts += [_alternation(self.before), gap]
        parts.append(f"{NUMBER_START}(?P<num>{self.number})")
        if self.after:
            parts += [gap, _alternation(self.after)]
        try:
            return re.compile("".join(parts), re.IGNORECASE)
        except re.error as e:
            raise InvalidFieldSpec(f"pattern {self.name!r}: {e}") from e

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "PatternSpec":
        try:
            return cls(
                name=str(d["name"]),
                number=d.get("number", NUMBER),
                before=d.get("before", ()),
                after=d.get("after", ()),
                gap=int(d.get("gap", DEFAULT_GAP)),
                separators=str(d.get("separators", SEPARATORS)),
            )
        except InvalidFieldSpec:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidFieldSpec(f"bad pattern definition {d!r}: {e}") from e


@dataclass(frozen=True)
class Plausibility:
    low: float
    high: float = math.inf
    include_low: bool = True

    def __post_init__(self) -> None:
        if not self.low < self.high:
            raise InvalidFieldSpec(f"empty plausibility interval [{self.low}, {self.high})")

    def contains(self, v: float) -> bool:
        if v >= self.high:
            return False
        return v >= self.low if self.include_low else v > self.low

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Plausibility":
        try:
            high = d.get("high")
            return cls(
                low=float(d["low"]),
                high=math.inf if high is None else float(high),
                include_low=bool(d.get("include_low", True)),
            )
        except InvalidFieldSpec:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidFieldSpec(f"bad plausibility definition {d!r}: {e}") from e


@dataclass(frozen=True)
class FieldSpec:
    name: str
    patterns: tuple[PatternSpec, ...]
    plausibility: Plausibility
    selection: Selection = "first"
    cascade: Cascade = "first_success"
    fallback: PatternSpec | None = None
    fallback_plausibility: Plausibility | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "patterns", tuple(self.patterns))
        if not self.patterns:
            raise InvalidFieldSpec(f"field spec {self.name!r} has no candidate patterns")
        if self.selection not in SELECTIONS:
            raise InvalidFieldSpec(f"field spec {self.name!r}: unknown selection {self.selection!r}")
        if self.cascade not in CASCADES:
            raise InvalidFieldSpec(f"field spec {self.name!r}: unknown cascade {self.cascade!r}")
        if self.fallback is not None and self.fallback_plausibility is None:
            object.__setattr__(self, "fallback_plausibility", self.plausibility)

    @classmethod
    def from_dict(cls, name: str, d: dict[str, Any]) -> "FieldSpec":
        if not isinstance(d, dict):
            raise InvalidFieldSpec(f"field spec {name!r} must be an object")
        patterns = d.get("patterns")
        if not isinstance(patterns, list):
            raise InvalidFieldSpec(f"field spec {name!r}: 'patterns' must be a list")
        if "plausibility" not in d:
            raise InvalidFieldSpec(f"field spec {name!r}: 'plausibility' is required")
        fb = d.get("fallback")
        fb_pl = d.get("fallback_plausibility")
        return cls(
            name=name,
            patterns=tuple(PatternSpec.from_dict(p) for p in patterns),
            plausibility=Plausibility.from_dict(d["plausibility"]),
            selection=d.get("selection", "first"),
            cascade=d.get("cascade", "first_success"),
            fallback=PatternSpec.from_dict(fb) if fb else None,
            fallback_plausibility=Plausibility.from_dict(fb_pl) if fb_pl else None,
        )


@dataclass
class ExtractionResult:
    field: str
    found: bool
    value: float | None
    candidates: list[float]   # every match seen, longest digit string first
    source_text: str
    reasons: list[str]
    pattern: str | None = None  # name of the pattern the value came from

    @property
    def status(self) -> Status:
        if self.found:
            return "found"
        return "all_implausible" if self.candidates else "no_candidates"

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["status"] = self.status
        return d
