from __future__ import annotations
import json
import os
import re
from typing import Any, Iterable, Iterator

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def write_jsonl(path: str, rows: Iterable[dict[str, Any]]) -> None:
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        for r in rows:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")

def read_jsonl(path: str) -> Iterator[dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        for ln in f:
            ln = ln.strip()
            if ln:
                yield json.loads(ln)

def normalize_whitespace(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()

def digit_count(s: str) -> int:
    return sum(1 for ch in s if ch.isdigit())
