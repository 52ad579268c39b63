"""Calculation history kept per browser session."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import List

import pandas as pd


COLUMNS = ["expression", "result", "ok", "detail", "created_at"]


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    result: str
    ok: bool = True
    detail: str = ""
    created_at: str = field(default_factory=_now_iso)

    def label(self) -> str:
        if self.ok:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> {self.result}"


class History:
    """Newest-first list of calculations, capped at ``limit`` entries."""

    def __init__(self, limit: int = 20):
        self.limit = max(0, int(limit))
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def record(self, expression: str, result: str, *, ok: bool = True, detail: str = "") -> None:
        if self.limit == 0:
            return
        self._entries.insert(0, HistoryEntry(expression, result, ok=ok, detail=detail))
        del self._entries[self.limit:]

    def clear(self) -> None:
        self._entries = []

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(e) for e in self._entries], columns=COLUMNS)

    def to_csv(self) -> str:
        return self.to_frame().to_csv(index=False)
