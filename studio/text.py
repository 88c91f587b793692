"""Small text helpers for case copy: phrase highlighting and tool badges."""

from __future__ import annotations
from typing import Iterable, List, Tuple

from studio.catalog import TOOL_ICON_MAP


def highlight_segments(text: str, phrases: Iterable[str]) -> List[Tuple[str, bool]]:
    """Split ``text`` into ``(run, highlighted)`` pairs.

    Phrases are applied one after another; a run that is already highlighted
    is never split again. Empty runs are dropped.
    """
    runs: List[Tuple[str, bool]] = [(text, False)]
    for phrase in phrases:
        if not phrase:
            continue
        nxt: List[Tuple[str, bool]] = []
        for run, marked in runs:
            if marked:
                nxt.append((run, marked))
                continue
            parts = run.split(phrase)
            for i, part in enumerate(parts):
                if part:
                    nxt.append((part, False))
                if i < len(parts) - 1:
                    nxt.append((phrase, True))
        runs = nxt
    return runs


def parse_tools(tools: str) -> List[Tuple[str, str]]:
    """"A, B" -> [("A", icon), ("B", icon)]; unknown tools get a bullet."""
    out = []
    for raw in tools.split(","):
        name = raw.strip()
        out.append((name, TOOL_ICON_MAP.get(name, "•")))
    return out
