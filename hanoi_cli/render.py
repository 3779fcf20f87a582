from __future__ import annotations

from typing import Iterable

from .pegs import PEG_LABELS, PegSet, Row

CELL_WIDTH = 3


def _header() -> str:
    return " ".join(f"{label:>{CELL_WIDTH}}" for label in PEG_LABELS).rstrip()


def _rule() -> str:
    return "-" * (len(PEG_LABELS) * (CELL_WIDTH + 1) + 1)


def format_rows(rows: Iterable[Row]) -> str:
    lines = [_header(), _rule()]
    for row in rows:
        lines.append(" ".join(f"{cell:{CELL_WIDTH}}" for cell in row))
    return "\n".join(lines)


def format_pegs(pegs: PegSet) -> str:
    """Fixed-width table of the board, top row first."""

    return format_rows(pegs.render(pegs.n_disks))
