"""Interactive Tower of Hanoi on the command line."""

from __future__ import annotations

from .commands import (
    InputStreamClosed,
    MalformedCommandError,
    MoveCommand,
    parse_command,
)
from .game import GameLoop, LoopState
from .pegs import (
    PEG_LABELS,
    Disk,
    EmptyPegError,
    HanoiError,
    IllegalMoveError,
    InvalidPegIdentifier,
    PegLabel,
    PegSet,
    PegSnapshot,
    StateCorruptedError,
    resolve,
)
from .render import format_pegs, format_rows

__all__ = [
    "PEG_LABELS",
    "Disk",
    "EmptyPegError",
    "GameLoop",
    "HanoiError",
    "IllegalMoveError",
    "InputStreamClosed",
    "InvalidPegIdentifier",
    "LoopState",
    "MalformedCommandError",
    "MoveCommand",
    "PegLabel",
    "PegSet",
    "PegSnapshot",
    "StateCorruptedError",
    "format_pegs",
    "format_rows",
    "parse_command",
    "resolve",
]
