from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterator, Literal, TypeAlias

PegLabel: TypeAlias = Literal["A", "B", "C"]
Disk: TypeAlias = int
Row: TypeAlias = tuple[Disk, Disk, Disk]

PEG_LABELS: tuple[PegLabel, ...] = ("A", "B", "C")
EMPTY_CELL: Disk = 0


class HanoiError(Exception):
    """Base exception for recoverable Tower of Hanoi errors."""


class InvalidPegIdentifier(HanoiError, ValueError):
    """Raised when a token does not name a known peg."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Invalid peg {token!a}, expected one of {', '.join(PEG_LABELS)}"
        )


class EmptyPegError(HanoiError):
    """Raised when taking the top disk from a peg that has none."""

    def __init__(self, peg: PegLabel) -> None:
        self.peg = peg
        super().__init__(f"Peg {peg} is empty")


class IllegalMoveError(HanoiError):
    """Raised when a move would place a disk on top of a smaller one."""

    def __init__(
        self, source: PegLabel, disk: Disk, destination: PegLabel, top: Disk
    ) -> None:
        self.source = source
        self.disk = disk
        self.destination = destination
        self.top = top
        super().__init__(
            f"Invalid move, {source}::{disk} is greater than {destination}::{top}"
        )


class StateCorruptedError(RuntimeError):
    """Raised when disk conservation or ordering no longer holds."""


@dataclass(frozen=True, slots=True)
class PegSnapshot:
    """Immutable copy of a PegSet.

    `pegs` holds one tuple per label in `PEG_LABELS` order, listed bottom->top.
    """

    n_disks: int
    pegs: tuple[tuple[Disk, ...], tuple[Disk, ...], tuple[Disk, ...]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "n_disks": self.n_disks,
            "pegs": {label: list(peg) for label, peg in zip(PEG_LABELS, self.pegs)},
        }


def _validate_n_disks(n_disks: int) -> None:
    if isinstance(n_disks, bool) or not isinstance(n_disks, int):
        raise TypeError(f"n_disks must be int, got {type(n_disks).__name__}")
    if n_disks < 1:
        raise ValueError(f"n_disks must be >= 1, got {n_disks}")


def resolve(token: str) -> PegLabel:
    """Map a raw token such as ``"a"`` or ``" C "`` to its peg label."""

    label = token.strip().upper()
    for known in PEG_LABELS:
        if label == known:
            return known
    raise InvalidPegIdentifier(token)


class PegSet:
    """The three pegs of one puzzle, and the only code that moves disks."""

    def __init__(self, n_disks: int = 3) -> None:
        _validate_n_disks(n_disks)
        self.n_disks = n_disks
        self._pegs: dict[PegLabel, list[Disk]] = {label: [] for label in PEG_LABELS}
        self._pegs["A"] = list(range(n_disks, 0, -1))

    def peek_top(self, peg: PegLabel) -> Disk | None:
        stack = self._pegs[peg]
        return stack[-1] if stack else None

    def pop_top(self, peg: PegLabel) -> Disk:
        stack = self._pegs[peg]
        if not stack:
            raise EmptyPegError(peg)
        return stack.pop()

    def push(self, peg: PegLabel, disk: Disk) -> None:
        # Legality is decided by the caller.
        self._pegs[peg].append(disk)

    def disks(self, peg: PegLabel) -> tuple[Disk, ...]:
        """Disks on `peg`, bottom->top."""

        return tuple(self._pegs[peg])

    def render(self, disk_count: int | None = None) -> Iterator[Row]:
        """Yield one row per height, from the tallest position down to the base.

        Each row holds the disk at that height on A, B and C, or `EMPTY_CELL`.
        Every call returns a fresh generator.
        """

        height = self.n_disks if disk_count is None else disk_count
        for level in range(height - 1, -1, -1):
            yield (
                self._cell("A", level),
                self._cell("B", level),
                self._cell("C", level),
            )

    def _cell(self, peg: PegLabel, level: int) -> Disk:
        stack = self._pegs[peg]
        return stack[level] if level < len(stack) else EMPTY_CELL

    def snapshot(self) -> PegSnapshot:
        return PegSnapshot(
            n_disks=self.n_disks,
            pegs=(self.disks("A"), self.disks("B"), self.disks("C")),
        )

    def check_invariants(self) -> None:
        all_disks = Counter(disk for stack in self._pegs.values() for disk in stack)
        expected = Counter(range(1, self.n_disks + 1))
        if all_disks != expected:
            raise StateCorruptedError(
                f"disk set {sorted(all_disks.elements())} does not match 1..{self.n_disks}"
            )
        for label, stack in self._pegs.items():
            for lower, upper in zip(stack, stack[1:]):
                if upper >= lower:
                    raise StateCorruptedError(
                        f"peg {label} is out of order: {stack} (bottom->top)"
                    )
