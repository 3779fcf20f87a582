from __future__ import annotations

import sys
from typing import Literal, TextIO, TypeAlias

from .commands import (
    DEFAULT_DELIMITER,
    DEFAULT_QUIT_TOKEN,
    InputStreamClosed,
    MoveCommand,
    is_quit,
    parse_command,
    read_command_line,
)
from .pegs import HanoiError, IllegalMoveError, PegLabel, PegSet, resolve
from .render import format_pegs

LoopState: TypeAlias = Literal[
    "awaiting_input",
    "parsing",
    "validating",
    "applying",
    "rejecting",
    "terminated",
]


class GameLoop:
    """Interactive session over a single PegSet.

    Reads one `<from><delimiter><to>` command per line, applies legal moves
    and reports rejected ones on `stderr` without touching the board. The
    session ends on the quit token or at end of input.
    """

    def __init__(
        self,
        pegs: PegSet | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        delimiter: str = DEFAULT_DELIMITER,
        quit_token: str = DEFAULT_QUIT_TOKEN,
        verbose: bool = False,
    ) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        if not quit_token.strip():
            raise ValueError("quit_token must be a non-empty string")

        self.pegs = pegs if pegs is not None else PegSet()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.delimiter = delimiter
        self.quit_token = quit_token
        self.verbose = verbose
        self.state: LoopState = "awaiting_input"

    def _print(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)

    def _report(self, text: str) -> None:
        print(text, file=self.stderr, flush=True)

    def show(self) -> None:
        self._print(format_pegs(self.pegs))

    def apply_move(self, command: MoveCommand) -> tuple[PegLabel, PegLabel]:
        """Move the top disk named by `command`, or raise without changing the board."""

        source = resolve(command.source)
        disk = self.pegs.pop_top(source)
        try:
            destination = resolve(command.destination)
            top = self.pegs.peek_top(destination)
            if top is not None and disk >= top:
                raise IllegalMoveError(source, disk, destination, top)
        except HanoiError:
            self.pegs.push(source, disk)
            raise

        self.pegs.push(destination, disk)
        return (source, destination)

    def process_line(self, line: str) -> LoopState:
        if is_quit(line, self.quit_token):
            self.state = "terminated"
            return self.state

        self.state = "parsing"
        try:
            command = parse_command(line, delimiter=self.delimiter)
            if self.verbose:
                self._report(repr([command.source, command.destination]))
            self.state = "validating"
            self.apply_move(command)
        except HanoiError as exc:
            self.state = "rejecting"
            self._report(str(exc))
        else:
            self.state = "applying"
            self.show()

        self.pegs.check_invariants()
        self.state = "awaiting_input"
        return self.state

    def run(self) -> int:
        self.show()
        while self.state != "terminated":
            try:
                line = read_command_line(self.stdin)
            except InputStreamClosed:
                self.state = "terminated"
                break
            self.process_line(line)
        return 0
