from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from .pegs import HanoiError

DEFAULT_DELIMITER = ">"
DEFAULT_QUIT_TOKEN = "X"


class MalformedCommandError(HanoiError, ValueError):
    """Raised when a line does not split into exactly two peg tokens."""

    def __init__(self, line: str, delimiter: str) -> None:
        self.line = line
        self.delimiter = delimiter
        super().__init__(
            f"Malformed command {line!a}, expected <from>{delimiter}<to> (e.g. A{delimiter}C)"
        )


class InputStreamClosed(Exception):
    """Raised by `read_command_line` once the input stream is exhausted."""


@dataclass(frozen=True, slots=True)
class MoveCommand:
    source: str
    destination: str


def is_quit(line: str, quit_token: str = DEFAULT_QUIT_TOKEN) -> bool:
    return line.strip().upper() == quit_token.strip().upper()


def parse_command(line: str, *, delimiter: str = DEFAULT_DELIMITER) -> MoveCommand:
    """Split `line` into a source and destination token.

    Tokens are trimmed and upper-cased but not resolved to pegs, so an
    unknown label is reported later against the peg it was meant for.
    """

    parts = line.strip().split(delimiter)
    if len(parts) != 2:
        raise MalformedCommandError(line.strip(), delimiter)
    source, destination = (part.strip().upper() for part in parts)
    return MoveCommand(source=source, destination=destination)


def read_command_line(stream: TextIO) -> str:
    line = stream.readline()
    if line == "":
        raise InputStreamClosed
    return line
