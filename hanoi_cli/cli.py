from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path
from typing import Any

from .config import Settings, load_config, resolve_settings
from .game import GameLoop
from .pegs import PegSet, StateCorruptedError
from .vision import render_board_image


def _print_usage_hint(settings: Settings) -> None:
    print(
        f"Move the top disk with <from>{settings.delimiter}<to> "
        f"(e.g. A{settings.delimiter}C), {settings.quit_token} to quit.",
        file=sys.stderr,
        flush=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi",
        description="Play the Tower of Hanoi one move per line on stdin.",
    )
    parser.add_argument(
        "--disks",
        type=int,
        default=None,
        help="Number of disks stacked on peg A at start (default: 3).",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="Character separating source and destination (default: '>').",
    )
    parser.add_argument(
        "--quit-token",
        default=None,
        help="Line that ends the session, case-insensitive (default: X).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON config file with n_disks/delimiter/quit_token/snapshot keys.",
    )
    parser.add_argument(
        "--snapshot",
        default=None,
        help="Write a PNG of the final board to this path (requires pillow).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Echo each parsed command to stderr.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the usage hint at start.",
    )
    return parser


def _write_snapshot(pegs: PegSet, path: Path) -> int:
    try:
        out = render_board_image(pegs).save(path)
    except (RuntimeError, OSError) as exc:
        print(f"Could not write snapshot: {exc}", file=sys.stderr, flush=True)
        return 1
    print(f"Snapshot written to {out}", file=sys.stderr, flush=True)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides: dict[str, Any] = {
        "n_disks": args.disks,
        "delimiter": args.delimiter,
        "quit_token": args.quit_token,
        "snapshot": args.snapshot,
    }
    try:
        config = load_config(args.config) if args.config else None
        settings = resolve_settings(config, overrides)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    if not args.quiet:
        _print_usage_hint(settings)

    # Undecodable bytes become U+FFFD and fail peg resolution like any bad token.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")

    pegs = PegSet(settings.n_disks)
    loop = GameLoop(
        pegs,
        delimiter=settings.delimiter,
        quit_token=settings.quit_token,
        verbose=args.verbose,
    )
    try:
        code = loop.run()
    except StateCorruptedError as exc:
        print(f"Internal error: {exc}", file=sys.stderr, flush=True)
        return 1
    except KeyboardInterrupt:
        print("\nExiting.", file=sys.stderr, flush=True)
        code = 0

    if settings.snapshot is not None:
        code = _write_snapshot(pegs, settings.snapshot) or code
    return code


if __name__ == "__main__":
    raise SystemExit(main())
