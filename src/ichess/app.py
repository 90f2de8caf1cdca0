"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from ichess.core.board import Board
from ichess.core.types import parse_square
from ichess.settings import AppSettings, is_log_level

_LOGGER = logging.getLogger(__name__)

_BANNER = (
    "====================================\n"
    "|  Inheritance Chess Engine v1.0   |\n"
    "====================================\n"
)


def _log_level(value: str) -> str:
    if not is_log_level(value):
        raise argparse.ArgumentTypeError(f"unknown logging level: {value!r}")
    return value.upper()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ichess",
        description="Show the standard chess setup and pseudo-legal moves.",
    )
    parser.add_argument(
        "--moves",
        metavar="SQUARE",
        help="list the moves of the piece on SQUARE, e.g. g1",
    )
    parser.add_argument(
        "--log-level", type=_log_level, help="logging level, e.g. DEBUG"
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="skip the title banner"
    )
    return parser


def _apply_args(settings: AppSettings, args: argparse.Namespace) -> None:
    if args.log_level:
        settings.log_level = args.log_level.upper()
    if args.no_banner:
        settings.show_banner = False


def main(argv: list[str] | None = None) -> int:
    """Print the starting position and, optionally, one piece's moves."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = AppSettings.from_env()
    _apply_args(settings, args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if settings.show_banner:
        sys.stdout.write(_BANNER)

    board = Board.initial()
    sys.stdout.write("Standard Chess Starting Position:\n")
    board.display()

    if args.moves is None:
        return 0

    try:
        square = parse_square(args.moves)
    except ValueError as exc:
        parser.error(str(exc))

    handle = board.piece_at(square)
    if handle is None:
        sys.stdout.write(f"No piece on {square}\n")
        return 1

    piece = board.piece(handle)
    moves = board.moves_for(handle)
    _LOGGER.info("%d moves for %r", len(moves), piece)
    names = " ".join(str(sq) for sq in sorted(moves)) or "(none)"
    sys.stdout.write(f"{piece} on {square}: {names}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
