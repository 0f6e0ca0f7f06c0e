"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessref.core.board import Board
from chessref.core.enums import Color, PieceType
from chessref.core.notation import STARTING_PLACEMENT, board_from_placement
from chessref.game.moves_file import MovesFile
from chessref.game.replay import replay
from chessref.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="chessref",
        description="Replay a file of chess moves and report each one",
    )
    p.add_argument("moves_file", help="Text file with one move per line, e.g. e2e4")
    p.add_argument(
        "--placement",
        default=STARTING_PLACEMENT,
        help="Start from a FEN piece placement instead of the initial position",
    )
    p.add_argument(
        "--black-first",
        action="store_true",
        help="Let black make the first move",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def _check_kings(board: Board) -> None:
    """Require exactly one king per side; check detection relies on it."""
    for color in Color:
        kings = [sq for sq, p in board.squares(color) if p.piece_type == PieceType.KING]
        if len(kings) != 1:
            raise ValueError(
                f"Placement needs exactly one {color} king, found {len(kings)}"
            )


def _initial_state(args: argparse.Namespace) -> GameState:
    if args.placement == STARTING_PLACEMENT:
        board = Board.initial()
    else:
        board = board_from_placement(args.placement)
        _check_kings(board)
    player = Color.BLACK if args.black_first else Color.WHITE
    return GameState(board, player)


def main(argv: list[str] | None = None) -> int:
    """Run the replay and return the process exit status."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        state = _initial_state(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        with MovesFile(args.moves_file) as moves:
            final = replay(state, moves)
    except FileNotFoundError:
        print(f"Error: The specified file '{args.moves_file}' was not found")
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading moves: {exc}")
        return 1

    _LOGGER.debug("Finished with %s to move", final.current_player)
    return 0


if __name__ == "__main__":
    sys.exit(main())
