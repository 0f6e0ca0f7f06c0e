"""Game layer — state transition, move sources and the replay loop.

Quick start::

    from chessref.game import GameState, MovesFile, replay

    with MovesFile("moves.txt") as moves:
        replay(GameState.initial(), moves)
"""

from chessref.game.moves_file import (
    MoveRecord,
    MovesFile,
    MovesFileError,
    MoveSource,
    parse_move_line,
)
from chessref.game.replay import describe_outcome, record_to_move, replay
from chessref.game.state import GameState, MoveOutcome, Rejection, apply_move

__all__ = [
    # State
    "GameState",
    "MoveOutcome",
    "Rejection",
    "apply_move",
    # Move sources
    "MoveRecord",
    "MoveSource",
    "MovesFile",
    "MovesFileError",
    "parse_move_line",
    # Driver
    "describe_outcome",
    "record_to_move",
    "replay",
]
