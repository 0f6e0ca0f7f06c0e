"""Tests for GameState and apply_move."""

from chessref.core.board import Board
from chessref.core.enums import Color, PieceType
from chessref.core.move import Move
from chessref.core.notation import board_from_placement
from chessref.core.piece import Piece
from chessref.core.rules import is_in_check
from chessref.core.types import E2, E4, E5, E7, Square
from chessref.game.state import GameState, Rejection, apply_move


class TestGameStateSetup:
    def test_initial(self) -> None:
        gs = GameState.initial()
        assert gs.board == Board.initial()
        assert gs.current_player == Color.WHITE

    def test_explicit_side_to_move(self) -> None:
        gs = GameState(Board.initial(), Color.BLACK)
        assert gs.current_player == Color.BLACK
        assert gs != GameState.initial()


class TestAcceptedMoves:
    def test_opening_double_push(self) -> None:
        gs = GameState.initial()
        outcome = apply_move(gs, Move(Square(4, 1), Square(4, 3)))
        assert outcome.accepted
        assert outcome.rejection is None
        assert outcome.state.current_player == Color.BLACK
        assert outcome.state.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert outcome.state.board[E2] is None
        assert not is_in_check(outcome.state.board, Color.WHITE)
        assert not is_in_check(outcome.state.board, Color.BLACK)
        assert not outcome.gives_check

    def test_input_state_unchanged(self) -> None:
        gs = GameState.initial()
        apply_move(gs, Move(E2, E4))
        assert gs == GameState.initial()

    def test_players_alternate(self) -> None:
        gs = GameState.initial()
        gs = apply_move(gs, Move(E2, E4)).state
        gs = apply_move(gs, Move(E7, E5)).state
        assert gs.current_player == Color.WHITE

    def test_capture_reported(self) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        outcome = apply_move(GameState(board, Color.WHITE), Move(E4, Square(3, 4)))
        assert outcome.accepted
        assert outcome.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert outcome.captured == Piece(Color.BLACK, PieceType.PAWN)

    def test_no_capture(self) -> None:
        outcome = apply_move(GameState.initial(), Move(E2, E4))
        assert outcome.captured is None

    def test_gives_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/R3K3")
        outcome = apply_move(GameState(board, Color.WHITE), Move(Square(0, 0), Square(0, 7)))
        assert outcome.accepted
        assert outcome.gives_check


class TestRejections:
    def test_no_piece(self) -> None:
        gs = GameState.initial()
        outcome = apply_move(gs, Move(E4, E5))
        assert outcome.rejection is Rejection.NO_PIECE
        assert outcome.state is gs

    def test_wrong_player(self) -> None:
        gs = GameState.initial()
        outcome = apply_move(gs, Move(E7, E5))
        assert outcome.rejection is Rejection.WRONG_PLAYER
        assert outcome.state is gs

    def test_illegal_geometry(self) -> None:
        gs = GameState.initial()
        outcome = apply_move(gs, Move(E2, E5))
        assert outcome.rejection is Rejection.ILLEGAL_MOVE
        assert outcome.state is gs

    def test_self_check_from_pinned_piece(self) -> None:
        # white bishop on e2 shields the king from the rook on e8
        board = board_from_placement("4r2k/8/8/8/8/8/4B3/4K3")
        gs = GameState(board, Color.WHITE)
        outcome = apply_move(gs, Move(E2, Square(3, 2)))
        assert outcome.rejection is Rejection.SELF_CHECK
        assert outcome.state is gs
        assert outcome.state.board == board

    def test_self_check_diagonal_pin(self) -> None:
        # black knight on f7 pinned by the white bishop on h5
        board = board_from_placement("4k3/5n2/8/7B/8/8/8/4K3")
        gs = GameState(board, Color.BLACK)
        outcome = apply_move(gs, Move(Square(5, 6), Square(6, 4)))
        assert outcome.rejection is Rejection.SELF_CHECK
        assert outcome.state.current_player == Color.BLACK

    def test_king_cannot_step_into_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/3rK3")
        gs = GameState(board, Color.WHITE)
        outcome = apply_move(gs, Move(Square(4, 0), Square(5, 0)))
        assert outcome.rejection is Rejection.SELF_CHECK

    def test_checks_run_in_order(self) -> None:
        # black piece + illegal geometry: the wrong-player check wins
        outcome = apply_move(GameState.initial(), Move(E7, Square(4, 2)))
        assert outcome.rejection is Rejection.WRONG_PLAYER

    def test_reason_text(self) -> None:
        assert str(Rejection.SELF_CHECK) == "Move leaves the player in check"
        assert str(Rejection.NO_PIECE) == "No piece at the starting position"
