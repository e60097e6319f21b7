from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from engine.board import Board  # noqa: E402
from engine.game import Game  # noqa: E402
from engine.move import Move, Position  # noqa: E402
from engine.pieces import PieceKind, Side  # noqa: E402
from engine.result import MoveStatus  # noqa: E402
from engine.session import SelectionSession  # noqa: E402


class _RecordingGame(Game):
    def __init__(self) -> None:
        super().__init__()
        self.submitted: list[Move] = []

    def submitMove(self, move: Move):
        self.submitted.append(move)
        return super().submitMove(move)


class SelectionSessionTests(unittest.TestCase):
    def test_first_pick_is_held_as_source(self) -> None:
        game = Game()
        self.assertIsNone(game.submitSelection((2, 1)))
        self.assertEqual(game.pendingSelection(), Position(2, 1))
        self.assertEqual(game.getBoardSnapshot(), Board.standard())

    def test_second_pick_submits_through_public_api(self) -> None:
        game = _RecordingGame()
        game.submitSelection((2, 1))
        result = game.submitSelection((3, 0))

        self.assertEqual(game.submitted, [Move.between((2, 1), (3, 0))])
        self.assertTrue(result)
        self.assertIsNone(game.pendingSelection())
        self.assertIs(game.currentTurn(), Side.BLACK)

    def test_rejected_pair_resets_selection(self) -> None:
        game = Game()
        game.submitSelection((2, 1))
        result = game.submitSelection((4, 3))

        self.assertIs(result.status, MoveStatus.ILLEGAL_MOVE)
        self.assertIsNone(game.pendingSelection())
        self.assertEqual(game.getBoardSnapshot(), Board.standard())

        self.assertIsNone(game.submitSelection((2, 3)))
        self.assertTrue(game.submitSelection((3, 4)))

    def test_out_of_bounds_pick_resets_without_touching_board(self) -> None:
        game = _RecordingGame()
        game.submitSelection((2, 1))
        result = game.submitSelection((3, -1))

        self.assertIs(result.status, MoveStatus.OUT_OF_BOUNDS)
        self.assertIsNone(result.move)
        self.assertEqual(game.submitted, [])
        self.assertIsNone(game.pendingSelection())
        self.assertEqual(game.getBoardSnapshot(), Board.standard())

        result = game.submitSelection((8, 8))
        self.assertIs(result.status, MoveStatus.OUT_OF_BOUNDS)
        self.assertIsNone(game.pendingSelection())

    def test_chain_jump_by_clicks(self) -> None:
        board = Board.from_rows(
            [
                "........",
                "........",
                "...w....",
                "........",
                ".....w..",
                "......b.",
                "........",
                "........",
            ]
        )
        game = Game.from_board(board, Side.BLACK)

        game.submitSelection((5, 6))
        first = game.submitSelection((3, 4))
        self.assertTrue(first.chain_continues)
        self.assertIs(game.currentTurn(), Side.BLACK)

        game.submitSelection((3, 4))
        second = game.submitSelection((1, 2))
        self.assertTrue(second.turn_ended)
        self.assertIs(game.board.getPiece(Position(1, 2)), PieceKind.BLACK_MAN)
        self.assertIs(game.currentTurn(), Side.WHITE)

    def test_session_can_drive_a_game_directly(self) -> None:
        game = Game()
        session = SelectionSession(game)
        self.assertFalse(session.pending)
        session.select((2, 7))
        self.assertTrue(session.pending)
        self.assertTrue(session.select((3, 6)))
        self.assertFalse(session.pending)

    def test_reset_clears_pending_selection(self) -> None:
        game = Game()
        game.submitSelection((2, 1))
        game.reset()
        self.assertIsNone(game.pendingSelection())


if __name__ == "__main__":
    unittest.main()
