from __future__ import annotations

import logging
from typing import Optional

from .board import Board
from .executor import MoveExecutor, TurnState
from .generator import MoveGenerator
from .move import Move, Position
from .pieces import Side
from .result import MoveResult
from .session import SelectionSession

logger = logging.getLogger(__name__)


class Game:
    """Authoritative checkers state: board, legal lists and side to move.

    All mutation goes through ``submitMove`` or ``submitSelection``; rule
    violations come back as a ``MoveResult`` instead of being raised.
    Calls must be serialized by the caller.
    """

    def __init__(self) -> None:
        self.board = Board()
        self.turn = TurnState()
        self.generator = MoveGenerator(self.board)
        self.executor = MoveExecutor(self.board, self.generator, self.turn)
        self.session = SelectionSession(self)
        self.setup()

    @classmethod
    def from_board(cls, board: Board, turn: Side = Side.WHITE) -> "Game":
        game = cls()
        game.load(board, turn)
        return game

    def setup(self) -> None:
        self.board.set_start_pieces()
        self._start_turn(Side.WHITE)

    def reset(self) -> None:
        self.setup()

    def load(self, board: Board, turn: Side = Side.WHITE) -> None:
        """Replace the position with a copy of ``board``, ``turn`` to move."""
        self.board.board = [list(row) for row in board.board]
        self._start_turn(turn)

    # public API ---------------------------------------------------------

    def getBoardSnapshot(self) -> Board:
        return self.board.copy()

    def getBoardSize(self) -> int:
        return self.board.boardSize

    def currentTurn(self) -> Side:
        return self.turn.side

    def isValidPosition(self, position: tuple[int, int]) -> bool:
        return self.board.is_within_bounds(position)

    def positionFromRowCol(self, row: int, col: int) -> Optional[Position]:
        """Board position for a UI cell; the UI reports (x, y) so the axes swap."""
        if not self.isValidPosition((row, col)):
            return None
        return Position(col, row)

    def submitMove(self, move: Move) -> MoveResult:
        mover = self.turn.side
        result = self.executor.execute(move)
        if result.applied:
            logger.info("%s played %s%s", mover.label, move, " and promoted" if result.promoted else "")
        return result

    def submitSelection(self, position: tuple[int, int]) -> Optional[MoveResult]:
        return self.session.select(position)

    def pendingSelection(self) -> Optional[Position]:
        return self.session.source

    def legalMoves(self) -> list[Move]:
        return list(self.generator.legal_moves)

    def legalJumps(self) -> list[Move]:
        return list(self.generator.legal_jumps)

    def isJumpRequired(self) -> bool:
        return self.generator.jump_required

    def destinationsFrom(self, position: tuple[int, int]) -> list[Position]:
        return self.generator.destinations_from(Position(*position))

    # helpers ------------------------------------------------------------

    def _start_turn(self, side: Side) -> None:
        self.turn.side = side
        self.session.reset()
        self.generator.populate(side)
        logger.debug(
            "%s to move, %d moves, %d jumps",
            side.label,
            len(self.generator.legal_moves),
            len(self.generator.legal_jumps),
        )
