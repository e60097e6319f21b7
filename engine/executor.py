from __future__ import annotations

import logging
from dataclasses import dataclass

from .board import Board
from .generator import MoveGenerator
from .move import Move
from .pieces import PieceKind, Side
from .result import MoveResult, MoveStatus

logger = logging.getLogger(__name__)


@dataclass
class TurnState:
    side: Side = Side.WHITE

    def toggle(self) -> Side:
        self.side = self.side.opponent
        return self.side


class MoveExecutor:
    """Applies validated moves and jumps, promotes, and hands over the turn."""

    def __init__(self, board: Board, generator: MoveGenerator, turn: TurnState) -> None:
        self.board = board
        self.generator = generator
        self.turn = turn

    def execute(self, move: Move) -> MoveResult:
        logger.debug("Attempting to move %s to %s", move.source, move.destination)
        if not (self.board.is_within_bounds(move.source) and self.board.is_within_bounds(move.destination)):
            logger.debug("Move %s leaves the board.", move)
            return MoveResult.rejected(MoveStatus.OUT_OF_BOUNDS, move, self.turn.side)

        if self.generator.is_legal_jump(move):
            return self.jump_piece(move)
        if self.generator.is_legal_move(move) and not self.generator.jump_required:
            return self.move_piece(move)

        logger.debug("Illegal move attempt: %s", move)
        return MoveResult.rejected(MoveStatus.ILLEGAL_MOVE, move, self.turn.side)

    def move_piece(self, move: Move) -> MoveResult:
        before = self.board.getPiece(move.source)
        after = self.piece_for_move(move)
        self.board.setPiece(move.destination, after)
        self.board.setPiece(move.source, PieceKind.EMPTY)
        self.switch_turns()
        return MoveResult(
            status=MoveStatus.APPLIED,
            move=move,
            side_to_move=self.turn.side,
            promoted=after is not before,
            turn_ended=True,
        )

    def jump_piece(self, move: Move) -> MoveResult:
        captured = move.captured
        assert captured is not None, f"Legal jump {move} has no captured square."
        mover = self.turn.side
        before = self.board.getPiece(move.source)
        after = self.piece_for_move(move)

        self.board.setPiece(move.destination, after)
        self.board.setPiece(move.source, PieceKind.EMPTY)
        self.board.setPiece(captured, PieceKind.EMPTY)

        # A chain only ever continues from the landing square.
        self.generator.clear()
        self.generator.add_jumps_from_jump(move, mover)

        turn_ended = not self.generator.jump_required
        if turn_ended:
            self.switch_turns()
        else:
            logger.debug("%s continues jumping from %s", mover.label, move.destination)

        return MoveResult(
            status=MoveStatus.APPLIED,
            move=move,
            side_to_move=self.turn.side,
            is_jump=True,
            captured=captured,
            promoted=after is not before,
            turn_ended=turn_ended,
        )

    def switch_turns(self) -> None:
        side = self.turn.toggle()
        logger.debug("%s's turn", side.label)
        self.generator.populate(side)

    def piece_for_move(self, move: Move) -> PieceKind:
        """Kind that lands on the destination, promoted on the king row."""
        piece = self.board.getPiece(move.source)
        assert not piece.is_empty, f"Legal move {move} starts on an empty square."
        side = piece.side
        if side is not None and move.destination.row == side.king_row:
            return piece.promoted()
        return piece
