from __future__ import annotations

import logging

from .board import Board
from .move import JUMP_LENGTH, Direction, Move, Position
from .pieces import Side

logger = logging.getLogger(__name__)


class MoveGenerator:
    """Legal ordinary moves and jumps for the side to move.

    Both lists are rebuilt whenever the turn context changes. While
    ``legal_jumps`` is non-empty, captures are mandatory and ``legal_moves``
    must not be used to validate a submission.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.legal_moves: list[Move] = []
        self.legal_jumps: list[Move] = []

    @property
    def jump_required(self) -> bool:
        return bool(self.legal_jumps)

    def clear(self) -> None:
        self.legal_moves.clear()
        self.legal_jumps.clear()

    def populate(self, side: Side) -> None:
        self.clear()
        for position, _ in self.board.pieces(side):
            self.evaluate_position(position, side)

    def evaluate_position(self, position: Position, side: Side) -> None:
        logger.debug("Evaluating moves for %s", position)
        for direction in self.board.getPiece(position).directions:
            self.add_move_for_direction(position, direction)
            self.add_jump_for_direction(position, direction, side)

    def add_move_for_direction(self, position: Position, direction: Direction) -> bool:
        target = position.translated(direction)
        if not self.board.is_within_bounds(target):
            return False
        if not self.board.getPiece(target).is_empty:
            return False
        logger.debug("Added valid destination: %s", target)
        self.legal_moves.append(Move(position, target))
        return True

    def add_jump_for_direction(self, position: Position, direction: Direction, side: Side) -> bool:
        middle = position.translated(direction)
        landing = position.translated(direction, JUMP_LENGTH)
        if not (self.board.is_within_bounds(middle) and self.board.is_within_bounds(landing)):
            return False
        if not self.contains_enemy_piece(middle, side):
            return False
        if not self.board.getPiece(landing).is_empty:
            return False
        logger.debug("Added valid jump destination: %s", landing)
        self.legal_jumps.append(Move(position, landing))
        return True

    def add_jumps_from_jump(self, jump: Move, side: Side) -> None:
        """Append the jumps that continue a chain from ``jump``'s landing square.

        Looks along the jump's own direction and its horizontal mirror. A king
        standing on the landing square also looks along the vertical mirror,
        so a man promoted by this jump already counts as a king here.
        """
        landing = jump.destination
        direction = Direction(jump.direction)
        candidates = [direction, direction.mirrored_horizontal()]
        if self.board.getPiece(landing).is_king:
            candidates.append(direction.mirrored_vertical())
        for candidate in candidates:
            self.add_jump_for_direction(landing, candidate, side)

    def contains_enemy_piece(self, position: Position, side: Side) -> bool:
        if not self.board.is_within_bounds(position):
            return False
        occupant = self.board.getPiece(position).side
        return occupant is not None and occupant is not side

    def is_legal_move(self, move: Move) -> bool:
        return move in self.legal_moves

    def is_legal_jump(self, move: Move) -> bool:
        return move in self.legal_jumps

    def destinations_from(self, position: Position) -> list[Position]:
        """Squares the piece on ``position`` may be submitted to right now."""
        candidates = self.legal_jumps if self.jump_required else self.legal_moves
        return [move.destination for move in candidates if move.source == position]
