from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import IllegalMoveError, OutOfBoundsError
from .move import Move, Position
from .pieces import Side


class MoveStatus(str, Enum):
    APPLIED = "applied"
    ILLEGAL_MOVE = "illegal_move"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True, slots=True)
class MoveResult:
    status: MoveStatus
    move: Optional[Move]
    side_to_move: Side
    is_jump: bool = False
    captured: Optional[Position] = None
    promoted: bool = False
    turn_ended: bool = False

    @classmethod
    def rejected(cls, status: MoveStatus, move: Optional[Move], side_to_move: Side) -> "MoveResult":
        return cls(status=status, move=move, side_to_move=side_to_move)

    @property
    def applied(self) -> bool:
        return self.status is MoveStatus.APPLIED

    @property
    def chain_continues(self) -> bool:
        return self.applied and self.is_jump and not self.turn_ended

    def raise_for_status(self) -> None:
        if self.status is MoveStatus.OUT_OF_BOUNDS:
            raise OutOfBoundsError(f"Move {self.move} leaves the board.")
        if self.status is MoveStatus.ILLEGAL_MOVE:
            raise IllegalMoveError(f"Move {self.move} is not legal for {self.side_to_move.value}.")

    def __bool__(self) -> bool:
        return self.applied
