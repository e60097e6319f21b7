from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

MOVE_LENGTH = 1
JUMP_LENGTH = 2


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Direction(Enum):
    """Diagonal unit vectors as (vertical, horizontal).

    North is decreasing row, south is increasing row.
    """

    NORTH_WEST = (-1, -1)
    NORTH_EAST = (-1, 1)
    SOUTH_WEST = (1, -1)
    SOUTH_EAST = (1, 1)

    @property
    def vertical(self) -> int:
        return self.value[0]

    @property
    def horizontal(self) -> int:
        return self.value[1]

    def mirrored_horizontal(self) -> "Direction":
        return Direction((self.vertical, -self.horizontal))

    def mirrored_vertical(self) -> "Direction":
        return Direction((-self.vertical, self.horizontal))


class Position(NamedTuple):
    row: int
    col: int

    def translated(self, direction: Direction, length: int = MOVE_LENGTH) -> "Position":
        return Position(
            self.row + length * direction.vertical,
            self.col + length * direction.horizontal,
        )

    def __str__(self) -> str:
        return f"{self.row} , {self.col}"


@dataclass(frozen=True, slots=True)
class Move:
    source: Position
    destination: Position

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Position(*self.source))
        object.__setattr__(self, "destination", Position(*self.destination))

    @classmethod
    def between(cls, source: tuple[int, int], destination: tuple[int, int]) -> "Move":
        return cls(Position(*source), Position(*destination))

    @property
    def direction(self) -> tuple[int, int]:
        return (
            _sign(self.destination.row - self.source.row),
            _sign(self.destination.col - self.source.col),
        )

    @property
    def length(self) -> int:
        return max(
            abs(self.destination.row - self.source.row),
            abs(self.destination.col - self.source.col),
        )

    @property
    def is_diagonal(self) -> bool:
        return abs(self.destination.row - self.source.row) == abs(
            self.destination.col - self.source.col
        ) != 0

    @property
    def is_jump(self) -> bool:
        return self.is_diagonal and self.length == JUMP_LENGTH

    @property
    def captured(self) -> Optional[Position]:
        """Midpoint of a jump; None for anything that is not a jump."""
        if not self.is_jump:
            return None
        return self.source.translated(Direction(self.direction))

    def __str__(self) -> str:
        connector = " x " if self.is_jump else " - "
        return f"({self.source}){connector}({self.destination})"
