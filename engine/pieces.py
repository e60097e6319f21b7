from __future__ import annotations

from enum import Enum
from typing import Optional

from .move import Direction


class Side(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        # White starts on rows 0-2 and heads south; black heads north.
        return 1 if self is Side.WHITE else -1

    @property
    def king_row(self) -> int:
        return 7 if self is Side.WHITE else 0

    @property
    def label(self) -> str:
        return self.value.capitalize()


_ALL_DIRECTIONS = (
    Direction.NORTH_WEST,
    Direction.NORTH_EAST,
    Direction.SOUTH_WEST,
    Direction.SOUTH_EAST,
)


class PieceKind(Enum):
    """Content of a single board cell.

    Values double as the one-character text form used by ``Board.from_rows``.
    """

    BLACK_MAN = "b"
    WHITE_MAN = "w"
    BLACK_KING = "B"
    WHITE_KING = "W"
    EMPTY = "."

    @property
    def is_empty(self) -> bool:
        return self is PieceKind.EMPTY

    @property
    def is_king(self) -> bool:
        return self in (PieceKind.BLACK_KING, PieceKind.WHITE_KING)

    @property
    def side(self) -> Optional[Side]:
        if self in (PieceKind.BLACK_MAN, PieceKind.BLACK_KING):
            return Side.BLACK
        if self in (PieceKind.WHITE_MAN, PieceKind.WHITE_KING):
            return Side.WHITE
        return None

    @property
    def directions(self) -> tuple[Direction, ...]:
        """Diagonals this piece may move or capture along."""
        side = self.side
        if side is None:
            return ()
        if self.is_king:
            return _ALL_DIRECTIONS
        return tuple(d for d in _ALL_DIRECTIONS if d.vertical == side.forward)

    def promoted(self) -> "PieceKind":
        if self is PieceKind.BLACK_MAN:
            return PieceKind.BLACK_KING
        if self is PieceKind.WHITE_MAN:
            return PieceKind.WHITE_KING
        return self

    @classmethod
    def man(cls, side: Side) -> "PieceKind":
        return cls.WHITE_MAN if side is Side.WHITE else cls.BLACK_MAN

    @classmethod
    def king(cls, side: Side) -> "PieceKind":
        return cls.WHITE_KING if side is Side.WHITE else cls.BLACK_KING
