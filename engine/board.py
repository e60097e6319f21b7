from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .errors import OutOfBoundsError
from .move import Position
from .pieces import PieceKind, Side

BOARD_SIZE = 8
START_ROWS = 3

BoardRows = tuple[str, ...]


class Board:
    """8x8 grid of ``PieceKind`` values. Storage only, no rules."""

    def __init__(self) -> None:
        self.boardSize = BOARD_SIZE
        self.board: list[list[PieceKind]] = [
            [PieceKind.EMPTY for _ in range(self.boardSize)] for _ in range(self.boardSize)
        ]

    @classmethod
    def standard(cls) -> "Board":
        board = cls()
        board.set_start_pieces()
        return board

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """Build a board from eight strings of ``PieceKind`` characters.

        Spaces are ignored, so rows may be written as ``". w . w . w . w"``.
        """
        board = cls()
        cleaned = [row.replace(" ", "") for row in rows]
        if len(cleaned) != board.boardSize:
            raise ValueError(f"Expected {board.boardSize} rows, got {len(cleaned)}.")
        for row, text in enumerate(cleaned):
            if len(text) != board.boardSize:
                raise ValueError(f"Row {row} must have {board.boardSize} cells: {text!r}")
            for col, char in enumerate(text):
                try:
                    board.board[row][col] = PieceKind(char)
                except ValueError as exc:
                    raise ValueError(f"Unknown piece character {char!r} at {row}, {col}.") from exc
        return board

    def to_rows(self) -> BoardRows:
        return tuple("".join(kind.value for kind in row) for row in self.board)

    def getPiece(self, position: Position) -> PieceKind:
        row, col = self._require_within_bounds(position)
        return self.board[row][col]

    def setPiece(self, position: Position, kind: PieceKind) -> None:
        row, col = self._require_within_bounds(position)
        self.board[row][col] = kind

    def is_within_bounds(self, position: tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    @staticmethod
    def is_playable(position: tuple[int, int]) -> bool:
        row, col = position
        return (row + col) % 2 == 1

    def positions(self) -> Iterator[Position]:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                yield Position(row, col)

    def pieces(self, side: Optional[Side] = None) -> list[tuple[Position, PieceKind]]:
        """Occupied cells in row-major order, optionally for one side."""
        found: list[tuple[Position, PieceKind]] = []
        for position in self.positions():
            kind = self.board[position.row][position.col]
            if kind.is_empty:
                continue
            if side is not None and kind.side is not side:
                continue
            found.append((position, kind))
        return found

    def count(self, side: Side, *, kings_only: bool = False) -> int:
        return sum(1 for _, kind in self.pieces(side) if kind.is_king or not kings_only)

    def clear(self) -> None:
        for row in self.board:
            for col in range(self.boardSize):
                row[col] = PieceKind.EMPTY

    def set_start_pieces(self) -> None:
        self.clear()
        for position in self.positions():
            if not self.is_playable(position):
                continue
            if position.row >= self.boardSize - START_ROWS:
                self.setPiece(position, PieceKind.BLACK_MAN)
            elif position.row < START_ROWS:
                self.setPiece(position, PieceKind.WHITE_MAN)

    def copy(self) -> "Board":
        clone = Board()
        clone.board = [list(row) for row in self.board]
        return clone

    def _require_within_bounds(self, position: tuple[int, int]) -> tuple[int, int]:
        if not self.is_within_bounds(position):
            raise OutOfBoundsError(
                f"Position {tuple(position)} is outside the {self.boardSize}x{self.boardSize} board."
            )
        return position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.board == other.board

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.to_rows())

    def __repr__(self) -> str:
        return f"Board({self.to_rows()!r})"
