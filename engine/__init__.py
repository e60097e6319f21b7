"""Checkers rules engine."""

from .board import BOARD_SIZE, Board
from .errors import CheckersError, IllegalMoveError, OutOfBoundsError
from .executor import MoveExecutor, TurnState
from .game import Game
from .generator import MoveGenerator
from .move import Direction, Move, Position
from .pieces import PieceKind, Side
from .result import MoveResult, MoveStatus
from .session import SelectionSession

__all__ = [
	"BOARD_SIZE",
	"Board",
	"CheckersError",
	"Direction",
	"Game",
	"IllegalMoveError",
	"Move",
	"MoveExecutor",
	"MoveGenerator",
	"MoveResult",
	"MoveStatus",
	"OutOfBoundsError",
	"PieceKind",
	"Position",
	"SelectionSession",
	"Side",
	"TurnState",
]
