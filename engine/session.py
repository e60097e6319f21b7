from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .move import Move, Position
from .result import MoveResult, MoveStatus

if TYPE_CHECKING:
    from .game import Game

logger = logging.getLogger(__name__)


class SelectionSession:
    """Turns a stream of clicked squares into submitted moves.

    The first pick is held as the tentative source, the second is the
    destination. After the second pick the selection is cleared whether or
    not the move was accepted. Only the game's public API is used.
    """

    def __init__(self, game: "Game") -> None:
        self.game = game
        self.source: Optional[Position] = None

    @property
    def pending(self) -> bool:
        return self.source is not None

    def reset(self) -> None:
        self.source = None

    def select(self, position: tuple[int, int]) -> Optional[MoveResult]:
        position = Position(*position)
        if not self.game.isValidPosition(position):
            logger.debug("Ignoring selection outside the board: %s", position)
            self.reset()
            return MoveResult.rejected(MoveStatus.OUT_OF_BOUNDS, None, self.game.currentTurn())

        if self.source is None:
            self.source = position
            return None

        move = Move(self.source, position)
        self.reset()
        return self.game.submitMove(move)
