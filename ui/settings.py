from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["debug", "info", "warning", "error"]


class GuiSettings(BaseModel):
    square_size: int = Field(default=80, ge=32, le=160, description="Edge of one board square in pixels.")
    margin: int = Field(default=40, ge=24, le=200)
    info_height: int = Field(default=150, ge=80, le=400)
    fps: int = Field(default=60, ge=1, le=240)
    log_level: LogLevel = "info"
    caption: str = Field(default="Checkers", min_length=1)

    def board_pixels(self, board_size: int) -> int:
        return self.square_size * board_size

    def window_size(self, board_size: int) -> tuple[int, int]:
        side = self.board_pixels(board_size) + self.margin * 2
        return side, side + self.info_height
