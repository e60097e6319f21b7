from __future__ import annotations

import logging
from typing import Optional

import pygame
from pygame import gfxdraw

from engine.board import Board
from engine.game import Game
from engine.move import Position
from engine.pieces import PieceKind, Side
from engine.result import MoveResult

from .settings import GuiSettings

logger = logging.getLogger(__name__)


class CheckersGUI:
    """Draws board snapshots and forwards clicked squares to the game."""

    def __init__(self, game: Game, settings: Optional[GuiSettings] = None) -> None:
        self.game = game
        self.settings = settings or GuiSettings()
        self.square_size = self.settings.square_size
        self.margin = self.settings.margin
        self.board_size = self.game.getBoardSize()
        self.board_pixels = self.settings.board_pixels(self.board_size)

        self.screen = pygame.display.set_mode(self.settings.window_size(self.board_size))
        pygame.display.set_caption(self.settings.caption)

        self.font = pygame.font.SysFont("arial", 24)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.hover_cell: Optional[Position] = None
        self.last_result: Optional[MoveResult] = None
        self.piece_surfaces: dict[PieceKind, pygame.Surface] = {}

        self.colors = {
            "light": (255, 228, 170),
            "dark": (209, 139, 71),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "white_piece": (245, 245, 245),
            "black_piece": (35, 35, 35),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "info_bg": (40, 46, 60),
            "panel_border": (86, 94, 110),
            "text": (230, 230, 230),
            "warning": (240, 120, 100),
            "coordinate": (210, 210, 210),
            "king": (255, 215, 0),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        logger.info("Board reset.")
                        self.game.reset()
                        self.last_result = None
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_position_from_pixels(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw(self.game.getBoardSnapshot())
            pygame.display.flip()
            self.clock.tick(self.settings.fps)

    def _handle_click(self, pixels: tuple[int, int]) -> None:
        position = self._board_position_from_pixels(pixels)
        if position is None:
            return
        result = self.game.submitSelection(position)
        if result is None:
            return
        self.last_result = result
        if not result:
            logger.info("Rejected %s: %s", result.move, result.status.value)

    def _board_position_from_pixels(self, pixels: tuple[int, int]) -> Optional[Position]:
        x = pixels[0] - self.margin
        y = pixels[1] - self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        # Screen cells arrive as (x, y); the game swaps them into (row, col).
        return self.game.positionFromRowCol(x // self.square_size, y // self.square_size)

    def _draw(self, board: Board) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board(board)
        self._draw_selection()
        self._draw_pieces(board)
        self._draw_info_panel(board)

    def _draw_board(self, board: Board) -> None:
        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        for position in board.positions():
            color = self.colors["dark"] if Board.is_playable(position) else self.colors["light"]
            pygame.draw.rect(self.screen, color, self._rect_for_cell(position))
        pygame.draw.rect(self.screen, self.colors["outline"], board_rect, 2)
        self._draw_coordinates(board_rect)

    def _draw_coordinates(self, board_rect: pygame.Rect) -> None:
        for idx in range(self.board_size):
            label = self.small_font.render(str(idx), True, self.colors["coordinate"])
            cx = board_rect.left + idx * self.square_size + self.square_size // 2
            cy = board_rect.top + idx * self.square_size + self.square_size // 2
            self.screen.blit(label, label.get_rect(center=(cx, board_rect.top - 18)))
            self.screen.blit(label, label.get_rect(center=(board_rect.left - 18, cy)))

    def _draw_selection(self) -> None:
        source = self.game.pendingSelection()
        if source is None:
            return
        pygame.draw.rect(self.screen, self.colors["selected"], self._rect_for_cell(source), 4)

        for destination in self.game.destinationsFrom(source):
            cx, cy = self._center_for_cell(destination)
            radius = 16 if destination == self.hover_cell else 12
            gfxdraw.filled_circle(self.screen, cx, cy, radius, (*self.colors["highlight"], 140))
            gfxdraw.aacircle(self.screen, cx, cy, radius, self.colors["outline"])

    def _draw_pieces(self, board: Board) -> None:
        for position, kind in board.pieces():
            surface = self._get_piece_surface(kind)
            self.screen.blit(surface, surface.get_rect(center=self._center_for_cell(position)))

    def _draw_info_panel(self, board: Board) -> None:
        panel_top = self.margin * 2 + self.board_pixels - 16
        info_rect = pygame.Rect(self.margin, panel_top, self.board_pixels, self.settings.info_height - 24)
        pygame.draw.rect(self.screen, self.colors["info_bg"], info_rect, border_radius=12)
        pygame.draw.rect(self.screen, self.colors["panel_border"], info_rect, 2, border_radius=12)

        turn = self.game.currentTurn()
        title = self.font.render(f"{turn.label} to move", True, self.colors["text"])
        self.screen.blit(title, (info_rect.left + 20, info_rect.top + 12))

        lines = [
            " | ".join(
                f"{side.label}: {board.count(side)} pieces, {board.count(side, kings_only=True)} kings"
                for side in (Side.WHITE, Side.BLACK)
            ),
            f"Mandatory capture: {'Yes' if self.game.isJumpRequired() else 'No'}",
            "R: Reset  |  Esc/Q: Quit",
        ]
        line_colors = [self.colors["text"]] * len(lines)
        if self.last_result is not None and not self.last_result:
            lines.append(f"Last attempt rejected: {self.last_result.status.value.replace('_', ' ')}")
            line_colors.append(self.colors["warning"])

        y_offset = info_rect.top + 48
        for line, color in zip(lines, line_colors):
            self.screen.blit(self.small_font.render(line, True, color), (info_rect.left + 24, y_offset))
            y_offset += 20

    def _rect_for_cell(self, position: Position) -> pygame.Rect:
        return pygame.Rect(
            self.margin + position.col * self.square_size,
            self.margin + position.row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, position: Position) -> tuple[int, int]:
        return self._rect_for_cell(position).center

    def _get_piece_surface(self, kind: PieceKind) -> pygame.Surface:
        if kind in self.piece_surfaces:
            return self.piece_surfaces[kind]

        diameter = self.square_size - 14
        radius = diameter // 2
        surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        center = (diameter // 2, diameter // 2)

        base = self.colors["white_piece"] if kind.side is Side.WHITE else self.colors["black_piece"]
        pygame.draw.circle(surface, base, center, radius)
        pygame.draw.circle(surface, self.colors["outline"], center, radius, 2)

        if kind.is_king:
            crown_color = self.colors["outline"] if kind.side is Side.WHITE else self.colors["king"]
            crown = self.king_font.render("K", True, crown_color)
            surface.blit(crown, crown.get_rect(center=center))

        self.piece_surfaces[kind] = surface
        return surface
