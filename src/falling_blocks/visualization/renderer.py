from __future__ import annotations

from typing import Tuple

import pygame

from falling_blocks.game import FallingBlocksGame
from falling_blocks.game.pieces import color_for


BACKGROUND: Tuple[int, int, int] = (128, 128, 128)
GRID_BACKGROUND: Tuple[int, int, int] = (0, 0, 0)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)


class Renderer:
    """Draws the field centred in the window, row 0 at the bottom."""

    def __init__(self, cell_size: int = 30, font_size: int = 40) -> None:
        self.cell_size = cell_size
        self.font_size = font_size
        self._font = None

    def _origin(self, screen: pygame.Surface, game: FallingBlocksGame) -> Tuple[int, int]:
        width = game.grid.width * self.cell_size
        height = game.grid.visible_height * self.cell_size
        return (screen.get_width() - width) // 2, (screen.get_height() - height) // 2

    def _draw_field(self, screen: pygame.Surface, game: FallingBlocksGame) -> None:
        x0, y0 = self._origin(screen, game)
        rows = game.grid.visible_height
        field = pygame.Rect(x0, y0, game.grid.width * self.cell_size, rows * self.cell_size)
        pygame.draw.rect(screen, GRID_BACKGROUND, field)
        for x, y, kind in game.cells():
            rect = pygame.Rect(
                x0 + x * self.cell_size,
                y0 + (rows - 1 - y) * self.cell_size,
                self.cell_size,
                self.cell_size,
            )
            pygame.draw.rect(screen, color_for(kind), rect)

    def _draw_game_over(self, screen: pygame.Surface, game: FallingBlocksGame) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, self.font_size)
        lines = [f"Game Over! Score: {game.score}", "Press any key to play again"]
        line_h = self._font.get_linesize()
        top = screen.get_height() // 2 - line_h * len(lines) // 2
        for i, txt in enumerate(lines):
            img = self._font.render(txt, True, TEXT_COLOR)
            rect = img.get_rect(center=(screen.get_width() // 2, top + i * line_h + line_h // 2))
            screen.blit(img, rect)

    def draw(self, screen: pygame.Surface, game: FallingBlocksGame) -> None:
        screen.fill(BACKGROUND)
        self._draw_field(screen, game)
        if game.game_over:
            self._draw_game_over(screen, game)
        pygame.display.flip()
