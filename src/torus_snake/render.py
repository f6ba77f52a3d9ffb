from typing import Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import CELL_SIZE, HEADER_H, BG, YELLOWGREEN, DARKORANGE, TEXT
from .game import CellType, GameSession

COLORS = {
    CellType.PATH: YELLOWGREEN,
    CellType.FOOD: DARKORANGE,
}


def window_size(session: GameSession) -> Tuple[int, int]:
    return session.grid.width * CELL_SIZE, session.grid.height * CELL_SIZE + HEADER_H


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int],
              radius: int) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, HEADER_H + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect.inflate(-4, -4), border_radius=radius)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    screen.fill(BG)
    grid = session.snapshot()
    for gy, gx in np.argwhere(grid != CellType.EMPTY):
        kind = CellType(int(grid[gy, gx]))
        # food is round, path segments slightly rounded
        radius = CELL_SIZE // 2 if kind is CellType.FOOD else 8
        draw_cell(screen, int(gx), int(gy), COLORS[kind], radius)
    # score
    txt = font.render(f"Score: {session.score}", True, TEXT)
    screen.blit(txt, (8, 6))
