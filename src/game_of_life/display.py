import time
from typing import List, Tuple

import pygame
from loguru import logger

from game_of_life.board import Board, Cell
from game_of_life.settings import DisplaySettings

Rect = Tuple[int, int, int, int]


def cell_rects(
    board: Board, window_width: int, window_height: int, border_size: int = 1
) -> List[Rect]:
    """Return ``(x, y, width, height)`` for every live cell that is big enough to draw."""
    if board.width == 0 or board.height == 0:
        return []

    cell_height = window_height // board.height
    cell_width = window_width // board.width
    width = cell_width - 2 * border_size
    height = cell_height - 2 * border_size
    # Avoid drawing zero-size or negative rectangles
    if width <= 0 or height <= 0:
        return []

    rects = []
    for row in range(board.height):
        for col in range(board.width):
            if board.get(row, col) is Cell.ALIVE:
                x = col * cell_width + border_size
                y = row * cell_height + border_size
                rects.append((x, y, width, height))
    return rects


def run_display(
    board: Board,
    settings: DisplaySettings | None = None,
    max_generations: int | None = None,
) -> Board:
    """Show the board in a pygame window, stepping it until the window is closed.

    Esc or q also quits. When ``max_generations`` is given the loop stops after
    that many steps. Returns the last board shown.
    """
    settings = settings or DisplaySettings()

    pygame.init()
    window = pygame.display.set_mode((settings.window_width, settings.window_height))
    pygame.display.set_caption("Conway's Game of Life")

    cell_fill_color = pygame.Color(settings.cell_color)
    background_fill_color = pygame.Color(settings.background_color)

    generation = 0
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False

            window.fill(background_fill_color)
            for rect in cell_rects(board, settings.window_width, settings.window_height):
                pygame.draw.rect(window, cell_fill_color, rect)
            pygame.display.flip()

            if max_generations is not None and generation >= max_generations:
                break

            time.sleep(settings.pause)
            board = board.step()
            generation += 1
    finally:
        pygame.quit()

    logger.info(f"Display closed after {generation} generations")
    return board
