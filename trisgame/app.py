"""Command-line entry point: asks the screen size and runs the game window."""

from __future__ import annotations

import argparse
import re
import sys
import time
from typing import Callable

import pygame

from trisgame.board import Board
from trisgame.render import BASE_HEIGHT, Layout, draw_all, draw_background

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
FPS = 30
WIN_PAUSE_SECONDS = 10

FONT_PATHS = (
    "/System/Library/Fonts/Helvetica.ttc",
    "/System/Library/Fonts/SFNSText.ttf",
    "/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
)

_KEY_POSITIONS = {
    key: position
    for position, key in enumerate(
        (
            pygame.K_1,
            pygame.K_2,
            pygame.K_3,
            pygame.K_4,
            pygame.K_5,
            pygame.K_6,
            pygame.K_7,
            pygame.K_8,
            pygame.K_9,
        ),
        start=1,
    )
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def ask_screen_size(
    width: int,
    height: int,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> tuple[int, int]:
    """Prompt for width and height; an answer without a number keeps the default."""
    write(f"DIMENSIONI SCHERMO (Invio per usare i default {width}x{height}):\n")
    write(f"Larghezza [{width}]: ")
    answer = _leading_int(read())
    if answer is not None:
        width = answer
    write(f"Altezza [{height}]: ")
    answer = _leading_int(read())
    if answer is not None:
        height = answer
    return width, height


def font_sizes(height: int) -> tuple[int, int]:
    """Normal and large font sizes for a screen of the given height."""
    return height // 36, height // 22


def scale_factor(height: int) -> float:
    """Scale relative to the reference height."""
    return height / BASE_HEIGHT


def _load_font(size: int, label: str):
    for path in FONT_PATHS:
        try:
            return pygame.font.Font(path, size)
        except (OSError, pygame.error):
            continue
    print(f"Avviso: impossibile caricare font {label}TTF, uso builtin", file=sys.stderr)
    return pygame.font.Font(None, size)


def _play(screen, layout: Layout, board: Board, font, font_large) -> None:
    clock = pygame.time.Clock()
    redraw = True
    while True:
        for event in pygame.event.get() or [pygame.event.wait(1000 // FPS)]:
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return
                position = _KEY_POSITIONS.get(event.key)
                if position is not None:
                    redraw = board.play(position)
        won = board.winner() is not None
        if redraw:
            redraw = False
            draw_all(screen, layout, board, font, font_large)
            pygame.display.flip()
        if won:
            time.sleep(WIN_PAUSE_SECONDS)
            return
        clock.tick(FPS)


def run(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
    """Open the game window and play until it is closed, Escape or a win."""
    pygame.init()
    try:
        print(f"Risoluzione: {width}x{height} (scala: {scale_factor(height):.2f})")
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Tris Game")
        size, large_size = font_sizes(height)
        print(f"Dimensioni font: normale={size}, grande={large_size}")
        font = _load_font(size, "")
        font_large = _load_font(large_size, "large ")
        layout = Layout(width, height)
        board = Board()
        draw_background(screen, layout, font, font_large)
        pygame.display.flip()
        _play(screen, layout, board, font, font_large)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Ask for the screen size on the terminal, then run the game."""
    parser = argparse.ArgumentParser(prog="trisgame", description="Tic-tac-toe for two players.")
    parser.parse_args(argv)

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    width, height = ask_screen_size(DEFAULT_WIDTH, DEFAULT_HEIGHT, sys.stdin.readline, write)
    try:
        run(width, height)
    except pygame.error as exc:
        print(f"Errore: impossibile creare display! ({exc})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())