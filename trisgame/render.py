"""Screen geometry and drawing of the board."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from trisgame.board import Board, Mark, WinLine

BASE_HEIGHT = 720.0
MARGIN = 100.0

GRID_COLOUR = (255, 200, 50)
X_COLOUR = (0, 255, 0)
O_COLOUR = (255, 0, 0)
WIN_COLOUR = (255, 255, 0)
BACKGROUND_COLOUR = (0, 0, 0)
TITLE = "TRIS GAME"

Point = tuple[float, float]
Segment = tuple[Point, Point]


@dataclass(frozen=True)
class Layout:
    """Positions of everything drawn on a screen of the given size."""

    width: int
    height: int
    margin: float = MARGIN

    @property
    def cell_width(self) -> int:
        return self.width // 3

    @property
    def cell_height(self) -> int:
        return self.height // 3

    @property
    def scale(self) -> float:
        return self.height / BASE_HEIGHT

    @property
    def title_position(self) -> Point:
        """Horizontal centre and top of the title."""
        return self.width // 2, 10 * self.scale

    def _cell(self, position: int) -> tuple[int, int]:
        if not 1 <= position <= 9:
            raise ValueError(f"position must be between 1 and 9, not {position}")
        row, column = divmod(position - 1, 3)
        return column, row

    def _centre(self, position: int) -> Point:
        column, row = self._cell(position)
        return (
            float(self.cell_width * column + self.cell_width // 2),
            float(self.cell_height * row + self.cell_height // 2),
        )

    def grid_lines(self) -> list[Segment]:
        """The two vertical then the two horizontal grid lines."""
        m = self.margin
        vertical = [
            ((float(self.cell_width * i), m), (float(self.cell_width * i), self.height - m))
            for i in (1, 2)
        ]
        horizontal = [
            ((m, float(self.cell_height * i)), (self.width - m, float(self.cell_height * i)))
            for i in (1, 2)
        ]
        return vertical + horizontal

    def label_positions(self) -> list[tuple[str, Point]]:
        """Cell numbers with the centre-top point where each is written."""
        half = self.margin / 2
        return [
            (
                str(row * 3 + column + 1),
                (self.cell_width * column + half, self.cell_height * row + half),
            )
            for row in range(3)
            for column in range(3)
        ]

    def cross(self, position: int) -> tuple[Segment, Segment]:
        """The two strokes of an X in the given cell."""
        column, row = self._cell(position)
        m = self.margin
        x1 = self.cell_width * column + m
        y1 = self.cell_height * row + m
        x2 = self.cell_width * (column + 1) - m
        y2 = self.cell_height * (row + 1) - m
        return ((x1, y1), (x2, y2)), ((x2, y1), (x1, y2))

    def circle(self, position: int) -> tuple[Point, float]:
        """Centre and radius of an O in the given cell."""
        radius = self.cell_height // 2 - self.margin
        return self._centre(position), radius

    def win_segment(self, line: WinLine) -> Segment:
        """The stroke drawn across a winning line."""
        m = self.margin
        w, h = float(self.width), float(self.height)
        if line in (WinLine.ROW1, WinLine.ROW2, WinLine.ROW3):
            y = self._centre((line - WinLine.ROW1) * 3 + 1)[1]
            return (m, y), (w - m, y)
        if line is WinLine.DIAGONAL:
            return (m, m), (w - m, h - m)
        if line is WinLine.ANTIDIAGONAL:
            return (w - m, m), (m, h - m)
        x = self._centre(line - WinLine.COL1 + 1)[0]
        return (x, m), (x, h - m)


def _draw_centred_text(surface, font, text: str, point: Point, colour) -> None:
    image = font.render(text, True, colour)
    x, y = point
    surface.blit(image, (x - image.get_width() / 2, y))


def draw_background(surface, layout: Layout, font, font_large) -> None:
    """Clear the surface and draw the title, the grid and the cell numbers."""
    surface.fill(BACKGROUND_COLOUR)
    _draw_centred_text(surface, font_large, TITLE, layout.title_position, GRID_COLOUR)
    for start, end in layout.grid_lines():
        pygame.draw.line(surface, GRID_COLOUR, start, end, 1)
    for text, point in layout.label_positions():
        _draw_centred_text(surface, font, text, point, GRID_COLOUR)


def draw_all(surface, layout: Layout, board: Board, font, font_large) -> None:
    """Draw the background, every move and the winning line, if any."""
    draw_background(surface, layout, font, font_large)
    for position, mark in board.moves():
        if mark is Mark.X:
            for start, end in layout.cross(position):
                pygame.draw.line(surface, X_COLOUR, start, end, 1)
        else:
            centre, radius = layout.circle(position)
            pygame.draw.circle(surface, O_COLOUR, centre, radius, 1)
    result = board.winner()
    if result is not None:
        start, end = layout.win_segment(result[1])
        pygame.draw.line(surface, WIN_COLOUR, start, end, 5)