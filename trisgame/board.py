"""Tic-tac-toe board state, move handling and win detection."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterator


class Mark(IntEnum):
    """Content of a cell."""

    EMPTY = 0
    X = 1
    O = 2


class WinLine(IntEnum):
    """The eight winning lines, in the order they are checked."""

    ROW1 = 1
    ROW2 = 2
    ROW3 = 3
    DIAGONAL = 4
    ANTIDIAGONAL = 5
    COL1 = 6
    COL2 = 7
    COL3 = 8

    @property
    def cells(self) -> tuple[int, int, int]:
        """Zero-based indices of the cells forming this line."""
        return _LINE_CELLS[self]


_LINE_CELLS = {
    WinLine.ROW1: (0, 1, 2),
    WinLine.ROW2: (3, 4, 5),
    WinLine.ROW3: (6, 7, 8),
    WinLine.DIAGONAL: (0, 4, 8),
    WinLine.ANTIDIAGONAL: (2, 4, 6),
    WinLine.COL1: (0, 3, 6),
    WinLine.COL2: (1, 4, 7),
    WinLine.COL3: (2, 5, 8),
}


class Board:
    """A 3x3 board with cells numbered 1 to 9, row by row; X moves first."""

    SIZE = 9

    def __init__(self) -> None:
        self.cells: list[Mark] = [Mark.EMPTY] * self.SIZE
        self.to_move: Mark = Mark.X

    def play(self, position: int) -> bool:
        """Place the current player's mark at ``position`` (1-9).

        Returns False, leaving the board untouched, when the position is
        out of range or already taken; otherwise places the mark, passes
        the turn and returns True.
        """
        if not 1 <= position <= self.SIZE:
            return False
        index = position - 1
        if self.cells[index] is not Mark.EMPTY:
            return False
        self.cells[index] = self.to_move
        self.to_move = Mark.O if self.to_move is Mark.X else Mark.X
        return True

    def winner(self) -> tuple[Mark, WinLine] | None:
        """Return the winning mark and line, or None if nobody has won."""
        for line in WinLine:
            a, b, c = line.cells
            mark = self.cells[a]
            if mark is not Mark.EMPTY and mark == self.cells[b] == self.cells[c]:
                return mark, line
        return None

    def moves(self) -> Iterator[tuple[int, Mark]]:
        """Yield ``(position, mark)`` for every occupied cell, in cell order."""
        for position, mark in enumerate(self.cells, start=1):
            if mark is not Mark.EMPTY:
                yield position, mark