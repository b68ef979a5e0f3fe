# trisgame

A game of tris (tic-tac-toe) for two players. It is drawn in a pygame window.

## Install

```
pip install .
```

## Play

```
trisgame
```

At start-up the game asks for the window size in the terminal. Press Enter
at a prompt to keep the default size of 1920x1080. To use a different size,
type a whole number at the prompt. Before opening the window, the game prints
the resolution, the scale and the font sizes it will use.

The board has nine cells. They are numbered 1 to 9, starting at the top-left
and going across each row:

```
1 | 2 | 3
4 | 5 | 6
7 | 8 | 9
```

- Press a number key from 1 to 9 to put a mark in that cell. X plays first
  and is drawn in green. O is drawn in red.
- Pressing the key of a cell that is already taken does nothing.
- Three of the same mark in a row, column or diagonal wins. A thick yellow
  line is drawn through them, and the game closes ten seconds later.
- Press Escape or close the window to end the game at any time.

The game first tries a few common system TrueType fonts. If none of them
loads, it uses pygame's built-in font. If the window cannot be opened, the
command prints an error and exits with status 1.

## What it does not do

- Both players use the same keyboard. There is no computer opponent and no
  network play.
- The game does not recognise a draw. When the board is full and nobody has
  won, the window stays open until you press Escape or close it.
- The window has a fixed size and cannot be resized. Each game is a single
  game: there is no score and no restart.

## Use from Python

The rules are in `trisgame.board`, and they do not need a display:

```python
from trisgame.board import Board

board = Board()
for cell in (1, 4, 2, 5, 3):
    board.play(cell)
print(board.winner())   # (<Mark.X: 1>, <WinLine.ROW1: 1>)
```

- `Board.play(position)` returns whether the move was accepted.
- `Board.winner()` returns the winning `Mark` and the `WinLine` it lies on. It returns `None` while no line is complete.
- `Board.moves()` yields `(position, mark)` for each occupied cell.

The screen geometry is in `trisgame.render.Layout`. The drawing functions are
`draw_background` and `draw_all`. `trisgame.app.run(width, height)` opens the
window and runs the game loop.

## Tests

```
pip install .[test]
pytest
```