"""Two-player tic-tac-toe: board rules, screen layout and a pygame game window."""

__version__ = "0.1.0"