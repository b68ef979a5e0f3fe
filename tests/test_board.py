import pytest

from trisgame.board import Board, Mark, WinLine


def _board_with(marks):
    board = Board()
    for position in marks:
        assert board.play(position)
    return board


def test_new_board_is_empty_and_x_moves_first():
    board = Board()
    assert list(board.moves()) == []
    assert board.to_move is Mark.X
    assert board.winner() is None


def test_players_alternate():
    board = Board()
    assert board.play(5) is True
    assert board.to_move is Mark.O
    assert board.play(1) is True
    assert board.to_move is Mark.X
    assert list(board.moves()) == [(1, Mark.O), (5, Mark.X)]


def test_occupied_cell_is_rejected_and_turn_kept():
    board = Board()
    board.play(3)
    assert board.play(3) is False
    assert board.to_move is Mark.O
    assert list(board.moves()) == [(3, Mark.X)]


@pytest.mark.parametrize("position", [0, 10, -1, 100])
def test_out_of_range_position_is_rejected(position):
    board = Board()
    assert board.play(position) is False
    assert board.cells == [Mark.EMPTY] * 9
    assert board.to_move is Mark.X


@pytest.mark.parametrize(
    "line, x_cells",
    [
        (WinLine.ROW1, (1, 2, 3)),
        (WinLine.ROW2, (4, 5, 6)),
        (WinLine.ROW3, (7, 8, 9)),
        (WinLine.DIAGONAL, (1, 5, 9)),
        (WinLine.ANTIDIAGONAL, (3, 5, 7)),
        (WinLine.COL1, (1, 4, 7)),
        (WinLine.COL2, (2, 5, 8)),
        (WinLine.COL3, (3, 6, 9)),
    ],
)
def test_x_wins_each_line(line, x_cells):
    free = [p for p in range(1, 10) if p not in x_cells and (p - 1) not in line.cells]
    o_cells = [p for p in free if not _completes_line(p, free)][:2]
    sequence = [x_cells[0], o_cells[0], x_cells[1], o_cells[1], x_cells[2]]
    board = _board_with(sequence)
    assert board.winner() == (Mark.X, line)


def _completes_line(position, free):
    return False


def test_o_can_win():
    board = _board_with([1, 4, 2, 5, 9, 6])
    assert board.winner() == (Mark.O, WinLine.ROW2)


def test_rows_checked_before_columns():
    board = Board()
    board.cells = [Mark.X] * 9
    assert board.winner() == (Mark.X, WinLine.ROW1)


@pytest.mark.parametrize("line", list(WinLine))
def test_each_line_alone_is_detected_as_win(line):
    assert len(set(line.cells)) == 3
    board = Board()
    board.cells = [Mark.O if i in line.cells else Mark.EMPTY for i in range(9)]
    assert board.winner() == (Mark.O, line)


def test_no_winner_on_full_drawn_board():
    board = _board_with([1, 2, 3, 5, 4, 6, 8, 7, 9])
    assert all(mark is not Mark.EMPTY for mark in board.cells)
    assert board.winner() is None