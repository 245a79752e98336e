"""Board placement, enumeration, win/draw detection and cloning."""

import pytest

from Battle_TicTacToe.Board import Board
from Battle_TicTacToe.Player import Move, Player


def snapshot(board):
    return [row[:] for row in board.cells]


def test_play_rejects_occupied_and_out_of_bounds_without_mutation():
    b = Board(3, 3, 3)
    p1 = Player("P1")
    p2 = Player("P2")
    assert b.play(p1, 1, 1)

    before = snapshot(b)
    assert not b.play(p2, 1, 1)
    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)]:
        assert not b.play(p2, x, y)
    assert b.cells == before
    assert b.cells[1][1] is p1


def test_available_moves_counts_empty_cells():
    b = Board(4, 3, 3)
    p = Player("P")
    assert len(b.available_moves()) == 12
    for k, (x, y) in enumerate([(0, 0), (3, 2), (1, 2), (2, 0)], start=1):
        b.play(p, x, y)
        assert len(b.available_moves()) == 4 * 3 - k
        assert b.occupied_count() == k
    assert Move(0, 0) not in b.available_moves()


def test_available_moves_are_column_major():
    b = Board(2, 3, 2)
    assert b.available_moves() == [
        Move(0, 0), Move(0, 1), Move(0, 2),
        Move(1, 0), Move(1, 1), Move(1, 2),
    ]


def test_horizontal_win():
    b = Board(3, 3, 3)
    p = Player("P")
    for x in range(3):
        b.play(p, x, 0)
    assert b.check_win() is p


@pytest.mark.parametrize(
    "cells",
    [
        [(0, 0), (0, 1), (0, 2)],  # vertical
        [(0, 0), (1, 1), (2, 2)],  # down-right
        [(0, 2), (1, 1), (2, 0)],  # up-right
    ],
)
def test_other_directions_win(cells):
    b = Board(3, 3, 3)
    p = Player("P")
    for x, y in cells:
        b.play(p, x, y)
    assert b.check_win() is p


def test_alternating_full_board_is_draw():
    b = Board(3, 3, 3)
    p1 = Player("P1")
    p2 = Player("P2")
    moves = [
        (p1, 0, 0), (p2, 1, 0), (p1, 2, 0),
        (p1, 0, 1), (p2, 1, 1), (p1, 2, 1),
        (p2, 0, 2), (p1, 1, 2), (p2, 2, 2),
    ]
    for p, x, y in moves:
        assert b.play(p, x, y)
    assert b.check_win() is None
    assert b.check_draw()


def test_same_name_players_are_distinct():
    b = Board(3, 3, 3)
    a = Player("Same")
    b_player = Player("Same")
    b.play(a, 0, 0)
    b.play(b_player, 1, 0)
    b.play(a, 2, 0)
    assert b.check_win() is None


def test_n_in_a_row_on_wider_board():
    b = Board(5, 4, 4)
    p = Player("P")
    for x in range(1, 4):
        b.play(p, x, 3)
    assert b.check_win() is None
    b.play(p, 4, 3)
    assert b.check_win() is p


@pytest.mark.parametrize("to_win", [0, -2, 4, 10])
def test_invalid_to_win_is_clamped_to_smaller_side(to_win):
    b = Board(3, 5, to_win)
    assert b.effective_to_win() == 3
    p = Player("P")
    for y in range(1, 4):
        b.play(p, 1, y)
    assert b.check_win() is p


def test_clone_is_independent_but_shares_players():
    b = Board(3, 3, 3)
    p1 = Player("P1")
    p2 = Player("P2")
    b.play(p1, 0, 0)

    c = b.clone()
    assert c.cells == b.cells
    assert c.cells[0][0] is p1

    c.play(p2, 1, 1)
    assert b.is_empty(1, 1)
    b.play(p2, 2, 2)
    assert c.is_empty(2, 2)


def test_clear_keeps_identity_and_geometry():
    b = Board(4, 4, 3)
    rows = b.cells
    p = Player("P")
    b.play(p, 0, 0)
    b.play(p, 3, 3)
    b.clear()
    assert b.cells is rows
    assert len(b.available_moves()) == 16
    assert (b.width, b.height, b.to_win) == (4, 4, 3)


def test_get_and_is_empty_are_bounds_checked():
    b = Board(2, 2, 2)
    assert b.get(5, 5) is None
    assert not b.is_empty(-1, 0)
    assert b.is_empty(1, 1)


def test_two_completed_lines_report_first_in_scan_order():
    b = Board(3, 3, 3)
    a = Player("A")
    c = Player("C")
    for y in range(3):
        b.play(c, 2, y)
        b.play(a, 0, y)
    assert b.check_win() is a
