"""
Tests for Board class.
"""
import random

import numpy as np
import pytest
from othello.core.board import Board, new_board
from othello.core.cell import Cell
from othello.core.location import Location
from othello.core.movement import CellChange, Movement


def create_board(black=(), white=(), width=8, height=8):
    """Create a board holding only the given discs."""
    board = Board(width, height)
    for location in list(board.locations()):
        board.apply(CellChange(location, Cell.EMPTY))
    for x, y in black:
        board.apply(CellChange(Location(x, y), Cell.BLACK))
    for x, y in white:
        board.apply(CellChange(Location(x, y), Cell.WHITE))
    return board


def test_board_initialization():
    """Test that a board is initialized with the starting layout."""
    board = Board()

    assert board.width == 8
    assert board.height == 8
    assert board.state.shape == (8, 8)
    assert board.state.dtype == np.int8

    assert board.cell_at(Location(3, 3)) == Cell.BLACK
    assert board.cell_at(Location(4, 4)) == Cell.BLACK
    assert board.cell_at(Location(4, 3)) == Cell.WHITE
    assert board.cell_at(Location(3, 4)) == Cell.WHITE

    assert board.count(Cell.BLACK) == 2
    assert board.count(Cell.WHITE) == 2
    assert board.count(Cell.EMPTY) == 60
    assert board.is_terminal() == False


def test_new_board_non_square():
    """Test the starting layout pivots on width // 2, height // 2."""
    board = new_board(5, 7)

    assert board.state.shape == (7, 5)
    assert board.center == Location(2, 3)
    assert board.cell_at(Location(2, 3)) == Cell.BLACK
    assert board.cell_at(Location(1, 2)) == Cell.BLACK
    assert board.cell_at(Location(2, 2)) == Cell.WHITE
    assert board.cell_at(Location(1, 3)) == Cell.WHITE
    assert board.count(Cell.EMPTY) == 31


def test_board_too_small():
    """Test that boards smaller than 2x2 are rejected."""
    with pytest.raises(ValueError):
        Board(1, 8)
    with pytest.raises(ValueError):
        Board(8, 0)


def test_two_by_two_board_is_terminal():
    """Test that a full 2x2 starting board has no moves for anyone."""
    board = Board(2, 2)

    assert board.count(Cell.EMPTY) == 0
    assert board.is_terminal() == True
    assert board.legal_moves_for(Cell.BLACK) == []
    assert board.legal_moves_for(Cell.WHITE) == []


def test_cell_at_out_of_range():
    """Test that reading off the board is an error, including negative indices."""
    board = Board()

    with pytest.raises(IndexError):
        board.cell_at(Location(8, 0))
    with pytest.raises(IndexError):
        board.cell_at(Location(0, 8))
    with pytest.raises(IndexError):
        board.cell_at(Location(-1, 0))


def test_locations_scan_order():
    """Test that locations run left-to-right, then top-to-bottom."""
    board = Board(3, 2)

    assert list(board.locations()) == [
        Location(0, 0), Location(1, 0), Location(2, 0),
        Location(0, 1), Location(1, 1), Location(2, 1),
    ]


def test_offset_within():
    """Test the board-bound offset helper."""
    board = Board(4, 6)

    assert board.offset_within(Location(3, 5), -1, -1) == Location(2, 4)
    assert board.offset_within(Location(3, 5), 1, 0) is None
    assert board.offset_within(Location(0, 5), 0, 1) is None


def test_apply_writes_and_refreshes_counts():
    """Test that apply() writes changed cells and updates counts."""
    board = Board()

    result = board.apply(CellChange(Location(0, 0), Cell.WHITE))
    assert result == True
    assert board.cell_at(Location(0, 0)) == Cell.WHITE
    assert board.count(Cell.WHITE) == 3
    assert board.count(Cell.EMPTY) == 59

    result = board.apply(CellChange(Location(4, 3), Cell.BLACK))
    assert result == True
    assert board.count(Cell.WHITE) == 2
    assert board.count(Cell.BLACK) == 3


def test_apply_same_value_is_not_a_write():
    """Test that writing the stored value reports no change."""
    board = Board()
    before = board.state.copy()

    assert board.apply(CellChange(Location(3, 3), Cell.BLACK)) == False
    assert board.apply(CellChange(Location(0, 0), Cell.EMPTY)) == False
    assert np.array_equal(board.state, before)


def test_apply_refreshes_terminal_flag():
    """Test that the terminal flag follows writes."""
    board = create_board(black=[(0, 0)], white=[(1, 0)])
    assert board.is_terminal() == False

    board.apply(CellChange(Location(1, 0), Cell.BLACK))
    assert board.is_terminal() == True

    board.apply(CellChange(Location(1, 0), Cell.WHITE))
    assert board.is_terminal() == False


def test_opening_legal_moves():
    """Test the four opening moves for black on the standard board."""
    board = Board()

    moves = board.legal_moves_for(Cell.BLACK)

    assert len(moves) == 4
    for movement in moves:
        assert movement.is_valid()
        assert movement.captures == 1

    # Equal scores keep board scan order
    assert [m.location for m in moves] == [
        Location(4, 2), Location(5, 3), Location(2, 4), Location(3, 5),
    ]


def test_opening_legal_moves_white():
    """Test that white's opening moves mirror black's."""
    board = Board()

    locations = {m.location for m in board.legal_moves_for(Cell.WHITE)}
    assert locations == {Location(3, 2), Location(2, 3), Location(5, 4), Location(4, 5)}


def test_legal_moves_for_empty_cell():
    """Test that EMPTY never has moves."""
    board = Board()
    assert board.legal_moves_for(Cell.EMPTY) == []


def test_find_flippable_single_ray():
    """Test a run of opponent discs bracketed by the mover."""
    board = create_board(black=[(3, 3)], white=[(1, 3), (2, 3)])

    captured = board.find_flippable_around(Location(0, 3), Cell.BLACK)

    # Nearest first; the bracketing disc is not captured
    assert captured == [Location(1, 3), Location(2, 3)]


def test_find_flippable_empty_breaks_ray():
    """Test that an empty cell inside the run invalidates the ray."""
    board = create_board(black=[(3, 3)], white=[(1, 3)])

    assert board.find_flippable_around(Location(0, 3), Cell.BLACK) == []
    assert board.is_legal_move(Location(0, 3), Cell.BLACK) == False


def test_find_flippable_unbracketed_run_to_edge():
    """Test that a run reaching the board edge captures nothing."""
    board = create_board(black=[(0, 0)], white=[(x, 3) for x in range(1, 8)])

    assert board.find_flippable_around(Location(0, 3), Cell.BLACK) == []


def test_find_flippable_adjacent_own_disc():
    """Test that a neighbouring own disc contributes nothing but other rays still count."""
    board = create_board(black=[(1, 3), (0, 5)], white=[(0, 4)])

    # Ray (1, 0) hits black at once; ray (0, 1) captures (0, 4)
    captured = board.find_flippable_around(Location(0, 3), Cell.BLACK)
    assert captured == [Location(0, 4)]


def test_find_flippable_direction_order():
    """Test that captures follow the fixed direction order."""
    board = create_board(
        black=[(1, 1), (5, 3), (3, 5)],
        white=[(2, 2), (4, 3), (3, 4)],
    )

    captured = board.find_flippable_around(Location(3, 3), Cell.BLACK)

    # (-1, -1) before (0, 1) before (1, 0)
    assert captured == [Location(2, 2), Location(3, 4), Location(4, 3)]


def test_find_flippable_rejects_bad_placements():
    """Test occupied, off-board and EMPTY placements."""
    board = Board()

    assert board.find_flippable_around(Location(3, 3), Cell.BLACK) == []
    assert board.find_flippable_around(Location(4, 3), Cell.BLACK) == []
    assert board.find_flippable_around(Location(8, 8), Cell.BLACK) == []
    assert board.find_flippable_around(Location(-1, 4), Cell.BLACK) == []
    assert board.find_flippable_around(Location(4, 2), Cell.EMPTY) == []


def test_legal_moves_prefer_corners():
    """Test that a corner move sorts ahead of earlier interior moves."""
    board = create_board(black=[(2, 2), (5, 5)], white=[(3, 3), (6, 6)])

    moves = board.legal_moves_for(Cell.BLACK)

    assert [m.location for m in moves] == [Location(7, 7), Location(4, 4)]
    assert moves[0].score(board) > moves[1].score(board)


def test_legal_moves_avoid_edges():
    """Test that an edge move sorts behind an interior move."""
    board = create_board(black=[(2, 3), (5, 5)], white=[(1, 3), (4, 5)])

    moves = board.legal_moves_for(Cell.BLACK)

    assert [m.location for m in moves] == [Location(3, 5), Location(0, 3)]
    assert moves[1].score(board) == 1


def test_terminal_iff_no_moves_for_both():
    """Test that the terminal flag matches the legal-move lists."""
    board = create_board(black=[(0, 0), (7, 7)], white=[(1, 0)])
    assert board.is_terminal() == False
    assert board.legal_moves_for(Cell.BLACK) != []
    assert board.legal_moves_for(Cell.WHITE) == []

    board = create_board(black=[(7, 7)], white=[(0, 0), (1, 0)])
    assert board.is_terminal() == True
    assert board.legal_moves_for(Cell.BLACK) == []
    assert board.legal_moves_for(Cell.WHITE) == []


def test_refresh_does_not_score_moves(monkeypatch):
    """Test that refreshing the terminal flag only checks for a legal move."""
    board = Board()

    def fail_score(self, board):
        raise AssertionError("score() called during refresh")

    monkeypatch.setattr(Movement, "score", fail_score)

    assert board.apply(CellChange(Location(0, 0), Cell.WHITE)) == True
    assert board.is_terminal() == False

    board.apply(CellChange(Location(4, 3), Cell.BLACK))
    board.apply(CellChange(Location(3, 4), Cell.BLACK))
    board.apply(CellChange(Location(0, 0), Cell.EMPTY))
    assert board.is_terminal() == True


def test_counts_sum_to_board_size_during_play():
    """Test count bookkeeping and the terminal flag over random games."""
    rng = random.Random(7)

    for width, height in [(8, 8), (6, 4), (5, 7)]:
        board = Board(width, height)
        player = Cell.BLACK

        while not board.is_terminal():
            moves = board.legal_moves_for(player)
            if moves:
                movement = rng.choice(moves)
                while movement.play_one(board):
                    total = sum(board.count(cell) for cell in Cell)
                    assert total == width * height

                    tally = {cell: int(np.sum(board.state == cell)) for cell in Cell}
                    assert tally == {cell: board.count(cell) for cell in Cell}
            player = player.opposite()

        # Terminal: neither player has a placement that captures
        for location in board.locations():
            assert not board.is_legal_move(location, Cell.BLACK)
            assert not board.is_legal_move(location, Cell.WHITE)


def test_copy_is_independent():
    """Test that a copied board does not share state."""
    board = Board()
    snapshot = board.copy()

    board.apply(CellChange(Location(0, 0), Cell.BLACK))

    assert snapshot.cell_at(Location(0, 0)) == Cell.EMPTY
    assert snapshot.count(Cell.BLACK) == 2
    assert board.count(Cell.BLACK) == 3


def test_board_str():
    """Test the text rendering of a board."""
    board = Board(4, 4)

    assert str(board) == (
        ". . . .\n"
        ". X O .\n"
        ". O X .\n"
        ". . . ."
    )


def test_movement_scan_uses_snapshot():
    """Test that building movements does not modify the board."""
    board = Board()
    before = board.state.copy()

    Movement.build(board, Location(4, 2), Cell.BLACK)
    board.legal_moves_for(Cell.WHITE)

    assert np.array_equal(board.state, before)
