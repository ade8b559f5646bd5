from __future__ import annotations

import pytest

from scorekeeper.core.board import BOARD_SIZE, Board, BoardError, square_type_at
from scorekeeper.core.types import Placement, SquareType


def test_premium_counts() -> None:
    counts = {square: 0 for square in SquareType}
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            counts[square_type_at(r, c)] += 1
    assert counts[SquareType.TW] == 8
    assert counts[SquareType.DW] == 16
    assert counts[SquareType.START] == 1
    assert counts[SquareType.TL] == 12
    assert counts[SquareType.DL] == 24
    assert counts[SquareType.NORMAL] == 225 - (8 + 16 + 1 + 12 + 24)


def test_dw_spotchecks() -> None:
    # B2, C3, D4, E5, K11, L12, M13, N14 a protilahle diagonaly
    checks = [(1,1),(2,2),(3,3),(4,4),(10,10),(11,11),(12,12),(13,13),
              (1,13),(2,12),(3,11),(4,10),(10,4),(11,3),(12,2),(13,1)]
    for r, c in checks:
        assert square_type_at(r, c) == SquareType.DW


def test_corners_and_edge_midpoints_are_triple_word() -> None:
    for r, c in [(0,0),(0,7),(0,14),(7,0),(7,14),(14,0),(14,7),(14,14)]:
        assert square_type_at(r, c) == SquareType.TW


def test_center_and_known_letter_squares() -> None:
    assert square_type_at(7, 7) == SquareType.START
    assert square_type_at(8, 8) == SquareType.DL
    assert square_type_at(7, 11) == SquareType.DL
    assert square_type_at(5, 5) == SquareType.TL
    assert square_type_at(7, 10) == SquareType.NORMAL


def test_layout_is_symmetric_under_rotation() -> None:
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            assert square_type_at(r, c) == square_type_at(14 - r, 14 - c)
            # standardna doska je symetricka aj podla diagonaly
            assert square_type_at(r, c) == square_type_at(c, r)


def test_from_rows_round_trip_with_blank() -> None:
    rows = ["." * 15 for _ in range(15)]
    rows[7] = ".......CaT....."
    b = Board.from_rows(rows)
    assert b.get_letter(7, 8) == "A"
    assert b.cells[7][8].is_blank
    assert not b.cells[7][7].is_blank
    assert b.to_rows() == rows


def test_from_rows_rejects_wrong_size() -> None:
    with pytest.raises(BoardError):
        Board.from_rows(["..."] * 15)
    with pytest.raises(BoardError):
        Board.from_rows(["." * 15] * 14)


def test_with_placements_leaves_original_untouched(cat_board: Board) -> None:
    before = cat_board.to_rows()
    scratch = cat_board.with_placements([Placement(7, 10, "S")])
    assert scratch.get_letter(7, 10) == "S"
    assert cat_board.get_letter(7, 10) is None
    assert cat_board.to_rows() == before


def test_single_tile_prefers_horizontal_main_word() -> None:
    b = Board()
    b.place_letters([Placement(7, 8, "A"), Placement(8, 7, "T"), Placement(8, 8, "X")])
    words = b.build_words_for_move([Placement(8, 8, "X")])
    assert [w.word for w in words] == ["TX", "AX"]


def test_has_any_letters(empty_board: Board, cat_board: Board) -> None:
    assert not empty_board.has_any_letters()
    assert cat_board.has_any_letters()
