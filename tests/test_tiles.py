import pytest

from scorekeeper.core.tiles import (
    TILE_DISTRIBUTION,
    TILE_POINTS,
    TOTAL_TILES,
    get_tile_count,
    get_tile_points,
    sorted_tile_entries,
)


def test_bag_total_count() -> None:
    assert TOTAL_TILES == 100
    assert sum(TILE_DISTRIBUTION.values()) == 100
    assert TILE_DISTRIBUTION["?"] == 2
    assert TILE_DISTRIBUTION["E"] == 12


def test_points_lookup_is_case_insensitive() -> None:
    assert get_tile_points("Q") == 10
    assert get_tile_points("q") == 10
    assert get_tile_points("k") == 5
    assert get_tile_points("?") == 0
    assert get_tile_points(" ") == 0


def test_unknown_letters_default_to_zero() -> None:
    assert get_tile_points("1") == 0
    assert get_tile_count("Ä") == 0
    assert get_tile_count(" ") == 2


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        TILE_POINTS["A"] = 5  # type: ignore[index]


def test_sorted_tile_entries_puts_blank_last() -> None:
    entries = sorted_tile_entries({"?": 1, "Z": 1, "A": 3})
    assert entries == [("A", 3), ("Z", 1), ("?", 1)]


def test_full_tables_match_standard_set() -> None:
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ?"
    points = [1, 3, 3, 2, 1, 4, 2, 4, 1, 8, 5, 1, 3, 1, 1, 3, 10, 1, 1, 1, 1, 4, 4, 8, 4, 10, 0]
    counts = [9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1, 2]
    assert dict(TILE_POINTS) == dict(zip(letters, points))
    assert dict(TILE_DISTRIBUTION) == dict(zip(letters, counts))
