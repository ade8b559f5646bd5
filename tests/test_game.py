from __future__ import annotations

from scorekeeper.core.game import (
    apply_endgame,
    board_from_history,
    is_first_move,
    move_scores,
    player_score,
    scores_with_winner,
)
from scorekeeper.core.types import GameMove, RackEntry


def test_board_from_history(cat_history: list[GameMove]) -> None:
    board = board_from_history(cat_history)
    assert board.to_rows()[7] == ".......CAT....."
    assert board.get_letter(8, 8) == "S"


def test_is_first_move(cat_history: list[GameMove]) -> None:
    assert is_first_move([])
    assert is_first_move([GameMove(0), GameMove(1)])
    assert not is_first_move(cat_history)


def test_move_scores_replay_against_board_at_the_time(cat_history: list[GameMove]) -> None:
    assert move_scores(cat_history) == [10, 3]


def test_player_score(cat_history: list[GameMove]) -> None:
    assert player_score(cat_history, 0) == 10
    assert player_score(cat_history, 1) == 3
    assert player_score(cat_history, 2) == 0


def test_scores_with_winner(cat_history: list[GameMove]) -> None:
    scores = scores_with_winner(["Ann", "Bob"], cat_history)
    assert [(s.name, s.score, s.is_winner) for s in scores] == [
        ("Ann", 10, True),
        ("Bob", 3, False),
    ]


def test_apply_endgame_changes_winner(cat_history: list[GameMove]) -> None:
    racks = [RackEntry(0, ["Q"]), RackEntry(1, [])]
    final = apply_endgame(cat_history, racks, ended_by=1)
    assert len(final) == len(cat_history) + 2
    assert len(cat_history) == 2
    assert player_score(final, 0) == 0
    assert player_score(final, 1) == 13
    scores = scores_with_winner(["Ann", "Bob"], final)
    assert [s.is_winner for s in scores] == [False, True]


def test_tie_marks_everyone_as_winner() -> None:
    scores = scores_with_winner(["Ann", "Bob"], [])
    assert all(s.is_winner for s in scores)
    assert scores_with_winner([], []) == []
