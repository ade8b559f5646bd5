from __future__ import annotations

from scorekeeper.core.endgame import calculate_endgame_adjustments, rack_value
from scorekeeper.core.types import Adjustment, RackEntry


def test_player_who_went_out_collects_opponent_rack() -> None:
    racks = [RackEntry(0, ["Q", "Z"]), RackEntry(1, [])]
    result = calculate_endgame_adjustments(racks, ended_by=1)
    assert result == [
        Adjustment(player_index=0, deduction=-20, bonus=0, net=-20),
        Adjustment(player_index=1, deduction=0, bonus=20, net=20),
    ]


def test_blocked_game_only_deducts() -> None:
    racks = [RackEntry(0, ["A", "E"]), RackEntry(1, ["K"]), RackEntry(2, ["?"])]
    result = calculate_endgame_adjustments(racks, ended_by=None)
    assert [a.deduction for a in result] == [-2, -5, 0]
    assert all(a.bonus == 0 for a in result)
    assert sum(a.net for a in result) == -7


def test_net_sums_to_zero_when_someone_ended() -> None:
    racks = [RackEntry(0, list("JXQ")), RackEntry(1, []), RackEntry(2, list("ABC"))]
    result = calculate_endgame_adjustments(racks, ended_by=1)
    assert result[1].bonus == 26 + 7
    assert sum(a.net for a in result) == 0


def test_lowercase_letters_and_blanks() -> None:
    assert rack_value(["q", "z", "?"]) == 20
    assert rack_value([]) == 0
    result = calculate_endgame_adjustments([RackEntry(0, ["q"]), RackEntry(1, [])], ended_by=1)
    assert result[0].net == -10
    assert result[1].net == 10


def test_output_order_follows_input() -> None:
    racks = [RackEntry(3, ["A"]), RackEntry(1, ["B"])]
    result = calculate_endgame_adjustments(racks, ended_by=3)
    assert [a.player_index for a in result] == [3, 1]
    assert result[0] == Adjustment(player_index=3, deduction=-1, bonus=3, net=2)


def test_ended_by_unknown_player_gives_no_bonus() -> None:
    result = calculate_endgame_adjustments([RackEntry(0, ["A"])], ended_by=5)
    assert result[0].bonus == 0
    assert result[0].net == -1
