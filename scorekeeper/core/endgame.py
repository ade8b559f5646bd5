"""Koncové zúčtovanie nepoužitých písmen na rackoch.

Každý hráč stratí hodnotu svojich nepoužitých písmen. Ak niekto partiu
ukončil (vyložil všetko), navyše získa súčet hodnôt rackov ostatných.
Pri zablokovanej partii (`ended_by=None`) sa iba odpočítava.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .tiles import get_tile_points
from .types import Adjustment, RackEntry

log = logging.getLogger("scorekeeper.endgame")


def rack_value(letters: Iterable[str]) -> int:
    """Obratková hodnota nepoužitých písmen (blank = 0)."""
    return sum(get_tile_points(letter) for letter in letters)


def calculate_endgame_adjustments(
    racks: Sequence[RackEntry],
    ended_by: int | None,
) -> list[Adjustment]:
    """Vráti úpravu skóre pre každý rack v rovnakom poradí ako vstup."""
    values = [rack_value(entry.letters) for entry in racks]
    total = sum(values)

    adjustments: list[Adjustment] = []
    for entry, value in zip(racks, values):
        deduction = -value
        bonus = total - value if entry.player_index == ended_by else 0
        adjustments.append(
            Adjustment(
                player_index=entry.player_index,
                deduction=deduction,
                bonus=bonus,
                net=deduction + bonus,
            )
        )
    log.debug(
        "endgame_adjustments ended_by=%s total_rack_value=%d nets=%s",
        ended_by,
        total,
        [a.net for a in adjustments],
    )
    return adjustments
