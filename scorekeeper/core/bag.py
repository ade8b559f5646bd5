"""Účtovanie tašky: odohrané a zvyšné dlaždice podľa histórie ťahov.

Funkcie sú čisté, históriu ani ťah nemenia. Blank sa vždy počíta do
priehradky `?`, nie do písmena, ktoré reprezentuje.
"""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .tiles import TILE_DISTRIBUTION, normalise_letter
from .types import BLANK, GameMove, Placement, TileOveruseWarning

log = logging.getLogger("scorekeeper.bag")


def _tile_key(placement: Placement) -> str:
    return BLANK if placement.is_blank else normalise_letter(placement.letter)


def _count_placements(placements: Iterable[Placement]) -> Counter[str]:
    return Counter(_tile_key(p) for p in placements)


def played_tiles(history: Iterable[GameMove]) -> dict[str, int]:
    """Počty odohraných dlaždíc podľa písmena."""
    played: Counter[str] = Counter()
    for move in history:
        played.update(_count_placements(move.placements))
    return dict(played)


def remaining_tiles(history: Iterable[GameMove]) -> dict[str, int]:
    """Distribúcia mínus odohrané; vyčerpané písmená sa vynechajú."""
    played = played_tiles(history)
    remaining: dict[str, int] = {}
    for letter, total in TILE_DISTRIBUTION.items():
        count = total - played.get(letter, 0)
        if count > 0:
            remaining[letter] = count
    return remaining


def remaining_tile_total(history: Iterable[GameMove]) -> int:
    return sum(remaining_tiles(history).values())


def check_overuse(
    history: Iterable[GameMove],
    placements: Sequence[Placement],
) -> list[TileOveruseWarning]:
    """Upozornenia na písmená, ktorých by po ťahu bolo viac, než je v sade.

    Len informatívne: volajúci rozhodne, či si vyžiada potvrdenie.
    """
    played = played_tiles(history)
    warnings: list[TileOveruseWarning] = []
    for letter, in_move in _count_placements(placements).items():
        used = played.get(letter, 0) + in_move
        available = TILE_DISTRIBUTION.get(letter, 0)
        if used > available:
            warnings.append(TileOveruseWarning(letter=letter, used=used, available=available))
    if warnings:
        log.warning(
            "tile_overuse %s",
            ", ".join(f"{w.label}={w.used}/{w.available}" for w in warnings),
        )
    return warnings


@dataclass(frozen=True)
class RackTileError:
    """Na rackoch je zadaných viac kusov písmena, než ich zostáva."""

    letter: str
    entered: int
    available: int


@dataclass
class RackValidationResult:
    valid: bool
    errors: list[RackTileError] = field(default_factory=list)


def validate_rack_tiles(
    racks: Iterable[Sequence[str]],
    remaining: dict[str, int],
) -> RackValidationResult:
    """Overí, že písmená zadané na všetkých rackoch spolu neprekročia zvyšok tašky."""
    entered: Counter[str] = Counter()
    for rack in racks:
        entered.update(normalise_letter(letter) for letter in rack)

    errors = [
        RackTileError(letter=letter, entered=count, available=remaining.get(letter, 0))
        for letter, count in entered.items()
        if count > remaining.get(letter, 0)
    ]
    return RackValidationResult(valid=not errors, errors=errors)
