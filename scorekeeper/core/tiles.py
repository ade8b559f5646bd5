"""Bodové hodnoty a distribúcia dlaždíc (štandardná anglická sada, 100 kusov)."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .types import BLANK

RACK_SIZE = 7


@dataclass(frozen=True)
class TileSpec:
    """Jedna dlaždica (písmeno alebo blank) v sade."""

    letter: str
    count: int
    points: int


_ENGLISH_TILES: tuple[TileSpec, ...] = (
    TileSpec("A", 9, 1),
    TileSpec("B", 2, 3),
    TileSpec("C", 2, 3),
    TileSpec("D", 4, 2),
    TileSpec("E", 12, 1),
    TileSpec("F", 2, 4),
    TileSpec("G", 3, 2),
    TileSpec("H", 2, 4),
    TileSpec("I", 9, 1),
    TileSpec("J", 1, 8),
    TileSpec("K", 1, 5),
    TileSpec("L", 4, 1),
    TileSpec("M", 2, 3),
    TileSpec("N", 6, 1),
    TileSpec("O", 8, 1),
    TileSpec("P", 2, 3),
    TileSpec("Q", 1, 10),
    TileSpec("R", 6, 1),
    TileSpec("S", 4, 1),
    TileSpec("T", 6, 1),
    TileSpec("U", 4, 1),
    TileSpec("V", 2, 4),
    TileSpec("W", 2, 4),
    TileSpec("X", 1, 8),
    TileSpec("Y", 2, 4),
    TileSpec("Z", 1, 10),
    TileSpec(BLANK, 2, 0),
)

TILE_POINTS: Mapping[str, int] = MappingProxyType({t.letter: t.points for t in _ENGLISH_TILES})
TILE_DISTRIBUTION: Mapping[str, int] = MappingProxyType(
    {t.letter: t.count for t in _ENGLISH_TILES}
)
TOTAL_TILES = sum(TILE_DISTRIBUTION.values())


def normalise_letter(letter: str) -> str:
    """Na veľké písmeno; medzera aj '?' znamenajú blank."""
    if letter in (" ", BLANK):
        return BLANK
    return letter.strip().upper()


def get_tile_points(letter: str) -> int:
    """Bodová hodnota písmena (0 pre blank a neznáme znaky)."""
    return TILE_POINTS.get(normalise_letter(letter), 0)


def get_tile_count(letter: str) -> int:
    """Počet kusov písmena v plnej sade (0 pre neznáme znaky)."""
    return TILE_DISTRIBUTION.get(normalise_letter(letter), 0)


def sorted_tile_entries(tiles: Mapping[str, int]) -> list[tuple[str, int]]:
    """Položky zoradené abecedne, blank vždy na konci (pre zobrazenie tašky)."""
    return sorted(tiles.items(), key=lambda item: (item[0] == BLANK, item[0]))
