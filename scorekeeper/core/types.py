from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

# Pozn.: Vsetky komentare su v slovencine podla preferencii pouzivatela.

BLANK = "?"


class Direction(Enum):
    """Smer kladenia slova na doske."""
    ACROSS = auto()
    DOWN = auto()


class SquareType(Enum):
    """Typ policka na doske (urceny iba poziciou)."""
    NORMAL = auto()
    DL = auto()     # Double Letter
    TL = auto()     # Triple Letter
    DW = auto()     # Double Word
    TW = auto()     # Triple Word
    START = auto()  # stred (7,7), boduje ako DW


@dataclass(frozen=True)
class Placement:
    """Jedno pismeno polozene v tomto tahu na suradnicu (row, col)."""
    row: int
    col: int
    letter: str   # 'A'..'Z' alebo '?' pre blank
    # Ak je to blank a uz bolo pouzite ako konkretne pismeno, ulozime jeho vyznam
    blank_as: str | None = None

    @property
    def is_blank(self) -> bool:
        return self.letter in (BLANK, " ")


@dataclass
class Adjustment:
    """Koncova uprava skore jedneho hraca (odpocet za rack + pripadny bonus)."""
    player_index: int
    deduction: int
    bonus: int
    net: int


@dataclass
class GameMove:
    """Potvrdeny tah konkretneho hraca v historii partie."""
    player_index: int
    placements: list[Placement] = field(default_factory=list)
    adjustment: Adjustment | None = None


@dataclass
class RackEntry:
    """Nepouzite pismena hraca na konci partie."""
    player_index: int
    letters: list[str]


@dataclass(frozen=True)
class TileOveruseWarning:
    """Tah by pouzil viac kusov pismena, nez ich sada obsahuje."""
    letter: str
    used: int        # vratane aktualneho tahu
    available: int   # pocet v plnej sade

    @property
    def label(self) -> str:
        return "blank" if self.letter == BLANK else self.letter


@dataclass
class WordFound:
    """Reprezentacia jedneho vzniknuteho slova na doske s jeho suradnicami."""
    word: str
    letters: list[tuple[int, int]]  # zoznam buniek tvoriacich slovo (row, col)
    blank_indices: list[int] = field(default_factory=list)


@dataclass
class ScoreBreakdown:
    """Detailne skore jedneho slova."""
    word: str
    base_points: int
    letter_bonus_points: int
    word_multiplier: int
    total: int

