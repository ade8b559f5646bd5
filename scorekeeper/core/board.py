from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache

from .assets import get_premiums_path
from .types import BLANK, Direction, Placement, SquareType, WordFound

log = logging.getLogger("scorekeeper.board")

BOARD_SIZE = 15
CENTER = (7, 7)  # H8 (0-index)

_SQUARE_TAGS: dict[str, SquareType] = {
    "": SquareType.NORMAL,
    "DL": SquareType.DL,
    "TL": SquareType.TL,
    "DW": SquareType.DW,
    "TW": SquareType.TW,
    "ST": SquareType.START,
}


class BoardError(ValueError):
    """Neplatny vstup pri zostavovani dosky (rozmery, znaky)."""


@lru_cache(maxsize=1)
def premium_layout() -> tuple[tuple[SquareType, ...], ...]:
    """Nacita rozlozenie premii z `premiums.json` (raz za beh procesu)."""
    path = get_premiums_path()
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if len(data) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in data):
        raise BoardError(f"premiums.json musi mat {BOARD_SIZE}x{BOARD_SIZE} poli: {path}")
    layout = tuple(tuple(_SQUARE_TAGS[tag] for tag in row) for row in data)
    log.debug("premium_layout_loaded path=%s", path)
    return layout


def placements_in_line(placements: Sequence[Placement]) -> Direction | None:
    """Ci su vsetky polozene pismena v jednom riadku alebo stlpci."""
    rows = {p.row for p in placements}
    cols = {p.col for p in placements}
    if len(rows) == 1:
        return Direction.ACROSS
    if len(cols) == 1:
        return Direction.DOWN
    return None


def square_type_at(row: int, col: int) -> SquareType:
    """Typ policka na (row, col). Suradnice mimo dosky su vecou volajuceho."""
    return premium_layout()[row][col]


@dataclass
class Cell:
    """Bunka na doske."""
    letter: str | None = None  # 'A'..'Z' uz ulozene ('?' pre blank bez pismena)
    is_blank: bool = False     # ci povodne bola '?'


class Board:
    """Model scrabble dosky 15x15 (iba potvrdene pismena; premie su dane poziciou)."""
    def __init__(self) -> None:
        self.cells: list[list[Cell]] = [
            [Cell() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Zostavi dosku z 15 riadkov textu.

        '.' (alebo '·') je prazdne pole, velke pismeno je bezna dlazdica,
        male pismeno je blank reprezentujuci dane pismeno, '?' je blank bez pismena.
        Medzery medzi znakmi sa ignoruju.
        """
        grid = [row.replace(" ", "") for row in rows]
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise BoardError(f"Doska musi mat {BOARD_SIZE} riadkov po {BOARD_SIZE} znakov")
        board = cls()
        for r, row in enumerate(grid):
            for c, ch in enumerate(row):
                if ch in (".", "·"):
                    continue
                if ch == BLANK:
                    board.cells[r][c] = Cell(BLANK, True)
                elif ch.isalpha() and ch.islower():
                    board.cells[r][c] = Cell(ch.upper(), True)
                elif ch.isalpha():
                    board.cells[r][c] = Cell(ch, False)
                else:
                    raise BoardError(f"Neplatny znak {ch!r} na ({r},{c})")
        return board

    def to_rows(self) -> list[str]:
        """Opak `from_rows`: blanky sa zapisu malym pismenom."""
        rows: list[str] = []
        for row in self.cells:
            chars: list[str] = []
            for cell in row:
                if not cell.letter:
                    chars.append(".")
                elif cell.is_blank and cell.letter != BLANK:
                    chars.append(cell.letter.lower())
                else:
                    chars.append(cell.letter)
            rows.append("".join(chars))
        return rows

    def inside(self, row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get_letter(self, row: int, col: int) -> str | None:
        return self.cells[row][col].letter

    def is_occupied(self, row: int, col: int) -> bool:
        return self.inside(row, col) and self.cells[row][col].letter is not None

    def has_any_letters(self) -> bool:
        return any(cell.letter for row in self.cells for cell in row)

    def copy(self) -> Board:
        """Nezavisla kopia dosky (scratch pre skorovanie a validaciu)."""
        clone = Board()
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                cell = self.cells[r][c]
                if cell.letter is not None:
                    clone.cells[r][c] = Cell(cell.letter, cell.is_blank)
        return clone

    def place_letters(self, placements: Iterable[Placement]) -> None:
        """Aplikuje pismena na dosku (bez validacii pravidiel)."""
        for p in placements:
            cell = self.cells[p.row][p.col]
            if p.blank_as:
                cell.letter = p.blank_as.upper()
            else:
                cell.letter = BLANK if p.is_blank else p.letter.upper()
            cell.is_blank = p.is_blank

    def clear_letters(self, placements: Iterable[Placement]) -> None:
        """Odstrani pismena (pouzite pri stiahnuti tahu po challengi)."""
        for p in placements:
            self.cells[p.row][p.col] = Cell()

    def with_placements(self, placements: Iterable[Placement]) -> Board:
        """Vrati novu dosku s prekrytymi pismenami tahu; self sa nemeni."""
        scratch = self.copy()
        scratch.place_letters(placements)
        return scratch

    def extend_word(self, row: int, col: int, direction: Direction) -> list[tuple[int, int]]:
        """Vrati suradnice celeho slova prechadzajuceho danym polom v danom smere."""
        dr, dc = (0,1) if direction == Direction.ACROSS else (1,0)
        # posun dolava/nahor
        r, c = row, col
        while self.inside(r - dr, c - dc) and self.get_letter(r - dr, c - dc):
            r -= dr
            c -= dc
        coords: list[tuple[int, int]] = []
        # dopln doprava/nadol
        while self.inside(r, c) and self.get_letter(r, c):
            coords.append((r, c))
            r += dr
            c += dc
        return coords

    def word_at(self, coords: list[tuple[int, int]]) -> WordFound:
        """Zlozi zobrazitelne slovo z buniek; blank bez pismena sa zobrazi ako '_'."""
        chars: list[str] = []
        blank_indices: list[int] = []
        for i, (r, c) in enumerate(coords):
            cell = self.cells[r][c]
            if cell.is_blank:
                blank_indices.append(i)
            letter = cell.letter or ""
            chars.append("_" if letter == BLANK else letter)
        return WordFound("".join(chars), coords, blank_indices)

    def build_words_for_move(self, placements: list[Placement]) -> list[WordFound]:
        """Najde hlavne + vsetky nove krizove slova po polozenej sade pismen.

        Predpoklad: pismena su uz provizorne na doske.
        Hlavne slovo je vzdy prve. Pri jednom pismene sa skusi vodorovny aj
        zvisly smer; ak vzniknu oba, vodorovne slovo je hlavne.
        """
        if not placements:
            return []

        if len(placements) == 1:
            p = placements[0]
            runs = (
                self.extend_word(p.row, p.col, Direction.ACROSS),
                self.extend_word(p.row, p.col, Direction.DOWN),
            )
            return [self.word_at(coords) for coords in runs if len(coords) >= 2]

        direction = placements_in_line(placements)
        if direction is None:
            return []

        words: list[WordFound] = []
        # hlavne slovo: vyhladame cez prvu novu bunku v smere dir
        r0, c0 = placements[0].row, placements[0].col
        main_coords = self.extend_word(r0, c0, direction)
        if len(main_coords) >= 2:
            words.append(self.word_at(main_coords))

        # krizove slova: pre kazdu novu dlazdicu pozri opacny smer
        cross_dir = Direction.DOWN if direction == Direction.ACROSS else Direction.ACROSS
        for p in placements:
            coords = self.extend_word(p.row, p.col, cross_dir)
            if len(coords) >= 2:  # jednopismenne sa nepocita
                words.append(self.word_at(coords))

        return words
