from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .board import BOARD_SIZE, CENTER, Board, placements_in_line
from .tiles import RACK_SIZE
from .types import Direction, Placement, WordFound

log = logging.getLogger("scorekeeper.rules")

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class MoveError(Enum):
    """Dovod neplatnosti tahu (hodnota je stabilny kod pre logy a UI)."""
    TOO_MANY_TILES = "too_many_tiles"
    NOT_SINGLE_LINE = "not_single_line"
    MISSING_CENTER_SQUARE = "missing_center_square"
    NOT_CONNECTED = "not_connected"
    GAP_IN_WORD = "gap_in_word"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[MoveError, str] = {
    MoveError.TOO_MANY_TILES: f"Cannot play more than {RACK_SIZE} tiles",
    MoveError.NOT_SINGLE_LINE: "Tiles must be in a single row or column",
    MoveError.MISSING_CENTER_SQUARE: "First word must include the center square",
    MoveError.NOT_CONNECTED: "Word must connect to existing tiles",
    MoveError.GAP_IN_WORD: "Word cannot have gaps",
}


@dataclass(frozen=True)
class ValidateResult:
    """Výsledok validácie ťahu.

    - valid: či je ťah platný
    - error: dôvod neplatnosti (alebo None pri úspechu)
    """

    valid: bool
    error: MoveError | None = None

    @property
    def reason(self) -> str | None:
        """Čitateľná správa pre používateľa."""
        return self.error.message if self.error else None


VALID = ValidateResult(True)


def first_move_must_cover_center(placements: Sequence[Placement]) -> bool:
    """Ci prvy tah prechadza stredom."""
    return any((p.row, p.col) == CENTER for p in placements)


def connected_to_existing(board: Board, placements: Sequence[Placement]) -> bool:
    """Aspon jedno nove pismeno musi ortogonalne susedit s existujucou dlazdicou."""
    for p in placements:
        for dr, dc in _NEIGHBOURS:
            rr, cc = p.row + dr, p.col + dc
            if 0 <= rr < BOARD_SIZE and 0 <= cc < BOARD_SIZE and board.cells[rr][cc].letter:
                return True
    return False


def no_gaps_in_line(
    board: Board,
    placements: Sequence[Placement],
    direction: Direction,
) -> bool:
    """V hlavnej linii nesmu byt diery medzi pismenami po potvrdeni tahu.

    Berieme do úvahy aj už existujúce písmená; doska volajuceho sa nemeni.
    """
    scratch = board.with_placements(placements)
    if direction == Direction.ACROSS:
        r = placements[0].row
        cols = [p.col for p in placements]
        span = [(r, c) for c in range(min(cols), max(cols) + 1)]
    else:
        c = placements[0].col
        rows = [p.row for p in placements]
        span = [(r, c) for r in range(min(rows), max(rows) + 1)]
    return all(scratch.cells[r][c].letter for r, c in span)


def validate_move(
    placements: Sequence[Placement],
    board: Board,
    is_first_move: bool,
) -> ValidateResult:
    """Overí umiestnenie ťahu; prvé porušené pravidlo určuje dôvod.

    Poradie: prázdny ťah (pass) je platný, počet dlaždíc, jedna línia,
    stred pri prvom ťahu / nadväznosť pri ďalších, diery v línii.
    Slovník sa tu nekontroluje.
    """
    if not placements:
        return VALID

    if len(placements) > RACK_SIZE:
        return _invalid(MoveError.TOO_MANY_TILES, placements)

    direction = placements_in_line(placements)
    if direction is None:
        return _invalid(MoveError.NOT_SINGLE_LINE, placements)

    if is_first_move:
        if not first_move_must_cover_center(placements):
            return _invalid(MoveError.MISSING_CENTER_SQUARE, placements)
    elif not connected_to_existing(board, placements):
        return _invalid(MoveError.NOT_CONNECTED, placements)

    if not no_gaps_in_line(board, placements, direction):
        return _invalid(MoveError.GAP_IN_WORD, placements)
    return VALID


def _invalid(error: MoveError, placements: Sequence[Placement]) -> ValidateResult:
    log.debug(
        "move_invalid error=%s tiles=%s",
        error.value,
        " ".join(f"{p.letter}@{p.row},{p.col}" for p in placements),
    )
    return ValidateResult(False, error)


def extract_all_words(board: Board, placements: list[Placement]) -> list[WordFound]:
    """Vytvori a vrati zoznam (hlavne + krizove) slov pre tento tah.

    Doska sa nemeni, tah sa prekryje na kopii.
    """
    return board.with_placements(placements).build_words_for_move(placements)
