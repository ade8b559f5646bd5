from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .board import Board, square_type_at
from .tiles import RACK_SIZE, TILE_POINTS
from .types import Placement, ScoreBreakdown, SquareType, WordFound

log = logging.getLogger("scorekeeper.scoring")

BINGO_BONUS = 50


def square_multipliers(square: SquareType) -> tuple[int, int]:
    """(nasobok pismena, nasobok slova) pre typ policka."""
    match square:
        case SquareType.DL:
            return 2, 1
        case SquareType.TL:
            return 3, 1
        case SquareType.DW | SquareType.START:
            return 1, 2
        case SquareType.TW:
            return 1, 3
        case SquareType.NORMAL:
            return 1, 1


@dataclass
class MoveScore:
    """Skore tahu s rozpisom po slovach (hlavne slovo prve)."""
    total: int
    words: list[ScoreBreakdown] = field(default_factory=list)
    bingo: bool = False


def score_words(
    board: Board,
    placements: Sequence[Placement],
    words_coords: list[tuple[str, list[tuple[int, int]]]],
) -> tuple[int, list[ScoreBreakdown]]:
    """Vypocita celkove skore slov a vrati aj rozpis pre jednotlive slova.

    `board` uz obsahuje pismena tahu, `words_coords` je zoznam (slovo, zoznam buniek).
    Prémie DL/TL/DW/TW sa uplatnia len na novych pismenach (placements).
    """
    new_cells = {(p.row, p.col) for p in placements}
    total_score = 0
    breakdowns: list[ScoreBreakdown] = []

    for word, coords in words_coords:
        word_multiplier = 1
        word_points = 0
        letter_bonus = 0
        for (r, c) in coords:
            cell = board.cells[r][c]
            base = 0 if cell.is_blank else TILE_POINTS.get(cell.letter or "", 0)
            # ak je to nova bunka, mozeme uplatnit prémie poli
            if (r, c) in new_cells:
                letter_mult, word_mult = square_multipliers(square_type_at(r, c))
                letter_bonus += base * (letter_mult - 1)
                word_multiplier *= word_mult
            word_points += base
        total = (word_points + letter_bonus) * word_multiplier
        total_score += total
        breakdowns.append(
            ScoreBreakdown(
                word=word,
                base_points=word_points,
                letter_bonus_points=letter_bonus,
                word_multiplier=word_multiplier,
                total=total,
            )
        )
    return total_score, breakdowns


def words_from_move(placements: Sequence[Placement], board: Board) -> list[WordFound]:
    """Slova vytvorene tahom (hlavne prve, potom krizove); doska sa nemeni."""
    scratch = board.with_placements(placements)
    return scratch.build_words_for_move(list(placements))


def score_move_breakdown(placements: Sequence[Placement], board: Board) -> MoveScore:
    """Skore tahu vratane krizovych slov a bonusu za vsetkych 7 pismen."""
    if not placements:
        return MoveScore(total=0)

    scratch = board.with_placements(placements)
    found = scratch.build_words_for_move(list(placements))
    total, breakdowns = score_words(
        scratch, placements, [(wf.word, wf.letters) for wf in found]
    )
    bingo = len(placements) == RACK_SIZE
    if bingo:
        total += BINGO_BONUS
    if not found:
        log.debug("score_no_words tiles=%d", len(placements))
    return MoveScore(total=total, words=breakdowns, bingo=bingo)


def score_move(placements: Sequence[Placement], board: Board) -> int:
    """Celkove body za tah (predpoklada uz zvalidovany tah)."""
    return score_move_breakdown(placements, board).total
