"""Prehrávanie histórie ťahov: doska, skóre hráčov a víťaz.

Pozn.: Poradie ťahov ani časomieru tu neriešime, pracujeme iba s už
potvrdenou históriou `GameMove`.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .board import Board
from .endgame import calculate_endgame_adjustments
from .scoring import score_move
from .types import GameMove, RackEntry

log = logging.getLogger("scorekeeper.game")


@dataclass
class PlayerScore:
    """Výsledné skóre hráča pre prehľad partie."""

    name: str
    score: int
    is_winner: bool = False


def board_from_history(history: Iterable[GameMove]) -> Board:
    """Zostaví dosku prehraním všetkých ťahov na prázdnu dosku."""
    board = Board()
    for move in history:
        board.place_letters(move.placements)
    return board


def is_first_move(history: Iterable[GameMove]) -> bool:
    """Prvý ťah je ten, pred ktorým ešte nikto nepoložil dlaždicu (pasy sa nerátajú)."""
    return not any(move.placements for move in history)


def move_scores(history: Sequence[GameMove]) -> list[int]:
    """Body každého ťahu voči doske, aká bola pred ním (bez koncových úprav)."""
    board = Board()
    scores: list[int] = []
    for move in history:
        scores.append(score_move(move.placements, board))
        board.place_letters(move.placements)
    return scores


def player_score(history: Sequence[GameMove], player_index: int) -> int:
    """Súčet bodov hráča vrátane prípadnej koncovej úpravy."""
    score = 0
    for move, points in zip(history, move_scores(history)):
        if move.player_index != player_index:
            continue
        score += points
        if move.adjustment is not None:
            score += move.adjustment.net
    return score


def scores_with_winner(names: Sequence[str], history: Sequence[GameMove]) -> list[PlayerScore]:
    """Skóre všetkých hráčov; pri rovnosti sú víťazmi všetci s maximom."""
    scores = [PlayerScore(name, player_score(history, idx)) for idx, name in enumerate(names)]
    if scores:
        best = max(s.score for s in scores)
        for s in scores:
            s.is_winner = s.score == best
    return scores


def apply_endgame(
    history: Sequence[GameMove],
    racks: Sequence[RackEntry],
    ended_by: int | None,
) -> list[GameMove]:
    """Vráti novú históriu doplnenú o koncové úpravy (jeden pas s úpravou na hráča)."""
    adjustments = calculate_endgame_adjustments(racks, ended_by)
    closing = [GameMove(player_index=a.player_index, adjustment=a) for a in adjustments]
    log.info("endgame_applied ended_by=%s players=%d", ended_by, len(closing))
    return [*history, *closing]
