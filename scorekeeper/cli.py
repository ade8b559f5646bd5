"""Príkazový riadok: prehranie GCG záznamu a kontrola zapísaného skóre.

Každý ťah sa zvaliduje, skontroluje sa taška a spočíta skóre, ktoré sa
porovná so skóre v zázname.
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import effective_strict_bag
from .core.bag import check_overuse, remaining_tiles
from .core.board import Board
from .core.gcg import (
    GcgGame,
    GcgMoveKind,
    GcgParseError,
    parse_gcg,
    play_placements,
    withdraw_last_play,
)
from .core.rules import validate_move
from .core.scoring import score_move_breakdown
from .core.tiles import sorted_tile_entries
from .core.types import GameMove, TileOveruseWarning
from .logging_setup import GAME_ID_VAR, configure_logging

log = logging.getLogger("scorekeeper.cli")


@dataclass
class ReplayRow:
    """Jeden prehraný ťah s vypočítaným a zapísaným skóre."""

    turn: int
    player: str
    word: str
    recorded: int
    computed: int
    error: str | None = None
    warnings: list[TileOveruseWarning] = field(default_factory=list)

    @property
    def matches(self) -> bool:
        return self.error is None and self.recorded == self.computed


@dataclass
class ReplayReport:
    rows: list[ReplayRow] = field(default_factory=list)
    history: list[GameMove] = field(default_factory=list)

    @property
    def mismatches(self) -> list[ReplayRow]:
        return [row for row in self.rows if not row.matches]

    @property
    def overused(self) -> bool:
        return any(row.warnings for row in self.rows)


def replay(game: GcgGame) -> ReplayReport:
    """Prehrá ťahy záznamu a pre každý položený ťah vráti riadok reportu."""
    report = ReplayReport()
    board = Board()
    for turn, move in enumerate(game.moves, start=1):
        if move.kind is GcgMoveKind.END:
            continue
        player_index = game.player_index(move.player)
        if move.kind is GcgMoveKind.CHALLENGE:
            withdraw_last_play(report.history, board, player_index)
            continue
        if move.kind is GcgMoveKind.EXCHANGE:
            report.history.append(GameMove(player_index))
            continue

        placements = play_placements(move, board)
        first = not board.has_any_letters()
        result = validate_move(placements, board, first)
        warnings = check_overuse(report.history, placements)
        breakdown = score_move_breakdown(placements, board)
        report.rows.append(
            ReplayRow(
                turn=turn,
                player=move.player,
                word=move.word,
                recorded=move.score,
                computed=breakdown.total,
                error=result.reason,
                warnings=warnings,
            )
        )
        board.place_letters(placements)
        report.history.append(GameMove(player_index, placements))
    return report


def _render(console: Console, game: GcgGame, report: ReplayReport) -> None:
    table = Table(title=game.title or "Replay")
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Word")
    table.add_column("Recorded", justify="right")
    table.add_column("Computed", justify="right")
    table.add_column("Notes")
    for row in report.rows:
        notes: list[str] = []
        if row.error:
            notes.append(f"[red]{row.error}[/red]")
        for w in row.warnings:
            notes.append(f"[yellow]{w.label}: {w.used}/{w.available}[/yellow]")
        style = None if row.matches else "bold red"
        table.add_row(
            str(row.turn),
            row.player,
            row.word,
            str(row.recorded),
            str(row.computed),
            ", ".join(notes),
            style=style,
        )
    console.print(table)

    bag = Table(title="Unplayed tiles")
    bag.add_column("Tile")
    bag.add_column("Count", justify="right")
    for letter, count in sorted_tile_entries(remaining_tiles(report.history)):
        bag.add_row("blank" if letter == "?" else letter, str(count))
    console.print(bag)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scorekeeper", description="Scrabble score keeping tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", default=None, help="rotating log file path")
    sub = parser.add_subparsers(dest="command", required=True)

    rp = sub.add_parser("replay", help="replay a GCG file and verify recorded scores")
    rp.add_argument("path", type=Path)
    rp.add_argument(
        "--strict-bag",
        action="store_true",
        default=None,
        help="treat tile overuse as a failure",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Exit kód: 0 v poriadku, 1 nesedí skóre alebo ťah, 2 nečitateľný záznam."""
    args = build_parser().parse_args(argv)
    configure_logging(log_path=args.log_file, verbose=args.verbose)
    console = Console()

    path: Path = args.path
    GAME_ID_VAR.set(path.name)
    try:
        game = parse_gcg(path.read_text(encoding="utf-8"))
        report = replay(game)
    except (GcgParseError, OSError) as exc:
        log.error("replay_failed path=%s error=%s", path, exc)
        console.print(f"[red]Cannot replay {escape(str(path))}: {escape(str(exc))}[/red]")
        return 2
    _render(console, game, report)

    failed = bool(report.mismatches)
    if effective_strict_bag(args.strict_bag) and report.overused:
        failed = True
    log.info("replay_done path=%s plays=%d mismatches=%d", path, len(report.rows), len(report.mismatches))
    return 1 if failed else 0
