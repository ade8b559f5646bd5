"""Import záznamov partií vo formáte GCG.

Formát (riadok po riadku):
- pragmy `#player1 NICK Meno`, `#player2 …`, `#title …`, `#description …`
- ťah:      `>Nick: RACK 8D SLOVO +skóre celkom`
- výmena:   `>Nick: RACK -ABC +0 celkom` (samotné `-` je pas)
- stiahnutý ťah po challengi: `>Nick: RACK -- -skóre celkom`
- koniec:   `>Nick: (PÍSMENÁ) +skóre celkom`

Pozícia s číslom na začiatku (8D) je vodorovný ťah v riadku 8 od stĺpca D,
s písmenom na začiatku (H4) zvislý ťah v stĺpci H od riadku 4. Malé písmeno
v slove je blank, `.` je písmeno, ktoré už leží na doske.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto

from .board import BOARD_SIZE, Board
from .types import BLANK, Direction, GameMove, Placement

log = logging.getLogger("scorekeeper.gcg")

_LETTER_FIRST = re.compile(r"^([A-O])(\d{1,2})$", re.IGNORECASE)
_NUMBER_FIRST = re.compile(r"^(\d{1,2})([A-O])$", re.IGNORECASE)
_END_LINE = re.compile(r'^>([^:"\s]+)[:"]\s+\(([A-Z?]*)\)\s+([+-]\d+)\s+(-?\d+)$')
_MOVE_LINE = re.compile(r'^>([^:"\s]+):\s+(\S+)\s+(.+?)\s+([+-]\d+)\s+(-?\d+)$')


class GcgParseError(ValueError):
    """Neplatný GCG vstup (napr. pozícia mimo dosky)."""


class GcgMoveKind(Enum):
    PLAY = auto()
    EXCHANGE = auto()
    CHALLENGE = auto()
    END = auto()


@dataclass(frozen=True)
class GcgPosition:
    row: int
    col: int
    direction: Direction


@dataclass
class GcgPlayer:
    nickname: str = ""
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.nickname


@dataclass
class GcgMove:
    """Jeden riadok ťahu zo záznamu."""

    player: str
    kind: GcgMoveKind
    score: int
    cumulative: int
    rack: str = ""
    position: GcgPosition | None = None
    word: str = ""
    tiles: str = ""  # iba pre END: písmená, ktoré zostali súperovi


@dataclass
class GcgGame:
    player1: GcgPlayer = field(default_factory=GcgPlayer)
    player2: GcgPlayer = field(default_factory=GcgPlayer)
    title: str | None = None
    description: str | None = None
    moves: list[GcgMove] = field(default_factory=list)

    @property
    def players(self) -> list[GcgPlayer]:
        return [self.player1, self.player2]

    def player_index(self, nickname: str) -> int:
        """Index hráča podľa prezývky (neznáma prezývka je chyba vstupu)."""
        for idx, player in enumerate(self.players):
            if player.nickname == nickname:
                return idx
        raise GcgParseError(f"Neznámy hráč v zázname: {nickname}")


def parse_position(pos: str) -> GcgPosition:
    """Prevedie GCG pozíciu ('8D', 'H4') na 0-indexované súradnice a smer."""
    if m := _LETTER_FIRST.match(pos):
        col = ord(m.group(1).upper()) - ord("A")
        row = int(m.group(2)) - 1
        direction = Direction.DOWN
    elif m := _NUMBER_FIRST.match(pos):
        row = int(m.group(1)) - 1
        col = ord(m.group(2).upper()) - ord("A")
        direction = Direction.ACROSS
    else:
        raise GcgParseError(f"Neplatná pozícia: {pos}")
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise GcgParseError(f"Neplatná pozícia: {pos}")
    return GcgPosition(row, col, direction)


def _parse_player(rest: str) -> GcgPlayer:
    nickname, _, name = rest.strip().partition(" ")
    return GcgPlayer(nickname=nickname, name=name.strip())


def parse_gcg(content: str) -> GcgGame:
    """Rozparsuje obsah GCG súboru; neznáme riadky a pragmy sa preskočia."""
    game = GcgGame()
    for raw in content.splitlines():
        line = raw.strip()
        if not line:
            continue

        if line.startswith("#"):
            pragma, _, rest = line.partition(" ")
            if pragma == "#player1":
                game.player1 = _parse_player(rest)
            elif pragma == "#player2":
                game.player2 = _parse_player(rest)
            elif pragma == "#title":
                game.title = rest.strip()
            elif pragma == "#description":
                game.description = rest.strip()
            continue

        if m := _END_LINE.match(line):
            game.moves.append(
                GcgMove(
                    player=m.group(1),
                    kind=GcgMoveKind.END,
                    tiles=m.group(2),
                    score=int(m.group(3)),
                    cumulative=int(m.group(4)),
                )
            )
            continue

        m = _MOVE_LINE.match(line)
        if m is None:
            log.debug("gcg_skip_line line=%r", line)
            continue
        player, rack, action = m.group(1), m.group(2), m.group(3)
        score, cumulative = int(m.group(4)), int(m.group(5))

        if action == "--":
            game.moves.append(GcgMove(player, GcgMoveKind.CHALLENGE, score, cumulative, rack))
            continue
        if action.startswith("-"):
            game.moves.append(GcgMove(player, GcgMoveKind.EXCHANGE, score, cumulative, rack))
            continue

        parts = action.split()
        if len(parts) != 2:
            log.debug("gcg_skip_action line=%r", line)
            continue
        game.moves.append(
            GcgMove(
                player=player,
                kind=GcgMoveKind.PLAY,
                score=score,
                cumulative=cumulative,
                rack=rack,
                position=parse_position(parts[0]),
                word=parts[1],
            )
        )
    return game


def play_placements(move: GcgMove, board: Board) -> list[Placement]:
    """Nové dlaždice GCG ťahu voči aktuálnej doske.

    Písmená na už obsadených poliach (aj zapísané ako '.') sa preskočia.
    """
    if move.kind is not GcgMoveKind.PLAY or move.position is None:
        return []
    dr, dc = (0, 1) if move.position.direction == Direction.ACROSS else (1, 0)
    r, c = move.position.row, move.position.col
    placements: list[Placement] = []
    for ch in move.word:
        if not board.inside(r, c):
            raise GcgParseError(f"Slovo {move.word} presahuje dosku")
        if ch != "." and not board.is_occupied(r, c):
            if ch.islower():
                placements.append(Placement(r, c, BLANK, blank_as=ch.upper()))
            else:
                placements.append(Placement(r, c, ch))
        r += dr
        c += dc
    return placements


def gcg_to_history(game: GcgGame) -> list[GameMove]:
    """Prevedie záznam na históriu ťahov.

    Výmeny sú pasy; challenge `--` stiahne predchádzajúci ťah toho istého
    hráča. Koncové riadky sa ignorujú (úpravy počíta `endgame`).
    """
    board = Board()
    history: list[GameMove] = []
    for move in game.moves:
        if move.kind is GcgMoveKind.END:
            continue
        player_index = game.player_index(move.player)
        if move.kind is GcgMoveKind.PLAY:
            placements = play_placements(move, board)
            board.place_letters(placements)
            history.append(GameMove(player_index, placements))
        elif move.kind is GcgMoveKind.CHALLENGE:
            withdraw_last_play(history, board, player_index)
        else:
            history.append(GameMove(player_index))
    return history


def withdraw_last_play(history: list[GameMove], board: Board, player_index: int) -> None:
    """Nahradí posledný ťah hráča pasom a zoberie jeho dlaždice z dosky."""
    if history and history[-1].player_index == player_index:
        board.clear_letters(history[-1].placements)
        history[-1] = GameMove(player_index)
    else:
        log.warning("gcg_challenge_without_play player=%s", player_index)
