"""Centralizovaná inicializácia logovania pre scorekeeper.

- Konfiguruje Rich konzolový handler a rotujúci súborový handler.
- Zabráni duplicitným handlerom pri opakovaných volaniach.
- Poskytuje `GAME_ID_VAR` pre propagáciu id partie cez ContextVar.
"""
from __future__ import annotations

import logging
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from .config import log_path_from_env

# Kontextové ID partie (napr. názov GCG súboru), dostupné pre všetky moduly
GAME_ID_VAR: ContextVar[str] = ContextVar("game_id", default="-")


class _GameIdFilter(logging.Filter):
    """Filter doplní `game_id` do každého záznamu z ContextVar.

    Pozn.: Použitý na konzolovom aj súborovom handleri.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.game_id = GAME_ID_VAR.get()
        return True


def configure_logging(*, log_path: str | None = None, verbose: bool = False) -> logging.Logger:
    """Inicializuje logging iba raz a vráti projektový logger.

    - Rich na konzolu (prehľadné tracebacky)
    - Rotujúci súborový handler (≈1 MB, 5 záloh), iba ak je daná cesta
      (argument alebo `SCOREKEEPER_LOG_PATH`)
    - Formát zahŕňa `game_id` z `GAME_ID_VAR`
    """

    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("scorekeeper")

    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    game_filter = _GameIdFilter()

    # Konzola
    ch = RichHandler(rich_tracebacks=True, show_path=False)
    ch.setLevel(logging.DEBUG if verbose else logging.WARNING)
    ch.addFilter(game_filter)
    ch.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(ch)

    # Súbor s rotáciou
    path = log_path or log_path_from_env()
    if path:
        try:
            fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
        except OSError as exc:
            # Bez súboru pokračuj aspoň s konzolou
            logging.getLogger("scorekeeper").warning("log_file_unavailable path=%s error=%s", path, exc)
        else:
            fh.setLevel(logging.DEBUG)
            fh.addFilter(game_filter)
            fh.setFormatter(
                logging.Formatter(
                    "%(asctime)s %(levelname)s %(name)s [game=%(game_id)s] %(message)s"
                )
            )
            root.addHandler(fh)

    return logging.getLogger("scorekeeper")
