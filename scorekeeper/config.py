"""Konfigurácia a flagy pre scorekeeper.

Pravidlá:
- SCOREKEEPER_STRICT_BAG='1' -> prečerpanie tašky sa v CLI berie ako chyba
  (override prepínača z príkazového riadku).
- SCOREKEEPER_STRICT_BAG='0' alebo chýba -> riadi to prepínač `--strict-bag`.
- SCOREKEEPER_LOG_PATH -> cesta k rotujúcemu log súboru (inak sa nepíše).
"""
from __future__ import annotations

import os

from dotenv import load_dotenv

# Načítaj .env veľmi skoro, ale nenahrádzaj už existujúce OS premenne
if os.getenv("PYTEST_CURRENT_TEST") is None:
    load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """True/False pre známe zápisy (1/0, yes/no, on/off ...), inak None."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def effective_strict_bag(cli_flag: bool | None) -> bool:
    """Vráti, či sa má prečerpanie tašky považovať za chybu.

    - .env == True  -> vždy True
    - .env == False -> podľa prepínača
    - .env == None  -> podľa prepínača
    """
    env_val = _parse_bool(os.getenv("SCOREKEEPER_STRICT_BAG"))
    if env_val is True:
        return True
    return bool(cli_flag)


def log_path_from_env() -> str | None:
    """Cesta k log súboru z prostredia, prázdna hodnota znamená bez súboru."""
    value = os.getenv("SCOREKEEPER_LOG_PATH", "").strip()
    return value or None
