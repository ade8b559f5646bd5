"""Pomocné funkcie pre prístup k assetom (napr. premiums.json).

Komentár (SK): Používame Path pre robustné zostavenie ciest nezávislé od cwd.
"""

from __future__ import annotations

from pathlib import Path


def get_assets_path() -> Path:
    """Vráti cestu k priečinku `assets/` v balíku.

    Nájde sa relatívne k tomuto modulu (`scorekeeper/core/assets.py`).
    """

    return Path(__file__).resolve().parent.parent / "assets"


def get_premiums_path() -> Path:
    """Úplná cesta k súboru `premiums.json` s rozložením prémiových polí."""

    return get_assets_path() / "premiums.json"
