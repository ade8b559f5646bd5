"""Vstupný bod pre spustenie: `python -m scorekeeper`.

Deleguje na `scorekeeper.cli.main()`.
"""

from __future__ import annotations

import sys

from .cli import main as _main


def main() -> None:
    """Spustí príkazový riadok.

    Pozn.: Oddelené kvôli entry pointu `scorekeeper` v pyproject.toml.
    """

    sys.exit(_main())


if __name__ == "__main__":
    main()
