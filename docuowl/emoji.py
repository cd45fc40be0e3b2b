"""Loading of emoji aliases from a JSON catalogue."""

from __future__ import annotations

import json
import os
from pathlib import Path


def load_emoji_aliases(path: str | os.PathLike[str]) -> dict[str, str]:
    """Map every alias in the catalogue at ``path`` to its emoji symbol.

    The catalogue is a JSON list of objects with ``emoji`` and ``aliases``.
    """
    entries = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError("emoji catalogue must be a JSON list")
    aliases: dict[str, str] = {}
    for entry in entries:
        symbol = entry.get("emoji") or ""
        for alias in entry.get("aliases") or []:
            aliases[alias] = symbol
    return aliases