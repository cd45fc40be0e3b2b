"""Loading of per-language stop word lists."""

from __future__ import annotations

import os
from pathlib import Path

_PREFIX = "stopwords-"
_SUFFIX = ".txt"


def _language_of(file_name: str) -> str:
    name = file_name[len(_PREFIX):] if file_name.startswith(_PREFIX) else file_name
    return name[: -len(_SUFFIX)]


def load_stop_words(directory: str | os.PathLike[str]) -> dict[str, list[str]]:
    """Read every ``*.txt`` file in ``directory`` as a stop word list.

    The language name is the file name without a ``stopwords-`` prefix and the
    ``.txt`` suffix. Lines starting with ``#`` and blank lines are skipped.
    """
    result: dict[str, list[str]] = {}
    for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if entry.is_dir() or not entry.name.endswith(_SUFFIX):
            continue
        text = entry.read_bytes().decode("utf-8")
        result[_language_of(entry.name)] = [
            line
            for line in text.split("\n")
            if not line.startswith("#") and line.strip()
        ]
    return result