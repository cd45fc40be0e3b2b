"""YAML front matter at the top of documentation files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

import yaml

Slugifier = Callable[[str], str]

_DELIMITER = "---"


@dataclass
class Meta:
    """Metadata declared in a file's front matter."""

    title: str = ""
    id: str = ""


class UnexpectedEOFError(ValueError):
    """Front matter was opened but never closed."""

    def __init__(self, message: str = "unexpected eof") -> None:
        super().__init__(message)


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"expected a scalar value in front matter, got {value!r}")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_meta(text: str) -> Meta:
    data = yaml.safe_load(text)
    if data is None:
        return Meta()
    if not isinstance(data, dict):
        raise ValueError("front matter must be a mapping")
    return Meta(title=_scalar(data.get("Title")), id=_scalar(data.get("ID")))


def extract_from_lines(
    lines: Iterable[str], slugify: Slugifier
) -> tuple[Optional[Meta], list[str]]:
    """Split ``lines`` into front matter and body.

    Returns ``(None, lines)`` when there is no front matter. The metadata ID
    falls back to the title and is passed through ``slugify``. A body made of
    blank lines only comes back empty.
    """
    lines = list(lines)
    if len(lines) < 3 or lines[0] != _DELIMITER:
        return None, lines
    try:
        end = lines.index(_DELIMITER, 1)
    except ValueError:
        raise UnexpectedEOFError() from None

    meta = _parse_meta("\n".join(lines[1:end]))
    meta.id = slugify(meta.id or meta.title)

    body = lines[end + 1:]
    if all(not line.strip() for line in body):
        body = []
    return meta, body


def extract_from_file(
    path: str | os.PathLike[str], slugify: Slugifier
) -> tuple[Optional[Meta], list[str]]:
    """Read ``path`` and split it as :func:`extract_from_lines` does."""
    text = Path(path).read_bytes().decode("utf-8")
    return extract_from_lines(text.split("\n"), slugify)