"""Discovery of documentation sections and groups on disk."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Optional, Union

from docuowl.frontmatter import (
    Meta,
    Slugifier,
    UnexpectedEOFError,
    extract_from_file,
    extract_from_lines,
)

_GROUP_FILE = "meta.md"
_CONTENT_FILE = "content.md"
_SIDE_NOTES_FILE = "sidenotes.md"


class EntityKind(enum.IntEnum):
    SECTION = 1
    GROUP = 2


def _compound_id(entity: Entity) -> str:
    ids = []
    node: Optional[Entity] = entity
    while node is not None:
        ids.append(node.meta.id)
        node = node.parent
    return "-".join(reversed(ids))


@dataclass(eq=False)
class Section:
    """A page of documentation, optionally with side notes."""

    kind: ClassVar[EntityKind] = EntityKind.SECTION

    meta: Optional[Meta] = None
    content: list[str] = field(default_factory=list)
    side_notes: list[str] = field(default_factory=list)
    has_side_notes: bool = False
    parent: Optional[Group] = field(default=None, repr=False)

    def compound_id(self) -> str:
        """IDs from the outermost group down to this section, joined by '-'."""
        return _compound_id(self)


@dataclass(eq=False)
class Group:
    """A directory of sections and nested groups described by meta.md."""

    kind: ClassVar[EntityKind] = EntityKind.GROUP

    meta: Optional[Meta] = None
    children: list[Entity] = field(default_factory=list)
    parent: Optional[Group] = field(default=None, repr=False)
    content: Optional[Section] = None

    def compound_id(self) -> str:
        """IDs from the outermost group down to this group, joined by '-'."""
        return _compound_id(self)


Entity = Union[Section, Group]


def walk(root: str | os.PathLike[str], slugify: Slugifier) -> list[Entity]:
    """Scan ``root`` and return the documentation tree found beneath it."""
    return _walk(os.fspath(root), None, slugify)


def _entries(root: str) -> list[str]:
    try:
        names = sorted(os.listdir(root))
    except OSError:
        return []
    return [os.path.join(root, name) for name in names]


def _read_text(path: str) -> str:
    return Path(path).read_bytes().decode("utf-8")


def _walk(root: str, parent: Optional[Group], slugify: Slugifier) -> list[Entity]:
    matches = _entries(root)
    names = {os.path.basename(m) for m in matches}

    if _GROUP_FILE in names:
        meta, content = extract_from_file(os.path.join(root, _GROUP_FILE), slugify)
        group = Group(meta=meta, parent=parent)
        for match in matches:
            if match.endswith(".md"):
                continue
            group.children.extend(_walk(match, group, slugify))
        if content:
            group.content = Section(content=content)
        return [group]

    if _CONTENT_FILE in names:
        return [_read_section(root, names, parent, slugify)]

    result: list[Entity] = []
    for subdir in _subdirectories(root):
        result.extend(_walk(subdir, parent, slugify))
    return result


def _read_section(
    root: str, names: set[str], parent: Optional[Group], slugify: Slugifier
) -> Section:
    content_path = os.path.join(root, _CONTENT_FILE)
    text = _read_text(content_path)
    try:
        meta, content = extract_from_lines(text.split("\n"), slugify)
    except UnexpectedEOFError:
        raise UnexpectedEOFError(
            f"{content_path}: Could not find frontmatter terminator"
        ) from None
    if meta is None:
        raise ValueError(f"{content_path}: Content files must have frontmatter")

    section = Section(meta=meta, content=content, parent=parent)
    if _SIDE_NOTES_FILE in names:
        section.has_side_notes = True
        section.side_notes = _read_text(os.path.join(root, _SIDE_NOTES_FILE)).split("\n")
    return section


def _subdirectories(root: str) -> list[str]:
    """Directories below ``root``, looking through dot-directories."""
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        return []
    found: list[str] = []
    _collect_dirs(root, found)
    return found


def _collect_dirs(directory: str, found: list[str]) -> None:
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if not stat.S_ISDIR(os.lstat(path).st_mode):
            continue
        if name.startswith("."):
            _collect_dirs(path, found)
        else:
            found.append(path)