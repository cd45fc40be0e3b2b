"""Readable dump of a markdown tree, meant for debugging."""

from __future__ import annotations

import io
from typing import Optional, TextIO

from docuowl.ast import Document, Image, Link, List, ListItem, ListType, Node

_MAX_CONTENT = 40

_FLAG_NAMES = (
    (ListType.ORDERED, "ordered"),
    (ListType.DEFINITION, "definition"),
    (ListType.TERM, "term"),
    (ListType.ITEM_CONTAINS_BLOCK, "has_block"),
    (ListType.ITEM_BEGINNING_OF_LIST, "start"),
    (ListType.ITEM_END_OF_LIST, "end"),
)


def print_ast(dst: TextIO, doc: Node) -> None:
    """Write the tree under ``doc`` to ``dst`` indented by two spaces."""
    print_with_prefix(dst, doc, "  ")


def print_with_prefix(dst: TextIO, doc: Node, prefix: str) -> None:
    """Write the tree under ``doc`` using ``prefix`` for each indent level.

    A Document root is not printed itself; its children start at depth 0.
    """
    roots = doc.children if isinstance(doc, Document) else [doc]
    for node in roots:
        _print_recur(dst, node, prefix, 0)


def to_string(doc: Node) -> str:
    """Return the dump of ``doc`` as a string."""
    buf = io.StringIO()
    print_ast(buf, doc)
    return buf.getvalue()


def _content_of(node: Node) -> str:
    for value in (node.literal, node.content):
        if value is not None:
            return value
    return ""


def _shorten(text: str, max_len: int) -> str:
    text = text.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    if max_len < 0 or len(text) < max_len:
        return text
    return text[: max_len - 3] + "…"


def _list_flags(flags: ListType) -> str:
    return " ".join(name for flag, name in _FLAG_NAMES if flags & flag)


def _print_default(dst: TextIO, indent: str, type_name: str, content: str) -> None:
    content = content.strip()
    if content:
        dst.write(f"{indent}{type_name} '{content}'\n")
    else:
        dst.write(f"{indent}{type_name}\n")


def _describe_list(node: List | ListItem, content: str, start: Optional[int]) -> str:
    if start is not None and start > 1:
        content += f"start={start} "
    if node.tight:
        content += "tight "
    if node.is_footnotes_list:
        content += "footnotes "
    flags = _list_flags(node.list_flags)
    if flags:
        content += f"flags={flags} "
    return content


def _print_recur(dst: TextIO, node: Optional[Node], prefix: str, depth: int) -> None:
    if node is None:
        return
    indent = prefix * depth
    content = _shorten(_content_of(node), _MAX_CONTENT)
    type_name = type(node).__name__
    if isinstance(node, (Link, Image)):
        content = "url=" + node.destination
    elif isinstance(node, List):
        content = _describe_list(node, content, node.start)
    elif isinstance(node, ListItem):
        content = _describe_list(node, content, None)
    _print_default(dst, indent, type_name, content)
    for child in node.children:
        _print_recur(dst, child, prefix, depth + 1)