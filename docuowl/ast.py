"""Tree representation of a parsed markdown document."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional


class ListType(enum.IntFlag):
    """Bit flags describing lists and list items."""

    ORDERED = 1
    DEFINITION = 2
    TERM = 4
    ITEM_CONTAINS_BLOCK = 8
    ITEM_BEGINNING_OF_LIST = 16
    ITEM_END_OF_LIST = 32


class CellAlignFlags(enum.IntFlag):
    """Alignment of a table cell; only one value is used at a time."""

    LEFT = 1
    RIGHT = 2
    CENTER = 3

    def __str__(self) -> str:
        return _ALIGN_NAMES.get(int(self), "")


_ALIGN_NAMES = {1: "left", 2: "right", 3: "center"}


class DocumentMatters(enum.IntEnum):
    """Document divisions: front, main or back matter."""

    NONE = 0
    FRONT = 1
    MAIN = 2
    BACK = 3


class CitationTypes(enum.IntEnum):
    """Kind of a citation."""

    NONE = 0
    SUPPRESSED = 1
    INFORMATIVE = 2
    NORMATIVE = 3


class WalkStatus(enum.Enum):
    """Controls how :func:`walk` proceeds after visiting a node."""

    GO_TO_NEXT = 0
    SKIP_CHILDREN = 1
    TERMINATE = 2


@dataclass(eq=False)
class Attribute:
    """Block attribute written as ``{#id .class key="value"}``."""

    id: Optional[str] = None
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)


class Node:
    """Base of every tree node. Nodes compare by identity."""

    is_container = False


@dataclass(eq=False)
class Container(Node):
    """A node that may hold children."""

    is_container = True

    parent: Optional[Node] = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list)
    literal: Optional[str] = None
    content: Optional[str] = None
    attribute: Optional[Attribute] = None


@dataclass(eq=False)
class Leaf(Node):
    """A node that cannot hold children."""

    parent: Optional[Node] = field(default=None, repr=False)
    literal: Optional[str] = None
    content: Optional[str] = None
    attribute: Optional[Attribute] = None

    @property
    def children(self) -> list[Node]:
        return []

    @children.setter
    def children(self, value: list[Node]) -> None:
        raise TypeError("leaf node cannot have children")


@dataclass(eq=False)
class Document(Container):
    """Root of a parsed document."""


@dataclass(eq=False)
class DocumentMatter(Container):
    matter: DocumentMatters = DocumentMatters.NONE


@dataclass(eq=False)
class BlockQuote(Container):
    pass


@dataclass(eq=False)
class Aside(Container):
    pass


@dataclass(eq=False)
class List(Container):
    list_flags: ListType = ListType(0)
    tight: bool = False
    bullet_char: str = ""
    delimiter: str = ""
    start: int = 0
    ref_link: Optional[str] = None
    is_footnotes_list: bool = False


@dataclass(eq=False)
class ListItem(Container):
    list_flags: ListType = ListType(0)
    tight: bool = False
    bullet_char: str = ""
    delimiter: str = ""
    ref_link: Optional[str] = None
    is_footnotes_list: bool = False


@dataclass(eq=False)
class Paragraph(Container):
    pass


@dataclass(eq=False)
class Math(Leaf):
    pass


@dataclass(eq=False)
class Emoji(Leaf):
    pass


@dataclass(eq=False)
class MathBlock(Container):
    pass


@dataclass(eq=False)
class Heading(Container):
    level: int = 0
    heading_id: str = ""
    is_titleblock: bool = False
    is_special: bool = False


@dataclass(eq=False)
class DocuowlBox(Container):
    title: str = ""
    is_docuowl_box: bool = False


@dataclass(eq=False)
class DocuowlList(Container):
    title: str = ""
    has_title: bool = False


@dataclass(eq=False)
class DocuowlListItem(Container):
    title: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class HorizontalRule(Leaf):
    pass


@dataclass(eq=False)
class Emph(Container):
    pass


@dataclass(eq=False)
class Strong(Container):
    pass


@dataclass(eq=False)
class Del(Container):
    pass


@dataclass(eq=False)
class Link(Container):
    destination: str = ""
    title: str = ""
    note_id: int = 0
    footnote: Optional[Node] = field(default=None, repr=False)
    deferred_id: Optional[str] = None
    additional_attributes: list[str] = field(default_factory=list)


@dataclass(eq=False)
class CrossReference(Container):
    destination: str = ""


@dataclass(eq=False)
class Citation(Leaf):
    destination: list[str] = field(default_factory=list)
    types: list[CitationTypes] = field(default_factory=list)
    suffix: list[str] = field(default_factory=list)


@dataclass(eq=False)
class Image(Container):
    destination: str = ""
    title: str = ""


@dataclass(eq=False)
class Text(Leaf):
    pass


@dataclass(eq=False)
class HTMLBlock(Leaf):
    pass


@dataclass(eq=False)
class CodeBlock(Leaf):
    is_fenced: bool = False
    info: Optional[str] = None
    fence_char: str = ""
    fence_length: int = 0
    fence_offset: int = 0


@dataclass(eq=False)
class Softbreak(Leaf):
    pass


@dataclass(eq=False)
class Hardbreak(Leaf):
    pass


@dataclass(eq=False)
class NonBlockingSpace(Leaf):
    pass


@dataclass(eq=False)
class Code(Leaf):
    pass


@dataclass(eq=False)
class HTMLSpan(Leaf):
    pass


@dataclass(eq=False)
class Table(Container):
    pass


@dataclass(eq=False)
class TableCell(Container):
    is_header: bool = False
    align: CellAlignFlags = CellAlignFlags(0)
    col_span: int = 0


@dataclass(eq=False)
class TableHeader(Container):
    pass


@dataclass(eq=False)
class TableBody(Container):
    pass


@dataclass(eq=False)
class TableRow(Container):
    pass


@dataclass(eq=False)
class TableFooter(Container):
    pass


@dataclass(eq=False)
class Caption(Container):
    pass


@dataclass(eq=False)
class CaptionFigure(Container):
    heading_id: str = ""


@dataclass(eq=False)
class Callout(Leaf):
    id: str = ""


@dataclass(eq=False)
class Index(Leaf):
    primary: bool = False
    item: str = ""
    subitem: str = ""
    id: str = ""


@dataclass(eq=False)
class Subscript(Leaf):
    pass


@dataclass(eq=False)
class Superscript(Leaf):
    pass


@dataclass(eq=False)
class Footnotes(Container):
    pass


def _index_of(nodes: list[Node], node: Node) -> int:
    return next((i for i, n in enumerate(nodes) if n is node), -1)


def append_child(parent: Node, child: Node) -> None:
    """Detach ``child`` from its current tree and append it to ``parent``."""
    remove_from_tree(child)
    child.parent = parent
    parent.children = [*parent.children, child]


def append_children(parent: Node, *args: Node) -> None:
    """Append every node in ``args`` to ``parent``, in order."""
    for child in args:
        append_child(parent, child)


def remove_from_tree(node: Node) -> None:
    """Remove ``node`` from its parent's children.

    A container that is removed loses its own children too. A node without a
    parent is left untouched.
    """
    parent = node.parent
    if parent is None:
        return
    if node.is_container:
        node.children = []
    siblings = parent.children
    idx = _index_of(siblings, node)
    if idx >= 0:
        parent.children = siblings[:idx] + siblings[idx + 1:]


def get_first_child(node: Node) -> Optional[Node]:
    children = node.children
    return children[0] if children else None


def get_last_child(node: Node) -> Optional[Node]:
    children = node.children
    return children[-1] if children else None


def get_next_node(node: Node) -> Optional[Node]:
    """Return the sibling after ``node``, or None."""
    if node.parent is None:
        return None
    siblings = node.parent.children
    idx = _index_of(siblings[:-1], node)
    return siblings[idx + 1] if idx >= 0 else None


def get_prev_node(node: Node) -> Optional[Node]:
    """Return the sibling before ``node``, or None."""
    if node.parent is None:
        return None
    siblings = node.parent.children
    idx = _index_of(siblings[1:], node)
    return siblings[idx] if idx >= 0 else None


Visitor = Callable[[Node, bool], Optional[WalkStatus]]


def walk(node: Node, visitor: Visitor) -> WalkStatus:
    """Traverse the tree depth first.

    ``visitor(node, entering)`` is called on entry to every node and, for
    containers, again on exit after the children.
    """
    is_container = node.is_container
    status = visitor(node, True)
    if status == WalkStatus.TERMINATE:
        if is_container:
            visitor(node, False)
        return WalkStatus.TERMINATE
    if is_container and status != WalkStatus.SKIP_CHILDREN:
        for child in list(node.children):
            if walk(child, visitor) == WalkStatus.TERMINATE:
                return WalkStatus.TERMINATE
    if is_container and visitor(node, False) == WalkStatus.TERMINATE:
        return WalkStatus.TERMINATE
    return WalkStatus.GO_TO_NEXT