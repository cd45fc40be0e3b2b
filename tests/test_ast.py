import pytest

from docuowl.ast import (
    CellAlignFlags,
    Document,
    HorizontalRule,
    Paragraph,
    Text,
    WalkStatus,
    append_child,
    append_children,
    get_first_child,
    get_last_child,
    get_next_node,
    get_prev_node,
    remove_from_tree,
    walk,
)


def _tree():
    doc = Document()
    para = Paragraph()
    text = Text(literal="hello")
    append_child(doc, para)
    append_child(para, text)
    return doc, para, text


def test_append_child_sets_parent_and_children():
    doc, para, text = _tree()
    assert doc.children == [para]
    assert para.parent is doc
    assert text.parent is para
    assert para.children[0] is text


def test_append_children_keeps_order():
    para = Paragraph()
    nodes = [Text(literal="a"), Text(literal="b"), Text(literal="c")]
    append_children(para, *nodes)
    assert [n.literal for n in para.children] == ["a", "b", "c"]
    assert all(n.parent is para for n in nodes)


def test_append_child_moves_node_between_parents():
    first, second = Paragraph(), Paragraph()
    text = Text(literal="x")
    append_child(first, text)
    append_child(second, text)
    assert first.children == []
    assert second.children == [text]
    assert text.parent is second


def test_remove_from_tree_detaches_and_clears_container_children():
    doc, para, text = _tree()
    remove_from_tree(para)
    assert doc.children == []
    assert para.children == []


def test_remove_from_tree_without_parent_keeps_children():
    para = Paragraph(children=[Text(literal="x")])
    remove_from_tree(para)
    assert len(para.children) == 1


def test_remove_uses_identity_not_equality():
    para = Paragraph()
    a, b = Text(literal="same"), Text(literal="same")
    append_children(para, a, b)
    remove_from_tree(b)
    assert len(para.children) == 1
    assert para.children[0] is a


def test_leaf_has_no_children_and_rejects_them():
    rule = HorizontalRule()
    assert rule.children == []
    with pytest.raises(TypeError):
        rule.children = [Text()]
    with pytest.raises(TypeError):
        append_child(rule, Text())


def test_first_and_last_child():
    para = Paragraph()
    assert get_first_child(para) is None
    assert get_last_child(para) is None
    a, b, c = Text(), Text(), Text()
    append_children(para, a, b, c)
    assert get_first_child(para) is a
    assert get_last_child(para) is c


def test_next_and_prev_node():
    para = Paragraph()
    a, b, c = Text(literal="t"), Text(literal="t"), Text(literal="t")
    append_children(para, a, b, c)
    assert get_next_node(a) is b
    assert get_next_node(b) is c
    assert get_next_node(c) is None
    assert get_prev_node(c) is b
    assert get_prev_node(b) is a
    assert get_prev_node(a) is None


def test_siblings_of_orphan_are_none():
    lone = Text()
    assert get_next_node(lone) is None
    assert get_prev_node(lone) is None


def test_walk_visits_in_order_and_exits_containers_only():
    doc, para, text = _tree()
    events = []

    def visitor(node, entering):
        events.append((node, entering))
        return WalkStatus.GO_TO_NEXT

    result = walk(doc, visitor)
    assert result == WalkStatus.GO_TO_NEXT
    assert events == [(doc, True), (para, True), (text, True), (para, False), (doc, False)]


def test_walk_skip_children():
    doc, para, text = _tree()
    seen = []

    def visitor(node, entering):
        seen.append(node)
        if isinstance(node, Paragraph):
            return WalkStatus.SKIP_CHILDREN
        return WalkStatus.GO_TO_NEXT

    walk(doc, visitor)
    assert text not in seen
    assert seen.count(para) == 2


def test_walk_terminate_still_closes_container():
    doc, para, text = _tree()
    append_child(doc, Paragraph())
    events = []

    def visitor(node, entering):
        events.append((node, entering))
        if node is para and entering:
            return WalkStatus.TERMINATE
        return WalkStatus.GO_TO_NEXT

    assert walk(doc, visitor) == WalkStatus.TERMINATE
    assert events == [(doc, True), (para, True), (para, False)]


def test_cell_align_names():
    assert CellAlignFlags.CENTER == CellAlignFlags.LEFT | CellAlignFlags.RIGHT
    assert str(CellAlignFlags.LEFT) == "left"
    assert str(CellAlignFlags.RIGHT) == "right"
    assert str(CellAlignFlags.CENTER) == "center"
    assert str(CellAlignFlags(0)) == ""