import base64
import gzip

from docuowl.frontmatter import Meta
from docuowl.fs import Group, Section
from docuowl.fts import FullTextSearchEngine


def _decode(encoded):
    raw = base64.b64decode(encoded)
    size = int.from_bytes(raw[5:9], "big")
    return raw[:5], size, raw[9:]


def _section(content, side_notes=None, title="Intro", ident="intro", parent=None):
    return Section(
        meta=Meta(title=title, id=ident),
        content=content,
        side_notes=side_notes or [],
        has_side_notes=side_notes is not None,
        parent=parent,
    )


def test_empty_index_layout():
    header, size, body = _decode(FullTextSearchEngine("en").serialize())
    assert header == b"owl\x00\x01"
    assert size == len(body)
    assert gzip.decompress(body) == b"\x02\x03"


def test_single_word_index_bytes():
    engine = FullTextSearchEngine("en", stop_words={"en": ["world"]})
    parent = Group(meta=Meta(title="Guide", id="guide"))
    engine.add_section(_section(["hello world", "hello the 1234 abc"], parent=parent))
    assert engine.pages == {5: {"hello": [(0, 2)]}}
    _, _, body = _decode(engine.serialize())
    payload = gzip.decompress(body)
    assert payload == (
        b"\x02guide-intro\x00\x03"
        + bytes([5, 1])
        + b"hello"
        + bytes([1])
        + b"\x00\x00\x00\x02"
    )


def test_stop_words_depend_on_language():
    engine = FullTextSearchEngine("pt", stop_words={"en": ["hello"]})
    engine.add_section(_section(["hello"]))
    assert "hello" in engine.pages[5]


def test_section_without_meta_is_skipped():
    engine = FullTextSearchEngine("en")
    engine.add_section(Section(content=["something long"]))
    assert engine.section_ids == []
    assert engine.pages == {}


def test_identifier_falls_back_to_title():
    engine = FullTextSearchEngine("en")
    parent = Group(meta=Meta(title="Guide", id=""))
    engine.add_section(_section(["words"], parent=parent))
    assert engine.section_ids == ["Guide-intro"]


def test_side_notes_join_content_without_separator():
    engine = FullTextSearchEngine("en")
    engine.add_section(_section(["alpha"], side_notes=["beta"]))
    assert engine.pages == {9: {"alphabeta": [(0, 1)]}}


def test_text_is_lowercased_and_tabs_split():
    engine = FullTextSearchEngine("en")
    engine.add_section(_section(["Hello\tHELLO"]))
    assert engine.pages[5]["hello"] == [(0, 2)]


def test_specials_are_replaced_by_spaces():
    engine = FullTextSearchEngine("en", specials=r"[.,]")
    engine.add_section(_section(["hello,hello."]))
    assert engine.pages == {5: {"hello": [(0, 2)]}}


def test_pages_accumulate_across_sections():
    engine = FullTextSearchEngine("en")
    engine.add_section(_section(["shared once"], ident="one"))
    engine.add_section(_section(["shared shared"], ident="two"))
    assert engine.section_ids == ["one", "two"]
    assert engine.pages[6]["shared"] == [(0, 1), (1, 2)]
    assert engine.words[6]["shared"] == 3


def test_serialized_sections_appear_in_order():
    engine = FullTextSearchEngine("en")
    engine.add_section(_section(["text"], ident="one"))
    engine.add_section(_section(["text"], ident="two"))
    _, size, body = _decode(engine.serialize())
    assert size == len(body)
    assert gzip.decompress(body).startswith(b"\x02one\x00two\x00\x03")