"""Full-text search index built from documentation sections."""

from __future__ import annotations

import base64
import gzip
import re
import struct
from typing import Mapping, Optional, Sequence, Union

from docuowl.fs import Section

MIN_WORD_LENGTH = 3

_MAGIC = b"owl\x00\x01"
_STRIPPER = re.compile(r"[\r\n\t]")
_ONLY_DIGITS = re.compile(r"[0-9]+")


class FullTextSearchEngine:
    """Collects word frequencies per section and serialises them.

    ``stop_words`` maps language names to their stop words; ``specials`` is a
    pattern whose matches are replaced by spaces before tokenising.
    """

    def __init__(
        self,
        lang: str,
        stop_words: Optional[Mapping[str, Sequence[str]]] = None,
        specials: Union[str, re.Pattern[str], None] = None,
    ) -> None:
        self.lang = lang
        self.stop_words = frozenset((stop_words or {}).get(lang, ()))
        self.specials = re.compile(specials) if isinstance(specials, str) else specials
        self.words: dict[int, dict[str, int]] = {}
        self.pages: dict[int, dict[str, list[tuple[int, int]]]] = {}
        self.section_ids: list[str] = []

    def add_section(self, section: Section) -> None:
        """Index the words of ``section``; sections without metadata are skipped."""
        identifier = _section_identifier(section)
        if not identifier:
            return
        frequency = self._process_words(section)
        self.section_ids.append(identifier)
        idx = len(self.section_ids) - 1
        for word, count in frequency.items():
            by_len = self.pages.setdefault(len(word), {})
            by_len.setdefault(word, []).append((idx, count))

    def serialize(self) -> str:
        """Return the compressed index encoded as base64."""
        payload = bytearray(b"\x02")
        for identifier in self.section_ids:
            payload += identifier.encode("utf-8") + b"\x00"
        payload += b"\x03"
        payload += self._serialize_index()
        compressed = gzip.compress(bytes(payload), compresslevel=9, mtime=0)
        result = _MAGIC + struct.pack(">I", len(compressed) & 0xFFFFFFFF) + compressed
        return base64.b64encode(result).decode("ascii")

    def _serialize_index(self) -> bytes:
        out = bytearray()
        for length, words in self.pages.items():
            out.append(length & 0xFF)
            out.append(len(words) & 0xFF)
            for word, postings in words.items():
                out += word.encode("utf-8")
                out.append(len(postings) & 0xFF)
                for page, freq in postings:
                    out += struct.pack(">HH", page & 0xFFFF, freq & 0xFFFF)
        return bytes(out)

    def _tokenize(self, text: str) -> list[str]:
        return [
            word
            for word in _STRIPPER.sub(" ", text).split(" ")
            if not _ONLY_DIGITS.fullmatch(word)
            and len(word) > MIN_WORD_LENGTH
            and word not in self.stop_words
        ]

    def _process_words(self, section: Section) -> dict[str, int]:
        data = " ".join(section.content)
        if section.has_side_notes:
            data += " ".join(section.side_notes)
        if self.specials is not None:
            data = self.specials.sub(" ", data)
        data = data.lower()

        freq: dict[str, int] = {}
        for token in self._tokenize(data):
            freq[token] = freq.get(token, 0) + 1

        for word, count in freq.items():
            counts = self.words.setdefault(len(word), {})
            counts[word] = counts.get(word, 0) + count
        return freq


def _take_id(entity) -> str:
    return entity.meta.id or entity.meta.title


def _section_identifier(section: Section) -> str:
    if section.meta is None:
        return ""
    ids = [_take_id(section)]
    parent = section.parent
    while parent is not None:
        ids.append(_take_id(parent))
        parent = parent.parent
    return "-".join(reversed(ids))