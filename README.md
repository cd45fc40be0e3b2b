# docuowl

Building blocks for turning a directory of Markdown files into a single
documentation page: discovering the documentation tree on disk, reading the
YAML frontmatter of each file, building a compact full-text search index, and
a Markdown syntax-tree model with editing and dumping helpers.

## Installation

```
pip install .
```

The tests need the `test` extra (`pip install .[test]`) and run with pytest.

## Modules

### `docuowl.frontmatter`

- `Meta` — dataclass with `title` and `id`.
- `extract_from_lines(lines, slugify)` — if the lines start with `---` (and
  there are at least three lines), the YAML up to the next `---` line is read
  for the `Title` and `ID` keys. `ID` falls back to `Title` and is passed
  through your `slugify` callable. Returns `(meta, body)`; a body made only of
  blank lines comes back as `[]`. Without frontmatter it returns
  `(None, lines)`.
- `extract_from_file(path, slugify)` — the same for a UTF-8 file.
- `UnexpectedEOFError` (a `ValueError`) — raised when frontmatter is opened
  but never closed. Frontmatter that is not a mapping, or whose `Title`/`ID`
  is a list or mapping, raises `ValueError`.

### `docuowl.fs`

`walk(root, slugify)` scans a directory and returns a list of `Group` and
`Section` entities:

- a directory holding `meta.md` is a `Group`. Its metadata comes from
  `meta.md`; every entry in it that does not end in `.md` is walked for
  children. Text after the frontmatter of `meta.md` becomes `group.content`
  (a `Section` without metadata).
- a directory holding `content.md` is a `Section`. `content.md` must start
  with frontmatter (otherwise `ValueError`; an unterminated block raises
  `UnexpectedEOFError` naming the file). A `sidenotes.md` next to it sets
  `has_side_notes` and fills `side_notes` with its lines.
- any other directory is searched for subdirectories, which are walked with
  the same parent. Directories whose name starts with `.` are looked through
  rather than walked themselves.

Entries are visited in sorted name order. Each entity has `kind`
(`EntityKind.SECTION` or `EntityKind.GROUP`), `meta`, `parent`, and
`compound_id()`: the IDs from the outermost group down to the entity, joined
by `-`.

```
docs/
  getting-started/
    meta.md          # group metadata and optional intro text
    install/
      content.md     # section text, must start with frontmatter
      sidenotes.md   # optional side notes
```

### `docuowl.fts`

`FullTextSearchEngine(lang, stop_words=None, specials=None)`:

- `stop_words` maps language names to word lists; the list for `lang` is
  used (see `docuowl.stopwords`).
- `specials` is a regular expression (string or compiled pattern) whose
  matches are replaced by spaces before tokenising.
- `add_section(section)` indexes a section that has metadata. Its content and
  side notes are lowercased and split on spaces (after turning `\r`, `\n`,
  `\t` into spaces). Words of three characters or fewer, words made only of
  digits and stop words are dropped; the rest are counted per section. The
  section's identifier is its ID (or title, if the ID is empty) preceded by
  those of its parents, joined by `-`.
- `serialize()` returns a base64 string: the bytes `owl\x00\x01`, a 4-byte
  big-endian length, then a gzip stream holding `\x02`, each section
  identifier followed by `\x00`, `\x03`, and the word index grouped by word
  length, with 16-bit big-endian section numbers and frequencies.

### `docuowl.stopwords`

`load_stop_words(directory)` reads every `*.txt` file in a directory into a
dict keyed by language: `stopwords-en.txt` becomes `"en"`. Lines starting with
`#` and blank lines are skipped.

### `docuowl.emoji`

`load_emoji_aliases(path)` reads a JSON list of objects with `emoji` and
`aliases` and returns a dict mapping each alias to its symbol. A file that is
not a JSON list raises `ValueError`.

### `docuowl.ast` and `docuowl.astprint`

`docuowl.ast` holds the Markdown node types (`Document`, `Paragraph`,
`Heading`, `List`, `ListItem`, `Link`, `Text`, `CodeBlock`, `Table`…, and the
`DocuowlBox`, `DocuowlList` and `DocuowlListItem` nodes), built on
`Container` (may hold children) and `Leaf` (assigning children raises
`TypeError`). Helpers: `append_child`, `append_children`, `remove_from_tree`,
`get_first_child`, `get_last_child`, `get_next_node`, `get_prev_node`, and
`walk(node, visitor)`, which calls `visitor(node, entering)` depth first and
honours the returned `WalkStatus` (`GO_TO_NEXT`, `SKIP_CHILDREN`,
`TERMINATE`).

`docuowl.astprint` dumps a tree one node per line: `to_string(doc)`,
`print_ast(dst, doc)` (two-space indent) and `print_with_prefix(dst, doc,
prefix)`. A `Document` root is not printed itself, and text is shortened to
40 characters.

## Example

```python
from docuowl.frontmatter import extract_from_lines
from docuowl.fs import walk
from docuowl.fts import FullTextSearchEngine

def slugify(text):
    return "-".join(text.lower().split())

meta, body = extract_from_lines(
    ["---", "Title: Hello World", "---", "Some text"], slugify
)
print(meta.id)   # hello-world
print(body)      # ['Some text']

engine = FullTextSearchEngine("en", stop_words={"en": ["this", "that"]})
for entity in walk("docs", slugify):
    print(entity.compound_id())
index = engine.serialize()
```

## What this package does not do

There is no command-line tool, no Markdown parser and no HTML renderer: the
`docuowl.ast` types describe a tree but nothing here builds one from text or
writes it out as HTML. Nothing writes a finished documentation page to disk,
serves it, or watches a directory for changes. Stop words, emoji aliases and
the slug function are supplied by the caller; none are bundled.