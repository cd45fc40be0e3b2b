"""Documentation tree discovery, frontmatter, a Markdown syntax tree and a full-text search index."""

__version__ = "0.1.0"

__all__ = ["ast", "astprint", "emoji", "frontmatter", "fs", "fts", "stopwords"]