[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docuowl"
version = "0.1.0"
description = "Documentation tree discovery, YAML frontmatter, a Markdown syntax tree and a compact full-text search index"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "documentation",
    "markdown",
    "frontmatter",
    "full-text-search",
    "syntax-tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["docuowl"]

[tool.hatch.build.targets.sdist]
include = [
    "docuowl",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
