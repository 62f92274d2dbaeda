"""Unit tests for docval.api.docs._split_guide."""

import re
from pathlib import Path

from docval.api.config._defaults import DEFAULT_SEPARATOR
from docval.api.docs._split_guide import _split_guide
from docval.api.docs.extract_links import extract_links

SEPARATOR = re.compile(DEFAULT_SEPARATOR, re.IGNORECASE)


def test_file_without_separator_is_one_guide():
    guides = _split_guide(Path("/docs/SKILL.md"), "SKILL.md", "# Skill\n\n[a](a.md)\n", SEPARATOR)

    assert len(guides) == 1
    guide = guides[0]
    assert guide.ordinal == 0
    assert guide.name is None
    assert guide.title == "Skill"
    assert guide.guide_id == "SKILL.md"
    assert guide.line_offset == 0


def test_split_on_separator_lines():
    text = (
        "# Index\n"
        "\n"
        "intro [x](a.md)\n"
        "<!-- guide: locators -->\n"
        "# Locators\n"
        "[l](b.md)\n"
        "<!-- GUIDE: ci -->\n"
        "## CI\n"
        "[c](c.md)\n"
    )
    guides = _split_guide(Path("/docs/all.md"), "all.md", text, SEPARATOR)

    assert [(g.ordinal, g.name, g.title, g.line_offset) for g in guides] == [
        (1, None, "Index", 0),
        (2, "locators", "Locators", 4),
        (3, "ci", "CI", 7),
    ]
    assert guides[1].guide_id == "all.md#2"
    assert all(g.path == Path("/docs/all.md") for g in guides)

    # Line numbers refer to the parent file
    assert [ref.line_number for ref in extract_links(guides[1])] == [6]
    assert [ref.line_number for ref in extract_links(guides[2])] == [9]


def test_blank_preamble_is_dropped():
    guides = _split_guide(Path("/docs/a.md"), "a.md", "\n<!-- guide: a -->\n[x](y.md)\n", SEPARATOR)

    assert [(g.ordinal, g.name, g.line_offset) for g in guides] == [(1, "a", 2)]
    assert extract_links(guides[0])[0].line_number == 3


def test_separator_inside_code_fence_does_not_split():
    text = "# Example\n```md\n<!-- guide: sample -->\n```\n"
    guides = _split_guide(Path("/docs/a.md"), "a.md", text, SEPARATOR)
    assert len(guides) == 1
    assert guides[0].ordinal == 0


def test_unnamed_separator():
    guides = _split_guide(Path("/docs/a.md"), "a.md", "<!-- guide: -->\n# One\n", SEPARATOR)
    assert guides[0].name is None
    assert guides[0].title == "One"


def test_title_ignores_headings_in_code():
    text = "```\n# not a title\n```\n## Real title ##\n"
    guides = _split_guide(Path("/docs/a.md"), "a.md", text, SEPARATOR)
    assert guides[0].title == "Real title"
