"""Tests for comment/code sectioning."""

import pytest

from ingestion import DEFAULT_REGISTRY, Section, sectionize
from ingestion.languages import lookup


PYTHON = lookup(".py")

SAMPLES = [
    "",
    "x = 1\n",
    "# only\n# comments\n",
    "x=1\n# c\ny=2\n# d\nz=3\n",
    "# lead\n\n# two\nx = 1\n\ny = 2\n# tail\n",
    "#!/usr/bin/env python\n# doc\nimport os\n    # indented doc\nos.sep\n",
    "no trailing newline\n# c\nlast",
]


def pairs(sections):
    return [(s.docs_text, s.code_text) for s in sections]


def test_hashbang_stays_with_code():
    source = "#!/usr/bin/env python\nx = 1\n# comment\ny = 2\n"
    assert pairs(sectionize(PYTHON, source)) == [
        ("", "#!/usr/bin/env python\nx = 1\n"),
        ("comment\n", "y = 2\n"),
    ]


def test_only_comments_gives_one_section():
    assert pairs(sectionize(PYTHON, "# a\n# b\n")) == [("a\nb\n", "")]


def test_alternating_runs():
    assert pairs(sectionize(PYTHON, "x=1\n# c\ny=2\n# d\nz=3\n")) == [
        ("", "x=1\n"),
        ("c\n", "y=2\n"),
        ("d\n", "z=3\n"),
    ]


def test_no_comments_gives_one_code_section():
    source = "a = 1\nb = 2\n"
    assert pairs(sectionize(PYTHON, source)) == [("", source)]


def test_trailing_comment_seals_section_with_empty_code():
    assert pairs(sectionize(PYTHON, "x = 1\n# end\n")) == [("", "x = 1\n"), ("end\n", "")]


def test_sections_are_fresh_objects_without_html():
    sections = sectionize(PYTHON, "# doc\ncode\n")
    assert sections == [Section(docs_text="doc\n", code_text="code\n")]
    assert sections[0].docs_html is None
    assert sections[0].code_html is None


@pytest.mark.parametrize("language", DEFAULT_REGISTRY.languages(), ids=lambda lang: lang.extension)
def test_empty_file_gives_one_empty_section(language):
    assert pairs(sectionize(language, "")) == [("", "")]


@pytest.mark.parametrize("source", SAMPLES)
def test_every_line_lands_in_exactly_one_section(source):
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    code_lines = [line for line in lines if not PYTHON.is_comment(line)]
    doc_lines = [PYTHON.strip_comment(line) for line in lines if PYTHON.is_comment(line)]

    sections = sectionize(PYTHON, source)

    assert "".join(s.code_text for s in sections) == "".join(line + "\n" for line in code_lines)
    assert "".join(s.docs_text for s in sections) == "".join(line + "\n" for line in doc_lines)


def test_only_first_section_may_lack_docs_and_only_last_may_lack_code():
    sections = sectionize(PYTHON, "x\n# a\ny\n# b\n# c\nz\n# d\n")
    assert all(s.docs_text for s in sections[1:])
    assert all(s.code_text for s in sections[:-1])


def test_ruby_interpolation_line_is_code():
    ruby = lookup(".rb")
    assert pairs(sectionize(ruby, '# doc\n#{name}\n')) == [("doc\n", "#{name}\n")]


def test_other_comment_symbols():
    js = lookup(".js")
    assert pairs(sectionize(js, "// js doc\nlet a = 1;\n")) == [("js doc\n", "let a = 1;\n")]
    lua = lookup(".lua")
    assert pairs(sectionize(lua, "local a = 1\n-- lua doc\nprint(a)\n")) == [
        ("", "local a = 1\n"),
        ("lua doc\n", "print(a)\n"),
    ]


def test_crlf_line_endings_are_normalised():
    assert pairs(sectionize(PYTHON, "# c\r\nx = 1\r\n")) == [("c\n", "x = 1\n")]
