from __future__ import annotations

from datetime import datetime

from notecli.note_header import find_tags_line, has_tag, render_document, render_header
from notecli.utils.tags import split_tags

CREATED = datetime(2024, 1, 2, 3, 4, 5)


def test_render_header_without_tags() -> None:
    assert render_header("Project Plan", created=CREATED) == (
        "# Project Plan\n\nCreated: 2024-01-02 03:04:05\n\n---\n\n"
    )


def test_render_header_with_tags() -> None:
    header = render_header("Plan", ["work", "ideas"], created=CREATED)
    assert "Tags: work, ideas\n" in header
    assert header.endswith("\n---\n\n")


def test_render_document_appends_body_with_newline() -> None:
    document = render_document("Plan", None, "first line", created=CREATED)
    assert document.endswith("---\n\nfirst line\n")


def test_find_tags_line_returns_remainder() -> None:
    assert find_tags_line("# T\nTags: a, b\n") == " a, b"
    assert find_tags_line("# T\n") is None


def test_has_tag_is_case_insensitive_substring() -> None:
    content = "# T\nTags: Homework, misc\n"
    assert has_tag(content, "WORK")
    assert not has_tag(content, "urgent")


def test_split_tags_drops_blanks_and_duplicates() -> None:
    assert split_tags("work, ideas,, Work ,") == ("work", "ideas")
    assert split_tags(None) == ()
