"""Header block rendering and parsing for note files."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from .utils.datetime_fmt import to_user_friendly_local

HEADER_SEPARATOR = "---"
CREATED_PREFIX = "Created:"
TAGS_PREFIX = "Tags:"


def render_header(
    title: str,
    tags: Iterable[str] | None = None,
    *,
    created: datetime | None = None,
) -> str:
    """Return the header written at the top of a new note.

    The block ends with the separator followed by a blank line so that the
    body (or the editor cursor) starts on a fresh line.
    """

    lines = [f"# {title}", "", f"{CREATED_PREFIX} {to_user_friendly_local(created)}"]
    tag_list = list(tags or ())
    if tag_list:
        lines.append(f"{TAGS_PREFIX} {', '.join(tag_list)}")
    lines.extend(["", HEADER_SEPARATOR, "", ""])
    return "\n".join(lines)


def render_document(
    title: str,
    tags: Iterable[str] | None = None,
    body: str | None = None,
    *,
    created: datetime | None = None,
) -> str:
    document = render_header(title, tags, created=created)
    if body:
        document += body + "\n"
    return document


def find_tags_line(content: str) -> str | None:
    """Return the remainder of the first line starting with ``Tags:``."""

    for line in content.splitlines():
        if line.startswith(TAGS_PREFIX):
            return line[len(TAGS_PREFIX) :]
    return None


def has_tag(content: str, tag: str) -> bool:
    """Case-insensitive substring test against the ``Tags:`` line."""

    remainder = find_tags_line(content)
    if remainder is None:
        return False
    return tag.lower() in remainder.lower()
