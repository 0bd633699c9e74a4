"""Tag list parsing utilities."""

from __future__ import annotations

from typing import Iterable


def split_tags(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Split a comma separated tag list, preserving order and dropping blanks.

    - ``"work, ideas,,"`` becomes ``("work", "ideas")``.
    - Duplicates are removed case-insensitively, keeping the first spelling.
    """

    if raw is None:
        return ()
    parts: Iterable[str] = raw.split(",") if isinstance(raw, str) else raw

    seen: set[str] = set()
    ordered: list[str] = []
    for part in parts:
        tag = part.strip()
        if tag and tag.lower() not in seen:
            seen.add(tag.lower())
            ordered.append(tag)
    return tuple(ordered)
