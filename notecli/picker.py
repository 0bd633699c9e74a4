"""Interactive fuzzy selection of a note title."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from prompt_toolkit import prompt
from prompt_toolkit.application.current import get_app
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

PICKER_MESSAGE = "Select a note to open (or type to search): "

PromptFunc = Callable[[str, Completer], str]


@dataclass(frozen=True, slots=True)
class FuzzyMatch:
    """A title matched by :func:`fuzzy_filter`.

    ``start`` and ``length`` describe the tightest span of the title that
    contains the query characters in order.
    """

    title: str
    start: int
    length: int


def fuzzy_filter(query: str, titles: Sequence[str]) -> list[FuzzyMatch]:
    """Filter and rank ``titles`` against ``query``.

    A title matches when every character of the query occurs in it in order,
    ignoring case. Results are ordered by the length of the tightest match,
    then where it starts, then input order, so contiguous substrings come
    first. An empty query keeps every title in its original order.
    """

    if not query:
        return [FuzzyMatch(title=title, start=0, length=0) for title in titles]

    pattern = re.compile(
        "(?=({}))".format(".*?".join(map(re.escape, query))), re.IGNORECASE
    )

    ranked: list[tuple[int, int, int, FuzzyMatch]] = []
    for index, title in enumerate(titles):
        candidates = list(pattern.finditer(title))
        if not candidates:
            continue
        best = min(candidates, key=lambda m: (len(m.group(1)), m.start()))
        match = FuzzyMatch(title=title, start=best.start(), length=len(best.group(1)))
        ranked.append((match.length, match.start, index, match))

    ranked.sort(key=lambda item: item[:3])
    return [item[3] for item in ranked]


class TitleCompleter(Completer):
    """Completer re-ranking note titles on every keystroke."""

    def __init__(self, titles: Iterable[str]) -> None:
        self.titles = list(titles)

    def get_completions(self, document: Document, complete_event: CompleteEvent):
        text = document.text_before_cursor
        for match in fuzzy_filter(text, self.titles):
            yield Completion(match.title, start_position=-len(text))


def _prompt_toolkit_prompt(message: str, completer: Completer) -> str:
    return prompt(
        message,
        completer=completer,
        complete_while_typing=True,
        pre_run=lambda: get_app().current_buffer.start_completion(select_first=False),
    )


def pick_note(titles: Sequence[str], prompt_fn: PromptFunc | None = None) -> str | None:
    """Ask the user to choose one of ``titles``.

    Returns ``None`` when the prompt is cancelled, left empty, or the typed
    text matches nothing. Free text that is not an exact title resolves to
    the best fuzzy match.
    """

    ask = prompt_fn or _prompt_toolkit_prompt
    try:
        answer = ask(PICKER_MESSAGE, TitleCompleter(titles))
    except (KeyboardInterrupt, EOFError):
        return None

    choice = (answer or "").strip()
    if not choice:
        return None
    if choice in titles:
        return choice

    matches = fuzzy_filter(choice, titles)
    return matches[0].title if matches else None
