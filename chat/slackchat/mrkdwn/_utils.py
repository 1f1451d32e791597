"""Shared helpers: Rich-markup escaping and placeholder fragments."""
from __future__ import annotations

import html
import re
from typing import Iterable, List, Tuple

from rich.markup import escape as markup_escape


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------

def escape(text: str, *, before_markup: bool = True) -> str:
    """Escape Rich markup in caller-supplied *text*.

    Rich halves a run of backslashes that precedes a tag, so a trailing run
    is doubled when a tag follows. When nothing follows (*before_markup*
    False) the run is shown as typed and is left alone.
    """
    body = text.rstrip("\\")
    trailing = len(text) - len(body)
    out = markup_escape(body)
    if trailing:
        out += "\\" * (trailing * 2 if before_markup else trailing)
    return out


def join_markup(parts: Iterable[Tuple[bool, str]]) -> str:
    """Join ``(is_markup, value)`` parts into one markup string.

    Consecutive text parts are coalesced and escaped as a single run; markup
    parts are emitted untouched.
    """
    out: List[str] = []
    run: List[str] = []
    for is_markup, value in parts:
        if not value:
            continue
        if is_markup:
            if run:
                out.append(escape("".join(run)))
                run = []
            out.append(value)
        else:
            run.append(value)
    if run:
        out.append(escape("".join(run), before_markup=False))
    return "".join(out)


# Slack sends `& < >` inside message bodies as HTML entities.
_SLACK_ESCAPES_RE = re.compile(r"&(?:lt|gt|amp);")


def decode_slack_escapes(text: str) -> str:
    if "&" not in text:
        return text
    return _SLACK_ESCAPES_RE.sub(lambda m: html.unescape(m.group(0)), text)


# ---------------------------------------------------------------------------
# Placeholder fragments
# ---------------------------------------------------------------------------

_PLACEHOLDER_RE = re.compile("\x00(\\d+)\x00")


class Fragments:
    """Stash rendered pieces behind opaque ``\\x00N\\x00`` placeholders.

    Later regex passes only ever see the placeholder, so nothing they match
    can reach inside a stashed piece.
    """

    def __init__(self) -> None:
        self._items: List[Tuple[bool, str]] = []

    def _add(self, is_markup: bool, value: str) -> str:
        self._items.append((is_markup, value))
        return f"\x00{len(self._items) - 1}\x00"

    def markup(self, value: str) -> str:
        return self._add(True, value)

    def text(self, value: str) -> str:
        return self._add(False, value)

    def expand(self, line: str) -> List[Tuple[bool, str]]:
        """Split *line* back into ``(is_markup, value)`` parts."""
        parts: List[Tuple[bool, str]] = []
        pieces = _PLACEHOLDER_RE.split(line)
        for i, piece in enumerate(pieces):
            if i % 2:
                parts.append(self._items[int(piece)])
            elif piece:
                parts.append((False, piece))
        return parts
