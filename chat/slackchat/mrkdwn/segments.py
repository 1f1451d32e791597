"""Split message text into inline runs and fenced code blocks."""
from __future__ import annotations

import dataclasses
import re
from typing import List, Optional

_FENCE_OPEN_RE = re.compile(r"```([\w+#.\-]*)")
_FENCE = "```"


@dataclasses.dataclass(frozen=True)
class Segment:
    """Either an inline run (``text``) or a fenced code block (``language``/``body``).

    ``body`` is the exact text between the opening line (or the opening
    backticks, when code starts on that line) and the closing backticks, so
    ``source()`` always reproduces the block as written.
    """
    kind: str  # inline | code
    text: str = ""
    language: str = ""
    body: str = ""
    newline_after_open: bool = True  # False when code starts on the opening line

    @property
    def is_code(self) -> bool:
        return self.kind == "code"

    @staticmethod
    def inline(text: str) -> Segment:
        return Segment(kind="inline", text=text)

    @staticmethod
    def code(language: str, body: str, newline_after_open: bool = True) -> Segment:
        return Segment(kind="code", language=language, body=body, newline_after_open=newline_after_open)

    def source(self) -> str:
        if self.is_code:
            head = f"{_FENCE}{self.language}\n" if self.newline_after_open else _FENCE
            return f"{head}{self.body}{_FENCE}"
        return self.text


def _find_close(text: str, start: int) -> Optional[int]:
    """Offset of the first ``` that ends a line, searching from *start*."""
    pos = start
    while pos <= len(text):
        end = text.find("\n", pos)
        if end == -1:
            end = len(text)
        if end - pos >= len(_FENCE) and text.endswith(_FENCE, pos, end):
            return end - len(_FENCE)
        pos = end + 1
    return None


def split_code_blocks(text: str) -> List[Segment]:
    """Return *text* as ordered inline/code segments.

    A fence opens at the start of a line. Either the rest of that line is a
    language tag and the body starts on the next line, or the body starts
    right after the backticks (```` ```code ````). The block closes at the
    first ``` that ends a line, alone or attached to the last body line.

    Concatenating ``seg.source()`` over the result gives back *text*. An
    opening fence without a close leaves the rest of the text inline.
    """
    segments: List[Segment] = []
    inline_start = 0
    pos = 0
    while pos < len(text):
        end = text.find("\n", pos)
        if end == -1:
            end = len(text)
        if not text.startswith(_FENCE, pos, end):
            pos = end + 1
            continue

        m = _FENCE_OPEN_RE.fullmatch(text, pos, end)
        if m is not None and end < len(text):
            language, body_start, newline_after_open = m.group(1), end + 1, True
        elif end - pos > len(_FENCE):
            language, body_start, newline_after_open = "", pos + len(_FENCE), False
        else:
            pos = end + 1
            continue

        close = _find_close(text, body_start)
        if close is None:
            break  # no later fence can close either
        if pos > inline_start:
            segments.append(Segment.inline(text[inline_start:pos]))
        segments.append(Segment.code(language, text[body_start:close], newline_after_open))
        inline_start = close + len(_FENCE)
        pos = inline_start + 1

    if inline_start < len(text) or not segments:
        segments.append(Segment.inline(text[inline_start:]))
    return segments
