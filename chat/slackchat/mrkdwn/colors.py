"""Markdown style schemes: Rich markup open/close pairs per syntax category."""
from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Mapping, NamedTuple, Optional

from rich.errors import StyleSyntaxError
from rich.style import Style

log = logging.getLogger(__name__)


class StyleTag(NamedTuple):
    open: str
    close: str

    @staticmethod
    def of(style: str) -> StyleTag:
        """``StyleTag.of("bold yellow")`` -> ``("[bold yellow]", "[/bold yellow]")``."""
        style = " ".join(style.split())
        if not style:
            return NO_STYLE
        return StyleTag(f"[{style}]", f"[/{style}]")

    def wrap(self, markup: str) -> str:
        return f"{self.open}{markup}{self.close}"


NO_STYLE = StyleTag("", "")

BOLD = StyleTag.of("bold")
ITALIC = StyleTag.of("italic")
STRIKE = StyleTag.of("strike")


@dataclasses.dataclass(frozen=True)
class MarkdownColors:
    """Caller-supplied styling per mrkdwn category.

    ``MarkdownColors()`` is the zero scheme; ``render`` swaps it for
    ``default_markdown_colors()`` (see ``is_defaultish``).
    """
    user_mention: StyleTag = NO_STYLE
    channel_mention: StyleTag = NO_STYLE
    special_mention: StyleTag = NO_STYLE
    link: StyleTag = NO_STYLE
    inline_code: StyleTag = NO_STYLE
    code_fence: StyleTag = NO_STYLE
    blockquote_mark: StyleTag = NO_STYLE
    blockquote_text: StyleTag = NO_STYLE

    @staticmethod
    def from_styles(
        styles: Mapping[str, str],
        base: Optional[MarkdownColors] = None,
    ) -> MarkdownColors:
        """Build a scheme from ``{field: rich_style}``; omitted fields come from *base*."""
        base = base or default_markdown_colors()
        known = {f.name for f in dataclasses.fields(MarkdownColors)}
        overrides: Dict[str, StyleTag] = {}
        for field_name, style in styles.items():
            if field_name not in known:
                raise ValueError(f"Unknown markdown style field: {field_name!r}")
            try:
                Style.parse(style)
            except StyleSyntaxError as e:
                raise ValueError(f"Invalid style for {field_name}: {e}") from e
            overrides[field_name] = StyleTag.of(style)
        return dataclasses.replace(base, **overrides)


def _scheme(user: str, channel: str, link: str, code: str, mark: str) -> MarkdownColors:
    return MarkdownColors(
        user_mention=StyleTag.of(f"bold {user}"),
        channel_mention=StyleTag.of(f"bold {channel}"),
        special_mention=StyleTag.of(f"bold underline {user}"),
        link=StyleTag.of(f"underline {link}"),
        inline_code=StyleTag.of(code),
        code_fence=StyleTag.of(code),
        blockquote_mark=StyleTag.of(mark),
        blockquote_text=StyleTag.of("dim"),
    )


_BUILTIN: Dict[str, MarkdownColors] = {
    "default": _scheme("yellow", "cyan", "blue", "grey50", "grey50"),
    "dark": _scheme("#d7af5f", "#5fafd7", "#5f87ff", "#8a8a8a", "#585858"),
    "light": _scheme("#af8700", "#0087af", "#005faf", "#585858", "#a8a8a8"),
    "monokai": _scheme("#e6db74", "#66d9ef", "#66d9ef", "#75715e", "#75715e"),
    "solarized-dark": _scheme("#b58900", "#2aa198", "#268bd2", "#586e75", "#586e75"),
    "solarized-light": _scheme("#b58900", "#2aa198", "#268bd2", "#93a1a1", "#93a1a1"),
}


def default_markdown_colors() -> MarkdownColors:
    return _BUILTIN["default"]


def builtin_theme_names() -> list[str]:
    return sorted(_BUILTIN)


def builtin_markdown_colors(name: str) -> MarkdownColors:
    try:
        return _BUILTIN[name]
    except KeyError:
        log.warning("Unknown theme %r, using default", name)
        return default_markdown_colors()


def is_defaultish(colors: Optional[MarkdownColors]) -> bool:
    """True for ``None`` or a scheme whose first field is still unset."""
    return colors is None or colors.user_mention == NO_STYLE
