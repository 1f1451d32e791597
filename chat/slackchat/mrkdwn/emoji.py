"""Emoji shortcode table, built once from Rich's bundled emoji codes."""
from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Dict, Mapping

from rich._emoji_codes import EMOJI

log = logging.getLogger(__name__)

# Slack names that Rich spells differently -> Rich's canonical name.
SLACK_ALIASES: Dict[str, str] = {
    "+1": "thumbs_up",
    "-1": "thumbs_down",
    "thumbsup": "thumbs_up",
    "thumbsdown": "thumbs_down",
    "unicorn": "unicorn_face",
    "simple_smile": "slightly_smiling_face",
}

# Symbols that terminals draw as narrow text unless followed by U+FE0F.
_TEXT_PRESENTATION = frozenset(
    "©®‼⁉™ℹ↔↕↖↗↘↙↩↪⌨⏏▪▫▶◀☀☁☂☃☄☎☑☘☝☠☢☣☦☪☮☯☸☹☺♀♂♠♣♥♦♨♻♾⚒⚔⚕⚖⚗⚙⚛⚜⚠⚰⚱⛈⛏⛑⛓⛩⛰⛱⛴⛷⛸⛹"
    "✂✈✉✌✍✏✒✔✖✝✡✳✴❄❇❣❤➡⤴⤵⬅⬆⬇〰〽㊗㊙"
)

_SHORTCODE_RE = re.compile(r"[a-z0-9_+\-]+")


def is_slack_shortcode(name: str) -> bool:
    return bool(_SHORTCODE_RE.fullmatch(name))


def with_emoji_presentation(glyph: str) -> str:
    if glyph in _TEXT_PRESENTATION:
        return glyph + "\ufe0f"
    return glyph


class EmojiTable:
    """Immutable ``shortcode -> glyph`` mapping."""

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_codes(
        cls,
        codes: Mapping[str, str],
        aliases: Mapping[str, str] = SLACK_ALIASES,
    ) -> EmojiTable:
        entries = {
            name: with_emoji_presentation(glyph)
            for name, glyph in codes.items()
            if is_slack_shortcode(name)
        }
        for alias, canonical in aliases.items():
            glyph = entries.get(canonical)
            if glyph is None:
                log.debug("Emoji alias %s -> %s: no such canonical entry", alias, canonical)
                continue
            entries[alias] = glyph
        return cls(entries)

    def lookup(self, name: str) -> str:
        """Glyph for *name*, or ``:name:`` unchanged when unknown."""
        glyph = self._entries.get(name)
        if glyph is None:
            return f":{name}:"
        return glyph

    def entries(self) -> Mapping[str, str]:
        return self._entries

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


EMOJI_TABLE = EmojiTable.from_codes(EMOJI)


def lookup_emoji(name: str) -> str:
    return EMOJI_TABLE.lookup(name)


def emoji_entries() -> Mapping[str, str]:
    return EMOJI_TABLE.entries()
