"""Slack ``<...>`` entity tokens: recognition and display-text resolution.

Every resolver is a pure lookup and never raises: a missing map entry
degrades to the raw identifier.
"""
from __future__ import annotations

import dataclasses
import re
from typing import Iterator, Mapping, Optional, Union

from slackchat.models import UserRecord

from ._utils import decode_slack_escapes

_ID_RE = re.compile(r"[^\s|]+")


@dataclasses.dataclass(frozen=True)
class Entity:
    kind: str    # user | channel | special | link
    target: str  # user/channel ID, special name, or URL
    label: str = ""


def parse_entity(inner: str) -> Optional[Entity]:
    """Classify the text between ``<`` and ``>``; ``None`` if it is not an entity."""
    if "\x00" in inner:  # spans a stashed code span
        return None
    target, _, label = inner.partition("|")
    kind = "link"
    if target[:1] == "@":
        kind, target = "user", target[1:]
    elif target[:1] == "#":
        kind, target = "channel", target[1:]
    elif target[:1] == "!":
        kind, target = "special", target[1:]
    if not _ID_RE.fullmatch(target):
        return None
    return Entity(kind=kind, target=decode_slack_escapes(target), label=decode_slack_escapes(label))


def scan_entities(line: str) -> Iterator[Union[str, Entity]]:
    """Yield plain-text runs and ``Entity`` tokens from *line*, left to right.

    A ``>`` closes the innermost open ``<``; brackets whose interior is not a
    recognized shape stay in the plain text.
    """
    last = 0
    open_at = -1
    for i, ch in enumerate(line):
        if ch == "<":
            open_at = i
        elif ch == ">" and open_at >= 0:
            entity = parse_entity(line[open_at + 1:i])
            if entity is not None:
                if open_at > last:
                    yield line[last:open_at]
                yield entity
                last = i + 1
            open_at = -1
    if last < len(line):
        yield line[last:]


def resolve_user(
    user_id: str,
    label: str = "",
    users: Optional[Mapping[str, UserRecord]] = None,
) -> str:
    if label:
        return "@" + label
    user = (users or {}).get(user_id)
    if user is None:
        return "@" + user_id
    return "@" + user.best_name(user_id)


def resolve_channel(
    channel_id: str,
    label: str = "",
    channels: Optional[Mapping[str, str]] = None,
) -> str:
    if label:
        return "#" + label
    return "#" + ((channels or {}).get(channel_id) or channel_id)


def resolve_special(name: str, label: str = "") -> str:
    if label:
        return label
    return "@" + name


def resolve_link(url: str, label: str = "") -> str:
    return label or url


def resolve(
    entity: Entity,
    users: Optional[Mapping[str, UserRecord]] = None,
    channels: Optional[Mapping[str, str]] = None,
) -> str:
    """Display text for *entity*, before any styling."""
    if entity.kind == "user":
        return resolve_user(entity.target, entity.label, users)
    if entity.kind == "channel":
        return resolve_channel(entity.target, entity.label, channels)
    if entity.kind == "special":
        return resolve_special(entity.target, entity.label)
    return resolve_link(entity.target, entity.label)
