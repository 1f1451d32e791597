from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Dict, List

from slackchat.models import Message, UserRecord, load_channel_map, load_user_map


@dataclasses.dataclass
class Transcript:
    """An exported conversation plus the lookup tables needed to render it."""
    users: Dict[str, UserRecord]
    channels: Dict[str, str]
    messages: List[Message]
    title: str = ""

    def author_name(self, user_id: str) -> str:
        user = self.users.get(user_id)
        if user is None:
            return user_id or "unknown"
        return user.best_name(user_id)


def parse_transcript(data: dict, title: str = "") -> Transcript:
    if not isinstance(data, dict):
        raise ValueError("Transcript must be a JSON object")
    messages = data.get("messages", [])
    if not isinstance(messages, list):
        raise ValueError("Transcript 'messages' must be a list")
    return Transcript(
        users=load_user_map(data.get("users", {})),
        channels=load_channel_map(data.get("channels", {})),
        messages=[Message.from_slack(m) for m in messages],
        title=str(data.get("title") or title),
    )


def load_transcript(path: Path) -> Transcript:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e
    return parse_transcript(data, title=path.stem)
