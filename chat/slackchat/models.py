from __future__ import annotations

import dataclasses
from typing import Any, Dict, Optional


@dataclasses.dataclass(frozen=True)
class UserRecord:
    """The slice of a Slack user the renderer needs for mention text."""
    display_name: str = ""
    real_name: str = ""
    name: str = ""            # the legacy @username
    status_emoji: str = ""    # e.g. ":palm_tree:", shown after author names

    def best_name(self, fallback: str) -> str:
        return self.display_name or self.real_name or self.name or fallback

    @staticmethod
    def from_slack(payload: Dict[str, Any]) -> UserRecord:
        """Build a record from a Slack ``users.info`` / ``users.list`` member object.

        Flat ``{display_name, real_name, name}`` mappings are accepted too, so
        hand-written fixtures and exported caches load the same way.
        """
        profile = payload.get("profile") or {}
        return UserRecord(
            display_name=str(profile.get("display_name") or payload.get("display_name") or ""),
            real_name=str(profile.get("real_name") or payload.get("real_name") or ""),
            name=str(payload.get("name") or ""),
            status_emoji=str(profile.get("status_emoji") or payload.get("status_emoji") or ""),
        )


@dataclasses.dataclass
class Message:
    user: str
    text: str
    ts: str = ""
    thread_ts: Optional[str] = None

    @staticmethod
    def from_slack(payload: Dict[str, Any]) -> Message:
        return Message(
            user=str(payload.get("user") or payload.get("bot_id") or ""),
            text=str(payload.get("text") or ""),
            ts=str(payload.get("ts") or ""),
            thread_ts=payload.get("thread_ts"),
        )


def load_user_map(data: Dict[str, Any]) -> Dict[str, UserRecord]:
    return {str(uid): UserRecord.from_slack(u or {}) for uid, u in data.items()}


def load_channel_map(data: Dict[str, Any]) -> Dict[str, str]:
    return {str(cid): str(name) for cid, name in data.items()}
