from __future__ import annotations

import dataclasses
import json
from typing import Dict

import slackchat.config as _cfg
from slackchat.mrkdwn.colors import MarkdownColors, builtin_markdown_colors


@dataclasses.dataclass
class Settings:
    markdown_enabled: bool = True
    syntax_theme: str = _cfg.DEFAULT_SYNTAX_THEME
    theme: str = _cfg.DEFAULT_THEME
    markdown_style: Dict[str, str] = dataclasses.field(default_factory=dict)  # field -> Rich style

    def markdown_colors(self) -> MarkdownColors:
        base = builtin_markdown_colors(self.theme)
        if not self.markdown_style:
            return base
        return MarkdownColors.from_styles(self.markdown_style, base=base)


def _load_dataclass_strict(cls, payload: dict, label: str):
    try:
        return cls(**payload)
    except TypeError as e:
        raise ValueError(
            f"Settings schema mismatch in {label}: {e}. "
            f"Fix or delete {_cfg.SETTINGS_FILE} to start from defaults."
        ) from e


def ensure_app_dir() -> None:
    _cfg.APP_DIR.mkdir(parents=True, exist_ok=True)


def load_settings() -> Settings:
    if not _cfg.SETTINGS_FILE.exists():
        return Settings()
    try:
        data = json.loads(_cfg.SETTINGS_FILE.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{_cfg.SETTINGS_FILE} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{_cfg.SETTINGS_FILE} must hold a JSON object")
    settings = _load_dataclass_strict(Settings, data, str(_cfg.SETTINGS_FILE))
    settings.markdown_colors()  # surface bad style strings at load time
    return settings


def save_settings(settings: Settings) -> None:
    ensure_app_dir()
    tmp = _cfg.SETTINGS_FILE.with_suffix(".tmp")
    tmp.write_text(json.dumps(dataclasses.asdict(settings), indent=2, sort_keys=True), encoding="utf-8")
    tmp.replace(_cfg.SETTINGS_FILE)
