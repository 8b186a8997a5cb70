from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .days import DEFAULT_TIME_FORMAT

CONFIG_PATH_DEFAULT = "tripcal.yaml"
EMPTY_MESSAGE_DEFAULT = "No events scheduled. Press + to add one."


@dataclass
class DisplayConfig:
    time_format: str
    empty_message: str


@dataclass
class FormConfig:
    default_start: str
    default_end: str


@dataclass
class AppConfig:
    timezone: str
    display: DisplayConfig
    form: FormConfig


def load_config(path: str) -> AppConfig:
    p = Path(path)
    data: Dict[str, Any] = {}
    if p.exists():
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    display = data.get("display", {}) or {}
    form = data.get("form", {}) or {}

    return AppConfig(
        timezone=str(data.get("timezone", "UTC")),
        display=DisplayConfig(
            time_format=str(display.get("time_format", DEFAULT_TIME_FORMAT)),
            empty_message=str(display.get("empty_message", EMPTY_MESSAGE_DEFAULT)),
        ),
        form=FormConfig(
            default_start=str(form.get("default_start", "09:00")),
            default_end=str(form.get("default_end", "09:00")),
        ),
    )
