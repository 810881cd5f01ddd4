from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    json_indent: int | None = None  # None keeps JSON on one line
    strict_fields: bool = False
    log_level: str = "WARNING"
