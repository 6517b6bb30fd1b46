from __future__ import annotations

from ..core.config import DEFAULT_CONFIG, MessageConfig


def resolve_config(fmt: str | None = None) -> MessageConfig:
    if fmt is None or fmt == DEFAULT_CONFIG.default_format:
        return DEFAULT_CONFIG
    return MessageConfig(max_named_files=DEFAULT_CONFIG.max_named_files, default_format=fmt)


def clean_lines(s: str | list[str]) -> list[str]:
    """Accept raw command output or a list of lines; drop blank lines."""
    lines = s.splitlines() if isinstance(s, str) else s
    return [ln for ln in lines if ln and ln.strip()]
