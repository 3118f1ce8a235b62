from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import yaml

from dungeon.core.models import Style


CONFIG_FILENAME = "dungeon.yaml"
CONFIG_ENV = "DUNGEON_CONFIG"

DEFAULT_STYLES: dict[str, str] = {
    Style.NORMAL.value: "",
    Style.ECHO.value: "grey50",
    Style.WARNING.value: "yellow",
    Style.ERROR.value: "red",
    Style.SUCCESS.value: "green",
    Style.WIN.value: "bold yellow",
}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AuditConfig:
    enabled: bool = False
    path: str = "./dungeon_audit.jsonl"


@dataclass(frozen=True)
class DungeonConfig:
    audit: AuditConfig = field(default_factory=AuditConfig)
    log_level: str = "WARNING"
    prompt: str = "> "
    styles: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STYLES))


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {p}")
    return data


def resolve_config_path(config_path: str | None) -> Path | None:
    if config_path:
        return Path(config_path)

    env_path = os.getenv(CONFIG_ENV)
    if env_path:
        return Path(env_path)

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(path: str | Path | None = None) -> DungeonConfig:
    if path is None:
        return DungeonConfig()

    config_path = Path(path).resolve()
    raw = load_yaml(config_path)

    audit_raw = raw.get("audit", {}) or {}
    audit_path = str(audit_raw.get("path", AuditConfig.path))
    if not Path(audit_path).is_absolute():
        audit_path = str((config_path.parent / audit_path).resolve())

    styles = dict(DEFAULT_STYLES)
    for tag, style in (raw.get("styles", {}) or {}).items():
        if tag not in DEFAULT_STYLES:
            raise ConfigError(f"unknown style tag {tag} in {config_path}")
        styles[tag] = str(style or "")

    level = str((raw.get("logging", {}) or {}).get("level", "WARNING")).upper()

    return DungeonConfig(
        audit=AuditConfig(enabled=bool(audit_raw.get("enabled", False)), path=audit_path),
        log_level=level,
        prompt=str(raw.get("prompt", "> ")),
        styles=styles,
    )
